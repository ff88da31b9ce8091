# journal_helper/controllers/register_report.py
"""
Register report: every debit and credit of one account with running totals.

    2023/03/18 Groceries                      assets:savings                      $-41.06       $399.64
    2023/03/18 Crunchy Chicken Bowl           assets:savings                      $-16.10       $368.59
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

import pandas as pd

from journal_helper.data_model import Amount, Journal
from journal_helper.utilities.config_journal import JOURNAL_DATE_FORMAT


@dataclass(frozen=True)
class FilteredTransaction:
    """
    The entries of one transaction that belong to the reported account, held as
    indexes into the journal. The selected entries need not balance.
    """

    transaction_index: int
    entry_indexes: tuple[int, ...]


@dataclass
class RegisterLine:
    """
    One line of the register report. ``date`` and ``description`` are only set
    on the first line of each transaction.
    """

    date: Optional[date]
    description: Optional[str]
    account: str
    amount: Amount
    running_total: Amount


def filter_by_account(journal: Journal, account: str) -> list[FilteredTransaction]:
    """Transactions with at least one entry for ``account``, in journal order."""
    filtered: list[FilteredTransaction] = []
    for t_index, transaction in enumerate(journal.transactions):
        entry_indexes = tuple(
            e_index
            for e_index, entry in enumerate(transaction.entries)
            if entry.account == account
        )
        if entry_indexes:
            filtered.append(FilteredTransaction(t_index, entry_indexes))
    return filtered


def register(journal: Journal, account: str) -> list[RegisterLine]:
    """
    Build the register of ``account``: one line per entry in date order (stable
    for equal dates), with a running total kept separately for each unit.
    """
    transactions = journal.transactions
    filtered = sorted(
        filter_by_account(journal, account),
        key=lambda ft: transactions[ft.transaction_index].date,
    )

    running_totals: dict[str, Amount] = {}
    lines: list[RegisterLine] = []
    for ft in filtered:
        transaction = transactions[ft.transaction_index]
        for position, e_index in enumerate(ft.entry_indexes):
            entry = transaction.entries[e_index]
            units = entry.amount.units
            if units in running_totals:
                running_totals[units].add(entry.amount)
            else:
                running_totals[units] = entry.amount.copy()

            is_first_entry = position == 0
            lines.append(
                RegisterLine(
                    date=transaction.date if is_first_entry else None,
                    description=transaction.description if is_first_entry else None,
                    account=entry.account,
                    amount=entry.amount.copy(),
                    running_total=running_totals[units].copy(),
                )
            )
    return lines


def format_register_line(line: RegisterLine) -> str:
    when = line.date.strftime(JOURNAL_DATE_FORMAT) if line.date else " " * 10
    description = line.description or ""
    return (
        f"{when} {description:<30} {line.account:<30} "
        f"{str(line.amount):>10} {str(line.running_total):>10}"
    )


def register_frame(lines: list[RegisterLine]) -> pd.DataFrame:
    """The register as a DataFrame with display strings for the amounts."""
    columns = ["date", "description", "account", "amount", "running_total"]
    return pd.DataFrame(
        [
            {
                "date": line.date.strftime(JOURNAL_DATE_FORMAT) if line.date else "",
                "description": line.description or "",
                "account": line.account,
                "amount": str(line.amount),
                "running_total": str(line.running_total),
            }
            for line in lines
        ],
        columns=columns,
    )
