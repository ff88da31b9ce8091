# journal_helper/controllers/balance_report.py
"""
Balance report: the net change of every account in every month.
"""
from __future__ import annotations

import logging

import pandas as pd

from journal_helper.data_model import Amount, Journal, MonthGrid, MonthYear, Transaction
from journal_helper.controllers.transactions_by_month import transactions_by_month

log = logging.getLogger(__name__)


def _sum_by_account(transactions: list[Transaction]) -> dict[str, Amount]:
    by_account: dict[str, Amount] = {}
    for transaction in transactions:
        for entry in transaction.entries:
            existing = by_account.get(entry.account)
            if existing is None:
                by_account[entry.account] = entry.amount.copy()
            else:
                existing.add(entry.amount)
    return by_account


def balance_changes(journal: Journal) -> MonthGrid[str, Amount]:
    """
    Net change per account per month, from the journal's first to final month.

    Months in which an account has no entries hold ``None``. Each account is
    assumed to use a single unit within a month; mixing units raises
    ``AmountMismatchError``.

    Raises:
        EmptyJournalError: the journal has no transactions.
    """
    summary = journal.summary()
    grid: MonthGrid[str, Amount] = MonthGrid(summary.first_month, summary.final_month)

    for month, transactions in transactions_by_month(journal.sorted_by_date()):
        for account, amount in _sum_by_account(transactions).items():
            grid.insert(account, month, amount)

    log.debug(
        "Balance changes for %d accounts over %d months", len(grid), grid.total_months
    )
    return grid


def account_balance_changes(
    grid: MonthGrid[str, Amount], account: str
) -> list[tuple[MonthYear, Amount | None]]:
    """The ``(month, change)`` pairs of one account, for every month of the grid."""
    return [(month, grid[month, account]) for month in grid.months()]


def balance_frame(grid: MonthGrid[str, Amount]) -> pd.DataFrame:
    """The grid as a DataFrame of display strings; empty months are blank."""
    frame = grid.to_frame(render=str, empty="")
    frame.index.name = "account"
    return frame
