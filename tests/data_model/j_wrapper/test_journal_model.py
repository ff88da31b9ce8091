# tests/data_model/j_wrapper/test_journal_model.py
from __future__ import annotations

from datetime import date

import pytest

from journal_helper.data_model import (
    EmptyJournalError,
    Entry,
    Journal,
    JournalSummary,
    MonthYear,
    Transaction,
)
from journal_helper.data_model.j_wrapper.amount import Amount, Discrete


def _txn(d: date, description: str = "", cents: int = 100) -> Transaction:
    return Transaction(
        d,
        description,
        [
            Entry("assets:cash", Amount("$", Discrete(-cents, 2))),
            Entry("expenses:misc", Amount("$", Discrete(cents, 2))),
        ],
    )


def test_summary_covers_first_and_final_month_regardless_of_order():
    # Arrange
    journal = Journal(
        [_txn(date(2023, 3, 5)), _txn(date(2022, 11, 30)), _txn(date(2023, 1, 1))]
    )

    # Act
    summary = journal.summary()

    # Assert
    assert summary == JournalSummary(MonthYear(11, 2022), MonthYear(3, 2023), 3)


def test_summary_of_empty_journal_raises():
    with pytest.raises(EmptyJournalError):
        Journal().summary()


def test_sorted_by_date_is_stable_and_leaves_original_alone():
    # Arrange
    a = _txn(date(2023, 3, 17), "A")
    b = _txn(date(2023, 3, 1), "B")
    c = _txn(date(2023, 3, 17), "C")
    journal = Journal([a, b, c])

    # Act
    ordered = journal.sorted_by_date()

    # Assert
    assert [t.description for t in ordered] == ["B", "A", "C"]
    assert [t.description for t in journal] == ["A", "B", "C"]
    assert not journal.is_sorted_by_date()
    assert ordered.is_sorted_by_date()


def test_len_and_iter():
    journal = Journal([_txn(date(2023, 1, 1)), _txn(date(2023, 1, 2))])
    assert len(journal) == 2
    assert list(journal) == journal.transactions


def test_emit_journal_separates_transactions_with_blank_line():
    # Arrange
    journal = Journal([_txn(date(2023, 1, 1), "One"), _txn(date(2023, 1, 2), "Two", 250)])

    # Act
    text = journal.emit_journal()

    # Assert
    assert text == (
        "2023/01/01 One\n"
        "    assets:cash    $-1.00\n"
        "    expenses:misc    $1.00\n"
        "\n"
        "2023/01/02 Two\n"
        "    assets:cash    $-2.50\n"
        "    expenses:misc    $2.50\n"
    )


def test_emit_empty_journal():
    assert Journal().emit_journal() == ""
