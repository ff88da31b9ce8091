# tests/controllers/test_transactions_by_month.py
from __future__ import annotations

from datetime import date

import pytest

from journal_helper.controllers import TransactionsByMonth, transactions_by_month
from journal_helper.data_model import Journal, MonthYear, Transaction, UnsortedJournalError


def _txn(y: int, m: int, d: int) -> Transaction:
    return Transaction(date=date(y, m, d))


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    return [
        _txn(2022, 1, 1),
        _txn(2022, 1, 15),
        _txn(2022, 2, 5),
        _txn(2022, 2, 25),
        _txn(2022, 3, 10),
        _txn(2022, 3, 20),
    ]


def test_iterator(sample_transactions):
    # Arrange
    it = TransactionsByMonth(sample_transactions, MonthYear(1, 2022), MonthYear(3, 2022))

    # Act
    month_slices = list(it)

    # Assert
    assert [m for m, _ in month_slices] == [
        MonthYear(1, 2022),
        MonthYear(2, 2022),
        MonthYear(3, 2022),
    ]
    assert month_slices[0][1] == sample_transactions[0:2]
    assert month_slices[1][1] == sample_transactions[2:4]
    assert month_slices[2][1] == sample_transactions[4:6]


def test_iterator_no_transactions_in_range(sample_transactions):
    it = TransactionsByMonth(sample_transactions, MonthYear(4, 2022), MonthYear(6, 2022))
    month_slices = list(it)
    assert len(month_slices) == 3
    assert all(ts == [] for _, ts in month_slices)


def test_iterator_empty_slice_middle():
    # Arrange
    transactions = [_txn(2022, 1, 1), _txn(2022, 1, 15), _txn(2022, 3, 10), _txn(2022, 3, 20)]

    # Act
    month_slices = list(
        TransactionsByMonth(transactions, MonthYear(1, 2022), MonthYear(3, 2022))
    )

    # Assert
    assert len(month_slices) == 3
    assert month_slices[0][1] == transactions[0:2]
    assert month_slices[1][1] == [], "February has no transactions"
    assert month_slices[2][1] == transactions[2:4]


def test_slices_concatenate_to_the_input():
    transactions = [_txn(2021, 11, 30), _txn(2021, 12, 31), _txn(2022, 1, 1), _txn(2022, 3, 1)]
    it = TransactionsByMonth(transactions, MonthYear(11, 2021), MonthYear(3, 2022))
    joined = [t for _, ts in it for t in ts]
    assert joined == transactions


def test_transactions_by_month_for_journal():
    # Arrange
    journal = Journal([_txn(2022, 1, 1), _txn(2022, 1, 15), _txn(2022, 3, 10)])

    # Act
    month_slices = list(transactions_by_month(journal))

    # Assert
    assert [(m, len(ts)) for m, ts in month_slices] == [
        (MonthYear(1, 2022), 2),
        (MonthYear(2, 2022), 0),
        (MonthYear(3, 2022), 1),
    ]


def test_transactions_by_month_empty_journal_yields_nothing():
    assert list(transactions_by_month(Journal())) == []


def test_unsorted_input_raises():
    journal = Journal([_txn(2022, 3, 10), _txn(2022, 1, 1)])
    with pytest.raises(UnsortedJournalError):
        transactions_by_month(journal)


def test_iterator_is_single_use(sample_transactions):
    it = TransactionsByMonth(sample_transactions, MonthYear(1, 2022), MonthYear(1, 2022))
    assert len(list(it)) == 1
    assert list(it) == []
    with pytest.raises(StopIteration):
        next(it)
