# journal_helper/controllers/transactions_by_month.py
"""
Walk a date-sorted list of transactions one calendar month at a time.
"""
from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator, Sequence
from itertools import pairwise  # Python 3.10+

from journal_helper.data_model import (
    Journal,
    MonthYear,
    Transaction,
    UnsortedJournalError,
)


def _month_of(transaction: Transaction) -> MonthYear:
    return MonthYear.from_date(transaction.date)


class TransactionsByMonth(Iterator[tuple[MonthYear, list[Transaction]]]):
    """
    Yield ``(month, transactions)`` for every month from ``first`` to ``final``
    inclusive, with an empty list for months without transactions.

    The transactions must be in ascending date order; slice bounds are found
    by binary search. The iterator is single-use.
    """

    def __init__(
        self, transactions: Sequence[Transaction], first: MonthYear, final: MonthYear
    ):
        if any(a.date > b.date for a, b in pairwise(transactions)):
            raise UnsortedJournalError(
                "Transactions must be sorted by date before grouping by month"
            )
        self._transactions = transactions
        self._current = first
        self._final = final

    def __iter__(self) -> TransactionsByMonth:
        return self

    def __next__(self) -> tuple[MonthYear, list[Transaction]]:
        if self._current > self._final:
            raise StopIteration

        month = self._current
        next_month = month.next_month()
        start = bisect_left(self._transactions, month, key=_month_of)
        end = bisect_left(self._transactions, next_month, lo=start, key=_month_of)

        self._current = next_month
        return month, list(self._transactions[start:end])


def transactions_by_month(journal: Journal) -> TransactionsByMonth:
    """
    Iterate ``journal`` month by month over its own first..final month range.

    The journal must already be sorted by date (see ``Journal.sorted_by_date``).
    An empty journal yields nothing.
    """
    if not journal.transactions:
        # an empty range: first month after the final one
        month = MonthYear(1, 1)
        return TransactionsByMonth([], month.next_month(), month)
    summary = journal.summary()
    return TransactionsByMonth(
        journal.transactions, summary.first_month, summary.final_month
    )
