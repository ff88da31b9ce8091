from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise  # Python 3.10+
from typing import TYPE_CHECKING, Iterator

from ..errors import EmptyJournalError
from ..interfaces import IJournal
from .month_year import MonthYear
from .transaction import Transaction


@dataclass
class Journal:
    """
    The parsed journal: balanced transactions in source order.

    Source order is not necessarily date order; month bucketing needs
    ``sorted_by_date()`` first.
    """

    transactions: list[Transaction] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.transactions)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.transactions)

    def is_sorted_by_date(self) -> bool:
        return all(a.date <= b.date for a, b in pairwise(self.transactions))

    def sorted_by_date(self) -> Journal:
        """Return a journal with the same transactions in stable date order."""
        return Journal(sorted(self.transactions, key=lambda t: t.date))

    def summary(self) -> JournalSummary:
        return JournalSummary.from_journal(self)

    def emit_journal(self) -> str:
        """
        Returns the journal text, one blank line between transactions.
        """
        if not self.transactions:
            return ""
        return "\n\n".join(t.emit_journal() for t in self.transactions) + "\n"


@dataclass(frozen=True)
class JournalSummary:
    """First and final month covered by a journal."""

    first_month: MonthYear
    final_month: MonthYear
    transaction_count: int

    @classmethod
    def from_journal(cls, journal: Journal) -> JournalSummary:
        if not journal.transactions:
            raise EmptyJournalError("Journal has no transactions")
        dates = [t.date for t in journal.transactions]
        return cls(
            first_month=MonthYear.from_date(min(dates)),
            final_month=MonthYear.from_date(max(dates)),
            transaction_count=len(dates),
        )


if TYPE_CHECKING:
    _is_i_journal: type[IJournal] = Journal
