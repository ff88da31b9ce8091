from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from functools import total_ordering

from ..errors import InvalidMonthError

_MONTH_YEAR_RE = re.compile(r"(?P<year>-?\d{1,6})[-/](?P<month>\d{1,2})")


@total_ordering
@dataclass(frozen=True)
class MonthYear:
    """
    A calendar month, ordered by year and then month.
    """

    month: int
    year: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise InvalidMonthError(f"Invalid month: {self.month}")

    @classmethod
    def from_date(cls, d: date) -> MonthYear:
        return cls(d.month, d.year)

    @classmethod
    def parse(cls, text: str) -> MonthYear:
        """Parse ``YYYY-MM`` (or ``YYYY/MM``)."""
        m = _MONTH_YEAR_RE.fullmatch(text.strip())
        if m is None:
            raise ValueError(f"Expected YYYY-MM, got {text!r}")
        return cls(int(m.group("month")), int(m.group("year")))

    def next_month(self) -> MonthYear:
        if self.month == 12:
            return MonthYear(1, self.year + 1)
        return MonthYear(self.month + 1, self.year)

    def offset_from(self, first: MonthYear) -> int:
        """Signed number of months from ``first`` to this month."""
        return (self.year - first.year) * 12 + (self.month - first.month)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MonthYear):
            return NotImplemented
        return (self.year, self.month) < (other.year, other.month)

    def __str__(self) -> str:
        return f"{self.year}-{self.month:02d}"
