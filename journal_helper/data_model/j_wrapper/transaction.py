from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Optional

from journal_helper.utilities.config_journal import (
    COMMENT_CHAR,
    ENTRY_INDENT,
    ESCAPE_CHAR,
    JOURNAL_DATE_FORMAT,
)
from journal_helper.utilities.converters_scalar import to_date

from ..interfaces import ITransaction
from .amount import Amount
from .entry import Entry

# sentinel for "not set"
_MISSING_DATE = date(1900, 1, 1)

# "2023/03/15 Sandwich"
_HEADER_RE = re.compile(r"(?P<date>[0-9]{4}/[0-9]{2}/[0-9]{2})\s+(?P<description>.+)")


@dataclass
class Transaction:
    """
    A dated group of entries whose amounts net to zero for every unit.
    """

    date: date = _MISSING_DATE
    description: str = ""
    entries: list[Entry] = field(default_factory=list)

    def totals(self) -> dict[str, Amount]:
        """Sum the entries per unit. Entries are not modified."""
        totals: dict[str, Amount] = {}
        for entry in self.entries:
            units = entry.amount.units
            if units in totals:
                totals[units].add(entry.amount)
            else:
                totals[units] = entry.amount.copy()
        return totals

    @classmethod
    def parse_date_and_description(cls, line: str) -> Optional[Transaction]:
        """
        Start an empty transaction from a header line such as
        ``2023/03/11 Meatball Sub``.

        Returns ``None`` if the line is not a header, so the caller can try the
        entry-line grammar instead.
        """
        m = _HEADER_RE.fullmatch(line)
        if m is None:
            return None
        try:
            when = to_date(m.group("date"), JOURNAL_DATE_FORMAT)
        except ValueError:
            return None
        return cls(date=when, description=m.group("description"))

    # region Parser/Emitter

    def emit_journal(self) -> str:
        """
        Returns the journal text of this transaction: the header line followed
        by one indented line per entry.
        """
        description = self.description.replace(COMMENT_CHAR, ESCAPE_CHAR + COMMENT_CHAR)
        lines = [f"{self.date.strftime(JOURNAL_DATE_FORMAT)} {description}"]
        lines.extend(f"{ENTRY_INDENT}{entry.emit_journal()}" for entry in self.entries)
        return "\n".join(lines)

    def __str__(self) -> str:
        lines = [f"{self.date.strftime(JOURNAL_DATE_FORMAT)} {self.description}"]
        lines.extend(f"{ENTRY_INDENT}{entry}" for entry in self.entries)
        return "\n".join(lines)

    # endregion Parser/Emitter


if TYPE_CHECKING:
    _is_i_transaction: type[ITransaction] = Transaction
