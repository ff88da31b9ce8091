# journal_helper/data_model/errors.py
"""
Exceptions raised while parsing and aggregating a journal.

Two families share the ``JournalError`` (``ValueError``) base:

- ``ParseJournalError`` / ``LineParseError`` describe a malformed line. They
  carry an ``EnumParseError`` kind so callers can match on them and report the
  offending line.
- ``JournalInvariantError`` subclasses describe corrupt accounting data or a
  programming error (unbalanced transactions, mixed units, out-of-range grid
  access). Callers are not expected to recover from these.
"""
from __future__ import annotations

from typing import Optional

from .interfaces import EnumParseError


class JournalError(ValueError):
    """Base class for every error raised by journal_helper."""


# region Recoverable parse errors


class LineParseError(JournalError):
    """An entry line could not be split into an account and an optional amount."""

    def __init__(self, kind: EnumParseError, line: str = ""):
        self.kind = kind
        self.line = line
        super().__init__(f"{kind.message}: {line!r}" if line else kind.message)


class ParseJournalError(JournalError):
    """A journal line is malformed; parsing of the whole journal is aborted."""

    def __init__(
        self, kind: EnumParseError, line_number: Optional[int] = None, line: str = ""
    ):
        self.kind = kind
        self.line_number = line_number
        self.line = line
        where = f"line {line_number}: " if line_number is not None else ""
        text = f" {line!r}" if line else ""
        super().__init__(f"{where}{kind.message}{text}")


# endregion Recoverable parse errors

# region Fatal invariant violations


class JournalInvariantError(JournalError):
    """The journal data breaks an accounting invariant."""


class AmountMismatchError(JournalInvariantError):
    """Arithmetic across different units or numeric representations."""


class TwoBlankEntriesError(JournalInvariantError):
    """More than one entry without an amount in one transaction."""


class EntryOutsideTransactionError(JournalInvariantError):
    """An entry line appears before any transaction header."""


class BlankEntryError(JournalInvariantError):
    """A blank entry cannot be resolved to exactly one unbalanced unit."""


class UnbalancedTransactionError(JournalInvariantError):
    """A transaction does not sum to zero and has no blank entry to absorb it."""


class MonthRangeError(JournalInvariantError):
    """A month range whose last month precedes its first."""


class MonthOutOfRangeError(JournalInvariantError, IndexError):
    """A MonthGrid access outside the grid's months."""


# endregion Fatal invariant violations


class InvalidMonthError(JournalError):
    """A month number outside 1..12."""


class EmptyJournalError(JournalError):
    """An operation needs at least one transaction."""


class UnsortedJournalError(JournalError):
    """Transactions were expected in ascending date order."""
