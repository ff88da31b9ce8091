from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from journal_helper.utilities.core_util import is_null_or_whitespace, split_off_comment

from ..errors import (
    BlankEntryError,
    EntryOutsideTransactionError,
    LineParseError,
    ParseJournalError,
    TwoBlankEntriesError,
    UnbalancedTransactionError,
)
from ..interfaces import EnumParseError, IParserEmitter
from ..j_wrapper import Amount, Entry, Journal, Line, Transaction
from .line_parser import parse_line

log = logging.getLogger(__name__)


def balance_transaction(transaction: Transaction, blank: Optional[Line]) -> None:
    """
    Check that ``transaction`` sums to zero for every unit.

    If ``blank`` is given, append an entry for its account that absorbs the
    single unbalanced unit.

    Raises:
        BlankEntryError: a blank entry with no unbalanced unit, or with more
            than one.
        UnbalancedTransactionError: a non-zero total and no blank entry.
    """
    # units whose total is non-zero are the unbalanced ones
    nonzero: dict[str, Amount] = {
        units: total for units, total in transaction.totals().items() if not total.is_zero()
    }

    if blank is not None:
        if not nonzero:
            raise BlankEntryError(
                f"Blank transaction entry with no unbalanced commodity:\n{transaction}"
            )
        if len(nonzero) > 1:
            raise BlankEntryError(
                "Blank transaction entry with more than one unbalanced commodity "
                f"({', '.join(sorted(nonzero))}):\n{transaction}"
            )
        (remainder,) = nonzero.values()
        transaction.entries.append(Entry(blank.account, remainder.negate()))
    elif nonzero:
        raise UnbalancedTransactionError(f"Unbalanced transaction:\n{transaction}")


class JournalBuilder:
    """
    Line-by-line state machine that assembles and balances transactions.

    It holds the transaction currently being read, the one blank entry that
    transaction may have, and the finished transactions.
    """

    def __init__(self) -> None:
        self.current: Optional[Transaction] = None
        self.pending_blank: Optional[Line] = None
        self.transactions: list[Transaction] = []

    def _finish_current(self) -> None:
        if self.current is None:
            return
        balance_transaction(self.current, self.pending_blank)
        log.debug(
            "Finalized transaction %s %r with %d entries",
            self.current.date,
            self.current.description,
            len(self.current.entries),
        )
        self.transactions.append(self.current)
        self.current = None
        self.pending_blank = None

    def on_header(self, transaction: Transaction) -> None:
        """Close the current transaction and start ``transaction``."""
        self._finish_current()
        self.current = transaction

    def on_entry_line(self, line: Line) -> None:
        if self.current is None:
            raise EntryOutsideTransactionError(
                f"Can't have a debit/credit outside a transaction: {line.account!r}"
            )
        if line.amount is None:
            if self.pending_blank is not None:
                raise TwoBlankEntriesError(
                    "Two blank amounts in one transaction: "
                    f"{self.pending_blank.account!r} and {line.account!r}\n{self.current}"
                )
            self.pending_blank = line
        else:
            self.current.entries.append(Entry(line.account, line.amount))

    def finalize(self) -> Journal:
        """Close the last transaction and return the journal."""
        self._finish_current()
        return Journal(self.transactions)


def parse_journal(lines: Iterable[str]) -> Journal:
    """
    Parse journal text lines into a balanced ``Journal``.

        2023/03/15 Sandwich
            assets:savings                     $-6.76
            expenses:tips                          $1
            expenses:food:tim-hortons

    Raises:
        ParseJournalError: a malformed line (recoverable, carries the line number).
        JournalInvariantError: unbalanced or otherwise corrupt accounting data.
    """
    builder = JournalBuilder()
    for line_number, raw in enumerate(lines, start=1):
        line, _ = split_off_comment(raw.rstrip("\r\n"))

        transaction = Transaction.parse_date_and_description(line)
        if transaction is not None:
            builder.on_header(transaction)
            continue

        if is_null_or_whitespace(line):
            continue

        if not line[0].isspace():
            raise ParseJournalError(
                EnumParseError.ENTRY_LINE_MUST_START_WITH_SPACE, line_number, raw
            )

        try:
            entry_line = parse_line(line.strip())
        except LineParseError as e:
            raise ParseJournalError(e.kind, line_number, raw) from e
        builder.on_entry_line(entry_line)

    journal = builder.finalize()
    log.info("Parsed journal with %d transactions", len(journal.transactions))
    return journal


class JournalParserEmitter(IParserEmitter[Journal]):
    """Parse journal text into a ``Journal`` and emit it back to text."""

    file_format: str = "journal"

    def parse(self, unparsed_string: str) -> Journal:
        # only "\n" ends a line; "\r" is stripped per line by parse_journal
        return parse_journal(unparsed_string.split("\n"))

    def emit(self, obj: Journal) -> str:
        return obj.emit_journal()
