from .journal_parser_emitter import (
    JournalBuilder,
    JournalParserEmitter,
    balance_transaction,
    parse_journal,
)
from .line_parser import parse_account_and_amount, parse_account_only, parse_line

__all__ = [
    "JournalBuilder",
    "JournalParserEmitter",
    "balance_transaction",
    "parse_journal",
    "parse_account_and_amount",
    "parse_account_only",
    "parse_line",
]
