# journal_helper/__init__.py
"""
Plain-text double-entry journal parsing, balancing and monthly reports.
"""
from .controllers import (
    balance_changes,
    load_journal,
    parse_journal_text,
    register,
    transactions_by_month,
)
from .data_model import Amount, Journal, MonthGrid, MonthYear, Transaction
from .data_model.parsers_emitters import parse_journal

__all__ = [
    "Amount",
    "Journal",
    "MonthGrid",
    "MonthYear",
    "Transaction",
    "balance_changes",
    "load_journal",
    "parse_journal",
    "parse_journal_text",
    "register",
    "transactions_by_month",
]
