from .balance_report import account_balance_changes, balance_changes, balance_frame
from .journal_loader import load_journal, parse_journal_text, save_journal
from .register_report import (
    FilteredTransaction,
    RegisterLine,
    filter_by_account,
    format_register_line,
    register,
    register_frame,
)
from .transactions_by_month import TransactionsByMonth, transactions_by_month

__all__ = [
    "account_balance_changes",
    "balance_changes",
    "balance_frame",
    "load_journal",
    "parse_journal_text",
    "save_journal",
    "FilteredTransaction",
    "RegisterLine",
    "filter_by_account",
    "format_register_line",
    "register",
    "register_frame",
    "TransactionsByMonth",
    "transactions_by_month",
]
