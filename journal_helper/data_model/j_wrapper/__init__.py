# journal_helper/data_model/j_wrapper/__init__.py

from .amount import Amount, AmountValue, Discrete, Float
from .entry import Entry
from .journal import Journal, JournalSummary
from .line import Line
from .month_year import MonthYear
from .transaction import Transaction

__all__ = [
    "Amount",
    "AmountValue",
    "Discrete",
    "Float",
    "Entry",
    "Journal",
    "JournalSummary",
    "Line",
    "MonthYear",
    "Transaction",
]
