# journal_helper/data_model/__init__.py
from .interfaces import (
    AmountNumber, EnumParseError, IAmount, IEntry, IJournal,
    IParserEmitter, ITransaction)
from .errors import (
    AmountMismatchError, BlankEntryError, EmptyJournalError,
    EntryOutsideTransactionError, InvalidMonthError, JournalError,
    JournalInvariantError, LineParseError, MonthOutOfRangeError,
    MonthRangeError, ParseJournalError, TwoBlankEntriesError,
    UnbalancedTransactionError, UnsortedJournalError)
from .j_wrapper import (
    Amount, AmountValue, Discrete, Entry, Float, Journal,
    JournalSummary, Line, MonthYear, Transaction)
from .month_grid import MonthGrid
__all__ = [
    "AmountNumber", "EnumParseError", "IAmount", "IEntry", "IJournal",
    "IParserEmitter", "ITransaction", "AmountMismatchError", "BlankEntryError",
    "EmptyJournalError", "EntryOutsideTransactionError", "InvalidMonthError",
    "JournalError", "JournalInvariantError", "LineParseError",
    "MonthOutOfRangeError", "MonthRangeError", "ParseJournalError",
    "TwoBlankEntriesError", "UnbalancedTransactionError",
    "UnsortedJournalError", "Amount", "AmountValue", "Discrete", "Entry",
    "Float", "Journal", "JournalSummary", "Line", "MonthYear", "Transaction",
    "MonthGrid"]
