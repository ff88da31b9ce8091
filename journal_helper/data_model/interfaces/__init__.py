# journal_helper/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the journal data model.
"""

from .enum_parse_error import EnumParseError
from .i_amount import AmountNumber, IAmount
from .i_entry import IEntry
from .i_journal import IJournal
from .i_parser_emitter import IParserEmitter
from .i_transaction import ITransaction

__all__ = [
    "AmountNumber",
    "EnumParseError",
    "IAmount",
    "IEntry",
    "IJournal",
    "IParserEmitter",
    "ITransaction",
]
