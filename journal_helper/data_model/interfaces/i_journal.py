# journal_helper/data_model/interfaces/i_journal.py
from __future__ import annotations

from typing import Protocol, runtime_checkable

from typing_extensions import Self

from .i_transaction import ITransaction


@runtime_checkable
class IJournal(Protocol):
    """An ordered collection of balanced transactions."""

    transactions: list[ITransaction]

    def is_sorted_by_date(self) -> bool: ...
    def sorted_by_date(self) -> Self: ...
    def emit_journal(self) -> str: ...
