# journal_helper/data_model/interfaces/i_entry.py
from __future__ import annotations

from typing import Protocol, runtime_checkable

from .i_amount import IAmount


@runtime_checkable
class IEntry(Protocol):
    """One account/amount posting inside a transaction."""

    account: str
    amount: IAmount

    def emit_journal(self) -> str: ...
