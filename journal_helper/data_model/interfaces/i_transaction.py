# journal_helper/data_model/interfaces/i_transaction.py
from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable

from .i_amount import IAmount
from .i_entry import IEntry


@runtime_checkable
class ITransaction(Protocol):
    """Structural shape of a dated, described group of entries."""

    date: date
    description: str
    entries: list[IEntry]

    def totals(self) -> dict[str, IAmount]: ...

    # region Parser/Emitter

    def emit_journal(self) -> str: ...

    # endregion Parser/Emitter
