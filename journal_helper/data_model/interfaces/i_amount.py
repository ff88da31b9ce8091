# journal_helper/data_model/interfaces/i_amount.py
from __future__ import annotations

from decimal import Decimal
from typing import runtime_checkable

from typing_extensions import Protocol, Self, TypeAlias

AmountNumber: TypeAlias = int | float | Decimal | str


@runtime_checkable
class IAmount(Protocol):
    """Structural shape of a unit-tagged quantity with unit-checked arithmetic."""

    units: str

    def is_zero(self) -> bool: ...
    def negate(self) -> Self: ...
    def add(self, other: Self) -> None: ...
    def copy(self) -> Self: ...
    def to_number(self) -> Decimal | float: ...
