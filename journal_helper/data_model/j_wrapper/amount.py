from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TYPE_CHECKING

from typing_extensions import TypeAlias

from journal_helper.utilities.config_journal import (
    BASE_CURRENCY,
    DISCRETE_PLACES,
    MAX_AMOUNT_DIGITS,
)
from journal_helper.utilities.converters_scalar import to_decimal

from ..errors import AmountMismatchError
from ..interfaces import AmountNumber, IAmount

# region Value variants


@dataclass(frozen=True)
class Discrete:
    """
    An integer number of the smallest divisible units of a commodity and the
    number of decimal places after the unit place value, so $10.25 is
    ``Discrete(1025, 2)``.
    """

    scaled: int
    places: int


@dataclass(frozen=True)
class Float:
    """A floating point quantity, for units without a natural smallest step."""

    value: float


AmountValue: TypeAlias = Discrete | Float

# endregion Value variants


@dataclass
class Amount:
    """
    A quantity tagged with its units.

    Amounts are only mutated through ``add``. Arithmetic never mixes units or
    numeric representations; doing so raises ``AmountMismatchError``.
    """

    units: str
    value: AmountValue

    @classmethod
    def from_number(cls, units: str, number: AmountNumber) -> Amount:
        """
        Build an amount from a numeric literal.

        The base currency is stored as fixed-point cents (rounded half away
        from zero); every other unit is stored as a float.

        Raises:
            ValueError: the literal is not a number, or is too large to be
                stored (more than ``MAX_AMOUNT_DIGITS`` digits, or beyond the
                float range).
        """
        d = to_decimal(number)
        if units == BASE_CURRENCY:
            return cls(units, Discrete(_to_scaled(d, DISCRETE_PLACES), DISCRETE_PLACES))
        value = float(d)
        if not math.isfinite(value):
            raise ValueError(f"Amount {number!r} {units} is out of range")
        return cls(units, Float(value))

    def is_zero(self) -> bool:
        match self.value:
            case Discrete(scaled=scaled):
                return scaled == 0
            case Float(value=value):
                return value == 0.0
        raise TypeError(f"Unknown amount value {self.value!r}")

    def negate(self) -> Amount:
        """Return a new amount with the opposite sign."""
        match self.value:
            case Discrete(scaled=scaled, places=places):
                return Amount(self.units, Discrete(-scaled, places))
            case Float(value=value):
                return Amount(self.units, Float(-value))
        raise TypeError(f"Unknown amount value {self.value!r}")

    def add(self, other: Amount) -> None:
        """Add ``other`` into this amount in place."""
        if self.units != other.units:
            raise AmountMismatchError(
                f"Cannot add two amounts with different units: "
                f"{self.units!r} and {other.units!r}"
            )
        match self.value, other.value:
            case Discrete(scaled=left, places=p1), Discrete(scaled=right, places=p2):
                if p1 != p2:
                    raise AmountMismatchError(
                        "Cannot add two discrete amounts with different decimal places"
                        f" ({p1} and {p2})"
                    )
                self.value = Discrete(left + right, p1)
            case Float(value=left), Float(value=right):
                self.value = Float(left + right)
            case Discrete(), Float():
                raise AmountMismatchError("Cannot add a discrete amount to a float amount")
            case Float(), Discrete():
                raise AmountMismatchError("Cannot add a float amount to a discrete amount")
            case _:
                raise TypeError(f"Unknown amount values {self.value!r}, {other.value!r}")

    def copy(self) -> Amount:
        return Amount(self.units, self.value)

    def to_number(self) -> Decimal | float:
        """Return the numeric value: ``Decimal`` for discrete amounts, ``float`` otherwise."""
        match self.value:
            case Discrete(scaled=scaled, places=places):
                return Decimal(scaled).scaleb(-places)
            case Float(value=value):
                return value
        raise TypeError(f"Unknown amount value {self.value!r}")

    # region Parser/Emitter

    def _with_units(self, number_text: str) -> str:
        if self.units == BASE_CURRENCY:
            return f"{self.units}{number_text}"
        return f"{number_text} {self.units}"

    def emit_journal(self) -> str:
        """Exact journal text for this amount; parses back to an equal amount."""
        match self.value:
            case Discrete(scaled=scaled, places=places):
                return self._with_units(_format_scaled(scaled, places))
            case Float(value=value):
                return self._with_units(repr(value))
        raise TypeError(f"Unknown amount value {self.value!r}")

    def __str__(self) -> str:
        match self.value:
            case Discrete(scaled=scaled, places=places):
                return self._with_units(_format_scaled(scaled, places))
            case Float(value=value):
                return self._with_units(f"{value:.3f}")
        return repr(self)

    # endregion Parser/Emitter


def _to_scaled(d: Decimal, places: int) -> int:
    """``d`` counted in steps of ``10**-places``, rounded half away from zero."""
    digits = d.adjusted() + places + 1
    if digits > MAX_AMOUNT_DIGITS:
        raise ValueError(f"Amount {d} has more than {MAX_AMOUNT_DIGITS} digits")
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits + 1)
        return int(d.scaleb(places).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _format_scaled(scaled: int, places: int) -> str:
    sign = "-" if scaled < 0 else ""
    if places <= 0:
        return f"{sign}{abs(scaled)}"
    whole, frac = divmod(abs(scaled), 10**places)
    return f"{sign}{whole}.{frac:0{places}d}"


if TYPE_CHECKING:
    _is_i_amount: type[IAmount] = Amount
