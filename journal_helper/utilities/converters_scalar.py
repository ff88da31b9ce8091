# journal_helper/utilities/converters_scalar.py
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from .config_journal import JOURNAL_DATE_FORMAT


def _bad(value: Any, target: str) -> ValueError:
    return ValueError(f"Cannot convert {type(value).__name__} to {target}")


def to_date(value: str, fmt: str = JOURNAL_DATE_FORMAT, /) -> date:
    """
    Parse a journal date string strictly with ``fmt`` (default ``YYYY/MM/DD``).

    Raises
    ------
    ValueError
        If the value is not a string in that format, including
        calendar-invalid strings such as ``2023/02/30``.
    """
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), fmt).date()
        except ValueError as e:
            raise ValueError(f"Could not parse date from {value!r} using {fmt!r}") from e
    raise _bad(value, "date")


def to_decimal(value: Any) -> Decimal:
    """
    Convert a journal number literal to ``Decimal``.

    Journal numbers are plain decimals with an optional sign and exponent
    (``-12.46``, ``+3``, ``.5``, ``1e3``); no thousands separators.

    Raises:
        ValueError: if the value is not a finite number.
    """
    # Fast-path for numeric types
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise _bad(value, "Decimal")
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        # Avoid binary float artifacts
        result = Decimal(str(value))
    elif isinstance(value, str):
        cleaned = value.strip()
        if not cleaned:
            raise ValueError("Empty string cannot be converted to Decimal")
        try:
            result = Decimal(cleaned)
        except InvalidOperation as e:
            raise ValueError(f"Could not parse Decimal from {value!r}") from e
    else:
        raise _bad(value, "Decimal")

    if not result.is_finite():
        raise ValueError(f"Non-finite number {value!r}")
    return result
