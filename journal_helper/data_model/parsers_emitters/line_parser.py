# journal_helper/data_model/parsers_emitters/line_parser.py
"""
Grammar for the entry lines of a journal transaction.

    expenses:food:tim-hortons  $-1.25
    usage:power  308 kWh
    credit:visa

An account token is alphanumerics, colons and hyphens, so it never contains a
space. The amount must be separated from it by at least two spaces or tabs.
The amount is ``<units><number>`` or ``<number><units>``, optionally with
whitespace in between.
"""
from __future__ import annotations

import re
from typing import NamedTuple, Optional

from journal_helper.utilities.core_util import is_null_or_whitespace

from ..errors import LineParseError
from ..interfaces import EnumParseError
from ..j_wrapper import Amount, Line

_ACCOUNT = r"(?P<account>[A-Za-z0-9:-]+)"
_UNITS = r"[A-Za-z$]+"
_NUMBER = r"[-+]?[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?"

ACCOUNT_AND_AMOUNT_RE = re.compile(
    rf"""
    \s*
    {_ACCOUNT}
    (?:
        [ \t]{{2,}}
        (?P<units>{_UNITS})
        \s*
        (?P<amount>{_NUMBER})
      |
        [ \t]{{2,}}
        (?P<amount2>{_NUMBER})
        \s*
        (?P<units2>{_UNITS})
    )
    \s*
    """,
    re.VERBOSE,
)

ACCOUNT_ONLY_RE = re.compile(rf"\s*{_ACCOUNT}\s*")


class ParsedAmountLine(NamedTuple):
    account: str
    units: str
    number: str


def parse_account_and_amount(text: str) -> Optional[ParsedAmountLine]:
    """Match the account-with-amount shape; ``None`` if the line has another shape."""
    m = ACCOUNT_AND_AMOUNT_RE.fullmatch(text)
    if m is None:
        return None
    units = m.group("units") or m.group("units2")
    number = m.group("amount") or m.group("amount2")
    return ParsedAmountLine(m.group("account"), units, number)


def parse_account_only(text: str) -> Optional[str]:
    """Match the account-only shape; ``None`` if the line has another shape."""
    m = ACCOUNT_ONLY_RE.fullmatch(text)
    return m.group("account") if m else None


def parse_line(text: str) -> Line:
    """
    Parse an entry line (without its leading indentation or comment).

    Raises:
        LineParseError: ``MISSING_ACCOUNT`` for an empty line,
            ``UNKNOWN_LINE`` when neither shape matches, ``INVALID_AMOUNT``
            when the amount is too large to store.
    """
    if is_null_or_whitespace(text):
        raise LineParseError(EnumParseError.MISSING_ACCOUNT, text)

    parsed = parse_account_and_amount(text)
    if parsed is not None:
        try:
            amount = Amount.from_number(parsed.units, parsed.number)
        except ValueError as e:
            raise LineParseError(EnumParseError.INVALID_AMOUNT, text) from e
        return Line(parsed.account, amount)

    account = parse_account_only(text)
    if account is not None:
        return Line(account)

    raise LineParseError(EnumParseError.UNKNOWN_LINE, text)
