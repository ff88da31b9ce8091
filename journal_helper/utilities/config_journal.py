# journal_helper/utilities/config_journal.py
"""Constants describing the plain-text journal format."""
from __future__ import annotations

from typing import Final

# Units that are stored as fixed-point cents rather than floats
BASE_CURRENCY: Final[str] = "$"
DISCRETE_PLACES: Final[int] = 2
# upper bound on the digits of a fixed-point amount
MAX_AMOUNT_DIGITS: Final[int] = 100

COMMENT_CHAR: Final[str] = ";"
ESCAPE_CHAR: Final[str] = "\\"

JOURNAL_DATE_FORMAT: Final[str] = "%Y/%m/%d"

# entry lines must be indented by at least one space
ENTRY_INDENT: Final[str] = "    "
ACCOUNT_AMOUNT_GAP: Final[str] = "    "
