#!/usr/bin/env python3
"""
Core Utilities

Features:
- File I/O helpers
- String utilities
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import IO, Any, Optional

from .config_journal import COMMENT_CHAR, ESCAPE_CHAR

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def open_for_read(path: Path, **kwargs: Any) -> IO[str]:
    """Open ``path`` for reading in text mode."""
    return open(path, "r", **kwargs)


# endregion Common functions

# region Comments

_UNESCAPED_COMMENT = re.compile(
    rf"(?<!{re.escape(ESCAPE_CHAR)}){re.escape(COMMENT_CHAR)}"
)
_ESCAPED_COMMENT = ESCAPE_CHAR + COMMENT_CHAR


def split_off_comment(line: str) -> tuple[str, Optional[str]]:
    """
    Split a journal line at the first unescaped comment character.

    Returns ``(text, comment)`` where ``comment`` is ``None`` if the line has
    no comment. Escaped comment characters (``\\;``) in the text part are
    unescaped; the comment part is returned untouched.

        >>> split_off_comment("  assets:cash  $1 ; tip")
        ('  assets:cash  $1 ', ' tip')
    """
    parts = _UNESCAPED_COMMENT.split(line, maxsplit=1)
    text = parts[0].replace(_ESCAPED_COMMENT, COMMENT_CHAR)
    if len(parts) == 1:
        return text, None
    return text, parts[1]


# endregion Comments
