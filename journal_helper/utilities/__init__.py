from .config_logging import LOGGING, configure_logging
from .converters_scalar import to_date, to_decimal
from .core_util import (
    is_null_or_whitespace,
    open_for_read,
    split_off_comment,
)

__all__ = [
    "is_null_or_whitespace",
    "to_date",
    "to_decimal",
    "open_for_read",
    "split_off_comment",
    "configure_logging",
    "LOGGING",
]
