from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .amount import Amount


@dataclass
class Line:
    """
    An entry line of the journal text: an account and an optional amount.

    ``amount is None`` marks a blank entry whose amount is inferred when the
    transaction is balanced.
    """

    account: str
    amount: Optional[Amount] = None

    @property
    def is_blank(self) -> bool:
        return self.amount is None
