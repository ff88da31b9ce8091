from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from journal_helper.utilities.config_journal import ACCOUNT_AMOUNT_GAP

from ..interfaces import IEntry
from .amount import Amount


@dataclass
class Entry:
    """
    A single debit or credit of one account inside a transaction.
    """

    account: str
    amount: Amount

    def emit_journal(self) -> str:
        return f"{self.account}{ACCOUNT_AMOUNT_GAP}{self.amount.emit_journal()}"

    def __str__(self) -> str:
        return f"{self.account}{ACCOUNT_AMOUNT_GAP}{self.amount}"


if TYPE_CHECKING:
    _is_i_entry: type[IEntry] = Entry
