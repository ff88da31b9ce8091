from enum import Enum


class EnumParseError(Enum):
    """
    Enum representing why a journal line could not be parsed.
    """

    MISSING_ACCOUNT = "MissingAccount"
    ENTRY_LINE_MUST_START_WITH_SPACE = "EntryLineMustStartWithSpace"
    UNKNOWN_LINE = "UnknownLine"
    INVALID_AMOUNT = "InvalidAmount"

    @property
    def message(self) -> str:
        """Human readable description of this error kind."""
        return _MESSAGES[self]


_MESSAGES = {
    EnumParseError.MISSING_ACCOUNT: "Entry line has no account",
    EnumParseError.ENTRY_LINE_MUST_START_WITH_SPACE: (
        "First character of a debit/credit line must be a space or tab"
    ),
    EnumParseError.UNKNOWN_LINE: "Couldn't process this line",
    EnumParseError.INVALID_AMOUNT: "Amount is not a number that can be stored",
}
