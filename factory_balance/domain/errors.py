"""Exceptions raised while computing the balance sheet."""


class BalanceSheetError(Exception):
    """Base class for balance-sheet computation errors."""


class SourceUnavailableError(BalanceSheetError):
    """A store read failed and the report cannot be computed.

    Attributes:
        source: Name of the store collection that could not be read.
    """

    def __init__(self, source: str, message: str | None = None) -> None:
        self.source = source
        super().__init__(message or f"Could not read source: {source}")


__all__ = ["BalanceSheetError", "SourceUnavailableError"]
