"""Application exception hierarchy."""

from __future__ import annotations


class ExpenseBotError(Exception):
    """Base application error."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(ExpenseBotError):
    """Raised when startup configuration is missing or malformed."""


class SheetsError(ExpenseBotError):
    """Raised when the spreadsheet backend cannot complete an operation."""


class ReferenceFetchError(SheetsError):
    """Raised when the reference lists cannot be read."""


class AppendError(SheetsError):
    """Raised when an expense row cannot be appended to the ledger."""
