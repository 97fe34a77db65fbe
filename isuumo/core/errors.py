"""Error types for the isuumo listing service.

Defines a small hierarchy of exceptions raised by the domain layer to signal
client mistakes; the server maps every one of them to HTTP 400.
"""

from __future__ import annotations


class IsuumoError(Exception):
    """Base error for all isuumo domain exceptions."""


class InvalidSearchConditionError(IsuumoError):
    """Raised when a search request carries an unusable condition."""

    def __init__(self, parameter: str, message: str) -> None:
        self.parameter = parameter
        super().__init__(f"Invalid search condition '{parameter}': {message}")


class CsvImportError(IsuumoError):
    """Raised when an uploaded CSV cannot be turned into listing rows."""

    def __init__(self, line: int, message: str) -> None:
        self.line = line
        super().__init__(f"CSV line {line}: {message}")
