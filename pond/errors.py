# pond/errors.py
from __future__ import annotations


class CollectionError(Exception):
    """Misuse of a collection (contract violation, not a search outcome)."""


class EmptyCollectionError(CollectionError):
    def __init__(self, message: str = "empty collection"):
        super().__init__(message)


class ElementNotFoundError(CollectionError):
    def __init__(self, message: str = "element not found"):
        super().__init__(message)


class PondFormatError(ValueError):
    """Raised when a pond description cannot be turned into a Pond."""

    def __init__(self, message: str, line_no: int | None = None):
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)
