"""
Error taxonomy raised by the inventory engine.

Every failure carries the isbns that caused it so the HTTP layer can
report the whole batch back to the caller in one response.
"""

from __future__ import annotations

from typing import Iterable, List, Optional


class BookStoreError(Exception):
    """Base class for all engine errors."""

    def __init__(self, message: str, isbns: Optional[Iterable[int]] = None) -> None:
        self.message = message
        self.isbns: List[int] = sorted(set(isbns or []))
        if self.isbns:
            message = f"{message}: {', '.join(str(i) for i in self.isbns)}"
        super().__init__(message)


class InvalidArgument(BookStoreError):
    """Malformed, empty, duplicated or out-of-range input."""


class AlreadyExists(InvalidArgument):
    """An add batch names an isbn already present in the catalog."""


class NotFound(BookStoreError):
    """A referenced isbn is not in the catalog."""


class OutOfStock(BookStoreError):
    """A buy asks for more copies than the catalog holds."""
