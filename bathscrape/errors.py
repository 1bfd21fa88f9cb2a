"""Exception hierarchy for the scraping pipeline."""
from __future__ import annotations

from typing import Any, Dict, Optional


class ScrapeError(Exception):
    """Base class for every failure raised by :mod:`bathscrape`."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context: Dict[str, Any] = dict(context or {})

    def __str__(self) -> str:
        message = super().__str__()
        if not self.context:
            return message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{message} ({details})"


class FormatError(ScrapeError, ValueError):
    """Raised when a single text value does not have its expected shape."""

    def __init__(self, message: str, *, raw: Any = None, field: str = "", context=None):
        super().__init__(message, context=context)
        self.raw = raw
        self.field = field


class ExtractionMismatchError(ScrapeError):
    """Raised when related selections on a page disagree with each other."""


class InvalidRangeError(ScrapeError, ValueError):
    """Raised when a requested date range ends before it starts."""


class RangeMismatchError(ScrapeError):
    """Raised when assembled daily counts do not cover the requested days."""

    def __init__(self, message: str, *, expected: int, actual: int, context=None):
        super().__init__(message, context=context)
        self.expected = expected
        self.actual = actual


class FetchError(ScrapeError):
    """Raised when a page cannot be downloaded."""

    def __init__(self, message: str, *, url: str, context=None):
        super().__init__(message, context=context)
        self.url = url


class FetchTimeoutError(FetchError):
    """Raised when downloading a page exceeds the configured timeout."""
