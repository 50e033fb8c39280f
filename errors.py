"""Custom exceptions raised by the analytics engines."""
from __future__ import annotations


class AnalyticsError(Exception):
    """Base class for ticker analytics failures."""


class InsufficientDataError(AnalyticsError, ValueError):
    """A computation received fewer points than it needs.

    Raised by the summary statistics and returns-table builders.  The
    caller is expected to omit the affected instrument from display.
    """

    def __init__(self, message: str, required: int = 2, actual: int = 0):
        super().__init__(message)
        self.required = required
        self.actual = actual


class SeriesValidationError(AnalyticsError, ValueError):
    """A daily series breaks the ascending / unique / positive-close invariant."""
