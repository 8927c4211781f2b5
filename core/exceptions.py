"""Exception types raised at the Day2Day ingestion boundary."""

from __future__ import annotations

from typing import Optional

__all__ = ["Day2DayError", "ValidationError"]


class Day2DayError(Exception):
    """Base class for Day2Day errors."""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(Day2DayError):
    """Raised when user input cannot become an expense."""
