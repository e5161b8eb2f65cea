"""
Birth-date validation errors.

All three are ``ValueError`` subclasses so callers that only care about "bad
input" can catch ``ValueError``; callers that need to distinguish the cases
(e.g. to pick a user-facing message) catch the specific class.
"""

from __future__ import annotations

from typing import Optional


class BirthDateError(ValueError):
    """Base class for every birth-date input failure."""


class MissingBirthDate(BirthDateError):
    """Raised when no birth date was supplied."""

    def __init__(self, message: str = "A birth date is required.") -> None:
        super().__init__(message)


class InvalidDateFormat(BirthDateError):
    """Raised when a birth-date string matches neither accepted pattern.

    Attributes:
        value: The rejected input string.
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid birth date format: {value!r}. "
            "Expected YYYY-MM-DD or DD.MM.YYYY."
        )


class InvalidCalendarDate(BirthDateError):
    """Raised when parsed components do not form a usable calendar date.

    Attributes:
        value: The original input string.
        year, month, day: The parsed components.
        reason: Optional detail (e.g. "day is out of range for month").
    """

    def __init__(
        self,
        value: str,
        year: int,
        month: int,
        day: int,
        reason: Optional[str] = None,
    ) -> None:
        self.value = value
        self.year = year
        self.month = month
        self.day = day
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(
            f"Not a valid calendar date: {value!r} "
            f"(year={year}, month={month}, day={day}){detail}."
        )
