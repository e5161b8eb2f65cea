"""
Date utilities for forecast windows.

All forecast dates are plain ``datetime.date`` values interpreted as UTC
calendar days. The only function here that reads the clock is
``utc_today()``; it is called at the CLI boundary, never from the
calculation core.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone


def date_range(start: date, end: date, step_days: int = 1) -> list[date]:
    """Generate a list of dates from ``start`` to ``end`` (inclusive).

    Args:
        start: First date in the range.
        end: Last date in the range (inclusive).
        step_days: Step size in days (default 1).

    Returns:
        List of date objects.

    Raises:
        ValueError: If ``end < start`` or ``step_days < 1``.
    """
    if end < start:
        raise ValueError(f"end ({end}) must be >= start ({start}).")
    if step_days < 1:
        raise ValueError(f"step_days must be >= 1, got {step_days}.")

    result: list[date] = []
    current = start
    while current <= end:
        result.append(current)
        current += timedelta(days=step_days)
    return result


def month_key(d: date) -> str:
    """Return the ``YYYY-MM`` grouping key for a date."""
    return f"{d.year:04d}-{d.month:02d}"


def utcnow() -> datetime:
    """Return the current UTC datetime with timezone info."""
    return datetime.now(tz=timezone.utc)


def utc_today() -> date:
    """Return today's calendar date in UTC."""
    return utcnow().date()
