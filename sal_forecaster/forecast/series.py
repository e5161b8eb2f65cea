"""
Forecast series construction.

A series covers ``days_back`` days before ``today``, ``today`` itself and
``days_forward`` days after it (7 + 1 + 83 = 91 days by default). ``today``
is always passed in by the caller; this module never reads the clock, so the
same ``(birth_date, today)`` always yields the same series.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from sal_forecaster.calc.birth_date import parse_birth_date
from sal_forecaster.calc.codes import codes_for_birth_date
from sal_forecaster.calc.errors import MissingBirthDate
from sal_forecaster.forecast.engine import forecast_for_date
from sal_forecaster.models.client import ClientRecord
from sal_forecaster.models.forecast import ForecastSeries
from sal_forecaster.utils.time_utils import date_range

logger = logging.getLogger(__name__)

DEFAULT_DAYS_BACK = 7
DEFAULT_DAYS_FORWARD = 83


def forecast_window(
    today: date,
    days_back: int = DEFAULT_DAYS_BACK,
    days_forward: int = DEFAULT_DAYS_FORWARD,
) -> list[date]:
    """Return every date from ``today - days_back`` to ``today + days_forward``.

    Raises:
        ValueError: If either offset is negative.
    """
    if days_back < 0 or days_forward < 0:
        raise ValueError(
            f"days_back and days_forward must be >= 0, got {days_back}, {days_forward}."
        )
    return date_range(today - timedelta(days=days_back), today + timedelta(days=days_forward))


def build_forecast_series(
    birth_date: Optional[str],
    today: date,
    *,
    days_back: int = DEFAULT_DAYS_BACK,
    days_forward: int = DEFAULT_DAYS_FORWARD,
    strict: bool = True,
    client: Optional[ClientRecord] = None,
) -> ForecastSeries:
    """Compute SAL codes for ``birth_date`` and score every day in the window.

    Only personality, connector and realization feed the forecast; generator
    and mission are carried in ``series.codes`` for display.

    Args:
        birth_date:   ``YYYY-MM-DD`` or ``DD.MM.YYYY``.
        today:        Centre of the window (UTC calendar date).
        days_back:    Days before ``today`` to include.
        days_forward: Days after ``today`` to include.
        strict:       Reject non-existent calendar dates.
        client:       Optional client record attached to the result.

    Returns:
        ``ForecastSeries`` in ascending date order.

    Raises:
        MissingBirthDate:    ``birth_date`` is ``None`` or blank.
        InvalidDateFormat:   Unrecognized format.
        InvalidCalendarDate: Components do not form a usable date.
    """
    if birth_date is None or not str(birth_date).strip():
        raise MissingBirthDate()

    parsed = parse_birth_date(birth_date, strict=strict)
    codes = codes_for_birth_date(parsed)
    personality, connector, realization = codes.rotating

    forecasts = [
        forecast_for_date(d, personality, connector, realization)
        for d in forecast_window(today, days_back, days_forward)
    ]

    logger.debug(
        "Built forecast series: birth_date=%s today=%s days=%d codes=%s",
        parsed.iso,
        today,
        len(forecasts),
        codes.rotating,
    )

    return ForecastSeries(
        birth_date=parsed.iso,
        today=today,
        codes=codes,
        forecasts=forecasts,
        client=client,
    )


# Short alias matching the operation name used by callers.
build_series = build_forecast_series


def forecast_for_client(
    client: ClientRecord,
    today: date,
    *,
    days_back: int = DEFAULT_DAYS_BACK,
    days_forward: int = DEFAULT_DAYS_FORWARD,
    strict: bool = True,
) -> ForecastSeries:
    """Build the forecast series for a client record.

    Raises:
        MissingBirthDate: The record has no birth date.
        InvalidDateFormat, InvalidCalendarDate: Propagated from parsing.
    """
    if client.birth_date is None:
        raise MissingBirthDate(
            f"Client {client.id or client.name or '<unknown>'} has no birth date."
        )
    return build_forecast_series(
        client.birth_date,
        today,
        days_back=days_back,
        days_forward=days_forward,
        strict=strict,
        client=client,
    )
