"""
Per-day forecast scoring.

Each calendar day carries two positional codes that depend only on the
calendar:

    week_code  = ISO weekday, Monday=1 .. Sunday=7
    month_code = 1 (days 1–9), 4 (10–18), 8 (19–27), 9 (28–31)

Each personal code ``c`` (personality L, connector K, realization R) is
compared against both positional codes:

    steps = mod9(positional - c + 9)          # 0..8
    t     = STEP_WEIGHTS[steps]               # 2.0 .. -2.0 in 0.5 steps
    score = 0.55 * t_week + 0.45 * t_month    # [-2, 2]

and the daily index is the mean of the three unrounded scores. Scores and
index are rounded to 3 decimals.

Weights and the step table are fixed: forecasts are shown to clients and
must match across implementations.
"""

from __future__ import annotations

from datetime import date

from sal_forecaster.models.forecast import DimensionScore, ForecastDay

STEP_WEIGHTS: tuple[float, ...] = (2.0, 1.5, 1.0, 0.5, 0.0, -0.5, -1.0, -1.5, -2.0)
WEEK_WEIGHT = 0.55
MONTH_WEIGHT = 0.45

# (last day of bucket, month code)
_MONTH_BUCKETS: tuple[tuple[int, int], ...] = ((9, 1), (18, 4), (27, 8))
_LAST_MONTH_CODE = 9

ROUND_DIGITS = 3


def weekday_code(d: date) -> int:
    """Monday=1 .. Sunday=7."""
    return d.isoweekday()


def month_code(d: date) -> int:
    """Bucket the day of month into 1, 4, 8 or 9."""
    for last_day, code in _MONTH_BUCKETS:
        if d.day <= last_day:
            return code
    return _LAST_MONTH_CODE


def mod9(x: int) -> int:
    """Mathematical modulo 9, always in 0..8."""
    return ((x % 9) + 9) % 9


def steps_for(positional_code: int, personal_code: int) -> int:
    """Step distance from a personal code to a positional code, 0..8."""
    return mod9(positional_code - personal_code + 9)


def t_from_step(step: int) -> float:
    """Look up the step weight; ``step`` is clamped to 0..8."""
    return STEP_WEIGHTS[max(0, min(len(STEP_WEIGHTS) - 1, int(step)))]


def score_of(t_week: float, t_month: float) -> float:
    return WEEK_WEIGHT * t_week + MONTH_WEIGHT * t_month


def _dimension(code: int, week: int, month: int) -> tuple[DimensionScore, float]:
    steps_week = steps_for(week, code)
    steps_month = steps_for(month, code)
    t_week = t_from_step(steps_week)
    t_month = t_from_step(steps_month)
    raw = score_of(t_week, t_month)
    dim = DimensionScore(
        code=code,
        steps_week=steps_week,
        steps_month=steps_month,
        t_week=t_week,
        t_month=t_month,
        score=round(raw, ROUND_DIGITS),
    )
    return dim, raw


def forecast_for_date(
    d: date,
    personality: int,
    connector: int,
    realization: int,
) -> ForecastDay:
    """Evaluate one date against the three rotating codes.

    Args:
        d:           Calendar date (UTC).
        personality: Personality code (L).
        connector:   Connector code (K).
        realization: Realization code (R).

    Returns:
        ``ForecastDay`` with per-dimension breakdown and the daily index.
    """
    week = weekday_code(d)
    month = month_code(d)

    dim_l, raw_l = _dimension(personality, week, month)
    dim_k, raw_k = _dimension(connector, week, month)
    dim_r, raw_r = _dimension(realization, week, month)

    return ForecastDay(
        date=d,
        week_code=week,
        month_code=month,
        personality=dim_l,
        connector=dim_k,
        realization=dim_r,
        index=round((raw_l + raw_k + raw_r) / 3, ROUND_DIGITS),
    )
