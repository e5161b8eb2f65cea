"""
SAL code calculation: birth date → five codes.

Formulas
--------
    personality = reduce(day)
    connector   = reduce(sum of every digit of day, month, year)
    realization = reduce(digit_sum(year % 100))      -- 0 reported as 9
    generator   = reduce(digit_sum(day) * digit_sum(month))
    mission     = reduce_mission(personality + connector)   -- keeps 11 / 22

``reduce`` is ``digit_sum_reduce``; ``reduce_mission`` is
``digit_sum_reduce_mission`` (see ``calc/digits.py``).

Years ending in ``00`` give a two-digit-year sum of 0. Realization is then
reported as 9, its digit-root equivalent; forecast steps are computed
modulo 9 so the scores are the same as for 0.

The output is a client-facing contract: identical input must give identical
codes, so nothing here depends on configuration, locale or the clock.
"""

from __future__ import annotations

from typing import Optional

from sal_forecaster.calc.birth_date import parse_birth_date
from sal_forecaster.calc.digits import (
    digit_sum,
    digit_sum_reduce,
    digit_sum_reduce_mission,
)
from sal_forecaster.models.codes import BirthDate, SALCodes


def codes_for_birth_date(birth_date: BirthDate) -> SALCodes:
    """Compute the five SAL codes for an already-parsed ``BirthDate``."""
    day, month, year = birth_date.day, birth_date.month, birth_date.year

    personality = digit_sum_reduce(day)
    connector = digit_sum_reduce(sum(birth_date.digits()))
    realization = digit_sum_reduce(digit_sum(year % 100)) or 9
    generator = digit_sum_reduce(digit_sum(day) * digit_sum(month))
    mission = digit_sum_reduce_mission(personality + connector)

    return SALCodes(
        personality=personality,
        connector=connector,
        realization=realization,
        generator=generator,
        mission=mission,
    )


def compute_codes(birth_date: Optional[str], *, strict: bool = True) -> SALCodes:
    """Parse ``birth_date`` and compute its SAL codes.

    Args:
        birth_date: ``YYYY-MM-DD`` or ``DD.MM.YYYY``.
        strict:     Reject non-existent calendar dates (see ``parse_birth_date``).

    Returns:
        ``SALCodes``.

    Raises:
        MissingBirthDate, InvalidDateFormat, InvalidCalendarDate: see
            ``sal_forecaster.calc.errors``.
    """
    return codes_for_birth_date(parse_birth_date(birth_date, strict=strict))
