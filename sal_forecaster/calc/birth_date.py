"""
Birth-date string parsing.

Two textual forms are accepted:

    YYYY-MM-DD    e.g. ``1990-05-15`` (day/month may have one digit)
    DD.MM.YYYY    e.g. ``15.05.1990``

Validation levels
-----------------
strict=True (default)
    The components must form a real Gregorian date; ``2024-02-30`` raises
    ``InvalidCalendarDate``.
strict=False
    Only the coarse ranges are checked (day 1–31, month 1–12, year >= 1).
    This matches how older client records were accepted and lets codes be
    computed for them, since the code arithmetic only needs the integers.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

from pydantic import ValidationError

from sal_forecaster.calc.errors import (
    InvalidCalendarDate,
    InvalidDateFormat,
    MissingBirthDate,
)
from sal_forecaster.models.codes import BirthDate

_ISO_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_DOTTED_RE = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$")


def parse_birth_date(value: Optional[str], *, strict: bool = True) -> BirthDate:
    """Parse and validate a birth-date string.

    Args:
        value:  Raw input, ``YYYY-MM-DD`` or ``DD.MM.YYYY``.
        strict: Reject combinations that are not real calendar dates.

    Returns:
        Normalized ``BirthDate``.

    Raises:
        MissingBirthDate:    ``value`` is ``None`` or blank.
        InvalidDateFormat:   Neither pattern matches.
        InvalidCalendarDate: Components out of range (or not a real date in
            strict mode).
    """
    if value is None or not str(value).strip():
        raise MissingBirthDate()

    text = str(value).strip()

    if m := _ISO_RE.match(text):
        year, month, day = (int(g) for g in m.groups())
    elif m := _DOTTED_RE.match(text):
        day, month, year = (int(g) for g in m.groups())
    else:
        raise InvalidDateFormat(text)

    try:
        birth_date = BirthDate(year=year, month=month, day=day)
    except ValidationError as exc:
        raise InvalidCalendarDate(
            text, year, month, day, reason=_first_error(exc)
        ) from exc

    if strict:
        try:
            date(year, month, day)
        except ValueError as exc:
            raise InvalidCalendarDate(text, year, month, day, reason=str(exc)) from exc

    return birth_date


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    field = ".".join(str(p) for p in err.get("loc", ()))
    return f"{field} {err.get('msg', 'is invalid')}".strip()
