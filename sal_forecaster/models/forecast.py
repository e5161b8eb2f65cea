"""
Forecast output models.

``DimensionScore`` is one code's evaluation against a date's positional
codes. ``ForecastDay`` bundles the three rotating dimensions and the daily
``index``. ``ForecastSeries`` is the ordered window of days for one birth
date around one "today".

All models are frozen. A series is regenerated on every request; nothing
here is persisted.
"""

from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from sal_forecaster.models.client import ClientRecord
from sal_forecaster.models.codes import SALCodes
from sal_forecaster.taxonomy.code_taxonomy import IndexBand, classify_index

SCORE_MIN = -2.0
SCORE_MAX = 2.0


class DimensionScore(BaseModel):
    """Score of one personal code for one date.

    Attributes:
        code:        The personal code (1–9) being scored.
        steps_week:  ``mod9(week_code - code + 9)``, 0–8.
        steps_month: ``mod9(month_code - code + 9)``, 0–8.
        t_week:      Step-table weight for ``steps_week``.
        t_month:     Step-table weight for ``steps_month``.
        score:       ``0.55 * t_week + 0.45 * t_month``, 3 decimals.
    """

    model_config = ConfigDict(frozen=True)

    code: int
    steps_week: int = Field(ge=0, le=8)
    steps_month: int = Field(ge=0, le=8)
    t_week: float = Field(ge=SCORE_MIN, le=SCORE_MAX)
    t_month: float = Field(ge=SCORE_MIN, le=SCORE_MAX)
    score: float = Field(ge=SCORE_MIN, le=SCORE_MAX)


class ForecastDay(BaseModel):
    """One calendar day evaluated against a (personality, connector, realization) triplet.

    Attributes:
        date:        UTC calendar date.
        week_code:   1–7, Monday=1.
        month_code:  1, 4, 8 or 9 by day-of-month bucket.
        personality: Dimension score for the personality code.
        connector:   Dimension score for the connector code.
        realization: Dimension score for the realization code.
        index:       Mean of the three scores, 3 decimals, in [-2, 2].
    """

    model_config = ConfigDict(frozen=True)

    date: dt.date
    week_code: int = Field(ge=1, le=7)
    month_code: int
    personality: DimensionScore
    connector: DimensionScore
    realization: DimensionScore
    index: float = Field(ge=SCORE_MIN, le=SCORE_MAX)

    @field_validator("month_code")
    @classmethod
    def validate_month_code(cls, v: int) -> int:
        if v not in (1, 4, 8, 9):
            raise ValueError(f"month_code must be one of 1, 4, 8, 9; got {v}.")
        return v

    @property
    def band(self) -> IndexBand:
        return classify_index(self.index)

    @property
    def scores(self) -> tuple[float, float, float]:
        return self.personality.score, self.connector.score, self.realization.score


class ForecastSeries(BaseModel):
    """Ordered forecast window for one birth date.

    Attributes:
        birth_date: Normalized ``YYYY-MM-DD`` birth date the codes came from.
        today:      The centre date the window was built around.
        codes:      SAL codes of the birth date.
        forecasts:  Days in strictly ascending order with no gaps.
        client:     Optional client record the series was requested for.
    """

    model_config = ConfigDict(frozen=True)

    birth_date: str
    today: dt.date
    codes: SALCodes
    forecasts: list[ForecastDay]
    client: Optional[ClientRecord] = None

    @model_validator(mode="after")
    def validate_contiguous(self) -> "ForecastSeries":
        for prev, cur in zip(self.forecasts, self.forecasts[1:]):
            if cur.date - prev.date != dt.timedelta(days=1):
                raise ValueError(
                    f"forecasts must be consecutive ascending days; "
                    f"got {prev.date} followed by {cur.date}."
                )
        return self

    @property
    def start(self) -> Optional[dt.date]:
        return self.forecasts[0].date if self.forecasts else None

    @property
    def end(self) -> Optional[dt.date]:
        return self.forecasts[-1].date if self.forecasts else None

    def day(self, d: dt.date) -> Optional[ForecastDay]:
        """Return the ``ForecastDay`` for ``d``, or ``None`` if outside the window."""
        if not self.forecasts or not self.start <= d <= self.end:
            return None
        return self.forecasts[(d - self.start).days]
