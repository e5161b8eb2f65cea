"""
Series-level summaries for calendar display.

group_by_month()
    ``{"YYYY-MM": [ForecastDay, ...]}`` in chronological order, the shape the
    month-by-month calendar view renders.

summarize_series()
    Mean index, best and worst day, day counts per ``IndexBand`` and the list
    of favourable dates (plus / strong plus). Ties on best/worst go to the
    earliest date.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Optional

from sal_forecaster.models.forecast import ForecastDay, ForecastSeries
from sal_forecaster.taxonomy.code_taxonomy import FAVOURABLE_BANDS, IndexBand
from sal_forecaster.utils.time_utils import month_key


def group_by_month(days: Iterable[ForecastDay]) -> dict[str, list[ForecastDay]]:
    """Group days by ``YYYY-MM``, preserving input order."""
    months: dict[str, list[ForecastDay]] = {}
    for day in days:
        months.setdefault(month_key(day.date), []).append(day)
    return months


@dataclass
class SeriesSummary:
    """Aggregate view of a forecast series.

    Attributes:
        day_count:        Number of days in the series.
        mean_index:       Mean daily index, 3 decimals (0.0 for an empty series).
        best_day:         Day with the highest index, or ``None``.
        worst_day:        Day with the lowest index, or ``None``.
        band_counts:      Days per band; every band is present, possibly 0.
        favourable_dates: Dates in a favourable band, ascending.
    """

    day_count:        int
    mean_index:       float
    best_day:         Optional[ForecastDay]
    worst_day:        Optional[ForecastDay]
    band_counts:      dict[IndexBand, int] = field(default_factory=dict)
    favourable_dates: list[date] = field(default_factory=list)

    @property
    def favourable_share(self) -> float:
        if self.day_count == 0:
            return 0.0
        return round(len(self.favourable_dates) / self.day_count, 3)


def summarize_series(series: ForecastSeries) -> SeriesSummary:
    """Summarize a ``ForecastSeries``."""
    days = series.forecasts
    band_counts = {band: 0 for band in IndexBand}
    for day in days:
        band_counts[day.band] += 1

    if not days:
        return SeriesSummary(
            day_count=0,
            mean_index=0.0,
            best_day=None,
            worst_day=None,
            band_counts=band_counts,
        )

    # max()/min() return the first maximal element, i.e. the earliest date.
    best = max(days, key=lambda d: d.index)
    worst = min(days, key=lambda d: d.index)

    return SeriesSummary(
        day_count=len(days),
        mean_index=round(sum(d.index for d in days) / len(days), 3),
        best_day=best,
        worst_day=worst,
        band_counts=band_counts,
        favourable_dates=[d.date for d in days if d.band in FAVOURABLE_BANDS],
    )
