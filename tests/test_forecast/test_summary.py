"""Tests for sal_forecaster.forecast.summary."""

from __future__ import annotations

from datetime import date

from sal_forecaster.forecast.engine import forecast_for_date
from sal_forecaster.forecast.summary import group_by_month, summarize_series
from sal_forecaster.models.forecast import ForecastSeries
from sal_forecaster.taxonomy.code_taxonomy import FAVOURABLE_BANDS, IndexBand


class TestGroupByMonth:
    def test_keys_in_chronological_order(self, sample_series):
        months = group_by_month(sample_series.forecasts)
        assert list(months) == ["2024-05", "2024-06", "2024-07", "2024-08"]

    def test_counts(self, sample_series):
        months = group_by_month(sample_series.forecasts)
        assert len(months["2024-05"]) == 3   # 29, 30, 31
        assert len(months["2024-06"]) == 30
        assert len(months["2024-07"]) == 31
        assert len(months["2024-08"]) == 27
        assert sum(len(v) for v in months.values()) == 91

    def test_empty(self):
        assert group_by_month([]) == {}


class TestSummarizeSeries:
    def test_counts_add_up(self, sample_series):
        summary = summarize_series(sample_series)
        assert summary.day_count == 91
        assert sum(summary.band_counts.values()) == 91
        assert set(summary.band_counts) == set(IndexBand)

    def test_best_and_worst(self, sample_series):
        summary = summarize_series(sample_series)
        indices = [d.index for d in sample_series.forecasts]
        assert summary.best_day.index == max(indices)
        assert summary.worst_day.index == min(indices)

    def test_best_tie_goes_to_earliest(self, sample_series):
        summary = summarize_series(sample_series)
        top = max(d.index for d in sample_series.forecasts)
        first_top = next(d for d in sample_series.forecasts if d.index == top)
        assert summary.best_day.date == first_top.date

    def test_favourable_dates(self, sample_series):
        summary = summarize_series(sample_series)
        by_date = {d.date: d for d in sample_series.forecasts}
        for d in summary.favourable_dates:
            assert by_date[d].band in FAVOURABLE_BANDS
            assert by_date[d].index >= 0.5
        expected = sum(
            summary.band_counts[b] for b in (IndexBand.PLUS, IndexBand.STRONG_PLUS)
        )
        assert len(summary.favourable_dates) == expected
        assert summary.favourable_dates == sorted(summary.favourable_dates)

    def test_mean_index(self, sample_series):
        summary = summarize_series(sample_series)
        mean = sum(d.index for d in sample_series.forecasts) / 91
        assert summary.mean_index == round(mean, 3)

    def test_all_strong_plus(self, sample_codes):
        # Monday the 3rd with codes (1, 1, 1) scores the maximum.
        day = forecast_for_date(date(2024, 6, 3), 1, 1, 1)
        series = ForecastSeries(
            birth_date="1990-05-15", today=day.date, codes=sample_codes, forecasts=[day]
        )
        summary = summarize_series(series)
        assert summary.band_counts[IndexBand.STRONG_PLUS] == 1
        assert summary.favourable_share == 1.0

    def test_empty_series(self, sample_codes):
        series = ForecastSeries(
            birth_date="1990-05-15", today=date(2024, 6, 5), codes=sample_codes, forecasts=[]
        )
        summary = summarize_series(series)
        assert summary.day_count == 0
        assert summary.best_day is None
        assert summary.worst_day is None
        assert summary.favourable_share == 0.0
