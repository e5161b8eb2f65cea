"""Tests for sal_forecaster.reporting.formatters."""

from __future__ import annotations

from datetime import date

from sal_forecaster.calc.codes import compute_codes
from sal_forecaster.forecast.summary import summarize_series
from sal_forecaster.models.forecast import ForecastSeries
from sal_forecaster.reporting.formatters import (
    format_band_legend,
    format_codes_table,
    format_forecast_calendar,
    format_series_summary,
)


class TestFormatCodesTable:
    def test_lists_all_codes(self, sample_codes):
        out = format_codes_table(sample_codes, "1990-05-15")
        assert "Birth date:" in out
        for label in ("Personality Code", "Connector Code", "Realization Code",
                      "Generator Code", "Mission Code"):
            assert label in out
        assert "master number" not in out

    def test_master_mission_flagged(self):
        out = format_codes_table(compute_codes("1992-05-15"))
        assert "11  (master number)" in out

    def test_describe_adds_meanings(self, sample_codes):
        plain = format_codes_table(sample_codes)
        described = format_codes_table(sample_codes, describe=True)
        assert "innate nature" not in plain
        assert "innate nature" in described
        assert len(described.splitlines()) == len(plain.splitlines()) + 5


def test_band_legend_lists_all_bands():
    out = format_band_legend()
    for text in ("Strong plus", "Plus", "Neutral", "Minus", "Strong minus"):
        assert text in out


class TestFormatForecastCalendar:
    def test_month_blocks(self, sample_series):
        out = format_forecast_calendar(sample_series)
        for month in ("[2024-05]", "[2024-06]", "[2024-07]", "[2024-08]"):
            assert month in out
        assert "91 days" in out

    def test_today_marked(self, sample_series):
        lines = format_forecast_calendar(sample_series).splitlines()
        marked = [line for line in lines if line.startswith("* ")]
        assert len(marked) == 1
        assert marked[0].startswith("* 2024-06-05  Wed")

    def test_one_row_per_day(self, sample_series):
        out = format_forecast_calendar(sample_series)
        rows = [line for line in out.splitlines() if line[2:6] == "2024"]
        assert len(rows) == 91

    def test_empty_series(self, sample_codes):
        series = ForecastSeries(
            birth_date="1990-05-15", today=date(2024, 6, 5), codes=sample_codes, forecasts=[]
        )
        assert "empty forecast window" in format_forecast_calendar(series)


class TestFormatSeriesSummary:
    def test_contains_key_figures(self, sample_series):
        summary = summarize_series(sample_series)
        out = format_series_summary(summary)
        assert "Days:        91" in out
        assert f"{summary.mean_index:.3f}" in out
        assert str(summary.best_day.date) in out
        assert str(summary.worst_day.date) in out

    def test_empty(self, sample_codes):
        series = ForecastSeries(
            birth_date="1990-05-15", today=date(2024, 6, 5), codes=sample_codes, forecasts=[]
        )
        assert "(no days)" in format_series_summary(summarize_series(series))
