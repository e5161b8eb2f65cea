"""
ASCII terminal formatters for CLI commands.

All formatters accept models or summaries and return plain multi-line
strings suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``): index bands are
shown as symbols instead of colours::

    ++  strong plus     +  plus     0  neutral     -  minus     --  strong minus

The calendar is grouped by month and marks "today" with ``*``::

    === 2024-06 ===
      Date        Day  W  M   Pers   Conn   Real   Index  Band
      ----------------------------------------------------------
      2024-06-01  Sat  6  1  0.775  ...
    * 2024-06-02  Sun  7  1  ...
"""

from __future__ import annotations

from sal_forecaster.forecast.summary import SeriesSummary, group_by_month
from sal_forecaster.models.codes import SALCodes
from sal_forecaster.models.forecast import ForecastDay, ForecastSeries
from sal_forecaster.taxonomy.code_taxonomy import (
    BAND_LABELS,
    BAND_SYMBOLS,
    CODE_DESCRIPTIONS,
    CODE_LABELS,
    CodeKind,
    IndexBand,
)

_WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


# ── Codes ─────────────────────────────────────────────────────────────────────


def format_codes_table(
    codes: SALCodes,
    birth_date: str = "",
    describe: bool = False,
) -> str:
    """Return the five codes as an aligned two-column block.

    Args:
        codes:      Codes to show.
        birth_date: Optional birth date for the header line.
        describe:   Add the meaning of each code under its value.
    """
    lines: list[str] = ["", "=== SAL Codes ==="]
    if birth_date:
        lines.append(f"  Birth date:        {birth_date}")
    for kind in CodeKind:
        value = getattr(codes, kind.value)
        suffix = ""
        if kind is CodeKind.MISSION and codes.has_master_mission:
            suffix = "  (master number)"
        lines.append(f"  {CODE_LABELS[kind] + ':':<18} {value:>2}{suffix}")
        if describe:
            lines.append(f"      {CODE_DESCRIPTIONS[kind]}")
    return "\n".join(lines)


# ── Legend ────────────────────────────────────────────────────────────────────


def format_band_legend() -> str:
    lines = ["", "Legend:"]
    for band in IndexBand:
        lines.append(f"  {BAND_SYMBOLS[band]:>2}  {BAND_LABELS[band]}")
    return "\n".join(lines)


# ── Calendar ──────────────────────────────────────────────────────────────────


def _day_row(day: ForecastDay, is_today: bool) -> str:
    marker = "*" if is_today else " "
    return (
        f"{marker} {day.date.isoformat()}  {_WEEKDAY_NAMES[day.week_code - 1]:<3}  "
        f"{day.week_code:>1}  {day.month_code:>1}  "
        f"{day.personality.score:>6.3f}  {day.connector.score:>6.3f}  "
        f"{day.realization.score:>6.3f}  {day.index:>6.3f}  "
        f"{BAND_SYMBOLS[day.band]:>4}"
    )


def format_forecast_calendar(series: ForecastSeries) -> str:
    """Format a series as one table per month.

    Args:
        series: The series to render. ``series.today`` is marked with ``*``.

    Returns:
        Multi-line string.
    """
    lines: list[str] = ["", "=== Forecast Calendar ==="]
    if series.client and series.client.name:
        lines.append(f"  Client:     {series.client.name}")
    lines.append(f"  Birth date: {series.birth_date}")
    codes = series.codes
    lines.append(
        f"  Codes:      personality={codes.personality} "
        f"connector={codes.connector} realization={codes.realization}"
    )
    if not series.forecasts:
        lines.append("")
        lines.append("  (empty forecast window)")
        return "\n".join(lines)

    lines.append(f"  Window:     {series.start} -> {series.end} ({len(series.forecasts)} days)")

    header = (
        f"  {'Date':<10}  {'Day':<3}  {'W':>1}  {'M':>1}  "
        f"{'Pers':>6}  {'Conn':>6}  {'Real':>6}  {'Index':>6}  {'Band':>4}"
    )
    for month, days in group_by_month(series.forecasts).items():
        lines.append("")
        lines.append(f"  [{month}]")
        lines.append(header)
        lines.append("  " + "-" * (len(header) - 2))
        for day in days:
            lines.append(_day_row(day, day.date == series.today))
    return "\n".join(lines)


# ── Summary ───────────────────────────────────────────────────────────────────


def format_series_summary(summary: SeriesSummary) -> str:
    lines: list[str] = ["", "=== Summary ==="]
    if summary.day_count == 0:
        lines.append("  (no days)")
        return "\n".join(lines)

    lines.append(f"  Days:        {summary.day_count}")
    lines.append(f"  Mean index:  {summary.mean_index:.3f}")
    if summary.best_day is not None:
        lines.append(f"  Best day:    {summary.best_day.date} ({summary.best_day.index:.3f})")
    if summary.worst_day is not None:
        lines.append(f"  Worst day:   {summary.worst_day.date} ({summary.worst_day.index:.3f})")
    lines.append(
        f"  Favourable:  {len(summary.favourable_dates)} day(s) "
        f"({summary.favourable_share * 100:.1f}%)"
    )
    for band in IndexBand:
        lines.append(f"    {BAND_SYMBOLS[band]:>2}  {summary.band_counts.get(band, 0):>3}")
    return "\n".join(lines)
