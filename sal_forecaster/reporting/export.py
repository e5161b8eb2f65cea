"""
Export helpers for forecast series.

All ``export_*`` functions write to disk and return the written ``Path``.
They accept generic ``list[dict]`` / ``dict`` data to stay decoupled from
specific report shapes.

CSV exports are flat (no nested dicts) so they load directly in a
spreadsheet: ``flatten_series_for_export()`` turns each ``ForecastDay`` into
one row with every dimension field as its own column.

JSON exports use ``series_payload()``, the envelope consumers of the
forecast calendar expect::

    {"client": {...} | null, "birth_date": "...", "today": "...",
     "codes": {...}, "forecasts": [...], "generated_at": "..."}
"""

from __future__ import annotations

import csv
import json
import logging
from datetime import datetime
from pathlib import Path

from sal_forecaster.models.forecast import ForecastSeries
from sal_forecaster.taxonomy.code_taxonomy import ROTATING_CODES

logger = logging.getLogger(__name__)

_DIMENSION_FIELDS = ("code", "steps_week", "steps_month", "t_week", "t_month", "score")

EXPORT_FIELDNAMES: list[str] = (
    ["date", "week_code", "month_code"]
    + [f"{kind}_{f}" for kind in ROTATING_CODES for f in _DIMENSION_FIELDS]
    + ["index", "band"]
)


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    logger.info("Wrote %d CSV rows to %s", len(records), path)
    return path


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Args:
        data: Dict or list to serialise.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(data, indent=2, ensure_ascii=False, default=str), encoding="utf-8"
    )
    logger.info("Wrote JSON report to %s", path)
    return path


def flatten_series_for_export(series: ForecastSeries) -> list[dict]:
    """Flatten a series into one row per day.

    Each row contains ``date`` (ISO), ``week_code``, ``month_code``, the six
    fields of every rotating dimension prefixed with the code name (e.g.
    ``personality_steps_week``), ``index`` and ``band``.
    """
    rows: list[dict] = []
    for day in series.forecasts:
        row: dict = {
            "date":       day.date.isoformat(),
            "week_code":  day.week_code,
            "month_code": day.month_code,
        }
        for kind in ROTATING_CODES:
            dim = getattr(day, kind.value)
            for f in _DIMENSION_FIELDS:
                row[f"{kind}_{f}"] = getattr(dim, f)
        row["index"] = day.index
        row["band"] = day.band.value
        rows.append(row)
    return rows


def series_payload(series: ForecastSeries, generated_at: datetime) -> dict:
    """Build the JSON envelope for a series.

    ``generated_at`` is passed in so the payload is reproducible in tests.
    """
    return {
        "client":       series.client.model_dump() if series.client else None,
        "birth_date":   series.birth_date,
        "today":        series.today.isoformat(),
        "codes":        series.codes.model_dump(),
        "forecasts":    [
            {**day.model_dump(mode="json"), "band": day.band.value}
            for day in series.forecasts
        ],
        "generated_at": generated_at.isoformat(),
    }


def default_export_path(output_dir: Path, series: ForecastSeries, fmt: str) -> Path:
    """``<output_dir>/forecast_<birth_date>_<today>.<fmt>``."""
    return Path(output_dir) / f"forecast_{series.birth_date}_{series.today.isoformat()}.{fmt}"
