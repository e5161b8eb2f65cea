"""
SAL Forecaster — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs (birth date, --today).
  4. Compute codes / forecast series.
  5. Report result to stdout (or write an export file).

Install and run::

    pip install -e .
    sal-forecaster --help
    sal-forecaster validate-config
    sal-forecaster codes 1990-05-15
    sal-forecaster forecast 15.05.1990 --today 2024-06-01
    sal-forecaster export 1990-05-15 --format csv
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="sal-forecaster",
    help="SAL code calculator and daily forecast calendar.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from sal_forecaster.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from sal_forecaster.utils.logging import configure_logging
    configure_logging(config.logging)


def _parse_today_or_exit(today: Optional[str]) -> date:
    from sal_forecaster.utils.time_utils import utc_today

    if not today:
        return utc_today()
    try:
        return date.fromisoformat(today)
    except ValueError as exc:
        typer.echo(f"[ERROR] Invalid --today date: {exc}", err=True)
        raise typer.Exit(code=1)


def _build_series_or_exit(
    config,
    birth_date: str,
    today: date,
    lenient: bool,
    name: Optional[str] = None,
):
    from sal_forecaster.calc.errors import BirthDateError
    from sal_forecaster.forecast.series import forecast_for_client
    from sal_forecaster.models.client import ClientRecord

    client = ClientRecord(name=name, birth_date=birth_date)
    try:
        return forecast_for_client(
            client,
            today,
            days_back=config.forecast.days_back,
            days_forward=config.forecast.days_forward,
            strict=config.codes.strict_dates and not lenient,
        )
    except BirthDateError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Strict dates:     {config.codes.strict_dates}")
    typer.echo(
        f"  Forecast window:  -{config.forecast.days_back}d .. "
        f"+{config.forecast.days_forward}d ({config.forecast.window_days} days)"
    )
    typer.echo(f"  Output dir:       {config.reporting.output_dir}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("codes")
def codes(
    birth_date: str = typer.Argument(..., help="Birth date, YYYY-MM-DD or DD.MM.YYYY."),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Accept out-of-calendar dates such as 2024-02-30.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print codes as JSON."),
    describe: bool = typer.Option(
        False,
        "--describe",
        help="Explain what each code stands for.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Compute the five SAL codes for a birth date."""
    from sal_forecaster.calc.codes import compute_codes
    from sal_forecaster.calc.errors import BirthDateError
    from sal_forecaster.reporting.formatters import format_codes_table

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        result = compute_codes(birth_date, strict=config.codes.strict_dates and not lenient)
    except BirthDateError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.model_dump(), indent=2))
        return

    typer.echo(format_codes_table(result, birth_date.strip(), describe=describe))


@app.command("forecast")
def forecast(
    birth_date: str = typer.Argument(..., help="Birth date, YYYY-MM-DD or DD.MM.YYYY."),
    today: Optional[str] = typer.Option(
        None,
        "--today",
        help="Centre date of the window (ISO). Defaults to the current UTC date.",
    ),
    name: Optional[str] = typer.Option(None, "--name", help="Client name for the header."),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Accept out-of-calendar dates such as 2024-02-30.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the JSON envelope {client, codes, forecasts, generated_at}.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Print the forecast calendar around --today for a birth date.

    \b
    The window runs from 7 days before today to 83 days after it
    (configurable under [forecast] in the TOML config).
    """
    from sal_forecaster.forecast.summary import summarize_series
    from sal_forecaster.reporting.export import series_payload
    from sal_forecaster.reporting.formatters import (
        format_band_legend,
        format_codes_table,
        format_forecast_calendar,
        format_series_summary,
    )
    from sal_forecaster.utils.time_utils import utcnow

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    center = _parse_today_or_exit(today)
    series = _build_series_or_exit(config, birth_date, center, lenient, name)

    if as_json:
        typer.echo(json.dumps(series_payload(series, utcnow()), indent=2, ensure_ascii=False))
        return

    typer.echo(format_codes_table(series.codes, series.birth_date))
    typer.echo(format_band_legend())
    typer.echo(format_forecast_calendar(series))
    typer.echo(format_series_summary(summarize_series(series)))


@app.command("export")
def export(
    birth_date: str = typer.Argument(..., help="Birth date, YYYY-MM-DD or DD.MM.YYYY."),
    fmt: str = typer.Option("csv", "--format", "-f", help="Export format: csv or json."),
    out: Optional[str] = typer.Option(
        None,
        "--out",
        "-o",
        help="Output file. Defaults to <output_dir>/forecast_<birth>_<today>.<fmt>.",
    ),
    today: Optional[str] = typer.Option(
        None,
        "--today",
        help="Centre date of the window (ISO). Defaults to the current UTC date.",
    ),
    name: Optional[str] = typer.Option(None, "--name", help="Client name (JSON only)."),
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Accept out-of-calendar dates such as 2024-02-30.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Write the forecast series to a CSV or JSON file."""
    from sal_forecaster.reporting.export import (
        EXPORT_FIELDNAMES,
        default_export_path,
        export_to_csv,
        export_to_json,
        flatten_series_for_export,
        series_payload,
    )
    from sal_forecaster.utils.time_utils import utcnow

    fmt = fmt.lower()
    if fmt not in ("csv", "json"):
        typer.echo(f"[ERROR] Unsupported format '{fmt}'. Use csv or json.", err=True)
        raise typer.Exit(code=1)

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    center = _parse_today_or_exit(today)
    series = _build_series_or_exit(config, birth_date, center, lenient, name)

    path = Path(out) if out else default_export_path(
        Path(config.reporting.output_dir), series, fmt
    )
    if fmt == "csv":
        export_to_csv(flatten_series_for_export(series), path, fieldnames=EXPORT_FIELDNAMES)
    else:
        export_to_json(series_payload(series, utcnow()), path)

    typer.echo(f"  Days exported: {len(series.forecasts)}")
    typer.echo(f"  Written to:    {path}")
    typer.echo("[OK] Export complete.")


# ── Entry point ───────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
