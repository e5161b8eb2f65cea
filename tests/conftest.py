"""
Shared pytest fixtures for the SAL Forecaster test suite.

Provides:
  - ``clean_env``: removes every ``SAL_FORECASTER_*`` variable so config
    tests are not affected by the developer's shell.
  - ``config_file``: a minimal TOML config in ``tmp_path`` with file logging
    disabled, for config and CLI tests.
  - Sample codes / series for the canonical 1990-05-15 birth date.
"""

from __future__ import annotations

import os
from datetime import date
from pathlib import Path

import pytest

from sal_forecaster.calc.codes import compute_codes
from sal_forecaster.forecast.series import build_forecast_series
from sal_forecaster.models.codes import SALCodes
from sal_forecaster.models.forecast import ForecastSeries

SAMPLE_BIRTH_DATE = "1990-05-15"
SAMPLE_TODAY = date(2024, 6, 5)


# ── Environment / config fixtures ─────────────────────────────────────────────

@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("SAL_FORECASTER_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config_file(tmp_path: Path, clean_env: None) -> Path:
    """Write a minimal config with no log file and outputs under ``tmp_path``."""
    path = tmp_path / "config" / "default.toml"
    path.parent.mkdir(parents=True)
    output_dir = (tmp_path / "outputs").as_posix()
    path.write_text(
        "debug = false\n"
        "\n"
        "[codes]\n"
        "strict_dates = true\n"
        "\n"
        "[forecast]\n"
        "days_back = 7\n"
        "days_forward = 83\n"
        "\n"
        "[logging]\n"
        'level = "WARNING"\n'
        'log_file = ""\n'
        "\n"
        "[reporting]\n"
        f'output_dir = "{output_dir}"\n',
        encoding="utf-8",
    )
    return path


# ── Sample domain objects ─────────────────────────────────────────────────────

@pytest.fixture
def sample_codes() -> SALCodes:
    """Codes for 1990-05-15: personality 6, connector 3, realization 9."""
    return compute_codes(SAMPLE_BIRTH_DATE)


@pytest.fixture
def sample_series() -> ForecastSeries:
    """91-day series for 1990-05-15 centred on 2024-06-05."""
    return build_forecast_series(SAMPLE_BIRTH_DATE, SAMPLE_TODAY)
