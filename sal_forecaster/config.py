"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``SAL_FORECASTER_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

CLI commands receive an ``AppConfig`` instance and pass the relevant values
(strictness, window size) down to the calculation functions as plain
arguments. The calculation core never reads configuration itself.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class CodesConfig(BaseModel):
    """Birth-date parsing settings."""

    model_config = ConfigDict(frozen=True)

    strict_dates: bool = True


class ForecastConfig(BaseModel):
    """Forecast window settings.

    The default window is 7 days before "today", today itself, and 83 days
    after: 91 calendar days.
    """

    model_config = ConfigDict(frozen=True)

    days_back: int = 7
    days_forward: int = 83

    @field_validator("days_back", "days_forward")
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Forecast window offsets must be >= 0, got {v}.")
        return v

    @property
    def window_days(self) -> int:
        return self.days_back + 1 + self.days_forward


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = "data/logs/sal_forecaster.log"
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class ReportingConfig(BaseModel):
    """Where exported reports are written."""

    model_config = ConfigDict(frozen=True)

    output_dir: str = "data/outputs"


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env + env vars.
    """

    model_config = ConfigDict(frozen=True)

    codes: CodesConfig = CodesConfig()
    forecast: ForecastConfig = ForecastConfig()
    logging: LoggingConfig = LoggingConfig()
    reporting: ReportingConfig = ReportingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the specified ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    if config_path is None:
        config_path = root / "config" / "default.toml"

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply SAL_FORECASTER_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes")


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply SAL_FORECASTER_* env vars to the raw config dict.

    Supported overrides:
      SAL_FORECASTER_LOG_LEVEL     → raw["logging"]["level"]
      SAL_FORECASTER_STRICT_DATES  → raw["codes"]["strict_dates"]
      SAL_FORECASTER_OUTPUT_DIR    → raw["reporting"]["output_dir"]
      SAL_FORECASTER_DEBUG         → raw["debug"]
    """
    if log_level := os.environ.get("SAL_FORECASTER_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if strict := os.environ.get("SAL_FORECASTER_STRICT_DATES"):
        raw.setdefault("codes", {})["strict_dates"] = _env_flag(strict)

    if output_dir := os.environ.get("SAL_FORECASTER_OUTPUT_DIR"):
        raw.setdefault("reporting", {})["output_dir"] = output_dir

    if debug := os.environ.get("SAL_FORECASTER_DEBUG"):
        raw["debug"] = _env_flag(debug)

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    project = raw.pop("project", {})

    return AppConfig(
        codes=CodesConfig(**raw.get("codes", {})),
        forecast=ForecastConfig(**raw.get("forecast", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        reporting=ReportingConfig(**raw.get("reporting", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
