"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``EINVOICE_CHECKER_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The CLI and the questionnaire flow receive an ``AppConfig`` instance —
never raw dicts or individual env var lookups scattered through the codebase.

Validation rules and category thresholds are NOT configurable; they are
fixed tables in ``validation/rules.py`` and ``engine/classifier.py``.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class QuestionnaireConfig(BaseModel):
    """Form defaults and the year ranges offered in the dropdowns."""

    model_config = ConfigDict(frozen=True)

    default_commencement_year: int = 2024
    default_current_year: int = 2024
    commencement_year_start: int = 2020
    commencement_year_end: int = 2026
    current_year_start: int = 2022
    current_year_end: int = 2026

    @model_validator(mode="after")
    def validate_year_ranges(self) -> "QuestionnaireConfig":
        if self.commencement_year_start > self.commencement_year_end:
            raise ValueError(
                "commencement_year_start must be <= commencement_year_end, got "
                f"{self.commencement_year_start} > {self.commencement_year_end}."
            )
        if self.current_year_start > self.current_year_end:
            raise ValueError(
                "current_year_start must be <= current_year_end, got "
                f"{self.current_year_start} > {self.current_year_end}."
            )
        if not self.current_year_start <= self.default_current_year <= self.current_year_end:
            raise ValueError(
                f"default_current_year {self.default_current_year} is outside "
                f"[{self.current_year_start}, {self.current_year_end}]."
            )
        return self


class OutputConfig(BaseModel):
    """Filesystem location for exported result bundles."""

    model_config = ConfigDict(frozen=True)

    results_dir: str = "data/results"


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    It is constructed by ``load_config()`` which merges TOML + .env.
    """

    model_config = ConfigDict(frozen=True)

    questionnaire: QuestionnaireConfig = QuestionnaireConfig()
    output: OutputConfig = OutputConfig()
    logging: LoggingConfig = LoggingConfig()
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

    # Also merge local.toml if present (gitignored local overrides)
    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)

    # 3. Apply EINVOICE_CHECKER_* environment variable overrides
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


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply EINVOICE_CHECKER_* env vars to the raw config dict.

    Supported overrides:
      EINVOICE_CHECKER_LOG_LEVEL     → raw["logging"]["level"]
      EINVOICE_CHECKER_CURRENT_YEAR  → raw["questionnaire"]["default_current_year"]
      EINVOICE_CHECKER_DEBUG         → raw["debug"]
    """
    if log_level := os.environ.get("EINVOICE_CHECKER_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if current_year := os.environ.get("EINVOICE_CHECKER_CURRENT_YEAR"):
        raw.setdefault("questionnaire", {})["default_current_year"] = current_year

    if debug := os.environ.get("EINVOICE_CHECKER_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    # Flatten top-level keys that may be nested under [project]
    project = raw.pop("project", {})

    return AppConfig(
        questionnaire=QuestionnaireConfig(**raw.get("questionnaire", {})),
        output=OutputConfig(**raw.get("output", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        debug=raw.get("debug", project.get("debug", False)),
    )
