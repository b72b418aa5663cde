# src/deadline_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing is required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TRACKER"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path

    # ---- Overdue monitor ----
    monitor_enabled: bool
    overdue_check_interval_seconds: float

    # ---- Dashboard ----
    locale: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "deadline-tracker").strip() or "deadline-tracker"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tracker"))

        monitor_enabled = _env_bool(_k("MONITOR_ENABLED"), True)
        interval = _env_float(_k("OVERDUE_CHECK_INTERVAL_SECONDS"), 60.0)
        if interval <= 0:
            interval = 60.0

        locale = _env(_k("LOCALE"), "pt_BR").strip() or "pt_BR"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            monitor_enabled=monitor_enabled,
            overdue_check_interval_seconds=interval,
            locale=locale,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
