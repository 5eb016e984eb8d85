# src/taskboard/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Defaults reproduce the plain demo run (no env needed).
- Consumers accept an injected settings object, so tests never read the env.

Recognized variables (all prefixed with TASKBOARD_):
- APP_NAME                  display name (default: taskboard)
- LOG_LEVEL                 console log level (default: INFO)
- DATA_DIR                  local dir for the log file (default: .local/taskboard)
- EXPORT_PATH               export file (default: tasks_export.txt)
- REPORT_INTERVAL_SECONDS   reporter period (default: 2.0)
- DEMO_DURATION_SECONDS     how long the demo lets the reporter run (default: 4.0)
- DUE_WINDOW_DAYS           window for the "due soon" section (default: 3)
- EMAIL_DOMAIN              domain for derived employee emails (default: gmail.com)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOARD"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


# Local .env (if any) never overrides real environment variables.
load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


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
    data_dir: Path

    # ---- Demo ----
    export_path: Path
    report_interval_seconds: float
    demo_duration_seconds: float
    due_window_days: int

    # ---- People ----
    email_domain: str

    @staticmethod
    def from_env() -> "Settings":
        # Non-positive intervals would make the reporter spin.
        report_interval = _env_float(_k("REPORT_INTERVAL_SECONDS"), 2.0)
        if report_interval <= 0:
            report_interval = 2.0

        return Settings(
            app_name=_env(_k("APP_NAME"), "taskboard"),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
            data_dir=_env_path(_k("DATA_DIR"), Path(".local/taskboard")),
            export_path=_env_path(_k("EXPORT_PATH"), Path("tasks_export.txt")),
            report_interval_seconds=report_interval,
            demo_duration_seconds=max(0.0, _env_float(_k("DEMO_DURATION_SECONDS"), 4.0)),
            due_window_days=_env_int(_k("DUE_WINDOW_DAYS"), 3),
            email_domain=_env(_k("EMAIL_DOMAIN"), "gmail.com"),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
