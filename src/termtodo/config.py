# src/termtodo/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Components receive settings injected; get_settings() is for the entrypoint.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TERMTODO"

CURSOR_MODES = ("free", "clamp")

# Look for .env from the working directory, not from the installed package.
load_dotenv(find_dotenv(usecwd=True), override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value >= 0 else default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    db_path: Path

    # ---- Interactive timing ----
    banner_seconds: float
    notice_seconds: float

    # ---- List view ----
    cursor_mode: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "termtodo").strip() or "termtodo"
        # The list view owns the terminal in raw mode; keep console logs quiet by default.
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/termtodo"))
        db_path = _env_path(_k("DB_PATH"), data_dir / "db.sqlite3")

        banner_seconds = _env_float(_k("BANNER_SECONDS"), 2.0)
        notice_seconds = _env_float(_k("NOTICE_SECONDS"), 1.0)

        cursor_mode = _env_choice(_k("CURSOR_MODE"), CURSOR_MODES, "free")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            db_path=db_path,
            banner_seconds=banner_seconds,
            notice_seconds=notice_seconds,
            cursor_mode=cursor_mode,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
