# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from termtodo.config import Settings

_VARS = (
    "TERMTODO_APP_NAME",
    "TERMTODO_LOG_LEVEL",
    "TERMTODO_DATA_DIR",
    "TERMTODO_DB_PATH",
    "TERMTODO_BANNER_SECONDS",
    "TERMTODO_NOTICE_SECONDS",
    "TERMTODO_CURSOR_MODE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()

    assert s.app_name == "termtodo"
    assert s.log_level == "WARNING"
    assert s.data_dir == Path(".local/termtodo")
    assert s.db_path == Path(".local/termtodo/db.sqlite3")
    assert s.banner_seconds == 2.0
    assert s.notice_seconds == 1.0
    assert s.cursor_mode == "free"


def test_db_path_follows_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TERMTODO_DATA_DIR", str(tmp_path))

    s = Settings.from_env()

    assert s.db_path == tmp_path / "db.sqlite3"


def test_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TERMTODO_DB_PATH", str(tmp_path / "todo.db"))
    monkeypatch.setenv("TERMTODO_NOTICE_SECONDS", "0.25")
    monkeypatch.setenv("TERMTODO_CURSOR_MODE", "Clamp")

    s = Settings.from_env()

    assert s.db_path == tmp_path / "todo.db"
    assert s.notice_seconds == 0.25
    assert s.cursor_mode == "clamp"


@pytest.mark.parametrize("raw", ["soon", "-1", ""])
def test_bad_numbers_fall_back(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("TERMTODO_BANNER_SECONDS", raw)
    assert Settings.from_env().banner_seconds == 2.0


def test_unknown_cursor_mode_falls_back(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TERMTODO_CURSOR_MODE", "wrap")
    assert Settings.from_env().cursor_mode == "free"
