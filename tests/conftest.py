# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from termtodo.tasks.migrations import run_migrations
from termtodo.tasks.task_store import TaskStore

from .fakes import RecordingRenderPort


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the sessions.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="termtodo",
        log_level="WARNING",
        data_dir=tmp_path / "data",
        db_path=tmp_path / "data" / "db.sqlite3",
        banner_seconds=0.0,
        notice_seconds=0.0,
        cursor_mode="free",
    )


@pytest.fixture()
def raw_store(tmp_path: Path) -> TaskStore:
    """A store on an empty database (no migrations applied yet)."""
    return TaskStore(tmp_path / "db.sqlite3")


@pytest.fixture()
def store(raw_store: TaskStore) -> TaskStore:
    """
    A fully migrated store.

    NOTE: real SQLite on purpose; the sessions' correctness depends on the
    ordering and soft-delete behaviour of the actual queries.
    """
    run_migrations(raw_store)
    return raw_store


@pytest.fixture()
def render() -> RecordingRenderPort:
    return RecordingRenderPort()
