# tests/test_task_store.py

from __future__ import annotations

import sqlite3

import pytest

from termtodo.tasks.errors import DuplicateMigrationName, StoreError
from termtodo.tasks.task_store import TaskStore


def test_create_then_list_active(store: TaskStore) -> None:
    before = {t.id for t in store.list_active()}
    task_id = store.create("buy milk")

    tasks = store.list_active()
    new = [t for t in tasks if t.id not in before]
    assert len(new) == 1
    assert new[0].id == task_id
    assert new[0].content == "buy milk"
    assert new[0].active is True
    assert str(new[0]) == "Todo : buy milk"


def test_list_active_is_ordered_by_id(store: TaskStore) -> None:
    ids = [store.create(text) for text in ("one", "two", "three")]
    assert [t.id for t in store.list_active()] == sorted(ids)
    assert [t.content for t in store.list_active()] == ["one", "two", "three"]


def test_ids_are_not_reused_after_completion(store: TaskStore) -> None:
    first = store.create("first")
    store.complete(first)
    second = store.create("second")
    assert second != first


def test_empty_content_is_allowed(store: TaskStore) -> None:
    task_id = store.create("")
    task = store.get_task(task_id)
    assert task is not None
    assert task.content == ""


def test_complete_is_a_soft_delete(store: TaskStore) -> None:
    keep = store.create("keep")
    done = store.create("done")

    assert store.complete(done) is True

    assert [t.id for t in store.list_active()] == [keep]
    task = store.get_task(done)
    assert task is not None
    assert task.active is False

    conn = sqlite3.connect(str(store.db_path))
    try:
        (active,) = conn.execute("SELECT active FROM todo WHERE id = ?", (done,)).fetchone()
    finally:
        conn.close()
    assert active == 0


def test_complete_unknown_or_inactive_is_not_an_error(store: TaskStore) -> None:
    task_id = store.create("x")
    assert store.complete(task_id) is True
    assert store.complete(task_id) is False
    assert store.complete(9999) is False


def test_get_task_missing_returns_none(store: TaskStore) -> None:
    assert store.get_task(42) is None


def test_queries_before_migration_raise_store_error(raw_store: TaskStore) -> None:
    with pytest.raises(StoreError):
        raw_store.list_active()
    with pytest.raises(StoreError):
        raw_store.create("too early")


def test_bootstrap_migration_table_is_idempotent(raw_store: TaskStore) -> None:
    raw_store.bootstrap_migration_table()
    raw_store.bootstrap_migration_table()
    assert raw_store.applied_migration_count() == 0


def test_record_migration_rejects_duplicate_names(raw_store: TaskStore) -> None:
    raw_store.bootstrap_migration_table()
    raw_store.record_migration("init-table")

    with pytest.raises(DuplicateMigrationName) as exc_info:
        raw_store.record_migration("init-table")

    assert isinstance(exc_info.value, StoreError)
    assert exc_info.value.name == "init-table"
    assert raw_store.applied_migration_count() == 1
    assert [r.name for r in raw_store.applied_migrations()] == ["init-table"]
