# src/termtodo/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterator
from pathlib import Path

from .errors import DuplicateMigrationName, StoreError
from .task_models import Migration, MigrationRecord, Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    SQLite task store.

    The task table itself is created and evolved by the migration runner
    (see migrations.py); this class only bootstraps the migration table.

    Tasks are never deleted: completing one flips `active` to 0.

    Every sqlite3.Error is re-raised as StoreError.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "db.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("TaskStore ready db=%s", self._db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        return conn

    @contextlib.contextmanager
    def _connect(self, op: str) -> Iterator[sqlite3.Connection]:
        try:
            conn = self._get_conn()
        except sqlite3.Error as exc:
            raise StoreError(f"{op}: cannot open {self._db_path}: {exc}") from exc
        try:
            yield conn
        except sqlite3.Error as exc:
            raise StoreError(f"{op}: {exc}") from exc
        finally:
            conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            content=str(row["content"] or ""),
            active=bool(row["active"]),
        )

    # ---- tasks ----

    def list_active(self) -> list[Task]:
        """Active tasks in ascending id order (the order the list view maps rows to)."""
        with self._connect("list_active") as conn:
            cur = conn.execute(
                "SELECT id, content, active FROM todo WHERE active = 1 ORDER BY id ASC"
            )
            return [self._row_to_task(r) for r in cur.fetchall()]

    def get_task(self, task_id: int) -> Task | None:
        with self._connect("get_task") as conn:
            cur = conn.execute(
                "SELECT id, content, active FROM todo WHERE id = ?", (int(task_id),)
            )
            row = cur.fetchone()
            return self._row_to_task(row) if row else None

    def create(self, content: str) -> int:
        with self._connect("create") as conn:
            cur = conn.execute(
                "INSERT INTO todo (content, active) VALUES (?, 1)", (content,)
            )
            conn.commit()
            rowid = cur.lastrowid
            if rowid is None:
                raise StoreError("create: SQLite did not return lastrowid for todo insert")
            task_id = int(rowid)
            logger.debug("Task added id=%s len=%d", task_id, len(content))
            return task_id

    def complete(self, task_id: int) -> bool:
        """
        Soft-delete a task. Returns True if a row changed.

        Unknown or already completed ids affect zero rows and are not an error.
        """
        with self._connect("complete") as conn:
            cur = conn.execute(
                "UPDATE todo SET active = 0 WHERE id = ? AND active = 1", (int(task_id),)
            )
            conn.commit()
            changed = cur.rowcount == 1
            logger.debug("Task complete id=%s changed=%s", task_id, changed)
            return changed

    # ---- migration bookkeeping ----

    def bootstrap_migration_table(self) -> None:
        with self._connect("bootstrap_migration_table") as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS migration (
                    id INTEGER PRIMARY KEY,
                    name TEXT UNIQUE
                )
                """
            )
            conn.commit()

    def applied_migration_count(self) -> int:
        with self._connect("applied_migration_count") as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM migration").fetchone()
            return int(n)

    def applied_migrations(self) -> list[MigrationRecord]:
        with self._connect("applied_migrations") as conn:
            cur = conn.execute("SELECT id, name FROM migration ORDER BY id ASC")
            return [MigrationRecord(id=int(r["id"]), name=str(r["name"])) for r in cur.fetchall()]

    def record_migration(self, name: str) -> None:
        with self._connect("record_migration") as conn:
            try:
                conn.execute("INSERT INTO migration (name) VALUES (?)", (name,))
            except sqlite3.IntegrityError as exc:
                raise DuplicateMigrationName(name) from exc
            conn.commit()

    def run_migration_body(self, migration: Migration) -> None:
        with self._connect(f"migration {migration.name}") as conn:
            conn.executescript(migration.body)
            conn.commit()
