# src/termtodo/tasks/migrations.py

"""
Versioned schema migrations.

Each migration runs exactly once per database, in declaration order, and is
recorded in the `migration` table right after its body succeeds. A failed
body leaves no record, so the next start retries it.

New migrations must be appended to KnownMigration; never rename, reorder or
edit a released one. The runner compares recorded names against the
canonical list and refuses to continue if they are not a prefix of it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum
from typing import TYPE_CHECKING

from .errors import MigrationOrderError, StoreError
from .task_models import Migration

if TYPE_CHECKING:
    from ..core.ports import MigrationRepo

logger = logging.getLogger(__name__)


class KnownMigration(Enum):
    INIT_TABLE = Migration(
        "init-table",
        """
        CREATE TABLE IF NOT EXISTS todo (
            id INTEGER PRIMARY KEY,
            content TEXT
        );
        """,
    )
    ADD_ACTIVE_COLUMN = Migration(
        "add-active-column",
        """
        ALTER TABLE todo
        ADD active INTEGER DEFAULT 1 CHECK(active = 1 OR active = 0);
        """,
    )

    @classmethod
    def canonical(cls) -> list[Migration]:
        return [m.value for m in cls]


def pending_migrations(
    applied_names: Iterable[str],
    canonical: Sequence[Migration] | None = None,
) -> list[Migration]:
    """
    Return the canonical migrations not yet applied, in canonical order.

    Raises MigrationOrderError if `applied_names` (in application order) is not
    a prefix of the canonical names: an unknown name, a gap or a reordering
    means the schema is in a state this program does not know how to evolve.
    """
    if canonical is None:
        canonical = KnownMigration.canonical()
    applied = list(applied_names)

    if len(applied) > len(canonical):
        raise MigrationOrderError(
            f"Database has {len(applied)} migrations recorded, "
            f"only {len(canonical)} are known: {applied[len(canonical):]!r}"
        )

    for i, name in enumerate(applied):
        expected = canonical[i].name
        if name != expected:
            raise MigrationOrderError(
                f"Migration #{i + 1} is recorded as {name!r}, expected {expected!r}"
            )

    return list(canonical[len(applied):])


def run_migrations(
    store: MigrationRepo,
    canonical: Sequence[Migration] | None = None,
) -> list[str]:
    """
    Bring the schema up to date. Returns the names applied by this call.

    Any StoreError aborts the sequence and propagates; callers must treat it
    as fatal because the schema may be partially migrated.
    """
    store.bootstrap_migration_table()
    records = store.applied_migrations()
    logger.info("Migrations recorded: %d", store.applied_migration_count())

    todo = pending_migrations((r.name for r in records), canonical)
    applied: list[str] = []
    for migration in todo:
        logger.info("Applying migration %s", migration.name)
        try:
            store.run_migration_body(migration)
        except StoreError:
            logger.exception("Migration %s failed; not recorded.", migration.name)
            raise
        store.record_migration(migration.name)
        applied.append(migration.name)

    if applied:
        logger.info("Applied %d migration(s): %s", len(applied), ", ".join(applied))
    else:
        logger.info("Schema is up to date.")
    return applied
