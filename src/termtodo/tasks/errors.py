# src/termtodo/tasks/errors.py

from __future__ import annotations


class StoreError(RuntimeError):
    """Any failure talking to the task database (I/O, constraint, connection)."""


class DuplicateMigrationName(StoreError):
    """A migration name was recorded twice. Bookkeeping bug, not user-facing."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Migration already recorded: {name!r}")
        self.name = name


class MigrationOrderError(StoreError):
    """Recorded migrations are not a prefix of the canonical migration list."""
