# src/termtodo/core/ports.py

"""
Ports (interfaces) used by the core.

The sessions depend on Protocols instead of concrete implementations.
This keeps the terminal and storage swappable and makes testing easier
(tests drive sessions with a recording render port and scripted keys).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol

from ..tasks.task_models import Migration, MigrationRecord, Task
from .keys import KeyEvent


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class RenderPort(Protocol):
    """
    Fire-and-forget screen instructions. Coordinates are 1-based (col, row).

    Nothing is read back from the terminal.
    """

    def clear(self) -> None: ...
    def goto(self, col: int, row: int) -> None: ...
    def write(self, text: str) -> None: ...
    def write_styled(self, text: str, *, bold: bool = False, color: str | None = None) -> None: ...
    def move(self, direction: Direction, amount: int = 1) -> None: ...
    def erase_back(self) -> None: ...
    def flush(self) -> None: ...


class KeySource(Protocol):
    """Blocking, one-event-at-a-time terminal input."""

    def read_event(self) -> KeyEvent: ...


class TaskRepo(Protocol):
    def list_active(self) -> list[Task]: ...
    def get_task(self, task_id: int) -> Task | None: ...
    def create(self, content: str) -> int: ...
    def complete(self, task_id: int) -> bool: ...


class MigrationRepo(Protocol):
    def bootstrap_migration_table(self) -> None: ...
    def applied_migration_count(self) -> int: ...
    def applied_migrations(self) -> list[MigrationRecord]: ...
    def record_migration(self, name: str) -> None: ...
    def run_migration_body(self, migration: Migration) -> None: ...
