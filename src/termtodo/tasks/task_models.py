# src/termtodo/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Task:
    id: int
    content: str
    active: bool = True

    def __str__(self) -> str:
        return f"Todo : {self.content}"


@dataclass(frozen=True, slots=True)
class MigrationRecord:
    """One applied migration; `id` reflects application order."""

    id: int
    name: str


@dataclass(frozen=True, slots=True)
class Migration:
    """
    A named schema change.

    `name` is what gets recorded in the migration table, so it must never change
    once released. `body` is an SQL script (one or more statements).
    """

    name: str
    body: str
