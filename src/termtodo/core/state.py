# src/termtodo/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..config import Settings
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    settings: Settings

    task_store: TaskStore

    # Names applied by the startup migration run (empty when already up to date).
    applied_migrations: list[str] = field(default_factory=list)
