# src/termtodo/ui/list_session.py

"""
Main list view.

Screen layout: a bold header on row 1, then one active task per row starting
at row 2. `cursor_row` counts task rows (1 = first task), so task rows map to
snapshot indexes as `cursor_row - 1`.

Arrow keys only move the terminal cursor; they never re-render. Completing a
task or returning from add mode re-fetches the snapshot, redraws everything
and puts the cursor back on the first task row.

In "free" cursor mode the cursor may leave the task rows (above the first or
below the last); Enter there does nothing. "clamp" keeps it on task rows.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from ..core.keys import KeyEvent, KeyKind
from ..core.ports import Direction, KeySource, RenderPort, TaskRepo
from ..tasks.task_models import Task
from .add_session import AddSession

logger = logging.getLogger(__name__)

HEADER = "Welcome!"
FIRST_TASK_ROW = 2
ADD_KEY = "a"


class SessionState(StrEnum):
    VIEWING = "viewing"
    ADDING_ENTRY = "adding_entry"
    EXITED = "exited"


class CursorMode(StrEnum):
    FREE = "free"
    CLAMP = "clamp"


class ListSession:
    def __init__(
        self,
        store: TaskRepo,
        render: RenderPort,
        keys: KeySource,
        *,
        add_session_factory: Callable[[], AddSession] | None = None,
        cursor_mode: CursorMode | str = CursorMode.FREE,
        notice_seconds: float = 1.0,
    ) -> None:
        self._store = store
        self._render = render
        self._keys = keys
        self._cursor_mode = CursorMode(cursor_mode)
        self._add_session_factory = add_session_factory or (
            lambda: AddSession(store, render, keys, notice_seconds=notice_seconds)
        )

        self._state = SessionState.VIEWING
        self._snapshot: list[Task] = []
        self._cursor_row = 1

    # ---- read-only views (used by tests and logs) ----

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def snapshot(self) -> list[Task]:
        return list(self._snapshot)

    @property
    def cursor_row(self) -> int:
        return self._cursor_row

    @property
    def selection(self) -> int | None:
        """Snapshot index under the cursor, or None when the cursor is off the task rows."""
        idx = self._cursor_row - 1
        if 0 <= idx < len(self._snapshot):
            return idx
        return None

    # ---- loop ----

    def run(self) -> None:
        logger.info("List session started (cursor_mode=%s).", self._cursor_mode.value)
        self.refresh()
        while self._state is not SessionState.EXITED:
            self.handle(self._keys.read_event())
        logger.info("List session finished.")

    def refresh(self) -> None:
        """Re-fetch active tasks and redraw the whole list."""
        self._snapshot = self._store.list_active()
        self._cursor_row = 1

        r = self._render
        r.clear()
        r.goto(1, 1)
        r.write_styled(HEADER, bold=True)
        for i, task in enumerate(self._snapshot):
            r.goto(1, FIRST_TASK_ROW + i)
            r.write(str(task))
        r.goto(1, FIRST_TASK_ROW)
        r.flush()

    def handle(self, event: KeyEvent) -> SessionState:
        kind = event.kind

        if kind is KeyKind.INTERRUPT:
            self._state = SessionState.EXITED
        elif kind is KeyKind.ENTER:
            self._complete_selected()
        elif kind is KeyKind.UP:
            self._move_row(-1)
        elif kind is KeyKind.DOWN:
            self._move_row(+1)
        elif kind is KeyKind.LEFT:
            self._move_screen(Direction.LEFT)
        elif kind is KeyKind.RIGHT:
            self._move_screen(Direction.RIGHT)
        elif event.is_char(ADD_KEY):
            self._add_entry()

        return self._state

    # ---- transitions ----

    def _complete_selected(self) -> None:
        idx = self.selection
        if idx is None:
            return
        task = self._snapshot[idx]
        self._store.complete(task.id)
        logger.debug("Completed task id=%s at row %d", task.id, self._cursor_row)
        self.refresh()

    def _move_row(self, delta: int) -> None:
        target = self._cursor_row + delta
        if self._cursor_mode is CursorMode.CLAMP:
            last = max(len(self._snapshot), 1)
            if not 1 <= target <= last:
                return
        self._cursor_row = target
        self._move_screen(Direction.UP if delta < 0 else Direction.DOWN)

    def _move_screen(self, direction: Direction) -> None:
        self._render.move(direction)
        self._render.flush()

    def _add_entry(self) -> None:
        self._state = SessionState.ADDING_ENTRY
        outcome = self._add_session_factory().run()
        logger.debug("Add entry finished: %s", outcome.value)
        self.refresh()
        self._state = SessionState.VIEWING

