# src/termtodo/ui/add_session.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from enum import StrEnum

from ..core.keys import KeyKind
from ..core.ports import KeySource, RenderPort, TaskRepo
from ..tasks.errors import StoreError

logger = logging.getLogger(__name__)

PROMPT = "New Entry : "
SUCCESS_NOTICE = "Successfully added TODO : {text}"
FAILURE_NOTICE = "Couldn't add todo : Something went wrong!"


class AddOutcome(StrEnum):
    CREATED = "created"
    FAILED = "failed"
    ABANDONED = "abandoned"


class AddSession:
    """
    Modal text capture for a new task.

    Characters are buffered and echoed until Enter (create) or Ctrl+C (abandon).
    A failed create is reported on screen and swallowed: the caller keeps running.
    The notice pause is not interruptible by input.
    """

    def __init__(
        self,
        store: TaskRepo,
        render: RenderPort,
        keys: KeySource,
        *,
        notice_seconds: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._store = store
        self._render = render
        self._keys = keys
        self._notice_seconds = notice_seconds
        self._sleep = sleep
        self._buffer: list[str] = []

    @property
    def buffer(self) -> str:
        return "".join(self._buffer)

    def run(self) -> AddOutcome:
        r = self._render
        self._buffer.clear()
        r.goto(1, 1)
        r.clear()
        r.write(PROMPT)
        r.flush()

        while True:
            event = self._keys.read_event()
            kind = event.kind

            if kind is KeyKind.INTERRUPT:
                logger.debug("Add entry abandoned (len=%d).", len(self._buffer))
                return AddOutcome.ABANDONED

            if kind is KeyKind.ENTER:
                break

            if kind is KeyKind.CHAR:
                self._buffer.append(event.char)
                r.write(event.char)
                r.flush()
            elif kind is KeyKind.BACKSPACE:
                if self._buffer:
                    self._buffer.pop()
                    r.erase_back()
                    r.flush()

        text = self.buffer
        r.write(text)
        r.flush()
        return self._submit(text)

    def _submit(self, text: str) -> AddOutcome:
        r = self._render
        try:
            task_id = self._store.create(text)
        except StoreError:
            logger.exception("Failed to add task.")
            r.goto(1, 2)
            r.write(FAILURE_NOTICE)
            r.flush()
            self._sleep(self._notice_seconds)
            return AddOutcome.FAILED

        logger.info("Task added id=%s", task_id)
        r.clear()
        r.goto(1, 1)
        r.write(SUCCESS_NOTICE.format(text=text))
        r.flush()
        self._sleep(self._notice_seconds)
        return AddOutcome.CREATED
