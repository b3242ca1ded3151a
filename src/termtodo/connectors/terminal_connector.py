# src/termtodo/connectors/terminal_connector.py

"""
Terminal driver built on prompt_toolkit's low-level input/output layers.

We do not run a prompt_toolkit Application: the sessions own the loop and
pull one key at a time. prompt_toolkit gives us raw mode, VT100 key parsing
(arrows, Ctrl+C, bracketed paste) and escape-sequence output.

POSIX only: blocking reads wait on the input file descriptor with select().
"""

from __future__ import annotations

import contextlib
import logging
import select
from collections import deque
from collections.abc import Iterator

from prompt_toolkit.input import Input, create_input
from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import ColorDepth, Output, create_output
from prompt_toolkit.styles import DEFAULT_ATTRS

from ..core.keys import KeyEvent, KeyKind
from ..core.ports import Direction

logger = logging.getLogger(__name__)

# How long a lone ESC may wait for the rest of an escape sequence.
ESCAPE_TIMEOUT_SECONDS = 0.05

_KEY_KINDS: dict[str, KeyKind] = {
    Keys.ControlM: KeyKind.ENTER,
    Keys.ControlJ: KeyKind.ENTER,
    Keys.ControlH: KeyKind.BACKSPACE,
    Keys.Up: KeyKind.UP,
    Keys.Down: KeyKind.DOWN,
    Keys.Left: KeyKind.LEFT,
    Keys.Right: KeyKind.RIGHT,
    Keys.ControlC: KeyKind.INTERRUPT,
}


def decode_key_press(press: KeyPress) -> list[KeyEvent]:
    """
    Translate one prompt_toolkit KeyPress into zero or more KeyEvents.

    A bracketed paste expands into one CHAR event per printable character.
    """
    key = press.key

    if key == Keys.BracketedPaste:
        return [KeyEvent.of_char(ch) for ch in press.data if ch.isprintable()]

    kind = _KEY_KINDS.get(key)
    if kind is not None:
        return [KeyEvent(kind)]

    if not isinstance(key, Keys) and len(key) == 1 and key.isprintable():
        return [KeyEvent.of_char(key)]

    return [KeyEvent(KeyKind.OTHER)]


class TerminalKeySource:
    """Blocking KeySource over a prompt_toolkit Input (must be in raw mode)."""

    def __init__(self, inp: Input, *, escape_timeout: float = ESCAPE_TIMEOUT_SECONDS) -> None:
        self._input = inp
        self._escape_timeout = escape_timeout
        self._pending: deque[KeyEvent] = deque()
        self._partial = False

    def read_event(self) -> KeyEvent:
        while not self._pending:
            self._fill()
        return self._pending.popleft()

    def _fill(self) -> None:
        if self._input.closed:
            raise EOFError("terminal input closed")

        # Block forever unless the parser holds the start of an escape sequence.
        timeout = self._escape_timeout if self._partial else None
        ready, _, _ = select.select([self._input.fileno()], [], [], timeout)

        if ready:
            presses = self._input.read_keys()
            # The parser may still hold a trailing ESC even when keys were decoded.
            self._partial = True
        else:
            presses = self._input.flush_keys()
            self._partial = False

        for press in presses:
            self._pending.extend(decode_key_press(press))


class TerminalRenderer:
    """RenderPort over a prompt_toolkit Output. Coordinates are 1-based (col, row)."""

    def __init__(self, output: Output) -> None:
        self._out = output

    def clear(self) -> None:
        self._out.erase_screen()

    def goto(self, col: int, row: int) -> None:
        self._out.cursor_goto(row=row, column=col)

    def write(self, text: str) -> None:
        self._out.write(text)

    def write_styled(self, text: str, *, bold: bool = False, color: str | None = None) -> None:
        attrs = DEFAULT_ATTRS._replace(bold=bold, color=color or "")
        self._out.set_attributes(attrs, ColorDepth.DEPTH_8_BIT)
        self._out.write(text)
        self._out.reset_attributes()

    def move(self, direction: Direction, amount: int = 1) -> None:
        if direction is Direction.UP:
            self._out.cursor_up(amount)
        elif direction is Direction.DOWN:
            self._out.cursor_down(amount)
        elif direction is Direction.LEFT:
            self._out.cursor_backward(amount)
        else:
            self._out.cursor_forward(amount)

    def erase_back(self) -> None:
        self._out.cursor_backward(1)
        self._out.erase_down()

    def flush(self) -> None:
        self._out.flush()


@contextlib.contextmanager
def open_terminal() -> Iterator[tuple[TerminalRenderer, TerminalKeySource]]:
    """
    Put the controlling terminal into raw mode for the duration of the block.

    Raw mode disables echo, line buffering and signal keys, so Ctrl+C arrives
    as a key event instead of SIGINT.
    """
    inp = create_input(always_prefer_tty=True)
    out = create_output(always_prefer_tty=True)
    renderer = TerminalRenderer(out)

    logger.debug("Entering raw mode.")
    try:
        with inp.raw_mode():
            try:
                yield renderer, TerminalKeySource(inp)
            finally:
                out.reset_attributes()
                out.show_cursor()
                out.write_raw("\r\n")
                out.flush()
    finally:
        inp.close()
        logger.debug("Left raw mode.")
