# src/termtodo/core/keys.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class KeyKind(StrEnum):
    """Decoded terminal input, independent of the terminal library."""

    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    INTERRUPT = "interrupt"  # Ctrl+C
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class KeyEvent:
    kind: KeyKind
    char: str = ""

    @classmethod
    def of_char(cls, ch: str) -> KeyEvent:
        return cls(KeyKind.CHAR, ch)

    def is_char(self, ch: str) -> bool:
        return self.kind is KeyKind.CHAR and self.char == ch
