"""Terminal input events and their textual names."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class KeyKind(enum.Enum):
    """The kinds of key a terminal can report."""

    CHAR = "char"
    CTRL = "ctrl"
    ALT = "alt"
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    BACKSPACE = "backspace"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    BACK_TAB = "back_tab"
    INSERT = "insert"
    DELETE = "delete"
    ESC = "esc"
    F = "f"
    NULL = "null"


_CHAR_KINDS = frozenset({KeyKind.CHAR, KeyKind.CTRL, KeyKind.ALT})

_NAMED_KEYS = {
    KeyKind.LEFT: "arrow_left",
    KeyKind.RIGHT: "arrow_right",
    KeyKind.UP: "arrow_up",
    KeyKind.DOWN: "arrow_down",
    KeyKind.BACKSPACE: "backspace",
    KeyKind.HOME: "home",
    KeyKind.END: "end",
    KeyKind.PAGE_UP: "page_up",
    KeyKind.PAGE_DOWN: "page_down",
    KeyKind.BACK_TAB: "backtab",
    KeyKind.INSERT: "insert",
    KeyKind.DELETE: "delete",
    KeyKind.ESC: "escape",
}

_MOUSE_ACTIONS = frozenset({"Press", "Release", "Hold"})
_MOUSE_BUTTONS = frozenset({"Left", "Right", "Middle", "WheelUp", "WheelDown"})


@dataclass(frozen=True)
class Key:
    """A key press; ``char`` for character kinds, ``number`` for function keys."""

    kind: KeyKind
    char: str | None = None
    number: int | None = None

    def __post_init__(self) -> None:
        if self.kind in _CHAR_KINDS and (self.char is None or len(self.char) != 1):
            raise ValueError(f"{self.kind.name} key needs exactly one character")
        if self.kind is KeyKind.F and self.number is None:
            raise ValueError("function key needs a number")

    def __str__(self) -> str:
        if self.kind is KeyKind.CHAR:
            return self.char or ""
        if self.kind is KeyKind.CTRL:
            return f"ctrl+{self.char}"
        if self.kind is KeyKind.F:
            return f"f{self.number}"
        if self.kind in _NAMED_KEYS:
            return _NAMED_KEYS[self.kind]
        if self.kind is KeyKind.ALT:
            return f"Alt({self.char!r})"
        return "Null"


@dataclass(frozen=True)
class MouseEvent:
    """A mouse press (with a button), release or drag at a cell position."""

    action: str
    x: int
    y: int
    button: str | None = None

    def __post_init__(self) -> None:
        if self.action not in _MOUSE_ACTIONS:
            raise ValueError(f"unknown mouse action: {self.action}")
        if self.action == "Press":
            if self.button not in _MOUSE_BUTTONS:
                raise ValueError(f"unknown mouse button: {self.button}")
        elif self.button is not None:
            raise ValueError(f"{self.action} carries no button")

    def __str__(self) -> str:
        if self.action == "Press":
            return f"Press({self.button}, {self.x}, {self.y})"
        return f"{self.action}({self.x}, {self.y})"


@dataclass(frozen=True)
class UnsupportedEvent:
    """A raw byte sequence the terminal parser did not recognise."""

    data: bytes

    def __str__(self) -> str:
        return "[" + ", ".join(str(b) for b in self.data) + "]"


def event_to_string(event: Key | MouseEvent | UnsupportedEvent) -> str:
    """The name used for an input event in key maps and messages."""
    if isinstance(event, (Key, MouseEvent, UnsupportedEvent)):
        return str(event)
    raise TypeError(f"not a terminal event: {event!r}")