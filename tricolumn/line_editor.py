"""Editing a single input line, with file-name completion and cursor placement."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from wcwidth import wcwidth

from tricolumn.multiline import MultilineText

_BREAK_CHARS = frozenset(" \t\n\"\\'`@$><=;|&{(")
_ESCAPE = "\\"


@dataclass
class LineBuffer:
    """Text being edited and the cursor position within it, in characters."""

    text: str = ""
    pos: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.pos <= len(self.text):
            raise ValueError(f"cursor {self.pos} is outside the text")

    def __str__(self) -> str:
        return self.text

    def insert(self, ch: str) -> bool:
        """Insert ``ch`` at the cursor and move past it."""
        if len(ch) != 1:
            raise ValueError("insert takes exactly one character")
        self.text = self.text[: self.pos] + ch + self.text[self.pos :]
        self.pos += 1
        return True

    def backspace(self) -> bool:
        """Remove the character before the cursor; False at the start of the line."""
        if self.pos == 0:
            return False
        self.text = self.text[: self.pos - 1] + self.text[self.pos :]
        self.pos -= 1
        return True

    def delete(self) -> str | None:
        """Remove and return the character under the cursor, if there is one."""
        if self.pos >= len(self.text):
            return None
        removed = self.text[self.pos]
        self.text = self.text[: self.pos] + self.text[self.pos + 1 :]
        return removed

    def move_backward(self) -> bool:
        if self.pos == 0:
            return False
        self.pos -= 1
        return True

    def move_forward(self) -> bool:
        if self.pos >= len(self.text):
            return False
        self.pos += 1
        return True

    def move_home(self) -> bool:
        moved = self.pos != 0
        self.pos = 0
        return moved

    def move_end(self) -> bool:
        moved = self.pos != len(self.text)
        self.pos = len(self.text)
        return moved

    def update(self, start: int, replacement: str) -> None:
        """Replace the text from ``start`` to the cursor and put the cursor after it."""
        if not 0 <= start <= self.pos:
            raise ValueError(f"start {start} is not before the cursor {self.pos}")
        self.text = self.text[:start] + replacement + self.text[self.pos :]
        self.pos = start + len(replacement)


def _extract_word(line: str, pos: int) -> int:
    i = pos
    while i > 0:
        if line[i - 1] in _BREAK_CHARS:
            if i >= 2 and line[i - 2] == _ESCAPE:
                i -= 2
                continue
            break
        i -= 1
    return i


def _unescape(word: str) -> str:
    out: list[str] = []
    chars = iter(word)
    for ch in chars:
        if ch == _ESCAPE:
            nxt = next(chars, None)
            if nxt is None:
                out.append(ch)
            elif nxt in _BREAK_CHARS:
                out.append(nxt)
            else:
                out.extend((ch, nxt))
        else:
            out.append(ch)
    return "".join(out)


def _escape(text: str) -> str:
    return "".join(_ESCAPE + ch if ch in _BREAK_CHARS else ch for ch in text)


def complete_path(line: str, pos: int) -> tuple[int, list[tuple[str, str]]]:
    """Complete the file name ending at ``pos``.

    Returns where the word starts and ``(display, replacement)`` pairs;
    directories end with a separator.
    """
    if not 0 <= pos <= len(line):
        raise ValueError(f"cursor {pos} is outside the line")
    start = _extract_word(line, pos)
    path = _unescape(line[start:pos])
    dir_name, sep, prefix = path.rpartition(os.sep)
    if sep:
        dir_name += sep
    directory = Path(os.path.expanduser(dir_name)) if dir_name else Path(".")
    try:
        entries = list(os.scandir(directory))
    except OSError:
        return start, []
    candidates: list[tuple[str, str]] = []
    for entry in entries:
        if not entry.name.startswith(prefix):
            continue
        try:
            is_dir = entry.is_dir()
        except OSError:
            is_dir = False
        display = entry.name + (os.sep if is_dir else "")
        candidates.append((display, _escape(dir_name + display)))
    return start, candidates


@dataclass
class CompletionTracker:
    """Cycles through completion candidates on repeated tab presses."""

    pos: int
    candidates: list[tuple[str, str]]
    original: str
    index: int = field(default=0)

    @classmethod
    def start(cls, buffer: LineBuffer) -> CompletionTracker:
        """Gather candidates for the word at the cursor, sorted by display name."""
        pos, candidates = complete_path(buffer.text, buffer.pos)
        candidates.sort(key=lambda pair: pair[0])
        return cls(pos, candidates, buffer.text)

    def advance(self, buffer: LineBuffer) -> bool:
        """Put the next candidate into ``buffer``; False once all have been used."""
        if self.index >= len(self.candidates):
            return False
        display, _ = self.candidates[self.index]
        buffer.update(self.pos, display)
        self.index += 1
        return True


def _text_width(text: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in text)


def cursor_position(
    prompt: str, text: str, pos: int, width: int, height: int
) -> tuple[int, int]:
    """Screen ``(x, y)`` of the cursor for a prompted line wrapped at the bottom."""
    if not 0 <= pos <= len(text):
        raise ValueError(f"cursor {pos} is outside the text")
    multiline = MultilineText(prompt + text, width)
    prefix_width = _text_width(text[:pos]) + len(prompt.encode("utf-8"))
    y_offset = prefix_width // width
    y = height - multiline.height() + y_offset
    x = prefix_width % width + y_offset
    return x, y