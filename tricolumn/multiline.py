"""Splitting a line of text into rows that fit a given width."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from wcwidth import wcwidth


def _char_width(ch: str) -> int | None:
    width = wcwidth(ch)
    return None if width < 0 else width


def _text_width(text: str) -> int:
    return sum(_char_width(ch) or 0 for ch in text)


@dataclass(frozen=True)
class LineInfo:
    """One row: the character range ``[start, end)`` and its display width."""

    start: int
    end: int
    width: int


def _layout(text: str, area_width: int) -> list[LineInfo]:
    total = _text_width(text)
    if total < area_width:
        return [LineInfo(0, len(text), total)]

    lines: list[LineInfo] = []
    start = 0
    line_width = 0
    for i, ch in enumerate(text):
        w = _char_width(ch)
        if w is None:
            continue
        if line_width + w < area_width:
            line_width += w
            continue
        lines.append(LineInfo(start, i, line_width))
        line_width = w
        start = i
    lines.append(LineInfo(start, len(text), _text_width(text[start:])))
    return lines


class MultilineText:
    """Text wrapped to ``width`` columns, leaving room for a cursor at the end."""

    def __init__(self, text: str, area_width: int) -> None:
        if area_width <= 0:
            raise ValueError(f"area width must be positive, got {area_width}")
        self.text = text
        self.width = area_width
        self.infos = _layout(text, area_width)

    def __len__(self) -> int:
        return len(self.infos)

    def __iter__(self) -> Iterator[LineInfo]:
        return iter(self.infos)

    def height(self) -> int:
        """Rows needed, including an extra one when the last row is full."""
        if self.infos[-1].width >= self.width:
            return len(self) + 1
        return len(self)

    def lines(self) -> list[str]:
        """The text of each row."""
        return [self.text[info.start : info.end] for info in self.infos]