"""A grid of styled character cells that widgets draw into."""

from __future__ import annotations

import sys
from dataclasses import dataclass

from wcwidth import wcwidth

Style = frozenset
DEFAULT_STYLE: frozenset[str] = frozenset()


@dataclass(frozen=True)
class Rect:
    """A rectangular region of cells."""

    x: int
    y: int
    width: int
    height: int

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height


class Canvas:
    """Rows of cells, each holding a symbol and a style.

    A wide character occupies its own cell and blanks the cells it covers;
    those covered cells hold an empty symbol so :meth:`row` reads naturally.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must not be negative: {width}x{height}")
        self.area = Rect(0, 0, width, height)
        self._symbols = [[" "] * width for _ in range(height)]
        self.styles: list[list[frozenset[str]]] = [
            [DEFAULT_STYLE] * width for _ in range(height)
        ]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.area.width and 0 <= y < self.area.height):
            raise IndexError(f"cell ({x}, {y}) is outside the canvas {self.area}")

    def set_string(
        self, x: int, y: int, text: str, style: frozenset[str] = DEFAULT_STYLE
    ) -> int:
        """Write ``text`` from ``(x, y)``, clipped at the right edge; return the end column."""
        return self.set_stringn(x, y, text, sys.maxsize, style)

    def set_stringn(
        self,
        x: int,
        y: int,
        text: str,
        limit: int,
        style: frozenset[str] = DEFAULT_STYLE,
    ) -> int:
        """Write at most ``limit`` columns of ``text`` from ``(x, y)``; return the end column."""
        self._check(x, y)
        symbols = self._symbols[y]
        styles = self.styles[y]
        max_offset = min(self.area.right, x + max(limit, 0))
        offset = x
        last: int | None = None
        for ch in text:
            width = wcwidth(ch)
            if width <= 0:
                if width == 0 and last is not None:
                    symbols[last] += ch
                continue
            if width > max_offset - offset:
                break
            symbols[offset] = ch
            styles[offset] = style
            for covered in range(offset + 1, offset + width):
                symbols[covered] = ""
                styles[covered] = DEFAULT_STYLE
            last = offset
            offset += width
        return offset

    def row(self, y: int) -> str:
        """The symbols of row ``y`` joined into one string."""
        if not 0 <= y < self.area.height:
            raise IndexError(f"row {y} is outside the canvas {self.area}")
        return "".join(self._symbols[y])