"""A bordered list of options drawn over the bottom of the screen."""

from __future__ import annotations

from collections.abc import Sequence

from tricolumn.canvas import DEFAULT_STYLE, Canvas, Rect

_HORIZONTAL = "─"


def _draw_top_border(canvas: Canvas, area: Rect, style: frozenset[str]) -> None:
    bounds = canvas.area
    for y in range(max(area.top, 0), min(area.bottom, bounds.bottom)):
        for x in range(max(area.left, 0), min(area.right, bounds.right)):
            canvas.styles[y][x] = style
    for x in range(area.left, area.right):
        canvas.set_string(x, area.top, _HORIZONTAL, style)


def render_menu(canvas: Canvas, area: Rect, options: Sequence[str]) -> None:
    """Draw a top border over ``area`` and each option on its own row below it."""
    style = DEFAULT_STYLE
    if area.area > 0:
        _draw_top_border(canvas, area, style)
    for i, text in enumerate([*options, " "]):
        canvas.set_string(area.x + 1, area.y + 1 + i, text, style)