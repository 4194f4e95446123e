"""The label shown for the current tab."""

from __future__ import annotations

from wcwidth import wcwidth

_ELLIPSIS = "…"


def _text_width(text: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in text)


def tab_label(name: str, curr: int, length: int, width: int) -> str:
    """``"<n>/<total>: <name>"``, with the name elided when it does not fit ``width``."""
    position = f"{curr + 1}/{length}"
    space_avail = 0 if _text_width(position) >= width else width - len(position)
    shown = name if space_avail >= _text_width(name) else _ELLIPSIS
    return f"{position}: {shown}"