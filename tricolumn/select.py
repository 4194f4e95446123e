"""Options for selecting entries in a listing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SelectOption:
    """How a select command behaves: toggle, apply to all, or deselect."""

    toggle: bool = True
    all: bool = False
    reverse: bool = False

    def __str__(self) -> str:
        return (
            f"--toggle={str(self.toggle).lower()} "
            f"--all={str(self.all).lower()} "
            f"--deselect={str(self.reverse).lower()}"
        )