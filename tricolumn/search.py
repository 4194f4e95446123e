"""Search patterns: plain substrings or shell-style globs."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_CLASS_SPECIALS = "\\^[]"


def _translate_class(body: str) -> str:
    negate = body[:1] in ("!", "^")
    if negate:
        body = body[1:]
    escaped = "".join("\\" + ch if ch in _CLASS_SPECIALS else ch for ch in body)
    return "[" + ("^" if negate else "") + escaped + "]"


def _compile_glob(pattern: str) -> re.Pattern[str]:
    parts: list[str] = []
    depth = 0
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        i += 1
        if ch == "\\":
            if i >= n:
                raise ValueError(f"dangling escape in glob: {pattern!r}")
            parts.append(re.escape(pattern[i]))
            i += 1
        elif ch == "*":
            parts.append(".*")
        elif ch == "?":
            parts.append(".")
        elif ch == "[":
            j = i
            if j < n and pattern[j] in "!^":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                j += 1
            if j >= n:
                raise ValueError(f"unclosed character class in glob: {pattern!r}")
            parts.append(_translate_class(pattern[i:j]))
            i = j + 1
        elif ch == "{":
            depth += 1
            parts.append("(?:")
        elif ch == "}" and depth:
            depth -= 1
            parts.append(")")
        elif ch == "," and depth:
            parts.append("|")
        else:
            parts.append(re.escape(ch))
    if depth:
        raise ValueError(f"unclosed alternation in glob: {pattern!r}")
    try:
        return re.compile("".join(parts), re.DOTALL)
    except re.error as exc:
        raise ValueError(f"invalid glob {pattern!r}: {exc}") from None


@dataclass(frozen=True)
class SearchPattern:
    """A substring to look for, or a glob that a whole name must match."""

    pattern: str
    is_glob: bool = False
    _regex: re.Pattern[str] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.is_glob:
            object.__setattr__(self, "_regex", _compile_glob(self.pattern))

    @staticmethod
    def glob(pattern: str) -> SearchPattern:
        """A glob pattern; raises ValueError if it is malformed."""
        return SearchPattern(pattern, is_glob=True)

    def matches(self, name: str) -> bool:
        if self._regex is not None:
            return self._regex.fullmatch(name) is not None
        return self.pattern in name