"""
Glob matching for object keys.

Keys and patterns are split on `/` and matched segment by segment:
    - Each plain segment is matched with `fnmatch.fnmatchcase`, so `*`, `?`,
      `[seq]` and `[!seq]` work inside a segment and never cross a `/`.
    - `**` as a whole segment matches zero or more segments.
    - `{a,b}` alternatives are expanded before matching.
    - A pattern without `/` only matches keys at the top level
      (`*.html` does not match `docs/index.html`; use `**/*.html`).
    - Wildcards do not match a segment starting with `.` unless the pattern
      segment itself starts with `.` (pass dot=True to lift this).

Leading `!` negation is not supported; validate_pattern rejects it.
"""

from __future__ import annotations

from fnmatch import fnmatchcase
from functools import lru_cache
from typing import Iterable, Union

GlobPatterns = Union[str, Iterable[str]]

_GLOBSTAR = "**"


def is_match(key: str, patterns: GlobPatterns, *, dot: bool = False) -> bool:
    """Return True if key matches the pattern, or any of the patterns."""
    if isinstance(patterns, str):
        patterns = (patterns,)
    names = tuple(key.split("/"))
    return any(
        _match_segments(segments, names, dot)
        for pattern in patterns
        for segments in _split_pattern(pattern)
    )


def validate_pattern(pattern: str) -> None:
    """Raise ValueError if pattern is empty or uses unsupported syntax."""
    if not isinstance(pattern, str) or not pattern:
        raise ValueError("glob pattern must be a non-empty string")
    if pattern.startswith("!"):
        raise ValueError(f"negated glob patterns are not supported: {pattern!r}")


def expand_braces(pattern: str) -> list[str]:
    """Expand `{a,b}` groups (nested groups included) into plain patterns."""
    start = pattern.find("{")
    if start < 0:
        return [pattern]

    depth = 0
    options: list[str] = []
    current = start + 1
    for i in range(start, len(pattern)):
        ch = pattern[i]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                options.append(pattern[current:i])
                head, tail = pattern[:start], pattern[i + 1:]
                if len(options) == 1:
                    # `{a}` is not an alternation; keep the braces literal.
                    literal = head + "{" + options[0] + "}"
                    return [literal + rest for rest in expand_braces(tail)]
                out: list[str] = []
                for option in options:
                    out.extend(expand_braces(head + option + tail))
                return out
        elif ch == "," and depth == 1:
            options.append(pattern[current:i])
            current = i + 1

    # Unbalanced: treat the brace literally.
    return [pattern]


@lru_cache(maxsize=512)
def _split_pattern(pattern: str) -> tuple[tuple[str, ...], ...]:
    out: list[tuple[str, ...]] = []
    for expanded in expand_braces(pattern):
        segments: list[str] = []
        for seg in expanded.split("/"):
            if seg == _GLOBSTAR and segments and segments[-1] == _GLOBSTAR:
                continue
            segments.append(seg)
        out.append(tuple(segments))
    return tuple(out)


def _match_segments(pattern: tuple[str, ...], names: tuple[str, ...], dot: bool) -> bool:
    if not pattern:
        return not names

    head = pattern[0]
    if head == _GLOBSTAR:
        rest = pattern[1:]
        for i in range(len(names) + 1):
            if i > 0 and not dot and names[i - 1].startswith("."):
                return False
            if _match_segments(rest, names[i:], dot):
                return True
        return False

    if not names or not _match_segment(head, names[0], dot):
        return False
    return _match_segments(pattern[1:], names[1:], dot)


def _match_segment(pattern: str, name: str, dot: bool) -> bool:
    """Match one key segment against one pattern segment.

    ``*`` and ``?`` do not match a leading ``.`` unless the pattern itself
    starts with ``.`` or dot is set.
    """
    if not dot and not pattern.startswith(".") and name.startswith("."):
        return False
    return fnmatchcase(name, pattern)
