"""Ignore patterns.

Usage:
    matcher = IgnoreMatcher(["*.min.js", "build/**"])   # raises InvalidPattern
    matcher.matches("./build/out.txt")                  # True

Glob syntax:
    ?         any single character
    *         any run of characters, ``/`` included
    **        as a whole path component only (``**/x``, ``a/**``, ``a/**/b``)
    [abc]     character class, ranges allowed (``[a-z]``)
    [!abc]    negated class; a ``]`` right after ``[`` or ``[!`` is literal

Matching is case-sensitive and anchored at both ends.
"""

import os
import re
from typing import Iterable


class InvalidPattern(ValueError):
    """Raised when an ignore pattern is not a valid glob."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"'{pattern}': {reason}")
        self.pattern = pattern
        self.reason = reason


# ---------------------------------------------------------------------------
# Pattern compilation
# ---------------------------------------------------------------------------

def compile_pattern(pattern: str) -> re.Pattern:
    """Translate a glob into a compiled regular expression.

    Raises:
        InvalidPattern: unterminated ``[`` class, or a ``**`` that is not a
                        whole path component.
    """
    parts: list[str] = []
    i, n = 0, len(pattern)

    while i < n:
        char = pattern[i]

        if char == "*":
            run = 1
            while i + run < n and pattern[i + run] == "*":
                run += 1
            if run == 1:
                parts.append(".*")
                i += 1
                continue
            if run > 2:
                raise InvalidPattern(pattern, "wildcards are either regular `*` or recursive `**`")
            at_start = i == 0 or pattern[i - 1] == "/"
            at_end = i + 2 == n or pattern[i + 2] == "/"
            if not (at_start and at_end):
                raise InvalidPattern(pattern, "recursive wildcards must form a single path component")
            if i + 2 < n:
                # "**/" also matches zero directories
                parts.append("(?:.*/)?")
                i += 3
            else:
                parts.append(".*")
                i += 2

        elif char == "?":
            parts.append(".")
            i += 1

        elif char == "[":
            cls, i = _compile_class(pattern, i)
            parts.append(cls)

        else:
            parts.append(re.escape(char))
            i += 1

    return re.compile("(?s:" + "".join(parts) + r")\Z")


def _compile_class(pattern: str, start: int) -> tuple[str, int]:
    """Compile the ``[...]`` class opening at *start*; return (regex, next index)."""
    i = start + 1
    negated = i < len(pattern) and pattern[i] == "!"
    if negated:
        i += 1

    end = pattern.find("]", i + 1)
    if i >= len(pattern) or end == -1:
        raise InvalidPattern(pattern, f"invalid range pattern at position {start}")

    body = pattern[i:end]
    items: list[str] = []
    j = 0
    while j < len(body):
        if j + 2 < len(body) and body[j + 1] == "-":
            low, high = body[j], body[j + 2]
            if low <= high:
                items.append(f"{_escape_in_class(low)}-{_escape_in_class(high)}")
            j += 3
        else:
            items.append(_escape_in_class(body[j]))
            j += 1

    if not items:
        # only empty ranges such as [z-a]
        return ("." if negated else "(?!)"), end + 1
    return ("[^" if negated else "[") + "".join(items) + "]", end + 1


def _escape_in_class(char: str) -> str:
    return "\\" + char if char in "\\]^-[" else char


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------

class IgnoreMatcher:
    """A compiled list of ignore patterns."""

    def __init__(self, patterns: Iterable[str]) -> None:
        self.patterns = list(patterns)
        self._compiled = [compile_pattern(p) for p in self.patterns]

    def matches(self, path: str) -> bool:
        """True if any pattern matches *path* or its final component."""
        name = os.path.basename(path)
        for regex in self._compiled:
            if regex.match(path) or regex.match(name):
                return True
        return False

    def __bool__(self) -> bool:
        return bool(self._compiled)


def matches(path: str, patterns: Iterable[str]) -> bool:
    """One-shot form of ``IgnoreMatcher(patterns).matches(path)``."""
    return IgnoreMatcher(patterns).matches(path)
