"""Data models for lint results.

Contains:
    - IssueKind        closed set of defect kinds
    - Issue            one defect occurrence in one file
    - IssueCollection  ordered, per-root accumulator used by the reports
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator


# ---------------------------------------------------------------------------
# Issue kinds
# ---------------------------------------------------------------------------

class IssueKind(str, Enum):
    """Defect kinds. The value is the name used in JSON / YAML output."""

    TRAILING_WHITESPACE = "trailing_whitespace"
    MISSING_NEWLINE = "missing_newline"
    CRLF_LINE_ENDING = "crlf_line_ending"
    MULTIPLE_BLANK_LINES_EOF = "multiple_blank_lines_eof"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    IssueKind.TRAILING_WHITESPACE:      "Trailing whitespace",
    IssueKind.MISSING_NEWLINE:          "Missing newline at end of file",
    IssueKind.CRLF_LINE_ENDING:         "Contains CRLF line endings",
    IssueKind.MULTIPLE_BLANK_LINES_EOF: "Multiple blank lines at end of file",
}


# ---------------------------------------------------------------------------
# Issue
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Issue:
    kind: IssueKind
    line: int | None
    file: str
    message: str | None = None

    @classmethod
    def at(cls, kind: IssueKind, line: int, file: str) -> "Issue":
        """Build an issue carrying the default message for *kind*."""
        return cls(kind=kind, line=line, file=file, message=kind.message)

    def to_dict(self) -> dict[str, Any]:
        """Structured form used by the JSON and YAML reports (no message)."""
        return {"type": self.kind.value, "line": self.line, "file": self.file}


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

class IssueCollection:
    """Append-only list of issues, grouped by the root they were found under.

    Roots keep the order in which they were scanned and issues keep the order
    in which they were added. Nothing is sorted or deduplicated.
    """

    def __init__(self) -> None:
        self._groups: list[tuple[str, list[Issue]]] = []

    def begin_root(self, root: str) -> None:
        """Open a new group; following ``extend`` calls append to it."""
        self._groups.append((root, []))

    def extend(self, issues: Iterable[Issue]) -> None:
        if not self._groups:
            raise RuntimeError("begin_root() must be called before extend()")
        self._groups[-1][1].extend(issues)

    def by_root(self) -> Iterator[tuple[str, list[Issue]]]:
        for root, issues in self._groups:
            yield root, list(issues)

    def to_list(self) -> list[dict[str, Any]]:
        return [issue.to_dict() for issue in self]

    def __iter__(self) -> Iterator[Issue]:
        for _, issues in self._groups:
            yield from issues

    def __len__(self) -> int:
        return sum(len(issues) for _, issues in self._groups)
