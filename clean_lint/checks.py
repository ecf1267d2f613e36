"""Defect detection over the decoded text of one file.

Functions:
    detect(path, content)  -> list[Issue]   runs every check, in order

Each check is a pure function ``(path, content, lines) -> list[Issue]`` where
``lines`` is ``content.split("\\n")``. Line numbers are 1-based indexes into
``lines``, so a file ending in a newline has an empty final segment and its
"last line" number is one past the last line of text.
"""

from typing import Callable

from clean_lint.models import Issue, IssueKind

Check = Callable[[str, str, list[str]], list[Issue]]

# Unicode White_Space, without the ASCII separators \x1c-\x1f that str.isspace
# also accepts.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


# ---------------------------------------------------------------------------
# Checks
# ---------------------------------------------------------------------------

def trailing_whitespace(path: str, content: str, lines: list[str]) -> list[Issue]:
    """One issue per segment that ends with whitespace.

    The final segment is included, so an unterminated last line with trailing
    blanks is reported here as well as by ``missing_newline``.
    """
    return [
        Issue.at(IssueKind.TRAILING_WHITESPACE, number, path)
        for number, line in enumerate(lines, start=1)
        if len(line.rstrip(WHITESPACE)) != len(line)
    ]


def missing_newline(path: str, content: str, lines: list[str]) -> list[Issue]:
    if content.endswith("\n"):
        return []
    return [Issue.at(IssueKind.MISSING_NEWLINE, len(lines), path)]


def crlf_line_endings(path: str, content: str, lines: list[str]) -> list[Issue]:
    # A lone CR is only reported once the file uses CRLF somewhere.
    if "\r\n" not in content:
        return []
    return [
        Issue.at(IssueKind.CRLF_LINE_ENDING, number, path)
        for number, line in enumerate(lines, start=1)
        if "\r" in line
    ]


def blank_lines_at_eof(path: str, content: str, lines: list[str]) -> list[Issue]:
    trailing = len(content) - len(content.rstrip("\r\n"))
    if trailing <= 1:
        return []
    return [Issue.at(IssueKind.MULTIPLE_BLANK_LINES_EOF, len(lines), path)]


CHECKS: tuple[Check, ...] = (
    trailing_whitespace,
    missing_newline,
    crlf_line_endings,
    blank_lines_at_eof,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def detect(path: str, content: str) -> list[Issue]:
    """Return every issue found in *content*, in check order.

    Checks never short-circuit each other. An empty file has no issues.
    """
    if not content:
        return []

    lines = content.split("\n")
    issues: list[Issue] = []
    for check in CHECKS:
        issues.extend(check(path, content, lines))
    return issues
