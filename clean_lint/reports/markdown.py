"""Human-readable Markdown report.

Layout::

    # Clean report

    ## ./src/a.txt

    - **Line:** `3` Trailing whitespace
    - **Line:** `7` Missing newline at end of file

    ## ./src/b.txt

    - **Line:** `1` Contains CRLF line endings

Issues are printed per root, in scan order. A new ``##`` section starts
whenever the file changes, so the same file never gets re-sorted. Each root
block ends with a blank line.
"""

from clean_lint.models import IssueCollection

TITLE = "# Clean report"
NO_ISSUES = "No lint issues found."


def render_markdown(issues: IssueCollection) -> str:
    out: list[str] = [TITLE, ""]

    for _root, root_issues in issues.by_root():
        current_file = None
        for issue in root_issues:
            if issue.file != current_file:
                if current_file is not None:
                    out.append("")
                out.extend([f"## {issue.file}", ""])
                current_file = issue.file
            line = issue.line if issue.line is not None else 0
            out.append(f"- **Line:** `{line}` {issue.message or ''}".rstrip())
        out.append("")

    if not issues:
        out.extend([NO_ISSUES, ""])

    return "\n".join(out) + "\n"
