"""Tests for clean_lint/reports/"""

import json

import yaml

from clean_lint.config import OutputFormat
from clean_lint.models import Issue, IssueCollection, IssueKind
from clean_lint.reports import EXIT_ISSUES, EXIT_OK, render
from clean_lint.reports.markdown import render_markdown
from clean_lint.reports.structured import render_json, render_yaml


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _collection(*groups) -> IssueCollection:
    """Build a collection from ``(root, [(file, line, kind), ...])`` tuples."""
    c = IssueCollection()
    for root, items in groups:
        c.begin_root(root)
        c.extend(Issue.at(kind, line, file) for file, line, kind in items)
    return c


TW = IssueKind.TRAILING_WHITESPACE
MN = IssueKind.MISSING_NEWLINE


def _empty() -> IssueCollection:
    return _collection((".", []))


# ---------------------------------------------------------------------------
# Structured output
# ---------------------------------------------------------------------------

def test_json_empty_list():
    assert json.loads(render_json(_empty())) == []


def test_json_omits_message():
    c = _collection((".", [("./a.txt", 1, TW)]))
    assert json.loads(render_json(c)) == [
        {"type": "trailing_whitespace", "line": 1, "file": "./a.txt"},
    ]


def test_json_is_indented():
    c = _collection((".", [("./a.txt", 1, TW)]))
    assert '\n  {\n    "type"' in render_json(c)


def test_yaml_empty_list():
    assert yaml.safe_load(render_yaml(_empty())) == []


def test_yaml_keeps_field_order_and_issue_order():
    c = _collection((".", [("./b.txt", 2, MN), ("./a.txt", 1, TW)]))
    text = render_yaml(c)
    assert yaml.safe_load(text) == [
        {"type": "missing_newline", "line": 2, "file": "./b.txt"},
        {"type": "trailing_whitespace", "line": 1, "file": "./a.txt"},
    ]
    assert text.index("type:") < text.index("line:") < text.index("file:")
    assert "message" not in text


# ---------------------------------------------------------------------------
# Markdown output
# ---------------------------------------------------------------------------

def test_markdown_no_issues():
    assert render_markdown(_empty()) == "# Clean report\n\n\nNo lint issues found.\n\n"


def test_markdown_single_file():
    c = _collection((".", [("./a.txt", 1, TW), ("./a.txt", 2, MN)]))
    assert render_markdown(c) == (
        "# Clean report\n"
        "\n"
        "## ./a.txt\n"
        "\n"
        "- **Line:** `1` Trailing whitespace\n"
        "- **Line:** `2` Missing newline at end of file\n"
        "\n"
    )


def test_markdown_separates_files_and_roots():
    c = _collection(
        ("r1", [("r1/a.txt", 1, TW), ("r1/b.txt", 3, TW)]),
        ("r2", [("r2/c.txt", 1, MN)]),
    )
    assert render_markdown(c) == (
        "# Clean report\n\n"
        "## r1/a.txt\n\n"
        "- **Line:** `1` Trailing whitespace\n\n"
        "## r1/b.txt\n\n"
        "- **Line:** `3` Trailing whitespace\n\n"
        "## r2/c.txt\n\n"
        "- **Line:** `1` Missing newline at end of file\n\n"
    )


def test_markdown_groups_by_contiguous_runs_not_by_sorting():
    c = _collection((".", [("./a.txt", 1, TW), ("./b.txt", 1, TW), ("./a.txt", 2, TW)]))
    assert render_markdown(c).count("## ./a.txt") == 2


def test_markdown_does_not_mix_roots_sharing_a_prefix():
    c = _collection(("a", [("a/x.txt", 1, TW)]), ("ab", [("ab/y.txt", 1, TW)]))
    assert render_markdown(c).count("## a/x.txt") == 1


# ---------------------------------------------------------------------------
# render() — exit contract
# ---------------------------------------------------------------------------

def test_render_clean_is_success_in_every_format():
    for fmt in OutputFormat:
        _, status = render(_empty(), fmt)
        assert status == EXIT_OK


def test_render_issues_is_failure_in_every_format():
    c = _collection((".", [("./a.txt", 1, TW)]))
    for fmt in OutputFormat:
        text, status = render(c, fmt)
        assert status == EXIT_ISSUES
        assert "a.txt" in text
