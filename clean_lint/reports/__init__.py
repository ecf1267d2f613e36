"""Report rendering.

Usage:
    text, status = render(issues, config.output_format)
"""

from clean_lint.config import OutputFormat
from clean_lint.models import IssueCollection
from clean_lint.reports.markdown import render_markdown
from clean_lint.reports.structured import render_json, render_yaml

EXIT_OK = 0
EXIT_ISSUES = 1

_RENDERERS = {
    OutputFormat.MARKDOWN: render_markdown,
    OutputFormat.JSON: render_json,
    OutputFormat.YAML: render_yaml,
}


def render(issues: IssueCollection, output_format: OutputFormat) -> tuple[str, int]:
    """Return the report text and the exit status it implies.

    The status is EXIT_ISSUES whenever *issues* is non-empty, whatever the
    format; callers must write the text before exiting with it.
    """
    text = _RENDERERS[output_format](issues)
    return text, EXIT_ISSUES if issues else EXIT_OK
