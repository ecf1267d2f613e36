"""Machine-readable reports.

Both formats serialize the same list of ``{type, line, file}`` objects; the
human-readable message is left out. An empty collection gives an empty list.
"""

import json

import yaml

from clean_lint.models import IssueCollection


def render_json(issues: IssueCollection) -> str:
    return json.dumps(issues.to_list(), indent=2, ensure_ascii=False) + "\n"


def render_yaml(issues: IssueCollection) -> str:
    return yaml.safe_dump(
        issues.to_list(),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
