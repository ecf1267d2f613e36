"""Report destinations.

Usage:
    write_report(text, "report.md")    # raises OutputError on failure
"""

import os


class OutputError(Exception):
    """Raised when the report cannot be written to its destination."""


def write_report(text: str, output_path: str) -> None:
    """Create or truncate *output_path* and write *text* to it.

    Errors surfacing on close (for example a full device) are reported too.

    Raises:
        OutputError: the path is a directory or the write fails.
    """
    if os.path.isdir(output_path):
        raise OutputError(f"output path is a directory: {output_path}")
    try:
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except IsADirectoryError as exc:
        raise OutputError(f"output path is a directory: {output_path}") from exc
    except (OSError, UnicodeError) as exc:
        raise OutputError(f"failed to write output file {output_path}: {exc}") from exc
