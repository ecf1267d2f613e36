"""Scan pipeline: discover files, read them and collect their issues.

Functions:
    scan(config)                          -> IssueCollection
    scan_root(root, matcher, git_mode)    -> Iterator[Issue]
    read_text(path)                       -> str | None
    display_path(path)                    -> str
"""

import logging
import os
from pathlib import Path
from typing import Iterator

from clean_lint.checks import detect
from clean_lint.config import GitMode, ScanConfig
from clean_lint.git import tracked_filter
from clean_lint.ignore import IgnoreMatcher
from clean_lint.models import Issue, IssueCollection
from clean_lint.walker import walk

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def scan(config: ScanConfig) -> IssueCollection:
    """Lint every root of *config*, one after the other.

    Raises:
        InvalidPattern:      an ignore pattern is not a valid glob.
        TrackingQueryFailed: git was required for a root and failed.
    """
    matcher = IgnoreMatcher(config.ignore)
    collection = IssueCollection()
    for root in config.dirs:
        collection.begin_root(root)
        collection.extend(scan_root(root, matcher, config.git))
    return collection


def scan_root(root: str, matcher: IgnoreMatcher, git_mode: GitMode) -> Iterator[Issue]:
    """Yield the issues of every file kept under *root*, file by file."""
    tracked = tracked_filter(root, git_mode)

    for path in walk(root):
        if tracked is not None and path not in tracked:
            continue
        name = display_path(path)
        if matcher.matches(name):
            logger.debug("Ignoring '%s'", name)
            continue

        content = read_text(path)
        if content is None:
            continue

        logger.debug("Linting '%s'", name)
        yield from detect(name, content)


def display_path(path: str) -> str:
    """Return *path* with undecodable bytes replaced by U+FFFD.

    Paths from the filesystem may carry lone surrogates for bytes that are not
    UTF-8; those cannot be written to a report.
    """
    return os.fsencode(path).decode("utf-8", errors="replace")


def read_text(path: str) -> str | None:
    """Return the UTF-8 text of *path*, or None (with a warning) if unusable.

    Bytes are decoded without newline translation so CR characters survive.
    """
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        logger.warning("failed to read file '%s': %s", display_path(path), exc)
        return None

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("file '%s' is not a valid UTF-8 text file, skipped", display_path(path))
        return None
