"""Git queries used to restrict a scan to tracked files.

Usage:
    if is_git_repo(root):
        tracked = list_tracked(root)     # {"root/a.txt", "root/src/b.py", ...}
"""

import logging
import os
import subprocess

from clean_lint.config import GitMode

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class TrackingQueryFailed(Exception):
    """Raised when ``git ls-files`` cannot be run or exits abnormally."""

    def __init__(
        self,
        message: str,
        *,
        returncode: int | None = None,
        signal: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.returncode = returncode
        self.signal = signal
        self.stderr = stderr


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

def is_git_repo(directory: str) -> bool:
    """True if *directory* has a ``.git`` entry. Its validity is not checked."""
    return os.path.exists(os.path.join(directory, ".git"))


def list_tracked(root: str) -> set[str]:
    """Return the files ``git ls-files`` reports under *root*, joined onto *root*.

    The joined paths compare equal to the ones produced by
    ``clean_lint.walker.walk(root)``.

    Raises:
        TrackingQueryFailed: git is missing, exits non-zero or is killed.
    """
    try:
        proc = subprocess.run(
            ["git", "ls-files", "-z"],
            cwd=root,
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise TrackingQueryFailed(f"unable to run `git ls-files` in '{root}': {exc}") from exc

    if proc.returncode < 0:
        signal = -proc.returncode
        raise TrackingQueryFailed(
            f"`git ls-files` killed by signal: {signal}", signal=signal
        )
    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        raise TrackingQueryFailed(
            f"`git ls-files` exit with code={proc.returncode}: {stderr}",
            returncode=proc.returncode,
            stderr=stderr,
        )

    return {
        os.path.join(root, os.fsdecode(name))
        for name in proc.stdout.split(b"\0")
        if name
    }


def tracked_filter(root: str, mode: GitMode) -> set[str] | None:
    """Return the set of files to keep under *root*, or None for no filtering.

    AUTO filters only when *root* has a ``.git`` entry, ON always queries git
    (so a non-repository fails), OFF never filters.
    """
    if mode is GitMode.OFF:
        return None
    if mode is GitMode.AUTO and not is_git_repo(root):
        logger.debug("'%s' is not a git repository, linting all files", root)
        return None

    tracked = list_tracked(root)
    logger.debug("'%s': %d tracked file(s)", root, len(tracked))
    return tracked
