"""Scan configuration and validation.

Usage:
    config = build(dirs=["src", "docs"], ignore=["*.min.js"], json=True)
    config.output_format          # OutputFormat.JSON

There is no configuration file: a ScanConfig is built once from the command
line and is read-only afterwards.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from clean_lint.ignore import compile_pattern


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ConfigError(Exception):
    """Raised when the scan configuration is invalid."""


class DirectoryNotFoundError(ConfigError):
    """Raised when a directory to lint does not exist."""


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class GitMode(Enum):
    """Whether to restrict linting to files tracked by git."""

    AUTO = "auto"   # only inside a git repository
    ON = "on"
    OFF = "off"

    @classmethod
    def from_flag(cls, value: bool | None) -> "GitMode":
        if value is None:
            return cls.AUTO
        return cls.ON if value else cls.OFF


class OutputFormat(Enum):
    MARKDOWN = "markdown"
    JSON = "json"
    YAML = "yaml"


# ---------------------------------------------------------------------------
# Config dataclass
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScanConfig:
    dirs: tuple[str, ...] = (".",)
    ignore: tuple[str, ...] = ()
    json: bool = False
    yaml: bool = False
    output: str | None = None
    git: GitMode = GitMode.AUTO

    @property
    def output_format(self) -> OutputFormat:
        """Report format; JSON wins when both ``json`` and ``yaml`` are set."""
        if self.json:
            return OutputFormat.JSON
        if self.yaml:
            return OutputFormat.YAML
        return OutputFormat.MARKDOWN


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

def build(
    dirs: Iterable[str] = (),
    ignore: Iterable[str] = (),
    json: bool = False,
    yaml: bool = False,
    output: str | None = None,
    git: bool | None = None,
) -> ScanConfig:
    """Create and validate a ScanConfig.

    An empty *dirs* means the current directory.

    Raises:
        DirectoryNotFoundError: one or more directories do not exist.
        InvalidPattern:         an ignore pattern is not a valid glob.
    """
    config = ScanConfig(
        dirs=tuple(dirs) or (".",),
        ignore=tuple(ignore),
        json=json,
        yaml=yaml,
        output=output,
        git=GitMode.from_flag(git),
    )
    _validate(config)
    return config


def _validate(config: ScanConfig) -> None:
    """Check every directory and pattern before anything is scanned."""
    missing = [d for d in config.dirs if not d or not os.path.exists(d)]
    if missing:
        listed = ", ".join(f"'{d}'" for d in missing)
        raise DirectoryNotFoundError(f"Directory not found: {listed}")

    for pattern in config.ignore:
        compile_pattern(pattern)
