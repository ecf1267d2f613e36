"""CLI entry point: the ``clean`` command, defined with Click.

    clean [OPTIONS] [DIR]...

Exit status:
    0  no issues found
    1  issues found (the report is written first)
    2  fatal error: missing directory, invalid glob, git failure, unwritable output
"""

import functools
import logging
import sys

import click

from clean_lint import __version__

EXIT_ERROR = 2


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class _EchoHandler(logging.Handler):
    """Send log records to stderr through click.echo."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("clean_lint")
    if not any(isinstance(h, _EchoHandler) for h in logger.handlers):
        handler = _EchoHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _emit(text: str, output_path: str | None) -> None:
    """Write the report to stdout or to the file given by --output."""
    from clean_lint.output import OutputError, write_report

    if output_path:
        write_report(text, output_path)
        click.echo(f"Report written to '{output_path}'", err=True)
        return
    try:
        click.echo(text, nl=False)
    except (OSError, UnicodeError) as exc:
        raise OutputError(f"failed to write to stdout: {exc}") from exc


def _handle_errors(func):
    """Decorator that turns fatal errors into a message and EXIT_ERROR."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from clean_lint.config import ConfigError, DirectoryNotFoundError
        from clean_lint.git import TrackingQueryFailed
        from clean_lint.ignore import InvalidPattern
        from clean_lint.output import OutputError

        try:
            return func(*args, **kwargs)
        except DirectoryNotFoundError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(EXIT_ERROR)
        except InvalidPattern as exc:
            click.echo(f"Invalid glob pattern: {exc}", err=True)
            sys.exit(EXIT_ERROR)
        except ConfigError as exc:
            click.echo(f"Configuration error: {exc}", err=True)
            sys.exit(EXIT_ERROR)
        except TrackingQueryFailed as exc:
            click.echo(f"Git error: {exc}", err=True)
            sys.exit(EXIT_ERROR)
        except OutputError as exc:
            click.echo(f"Output error: {exc}", err=True)
            sys.exit(EXIT_ERROR)

    return wrapper


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("dirs", nargs=-1, metavar="[DIR]...")
@click.option("--json", "json_output", is_flag=True, default=False,
              help="Output results in JSON format.")
@click.option("--yaml", "yaml_output", is_flag=True, default=False,
              help="Output results in YAML format (--json wins if both are given).")
@click.option("--ignore", "ignore", multiple=True, metavar="PATTERN",
              help="Ignore files whose path or name matches this glob. Repeatable.")
@click.option("-o", "--output", "output_path", default=None, metavar="FILE",
              help="Write the report to FILE instead of stdout.")
@click.option("--git", "git", type=click.BOOL, is_flag=False, flag_value="true",
              default=None, metavar="[BOOLEAN]",
              help="Only lint files tracked by git. Without this option, tracked "
                   "files are used only when DIR is a git repository; "
                   "--git=false lints every file.")
@click.option("--verbose", is_flag=True, default=False,
              help="Enable verbose logging.")
@click.version_option(__version__, prog_name="clean")
@_handle_errors
def cli(dirs: tuple[str, ...], json_output: bool, yaml_output: bool,
        ignore: tuple[str, ...], output_path: str | None, git: bool | None,
        verbose: bool) -> None:
    """Lint text files under DIR (default: current directory) for trailing
    whitespace, missing final newline, CRLF line endings and multiple blank
    lines at end of file.
    """
    from clean_lint.config import build
    from clean_lint.reports import EXIT_OK, render
    from clean_lint.scanner import scan

    _configure_logging(verbose)

    config = build(
        dirs=dirs,
        ignore=ignore,
        json=json_output,
        yaml=yaml_output,
        output=output_path,
        git=git,
    )

    issues = scan(config)
    text, status = render(issues, config.output_format)
    _emit(text, config.output)

    if status != EXIT_OK:
        click.echo(f"{len(issues)} issue(s) found.", err=True)
        sys.exit(status)
