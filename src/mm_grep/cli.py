"""Command-line entry point: ``mm-grep [flags] REGEX FILE...``."""

import logging
import sys
from enum import StrEnum
from typing import Annotated

import typer

from .app import GrepTyper
from .driver import run
from .errors import OutputWriteError, PatternCompileError
from .options import InvocationOptions
from .output import fatal

logger = logging.getLogger(__name__)

app = GrepTyper(package_name="mm-grep", help="Print lines of FILE(s) that match REGEX.")


class LogLevel(StrEnum):
    """Diagnostic verbosity on stderr."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def configure_logging(level: LogLevel) -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)
    logging.getLogger("mm_grep").setLevel(level.upper())


@app.command()
def main(
    pattern: Annotated[str, typer.Argument(metavar="REGEX", help="Regular expression (Python re syntax).")],
    files: Annotated[list[str], typer.Argument(metavar="FILE...", help="Files to search, in order, named as typed.")],
    show_header: Annotated[bool, typer.Option("--show-header", "-H", help="Prefix each line with its file name.")] = False,
    no_header: Annotated[
        bool, typer.Option("--no-header", "-h", help="Never prefix file names, even with several files.")
    ] = False,
    insensitive: Annotated[bool, typer.Option("--insensitive", "-i", help="Case-insensitive matching.")] = False,
    invert_match: Annotated[bool, typer.Option("--invert-match", "-v", help="Show lines that do not match.")] = False,
    show_line_numbers: Annotated[
        bool, typer.Option("--show-line-numbers", "-n", help="Prefix each line with its 1-based line number.")
    ] = False,
    count_matching_lines: Annotated[
        bool, typer.Option("--count-matching-lines", "-c", help="Print only a count of matching lines per file.")
    ] = False,
    log_level: Annotated[
        LogLevel, typer.Option("--log-level", envvar="MM_GREP_LOG", case_sensitive=False, help="Log verbosity on stderr.")
    ] = LogLevel.WARNING,
) -> None:
    """Print lines of FILE(s) that match REGEX."""
    configure_logging(log_level)
    options = InvocationOptions(
        pattern=pattern,
        files=tuple(files),
        show_header=show_header,
        no_header=no_header,
        insensitive=insensitive,
        invert_match=invert_match,
        show_line_numbers=show_line_numbers,
        count_only=count_matching_lines,
    )
    logger.info("regex = %s", options.pattern)
    logger.info("files = %s", ", ".join(options.files))

    try:
        exit_code = run(options)
    except (PatternCompileError, OutputWriteError) as e:
        fatal(str(e))
    if exit_code:
        raise typer.Exit(exit_code)


if __name__ == "__main__":
    app()
