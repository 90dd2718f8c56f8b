"""Output sinks: matched lines to stdout, diagnostics to stderr."""

# ruff: noqa: T201 -- output layer

import sys
from typing import NoReturn, TextIO

import typer
from rich.console import Console

from .errors import OutputWriteError

PROGRAM_NAME = "mm-grep"


class LineSink:
    """Writes newline-terminated lines to a text stream (stdout by default).

    The stream is looked up on each write when not given explicitly, so
    test runners that swap ``sys.stdout`` see the output.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        """The underlying stream."""
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, line: str) -> None:
        """Write one line.

        Raises:
            OutputWriteError: If the stream rejects the write (e.g. closed pipe).

        """
        try:
            self.stream.write(f"{line}\n")
        except OSError as e:
            raise OutputWriteError(e.strerror or str(e)) from e

    def flush(self) -> None:
        """Flush the underlying stream."""
        try:
            self.stream.flush()
        except OSError as e:
            raise OutputWriteError(e.strerror or str(e)) from e


def print_plain(*messages: object) -> None:
    """Print messages to stdout as plain text."""
    print(*messages)


def _stderr_console() -> Console:
    return Console(stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True)


def warn(message: str) -> None:
    """Report a non-fatal problem on stderr."""
    _stderr_console().print(f"{PROGRAM_NAME}: {message}")


def fatal(message: str) -> NoReturn:
    """Report an error on stderr and exit with code 1."""
    warn(message)
    raise typer.Exit(1)
