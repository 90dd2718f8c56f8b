"""Lazy line reading from files."""

import logging
from collections.abc import Iterator
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Self

from .errors import FileOpenError, FileReadError, LineDecodeError

logger = logging.getLogger(__name__)


class LineSource:
    """Forward-only sequence of text lines read from a file.

    Use as a context manager: entering opens the file, exiting closes it.
    Lines are yielded without their ``\\n`` / ``\\r\\n`` terminator and are
    decoded as strict UTF-8. A line with invalid bytes stops the read with
    ``LineDecodeError`` once it is reached; lines before it have already been
    yielded.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._file: BinaryIO | None = None

    def __enter__(self) -> Self:
        try:
            self._file = Path(self.path).open("rb")
        except OSError as e:
            raise FileOpenError(self.path, e.strerror or str(e)) from e
        logger.debug("opened %s", self.path)
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc: BaseException | None, tb: TracebackType | None
    ) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __iter__(self) -> Iterator[str]:
        if self._file is None:
            raise RuntimeError("LineSource must be entered before iterating")
        line_number = 0
        lines = iter(self._file)
        while True:
            try:
                raw = next(lines)
            except StopIteration:
                return
            except OSError as e:
                raise FileReadError(self.path, e.strerror or str(e)) from e
            line_number += 1
            raw = raw.removesuffix(b"\n").removesuffix(b"\r")
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise LineDecodeError(self.path, line_number, "stream did not contain valid UTF-8") from e
            yield line
