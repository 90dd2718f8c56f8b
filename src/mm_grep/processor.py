"""Searching a single file."""

import logging
from enum import StrEnum

from mm_result import Result

from .errors import FileError
from .filter import FileResult, should_emit
from .matcher import Pattern
from .options import InvocationOptions
from .output import LineSink
from .prefix import OutputLine, format_count, format_prefix
from .source import LineSource

logger = logging.getLogger(__name__)


class FileState(StrEnum):
    """Lifecycle of one file search."""

    OPENING = "opening"
    READING = "reading"
    FINALIZING = "finalizing"
    DONE = "done"
    FAILED = "failed"


class FileProcessor:
    """Streams one file through the pattern and writes what should be shown.

    Lines are written as they are found, in file order. In count mode a single
    summary line is written after the last line instead. Lines written before
    a read failure stay written.
    """

    def __init__(self, path: str, pattern: Pattern, options: InvocationOptions, sink: LineSink, *, show_header: bool) -> None:
        self.path = path
        self.pattern = pattern
        self.options = options
        self.sink = sink
        self.show_header = show_header
        self.state = FileState.OPENING

    def run(self) -> Result[FileResult]:
        """Search the file.

        Returns ``Result.ok`` with the final counters, or ``Result.err`` whose
        context carries ``path`` and ``message`` when the file can't be opened
        or read. ``OutputWriteError`` is not caught.
        """
        try:
            file_result = self._search()
        except FileError as e:
            self.state = FileState.FAILED
            logger.debug("failed %s: %s", self.path, e)
            return Result.err((e.code, e), context={"path": self.path, "message": str(e)})
        return Result.ok(file_result)

    def _search(self) -> FileResult:
        file_result = FileResult()
        opts = self.options

        with LineSource(self.path) as lines:
            self.state = FileState.READING
            for line in lines:
                line_number = file_result.advance()
                is_match = self.pattern.matches(line)
                file_result.record(is_match, opts.invert_match)
                if should_emit(is_match, opts.invert_match, opts.count_only):
                    prefix = format_prefix(
                        self.path,
                        show_header=self.show_header,
                        suppress_header=opts.no_header,
                        show_line_numbers=opts.show_line_numbers,
                        line_number=line_number,
                    )
                    self.sink.write_line(OutputLine(prefix, line).render())

        self.state = FileState.FINALIZING
        if opts.count_only:
            self.sink.write_line(
                format_count(self.path, file_result.match_count, show_header=self.show_header, suppress_header=opts.no_header)
            )
        self.state = FileState.DONE
        logger.debug("searched %s: %d lines, %d matches", self.path, file_result.line_number, file_result.match_count)
        return file_result
