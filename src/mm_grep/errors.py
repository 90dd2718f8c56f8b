"""Exceptions raised while searching files."""


class GrepError(Exception):
    """Base for all mm-grep errors."""

    code = "grep_error"


class PatternCompileError(GrepError):
    """The regular expression could not be compiled."""

    code = "pattern_compile_error"

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid pattern '{pattern}': {reason}")


class FileError(GrepError):
    """A single input file could not be searched."""

    code = "file_error"

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class FileOpenError(FileError):
    """The file is missing or not accessible."""

    code = "file_open_error"


class FileReadError(FileError):
    """The file was opened but reading it failed."""

    code = "file_read_error"


class LineDecodeError(FileError):
    """A line is not valid UTF-8."""

    code = "line_decode_error"

    def __init__(self, path: str, line_number: int, reason: str) -> None:
        self.line_number = line_number
        super().__init__(path, f"line {line_number}: {reason}")


class OutputWriteError(GrepError):
    """The output stream rejected a write."""

    code = "output_write_error"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"can't write output: {reason}")
