"""Grep-style line search over files."""

from .app import GrepTyper as GrepTyper
from .driver import header_shown as header_shown
from .driver import run as run
from .errors import FileError as FileError
from .errors import FileOpenError as FileOpenError
from .errors import FileReadError as FileReadError
from .errors import GrepError as GrepError
from .errors import LineDecodeError as LineDecodeError
from .errors import OutputWriteError as OutputWriteError
from .errors import PatternCompileError as PatternCompileError
from .filter import FileResult as FileResult
from .filter import should_emit as should_emit
from .matcher import Pattern as Pattern
from .matcher import compile_pattern as compile_pattern
from .options import InvocationOptions as InvocationOptions
from .output import LineSink as LineSink
from .prefix import OutputLine as OutputLine
from .prefix import format_count as format_count
from .prefix import format_prefix as format_prefix
from .processor import FileProcessor as FileProcessor
from .processor import FileState as FileState
from .source import LineSource as LineSource
