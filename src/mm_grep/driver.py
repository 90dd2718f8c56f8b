"""Running a search over all input files."""

import logging

from .filter import FileResult
from .matcher import compile_pattern
from .options import InvocationOptions
from .output import LineSink, warn
from .processor import FileProcessor

logger = logging.getLogger(__name__)


def header_shown(options: InvocationOptions) -> bool:
    """Filename prefixes are on when requested or when more than one file is searched."""
    return options.show_header or len(options.files) > 1


def run(options: InvocationOptions, sink: LineSink | None = None) -> int:
    """Search every file in the given order and return the process exit code.

    The pattern is compiled before any file is touched, so ``PatternCompileError``
    propagates with no output written. A file that can't be opened or read is
    reported on stderr and the remaining files are still searched.

    Returns:
        0 if every file was searched (matches or not), 1 if any file failed.

    Raises:
        PatternCompileError: If the pattern is malformed.
        OutputWriteError: If writing to the sink fails.

    """
    pattern = compile_pattern(options.pattern, case_insensitive=options.insensitive)
    sink = sink if sink is not None else LineSink()
    show_header = header_shown(options)

    results: list[FileResult] = []
    failed = 0
    for path in options.files:
        result = FileProcessor(path, pattern, options, sink, show_header=show_header).run()
        if result.is_err():
            failed += 1
            warn(str(result.context["message"]) if result.context else path)
            continue
        results.append(result.unwrap())
    sink.flush()

    logger.info(
        "searched %d file(s), %d failed, %d matching line(s)", len(options.files), failed, sum(r.match_count for r in results)
    )
    return 1 if failed else 0
