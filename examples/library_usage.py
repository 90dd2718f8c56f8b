"""Using mm-grep from Python: count matches per file into a list instead of stdout."""

import io
import sys

from mm_grep import InvocationOptions, LineSink, PatternCompileError, run


def main() -> None:
    """Count lines containing 'def' in the given files."""
    files = tuple(sys.argv[1:]) or (__file__,)
    buffer = io.StringIO()
    options = InvocationOptions(pattern=r"\bdef\b", files=files, count_only=True, show_header=True)
    try:
        exit_code = run(options, LineSink(buffer))
    except PatternCompileError as e:
        sys.exit(str(e))

    for line in buffer.getvalue().splitlines():
        name, _, count = line.rpartition(":")
        print(f"{count:>5}  {name}")  # noqa: T201
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
