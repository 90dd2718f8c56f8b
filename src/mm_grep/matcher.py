"""Pattern compilation and per-line matching."""

import re
from dataclasses import dataclass

from .errors import PatternCompileError


@dataclass(frozen=True, slots=True)
class Pattern:
    """A compiled regular expression, reusable across lines and files."""

    text: str
    case_insensitive: bool
    regex: re.Pattern[str]

    def matches(self, line: str) -> bool:
        """Return True if the pattern occurs anywhere in the line."""
        return self.regex.search(line) is not None


def compile_pattern(text: str, *, case_insensitive: bool = False) -> Pattern:
    """Compile ``text`` with Python ``re`` syntax.

    Raises:
        PatternCompileError: If the pattern is malformed.

    """
    flags = re.IGNORECASE if case_insensitive else 0
    try:
        regex = re.compile(text, flags)
    except re.error as e:
        raise PatternCompileError(text, str(e)) from e
    return Pattern(text=text, case_insensitive=case_insensitive, regex=regex)
