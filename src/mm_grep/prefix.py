"""Filename and line-number prefixes for output lines."""

from typing import NamedTuple


class OutputLine(NamedTuple):
    """A line ready to be written: prefix plus the line as read."""

    prefix: str
    content: str

    def render(self) -> str:
        """Join prefix and content."""
        return f"{self.prefix}{self.content}"


def format_prefix(
    file_name: str, *, show_header: bool, suppress_header: bool, show_line_numbers: bool, line_number: int
) -> str:
    """Build the ``[filename:][linenumber:]`` prefix.

    ``suppress_header`` wins over ``show_header``.

    Examples:
        >>> format_prefix("a.txt", show_header=True, suppress_header=False, show_line_numbers=True, line_number=5)
        'a.txt:5:'

    """
    prefix = ""
    if show_header and not suppress_header:
        prefix += f"{file_name}:"
    if show_line_numbers:
        prefix += f"{line_number}:"
    return prefix


def format_count(file_name: str, count: int, *, show_header: bool, suppress_header: bool) -> str:
    """Build the count-mode summary line for one file."""
    if show_header and not suppress_header:
        return f"{file_name}:{count}"
    return str(count)
