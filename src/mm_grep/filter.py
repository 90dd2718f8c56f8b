"""Emit decisions and per-file match counting."""

from dataclasses import dataclass


def is_effective_match(is_match: bool, invert_match: bool) -> bool:
    """Return whether a line satisfies the match condition after inversion."""
    return is_match != invert_match


def should_emit(is_match: bool, invert_match: bool, count_only: bool) -> bool:
    """Decide whether the line itself is written.

    Count mode never writes lines, only the per-file total.
    """
    if count_only:
        return False
    return is_effective_match(is_match, invert_match)


@dataclass(slots=True)
class FileResult:
    """Progress through one file: lines read so far and lines that matched."""

    line_number: int = 0
    match_count: int = 0

    def advance(self) -> int:
        """Move to the next line and return its 1-based number."""
        self.line_number += 1
        return self.line_number

    def record(self, is_match: bool, invert_match: bool) -> None:
        """Count the current line if it matches after inversion."""
        if is_effective_match(is_match, invert_match):
            self.match_count += 1
