"""Invocation options, validated with Pydantic."""

from pydantic import BaseModel, ConfigDict, Field


class InvocationOptions(BaseModel):
    """Everything one run needs: the pattern, the files and the output flags.

    Built once from the command line and never mutated. File names are kept
    exactly as given so headers and errors show what the user typed.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pattern: str
    files: tuple[str, ...] = Field(min_length=1)
    show_header: bool = False
    no_header: bool = False
    insensitive: bool = False
    invert_match: bool = False
    show_line_numbers: bool = False
    count_only: bool = False
