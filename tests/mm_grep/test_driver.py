"""Tests for running a search over several files."""

import io
from pathlib import Path

import pytest

from mm_grep.driver import header_shown, run
from mm_grep.errors import OutputWriteError, PatternCompileError
from mm_grep.options import InvocationOptions
from mm_grep.output import LineSink


class BrokenStream(io.StringIO):
    """Stream that rejects every write like a closed pipe."""

    def write(self, s: str) -> int:
        raise BrokenPipeError(32, "Broken pipe")


def _names(*paths: Path) -> tuple[str, ...]:
    return tuple(str(p) for p in paths)


def _run(**kwargs: object) -> tuple[int, list[str]]:
    stream = io.StringIO()
    exit_code = run(InvocationOptions(**kwargs), LineSink(stream))  # type: ignore[arg-type]
    return exit_code, stream.getvalue().splitlines()


@pytest.fixture()
def second_file(tmp_path: Path) -> Path:
    """Another file with one matching line."""
    path = tmp_path / "second.txt"
    path.write_text("say hello\nbye\n")
    return path


class TestHeaderShown:
    """Tests for header_shown."""

    def test_single_file(self, sample_file: Path) -> None:
        """One file, no flag: no header."""
        assert not header_shown(InvocationOptions(pattern="x", files=_names(sample_file)))

    def test_explicit_flag(self, sample_file: Path) -> None:
        """Flag turns headers on for a single file."""
        assert header_shown(InvocationOptions(pattern="x", files=_names(sample_file), show_header=True))

    def test_several_files(self, sample_file: Path, second_file: Path) -> None:
        """More than one file turns headers on."""
        assert header_shown(InvocationOptions(pattern="x", files=_names(sample_file, second_file)))


class TestRun:
    """Tests for run."""

    def test_single_file(self, sample_file: Path) -> None:
        """Matching lines only, no prefix, exit 0."""
        exit_code, lines = _run(pattern="hello", files=_names(sample_file))
        assert exit_code == 0
        assert lines == ["hello"]

    def test_no_matches_exits_zero(self, sample_file: Path) -> None:
        """Finding nothing is not an error."""
        exit_code, lines = _run(pattern="absent", files=_names(sample_file))
        assert exit_code == 0
        assert lines == []

    def test_two_files_get_headers(self, sample_file: Path, second_file: Path) -> None:
        """Every line is prefixed with its file name when two files are given."""
        _, lines = _run(pattern="hello", files=_names(sample_file, second_file))
        assert lines == [f"{sample_file}:hello", f"{second_file}:say hello"]

    def test_two_files_no_header(self, sample_file: Path, second_file: Path) -> None:
        """--no-header suppresses the automatic header."""
        _, lines = _run(pattern="hello", files=_names(sample_file, second_file), no_header=True)
        assert lines == ["hello", "say hello"]

    def test_files_in_given_order(self, sample_file: Path, second_file: Path) -> None:
        """Files are searched in argument order, duplicates included."""
        _, lines = _run(pattern="hello", files=_names(second_file, sample_file, second_file), count_only=True)
        assert lines == [f"{second_file}:1", f"{sample_file}:1", f"{second_file}:1"]

    def test_count_one_line_per_file(self, sample_file: Path, second_file: Path) -> None:
        """Count mode writes exactly one line per file."""
        _, lines = _run(pattern="hello", files=_names(sample_file, second_file), count_only=True, insensitive=True)
        assert lines == [f"{sample_file}:2", f"{second_file}:1"]

    def test_idempotent(self, sample_file: Path, second_file: Path) -> None:
        """Two runs with the same inputs produce identical output."""
        kwargs = {"pattern": "l+", "files": _names(sample_file, second_file), "show_line_numbers": True, "invert_match": True}
        assert _run(**kwargs) == _run(**kwargs)

    def test_missing_file_continues(
        self, tmp_path: Path, sample_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A missing file is reported on stderr, later files are still searched, exit is 1."""
        missing = tmp_path / "missing.txt"
        exit_code, lines = _run(pattern="hello", files=_names(missing, sample_file))
        assert exit_code == 1
        assert lines == [f"{sample_file}:hello"]
        err = capsys.readouterr().err
        assert str(missing) in err
        assert err.startswith("mm-grep: ")

    def test_bad_pattern_before_any_io(self, tmp_path: Path) -> None:
        """Pattern errors are raised even when no file exists."""
        with pytest.raises(PatternCompileError):
            _run(pattern="(", files=_names(tmp_path / "missing.txt"))

    def test_output_error_is_fatal(self, sample_file: Path) -> None:
        """A failed write stops the run."""
        options = InvocationOptions(pattern="hello", files=_names(sample_file))
        with pytest.raises(OutputWriteError):
            run(options, LineSink(BrokenStream()))
