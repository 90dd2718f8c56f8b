from pathlib import Path

import pytest


@pytest.fixture()
def sample_file(tmp_path: Path) -> Path:
    """File with lines hello / world / HELLO."""
    path = tmp_path / "sample.txt"
    path.write_text("hello\nworld\nHELLO\n")
    return path
