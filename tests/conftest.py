"""
Shared test fixtures and configuration.
"""

import shutil
from pathlib import Path

import pytest

from filegen import Generator, with_formatters


requires_gofmt = pytest.mark.skipif(
    shutil.which("gofmt") is None, reason="gofmt not installed",
)
requires_terraform = pytest.mark.skipif(
    shutil.which("terraform") is None, reason="terraform not installed",
)


class RecordingFormatter:
    """Fake formatter: records every path it is asked to format."""

    def __init__(self, fail: Exception | None = None):
        self.calls: list[Path] = []
        self.fail = fail

    def __call__(self, path: Path) -> None:
        self.calls.append(Path(path))
        if self.fail is not None:
            raise self.fail


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Return an existing, empty output directory."""
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def fake_formatter() -> RecordingFormatter:
    return RecordingFormatter()


@pytest.fixture
def offline_generator(fake_formatter: RecordingFormatter) -> Generator:
    """Generator whose .go/.tf formatters never shell out."""
    return Generator(with_formatters({".go": fake_formatter, ".tf": fake_formatter}))
