"""Pytest configuration and shared fixtures."""

import pytest
from pathlib import Path
from typing import Callable

from chkr.utils.logging import logger

# md5 of b"foo\n" and b"bar\n"
FOO_DIGEST = "d3b07384d113edec49eaa6238ad5ff00"
BAR_DIGEST = "c157a79031e1c40f85931829bc5fc552"

# Listed digest for bar.txt, deliberately wrong
BAR_LISTED_DIGEST = "4d93d51945b88325c213640ef59fc50a"
MISSING_LISTED_DIGEST = "ce5188defed222ca612b41580e0d5fe7"


@pytest.fixture
def fixture_dir(tmp_path: Path) -> Path:
    """Create a directory with two files and a manifest listing three."""
    directory = tmp_path / "fixtures"
    directory.mkdir()
    (directory / "foo.txt").write_bytes(b"foo\n")
    (directory / "bar.txt").write_bytes(b"bar\n")
    (directory / "checksum.txt").write_text(
        f"{FOO_DIGEST}  foo.txt\n"
        f"{BAR_LISTED_DIGEST}  bar.txt\n"
        f"{MISSING_LISTED_DIGEST}  file-does-not-exist\n",
        encoding="utf-8",
    )
    return directory


@pytest.fixture
def manifest_path(fixture_dir: Path) -> Path:
    """Path to the fixture manifest."""
    return fixture_dir / "checksum.txt"


@pytest.fixture
def write_manifest(fixture_dir: Path) -> Callable[..., Path]:
    """Return a helper that writes a manifest next to the fixture files."""

    def _write(content: str, name: str = "custom.md5") -> Path:
        path = fixture_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def reset_chkr_logger():
    """Detach handlers installed by setup_logging after each test."""
    yield
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()


# Markers for test categories
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (run the CLI end to end)"
    )
    config.addinivalue_line(
        "markers", "slow: marks tests as slow running"
    )
