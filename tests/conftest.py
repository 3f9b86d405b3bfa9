"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from ddr_autoblob.infrastructure.logging import LoggerSetup


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[Path, None, None]:
    """
    Run each test from an empty working directory with logging torn down afterwards.

    Keeps a developer's .env file and AUTOBLOB_* variables out of the tests.
    """
    for name in (
        "AUTOBLOB_CONFIG_FILE",
        "AUTOBLOB_OUTPUT_FILE",
        "AUTOBLOB_OVERRIDE_FILE",
        "AUTOBLOB_LOG_DIR",
        "AUTOBLOB_VERBOSE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    LoggerSetup.reset()
    yield tmp_path
    LoggerSetup.reset()


@pytest.fixture
def j9_config_file(tmp_path: Path) -> Path:
    """Configuration listing j9.h and j9comp.h."""
    path = tmp_path / "j9.properties"
    path.write_text("# J9 headers\nheaders=j9.h,j9comp.h\n", encoding="utf-8")
    return path


@pytest.fixture
def empty_config_file(tmp_path: Path) -> Path:
    """Configuration with no headers key."""
    path = tmp_path / "empty.properties"
    path.write_text("# nothing to include\n", encoding="utf-8")
    return path
