"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, sample documents, and mock configurations
to ensure tests are isolated and safe.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))


POEM = """\
I'm nobody! Who are you?
Are you nobody, too?
Then there's a pair of us - don't tell!
They'd banish us, you know.

How dreary to be somebody!
How public, like a frog
To tell your name the livelong day
To an admiring bog!
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="minigrep_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_config(temp_dir: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json for testing.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    logs_dir = temp_dir / "output" / "logs"

    config_data = {
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "logs_directory": str(logs_dir),
            "max_file_size_mb": 1,
            "backup_count": 1
        },
        "search": {
            "ignore_case_env": "MINIGREP_IGNORE_CASE",
            "encoding": "utf-8"
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def poem_text() -> str:
    """Sample document used across search tests."""
    return POEM


@pytest.fixture
def poem_file(temp_dir: Path) -> Path:
    """
    Write the sample poem to a file.

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the created text file.
    """
    path = temp_dir / "poem.txt"
    path.write_text(POEM, encoding="utf-8")
    return path


@pytest.fixture
def reset_config_singleton(monkeypatch):
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance and is not
    affected by a MINIGREP_CONFIG variable in the environment.
    """
    from minigrep.core import config_loader
    monkeypatch.delenv(config_loader.CONFIG_PATH_ENV, raising=False)
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """
    Reset the logger initialization flag between tests.

    Handlers added during the test are removed again.
    """
    import logging
    from logging.handlers import RotatingFileHandler
    from minigrep.core import logger

    root_logger = logging.getLogger()
    original_handlers = list(root_logger.handlers)
    original_level = root_logger.level

    logger._logger_initialized = False
    yield
    logger._logger_initialized = False

    # exact type match leaves pytest's own capture handlers alone
    for handler in list(root_logger.handlers):
        if handler in original_handlers:
            continue
        if type(handler) in (logging.StreamHandler, RotatingFileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(original_level)
