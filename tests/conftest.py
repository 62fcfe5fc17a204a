# tests/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Iterator

import logging
import pytest

from cnhub.logger import BasicLogger

CNHUB_ENV_VARS = (
    "CNHUB_OWNER",
    "CNHUB_WORKSPACE_ROOT",
    "CNHUB_LOG_LEVEL",
    "CNHUB_LOG_TO_FILE",
    "CNHUB_LOG_DIR",
)


@pytest.fixture
def tmp_project_root(tmp_path: Path) -> Path:
    """Temporary directory used as a workspace root in tests."""
    return tmp_path


@pytest.fixture
def test_logger() -> logging.Logger:
    return BasicLogger("cnhub.test", log_to_file=False).get_logger()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """
    Remove every CNHUB_* variable so tests don't depend on the caller's shell.
    The CLI logger's handlers are dropped afterwards; they hold the stderr
    stream that was current when they were created.
    """
    for key in CNHUB_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    yield monkeypatch

    cli_logger = logging.getLogger("cnhub.cli")
    for handler in list(cli_logger.handlers):
        handler.close()
        cli_logger.removeHandler(handler)
