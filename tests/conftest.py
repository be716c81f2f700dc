from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from spawnlog import factory
from spawnlog.config import CHILD_PREFIX_ENV, CONFIG_PATH_ENV, LEVEL_ENV, SUBDIRECTORY_ENV, reset_config
from spawnlog.utils.log import close_file_logger, open_file_logger


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from default config and release file handles afterwards."""

    opened: list[logging.Logger] = []

    def recording_open(path: Path, **kwargs) -> logging.Logger:
        logger = open_file_logger(path, **kwargs)
        opened.append(logger)
        return logger

    for env in (CONFIG_PATH_ENV, CHILD_PREFIX_ENV, SUBDIRECTORY_ENV, LEVEL_ENV):
        monkeypatch.delenv(env, raising=False)
    monkeypatch.setattr(factory, "open_file_logger", recording_open)
    reset_config()
    yield
    for logger in opened:
        close_file_logger(logger)
    reset_config()
