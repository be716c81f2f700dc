"""`spawnlog` exports a file logger that spawns child loggers into sibling files."""

from __future__ import annotations

from .config import SpawnConfig, configure, get_config, load_config, reset_config
from .errors import ArgumentError, ConfigError, SpawnLogError
from .factory import SpawningLogger
from .levels import Severity

__all__ = [
    "SpawningLogger",
    "SpawnConfig",
    "Severity",
    "configure",
    "get_config",
    "load_config",
    "reset_config",
    "ArgumentError",
    "ConfigError",
    "SpawnLogError",
]

__version__ = "0.1.0"
