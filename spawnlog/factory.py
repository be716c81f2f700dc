"""
RESPONSIBILITIES
- Wrap a stdlib file logger and spawn named child loggers writing to sibling files.
- Cache children per parent so each child file is opened at most once.
PROCESS OVERVIEW
1. SpawningLogger(path) resolves the path, injects the configured subdirectory,
   creates the directory and binds a file logger.
2. spawn(name) derives <stem>_<child_prefix>_<name><ext> inside the same
   directory and returns the cached or newly built child.
3. self_and_spawn(name, severity, message) logs to this file and the child's.

Example::

    configure(child_prefix="worker", subdirectory="production")
    server = SpawningLogger("log/server.log")   # log/production/server.log
    worker = server.spawn("1")                  # log/production/server_worker_1.log
    server.self_and_spawn("1", "error", "server shutdown")
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping

from .config import SpawnConfig, get_config
from .levels import Severity
from .utils.log import close_file_logger, get_logger, open_file_logger
from .utils.paths import child_file_name, ensure_directory, resolve_log_path, validate_child_name

LOGGER = get_logger("factory")


class SpawningLogger:
    """A file logger able to spawn child loggers.

    Attributes:
        log_dir: Absolute directory holding this logger's file.
        file_name: Base name of the file, extension included.
        logger: The stdlib logger records are forwarded to.
    """

    def __init__(
        self,
        file_path: str | os.PathLike[str],
        config: SpawnConfig | None = None,
        *,
        _inject_subdirectory: bool = True,
    ) -> None:
        self._config = config
        settings = self.config
        subdirectory = settings.subdirectory if _inject_subdirectory else None
        log_dir, file_name = resolve_log_path(file_path, subdirectory)

        self.log_dir: Path = ensure_directory(log_dir)
        self.file_name: str = file_name
        self._children: Dict[str, SpawningLogger] = {}
        self._lock = threading.Lock()
        self.logger: logging.Logger = open_file_logger(
            self.path,
            level=settings.level,
            fmt=settings.line_format,
            datefmt=settings.date_format,
        )

    @property
    def config(self) -> SpawnConfig:
        """Explicit configuration, or the active process-wide one."""

        return self._config if self._config is not None else get_config()

    @property
    def path(self) -> Path:
        return self.log_dir / self.file_name

    @property
    def children(self) -> Mapping[str, "SpawningLogger"]:
        return MappingProxyType(self._children)

    def spawn(self, child_name: Any) -> "SpawningLogger":
        """Return the child logger for ``child_name``, creating it on first use.

        Raises:
            ArgumentError: If ``child_name`` is ``None`` or empty.
        """

        name = validate_child_name(child_name)
        with self._lock:
            child = self._children.get(name)
            if child is None:
                child = self._create_child(name)
                self._children[name] = child
        return child

    def self_and_spawn(self, child_name: Any, severity: Severity | str, message: str) -> None:
        """Log ``message`` here and in the child logger for ``child_name``."""

        level = Severity.parse(severity)
        self.log(level, message)
        self.spawn(child_name).log(level, message)

    def log(self, severity: Severity | str, message: str, *args: Any) -> None:
        self.logger.log(Severity.parse(severity).level, message, *args)

    def debug(self, message: str, *args: Any) -> None:
        self.logger.debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        self.logger.info(message, *args)

    def warn(self, message: str, *args: Any) -> None:
        self.logger.warning(message, *args)

    def error(self, message: str, *args: Any) -> None:
        self.logger.error(message, *args)

    def fatal(self, message: str, *args: Any) -> None:
        self.logger.critical(message, *args)

    def close(self) -> None:
        """Close the file handles of this logger and every spawned descendant."""

        with self._lock:
            children = list(self._children.values())
        for child in children:
            child.close()
        close_file_logger(self.logger)

    def _create_child(self, child_name: str) -> "SpawningLogger":
        file_name = child_file_name(self.file_name, child_name, self.config.child_prefix)
        LOGGER.debug("Spawning %s from %s", file_name, self.path)
        # children live next to their parent; the subdirectory was applied once at the root
        return type(self)(self.log_dir / file_name, self._config, _inject_subdirectory=False)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"


__all__ = ["SpawningLogger"]
