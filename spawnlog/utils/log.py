"""Logging helpers for the spawnlog package."""

# Module responsibilities:
# - Build the per-file stdlib loggers that spawned loggers delegate to.
# - Provide get_logger() for the package's own diagnostics, silent unless the host configures logging.

from __future__ import annotations

import logging
from pathlib import Path

ROOT_LOGGER_NAME = "spawnlog"
FILE_LOGGER_NAMESPACE = f"{ROOT_LOGGER_NAME}.files"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a package-scoped diagnostics logger."""

    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def open_file_logger(
    path: Path,
    *,
    level: int = logging.DEBUG,
    fmt: str = "%(asctime)s [%(levelname)s] %(message)s",
    datefmt: str = "%Y-%m-%d %H:%M:%S",
) -> logging.Logger:
    """Return a logger writing to ``path``.

    The file is created if absent and appended to otherwise. Every call
    builds a fresh logger with its own handler. The logger is not
    registered with the logging manager, so it belongs to the caller alone
    and is released with it.

    Args:
        path: Absolute path of the log file; its directory must exist.
        level: Threshold applied to both logger and handler.
        fmt: Line format passed to :class:`logging.Formatter`.
        datefmt: Timestamp format passed to :class:`logging.Formatter`.

    Returns:
        A non-propagating logger bound to ``path``.
    """

    logger = logging.Logger(f"{FILE_LOGGER_NAMESPACE}.{path.name}", level)
    logger.propagate = False

    file_handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(fmt=fmt, datefmt=datefmt))
    file_handler.setLevel(level)
    logger.addHandler(file_handler)
    return logger


def close_file_logger(logger: logging.Logger) -> None:
    """Detach and close every handler attached to ``logger``."""

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


__all__ = ["close_file_logger", "get_logger", "open_file_logger"]
