"""Filesystem helpers for spawnlog log files."""

# Module responsibilities:
# - Resolve a caller-supplied file path into (log directory, file name), injecting the configured subdirectory.
# - Create log directories on demand.
# - Derive sibling file names for child loggers.

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

from ..errors import ArgumentError
from .log import get_logger

LOGGER = get_logger("paths")

CHILD_SEPARATOR = "_"


def resolve_log_path(
    file_path: str | os.PathLike[str], subdirectory: Optional[str] = None
) -> Tuple[Path, str]:
    """Split ``file_path`` into its log directory and base file name.

    Args:
        file_path: Absolute or relative path; ``~`` is expanded.
        subdirectory: Optional directory inserted below the file's parent.

    Returns:
        ``(log_dir, file_name)`` with ``log_dir`` absolute.
    """

    resolved = Path(file_path).expanduser().resolve()
    log_dir = resolved.parent
    if subdirectory:
        log_dir = log_dir / subdirectory
    return log_dir, resolved.name


def ensure_directory(directory: Path) -> Path:
    """Create ``directory`` and any missing ancestors."""

    if directory.is_dir():
        return directory
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        LOGGER.error("Could not create log directory %s", directory)
        raise
    LOGGER.debug("Created log directory %s", directory)
    return directory


def split_extension(file_name: str) -> Tuple[str, str]:
    """Return ``(stem, extension)``; the extension keeps its leading dot."""

    return os.path.splitext(file_name)


def validate_child_name(child_name: object) -> str:
    """Return ``child_name`` as text or raise :class:`ArgumentError`."""

    if child_name is None:
        raise ArgumentError("empty child_name")
    text = str(child_name)
    if not text:
        raise ArgumentError("empty child_name")
    return text


def child_file_name(file_name: str, child_name: str, child_prefix: Optional[str] = None) -> str:
    """Derive the file name of a child logger.

    ``server.log`` with prefix ``worker`` and child ``1`` becomes
    ``server_worker_1.log``; without a prefix it becomes ``server_1.log``.
    """

    stem, ext = split_extension(file_name)
    parts = [part for part in (stem, child_prefix, child_name) if part]
    return CHILD_SEPARATOR.join(parts) + ext


__all__ = [
    "CHILD_SEPARATOR",
    "child_file_name",
    "ensure_directory",
    "resolve_log_path",
    "split_extension",
    "validate_child_name",
]
