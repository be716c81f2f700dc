"""Process-wide configuration for spawnlog.

The active :class:`SpawnConfig` lives in this module. It is read whenever a
root logger is constructed and whenever a child file name is derived, unless
the logger was built with an explicit ``config=``.

Lifecycle:

1. Defaults apply until someone calls :func:`configure` or :func:`load_config`.
2. :func:`configure` replaces individual fields; passing ``None`` unsets one.
3. :func:`reset_config` restores the defaults (test suites call this between
   tests).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path, PurePath
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

from .errors import ConfigError
from .levels import Severity

DEFAULT_LINE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONFIG_PATH_ENV = "SPAWNLOG_CONFIG"
CHILD_PREFIX_ENV = "SPAWNLOG_CHILD_PREFIX"
SUBDIRECTORY_ENV = "SPAWNLOG_SUBDIRECTORY"
LEVEL_ENV = "SPAWNLOG_LEVEL"

SECTION_KEY = "spawnlog"


@dataclass(frozen=True)
class SpawnConfig:
    """Settings shared by every logger constructed while they are active."""

    child_prefix: str | None = None
    subdirectory: str | None = None
    level: int = logging.DEBUG
    line_format: str = DEFAULT_LINE_FORMAT
    date_format: str = DEFAULT_DATE_FORMAT

    def __post_init__(self) -> None:
        object.__setattr__(self, "child_prefix", _optional_text(self.child_prefix))
        object.__setattr__(self, "subdirectory", _normalize_subdirectory(self.subdirectory))
        object.__setattr__(self, "level", _normalize_level(self.level))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "SpawnConfig":
        """Create a configuration instance from a mapping.

        Unknown keys raise :class:`ConfigError` so typos in config files do
        not go unnoticed.
        """

        if not data:
            return cls()
        _reject_unknown(data)
        return cls(**dict(data))


def get_config() -> SpawnConfig:
    """Return the active process-wide configuration."""

    return _CONFIG


def configure(**changes: Any) -> SpawnConfig:
    """Replace the named fields of the active configuration.

    Example::

        configure(child_prefix="worker", subdirectory="production")

    Returns:
        The configuration now in effect.
    """

    global _CONFIG
    _reject_unknown(changes)
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG


def reset_config() -> SpawnConfig:
    """Restore the default configuration."""

    global _CONFIG
    _CONFIG = _DEFAULTS
    return _CONFIG


def load_config(path: str | os.PathLike[str] | None = None, *, apply: bool = True) -> SpawnConfig:
    """Load configuration from a YAML file and environment overrides.

    Args:
        path: YAML file to read. Defaults to ``$SPAWNLOG_CONFIG``; when neither
            is given only the environment is consulted.
        apply: Install the result as the process-wide configuration.

    Returns:
        The loaded configuration.

    Raises:
        ConfigError: If the file is missing or malformed, or a value is invalid.
    """

    global _CONFIG
    load_dotenv(override=False)
    target = path or _read_env(CONFIG_PATH_ENV)
    data: dict[str, Any] = {}
    if target:
        data.update(_load_yaml(Path(target)))
    data.update(_env_overrides())
    loaded = SpawnConfig.from_mapping(data)
    if apply:
        _CONFIG = loaded
    return loaded


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigError(f"Config file {path} must contain a mapping")
    section = data.get(SECTION_KEY, data)
    if not isinstance(section, Mapping):
        raise ConfigError(f"'{SECTION_KEY}' section in {path} must be a mapping")
    return dict(section)


def _env_overrides() -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for key, env in (
        ("child_prefix", CHILD_PREFIX_ENV),
        ("subdirectory", SUBDIRECTORY_ENV),
        ("level", LEVEL_ENV),
    ):
        value = _read_env(env)
        if value:
            overrides[key] = value
    return overrides


def _read_env(key: str) -> str | None:
    value = os.getenv(key)
    if value is None:
        return None
    return value.strip()


def _reject_unknown(data: Mapping[str, Any]) -> None:
    known = {f.name for f in fields(SpawnConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigError(f"Unknown spawnlog config keys: {', '.join(unknown)}")


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_subdirectory(value: Any) -> str | None:
    text = _optional_text(value)
    if text is None:
        return None
    if PurePath(text).is_absolute():
        raise ConfigError(f"subdirectory must be relative, got: {text}")
    return text


def _normalize_level(value: Any) -> int:
    if isinstance(value, Severity):
        return value.level
    if isinstance(value, bool):
        raise ConfigError(f"Invalid log level: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    try:
        return Severity.parse(str(value)).level
    except ValueError as exc:
        raise ConfigError(f"Invalid log level: {value!r}") from exc


_DEFAULTS = SpawnConfig()
_CONFIG = _DEFAULTS


__all__ = [
    "SpawnConfig",
    "CONFIG_PATH_ENV",
    "CHILD_PREFIX_ENV",
    "SUBDIRECTORY_ENV",
    "LEVEL_ENV",
    "configure",
    "get_config",
    "load_config",
    "reset_config",
]
