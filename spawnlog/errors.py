"""Custom exceptions used across spawnlog."""


class SpawnLogError(Exception):
    """Base error for the package."""


class ArgumentError(SpawnLogError, ValueError):
    """Raised when a child logger is requested with an unusable name."""


class ConfigError(SpawnLogError):
    """Configuration related error."""
