"""Severity levels understood by :class:`spawnlog.SpawningLogger`."""

from __future__ import annotations

import logging
from enum import Enum


class Severity(Enum):
    """Closed set of severity operations forwarded to the file logger."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL

    @property
    def level(self) -> int:
        return self.value

    @classmethod
    def parse(cls, value: "Severity | str") -> "Severity":
        """Return the member for ``value``.

        Accepts a member or a case-insensitive name. ``warning`` and
        ``critical`` map to ``WARN`` and ``FATAL``.

        Raises:
            ValueError: If ``value`` names no known severity.
        """

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            member = cls.__members__.get(key) or _ALIASES.get(key)
            if member is not None:
                return member
        raise ValueError(f"Unknown severity: {value!r}")


_ALIASES = {
    "WARNING": Severity.WARN,
    "CRITICAL": Severity.FATAL,
}


__all__ = ["Severity"]
