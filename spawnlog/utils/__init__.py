"""Filesystem and logging helpers used by :mod:`spawnlog`."""
