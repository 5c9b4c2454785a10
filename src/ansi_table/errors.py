"""Exceptions raised by ansi-table."""

from pathlib import Path


class AnsiTableError(Exception):
    """Base class for all ansi-table errors."""


class ConfigError(AnsiTableError):
    """
    Invalid or unreadable configuration.

    `source` names where the bad value came from: a file path or an
    environment variable.
    """

    def __init__(self, message: str, source: str | Path | None = None):
        self.source = source
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)
