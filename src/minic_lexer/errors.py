"""Errors raised around the scanner. ``scan`` itself never raises."""

from __future__ import annotations

from pathlib import Path


class LexerError(Exception):
    """Base error for the package."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class SourceReadError(LexerError):
    """The source file could not be opened or decoded."""

    def __init__(self, path: str | Path, *, cause: Exception | None = None):
        super().__init__(
            f"Error: Could not open the file '{path}'. Please check the path and filename.",
            cause=cause,
        )
        self.path = str(path)


class ConfigurationError(LexerError):
    """Invalid configuration value from the environment or the command line."""
