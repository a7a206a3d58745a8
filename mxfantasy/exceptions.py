"""Custom exceptions for the fantasy league."""

from pathlib import Path


class FantasyLeagueError(Exception):
    """Base exception for fantasy league errors."""


class LoadError(FantasyLeagueError):
    """Race results could not be read."""

    def __init__(self, path: str | Path, cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(str(cause))


class InputFormatError(FantasyLeagueError):
    """Wildcard position entry was not a number between 5 and 20."""
