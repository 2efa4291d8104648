"""Errors raised by build-husky."""

from pathlib import Path


class HuskyError(Exception):
    """Base class for every failure that should abort the build step."""


class MetadataNotFound(HuskyError):
    """No git metadata directory was found for a start path."""

    def __init__(self, start: Path, detail: str = ""):
        self.start = start
        message = (
            f".git directory was not found in '{start}' or its parent directories"
        )
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)


class EnvironmentUnreadable(HuskyError):
    """The build output directory variable is missing or not text."""

    def __init__(self, var: str, reason: str):
        self.var = var
        super().__init__(f"Environment variable {var} {reason}")


class HuskyIOError(HuskyError):
    """A filesystem read or write failed."""

    def __init__(self, path: Path, error: OSError):
        self.path = path
        self.error = error
        super().__init__(f"IO error on {path}: {error}")


class ConfigError(HuskyError):
    """The [tool.build-husky] configuration could not be used."""
