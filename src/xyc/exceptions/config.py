"""Configuration exceptions: input paths and settings."""

from pathlib import Path
from typing import Any, Union

from .base import XycError


class ConfigurationError(XycError):
    """Base class for configuration-related errors."""

    pass


class PathNotFoundError(ConfigurationError):
    """Raised when the input path is neither a file nor a directory."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(f"Path does not exist or is not accessible: {path}")
        self.path = path


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
