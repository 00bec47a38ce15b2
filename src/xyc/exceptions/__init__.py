"""Exception hierarchy for xyc."""

from .analysis import DirectoryReadError, FileReadError, ScanError
from .base import XycError
from .config import ConfigurationError, InvalidConfigError, PathNotFoundError

__all__ = [
    "XycError",
    "ScanError",
    "DirectoryReadError",
    "FileReadError",
    "ConfigurationError",
    "PathNotFoundError",
    "InvalidConfigError",
]
