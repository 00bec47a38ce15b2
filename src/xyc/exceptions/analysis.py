"""Scanning exceptions: directory listing and file reading."""

from pathlib import Path
from typing import Union

from .base import XycError


class ScanError(XycError):
    """Base class for errors raised while walking or reading files."""
    pass


class DirectoryReadError(ScanError):
    """Raised when a directory listing cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(
            f"Cannot read directory: {path}",
            details={"reason": reason},
        )
        self.path = path
        self.reason = reason


class FileReadError(ScanError):
    """Raised when a file cannot be read as UTF-8 text."""

    def __init__(self, filepath: Union[str, Path], reason: str):
        super().__init__(
            f"Cannot read file: {filepath}",
            details={"reason": reason},
        )
        self.filepath = filepath
        self.reason = reason
