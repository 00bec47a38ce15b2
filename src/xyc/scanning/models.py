"""Data models for the scanning layer."""

from dataclasses import dataclass
from enum import Enum


class FileType(str, Enum):
    """Detected file type. The value doubles as the display name."""

    XML = "XML"
    YANG = "YANG"


@dataclass(frozen=True)
class LineCounts:
    """Line classification of one piece of text."""

    lines: int = 0
    comments: int = 0
    blanks: int = 0


@dataclass
class FileRecord:
    """Raw observations for a single XML or YANG file"""

    path: str
    file_type: FileType
    lines: int
    characters: int
    comments: int
    blanks: int

    @property
    def code(self) -> int:
        """Lines that are neither blank nor comments."""
        return self.lines - self.comments - self.blanks

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "type": self.file_type.value,
            "lines": self.lines,
            "characters": self.characters,
            "comments": self.comments,
            "blanks": self.blanks,
        }
