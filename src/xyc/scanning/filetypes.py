"""File type configurations — the single source of truth for comment markers.

Adding a new type:
  1. Add a FileType member in models.py.
  2. Add a FileTypeConfig entry to FILE_TYPES below.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .models import FileType


@dataclass(frozen=True)
class FileTypeConfig:
    """Everything the scanner needs to know about a file type."""

    file_type: FileType
    # Lower-case extensions without the leading dot.
    extensions: tuple[str, ...]

    # A trimmed line starting with any of these is a comment line.
    comment_prefixes: tuple[str, ...] = ()

    # A trimmed line containing any of these is a comment line.
    comment_markers: tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.file_type.value

    def is_comment(self, trimmed: str) -> bool:
        """Single-line heuristic; multi-line comment bodies are not tracked."""
        if self.comment_prefixes and trimmed.startswith(self.comment_prefixes):
            return True
        return any(marker in trimmed for marker in self.comment_markers)


XML = FileTypeConfig(
    file_type=FileType.XML,
    extensions=("xml",),
    comment_markers=("<!--",),
)

YANG = FileTypeConfig(
    file_type=FileType.YANG,
    extensions=("yang",),
    comment_prefixes=("//", "/*"),
)

FILE_TYPES: dict[FileType, FileTypeConfig] = {
    FileType.XML: XML,
    FileType.YANG: YANG,
}

_EXTENSION_MAP: dict[str, FileTypeConfig] = {
    ext: cfg for cfg in FILE_TYPES.values() for ext in cfg.extensions
}


def get_extension(path: Union[str, Path]) -> str:
    """Lower-cased extension without the dot, or "" when there is none.

    Dotfiles such as ``.xml`` have no extension, only a name.
    """
    return Path(path).suffix[1:].lower()


def detect_file_type(path: Union[str, Path]) -> Optional[FileTypeConfig]:
    """Return the config for the file's extension, or None when unsupported."""
    return _EXTENSION_MAP.get(get_extension(path))


def accepts(type_filter: str, file_type: FileType) -> bool:
    """Whether a type filter (xml, yang, all) admits the given type."""
    if type_filter == "all":
        return True
    return type_filter.upper() == file_type.value
