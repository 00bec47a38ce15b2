"""File resolution, type detection and line scanning."""

from .filetypes import FILE_TYPES, FileTypeConfig, accepts, detect_file_type, get_extension
from .models import FileRecord, FileType, LineCounts
from .resolver import resolve_paths
from .scanner import count_lines, read_text, scan_file, scan_files, split_lines

__all__ = [
    "FileType",
    "FileRecord",
    "LineCounts",
    "FileTypeConfig",
    "FILE_TYPES",
    "accepts",
    "detect_file_type",
    "get_extension",
    "resolve_paths",
    "count_lines",
    "read_text",
    "scan_file",
    "scan_files",
    "split_lines",
]
