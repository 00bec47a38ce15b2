"""
xyc - line statistics for XML and YANG files

Counts lines, characters, comment lines and blank lines per file and per
type across a file or directory tree.
"""

__version__ = "1.0.0"

from .aggregation import AggregateRecord, Summary, summarize
from .api import analyze
from .config import CountConfig, load_config
from .scanning import FileRecord, FileType, scan_file

__all__ = [
    "analyze",  # Main entry point
    "scan_file",
    "summarize",
    "FileRecord",
    "FileType",
    "AggregateRecord",
    "Summary",
    "CountConfig",
    "load_config",
]
