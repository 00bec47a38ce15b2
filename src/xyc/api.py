"""Public API for xyc.

Example:
    >>> from xyc import analyze
    >>>
    >>> records = analyze("models/", recursive=True, file_type="yang")
    >>> sum(r.lines for r in records)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from .config import CountConfig, load_config
from .logging_config import get_logger
from .scanning import FileRecord, resolve_paths, scan_files

logger = get_logger(__name__)


def analyze(
    path: Union[str, Path] = ".",
    config: Optional[CountConfig] = None,
    **overrides,
) -> list[FileRecord]:
    """Count lines of every matching file under ``path``.

    Args:
        path: File or directory to analyze
        config: Pre-built configuration; built from ``overrides`` when None
        **overrides: CountConfig fields (recursive, file_type, ...)

    Returns:
        Records in traversal order

    Raises:
        PathNotFoundError: If path does not exist
        DirectoryReadError: If a non-recursive directory listing fails
        FileReadError: If any matching file cannot be read
    """
    if config is None:
        config = load_config(**overrides)

    logger.debug(
        f"Analyzing {path} (recursive={config.recursive}, type={config.file_type})"
    )
    paths = resolve_paths(path, recursive=config.recursive, follow_symlinks=config.follow_symlinks)
    return scan_files(paths, type_filter=config.file_type)
