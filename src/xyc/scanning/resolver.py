"""Input path resolution: a single file, a directory, or a directory tree."""

import os
from pathlib import Path
from typing import Union

from ..exceptions import DirectoryReadError, PathNotFoundError
from ..logging_config import get_logger

logger = get_logger(__name__)


def resolve_paths(
    path: Union[str, Path], recursive: bool = False, follow_symlinks: bool = False
) -> list[str]:
    """
    Enumerate candidate files under ``path``.

    Directory entries are joined onto ``path`` exactly as given, so ``.``
    yields ``./a.xml``. Order follows the filesystem listing and is not sorted.

    Args:
        path: File or directory to analyze
        recursive: Descend into subdirectories
        follow_symlinks: Treat symbolic links as their targets

    Returns:
        Paths of regular files

    Raises:
        PathNotFoundError: If path is neither a file nor a directory
        DirectoryReadError: If a non-recursive listing fails
    """
    path = os.fspath(path)

    if os.path.isfile(path):
        return [path]
    if os.path.isdir(path):
        if recursive:
            return _walk(path, follow_symlinks)
        return _list_directory(path, follow_symlinks)
    raise PathNotFoundError(path)


def _list_directory(directory: str, follow_symlinks: bool) -> list[str]:
    files = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if entry.is_file(follow_symlinks=follow_symlinks):
                    files.append(os.path.join(directory, entry.name))
    except OSError as e:
        raise DirectoryReadError(directory, e.strerror or str(e))
    return files


def _walk(root: str, follow_symlinks: bool) -> list[str]:
    files = []

    def _skip(error: OSError) -> None:
        logger.debug(f"Skipped unreadable entry {error.filename}: {error.strerror}")

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_skip, followlinks=follow_symlinks):
        for name in filenames:
            filepath = os.path.join(dirpath, name)
            if not follow_symlinks and os.path.islink(filepath):
                continue
            # skips sockets, fifos and entries removed mid-walk
            if os.path.isfile(filepath):
                files.append(filepath)

    logger.debug(f"Walk of {root} found {len(files)} files")
    return files
