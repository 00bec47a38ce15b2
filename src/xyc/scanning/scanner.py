"""Line scanner — counts lines, characters, comments and blanks per file.

Type-specific behavior is driven entirely by a FileTypeConfig instance
(from filetypes.py).
"""

from pathlib import Path
from typing import Iterable, Optional, Union

from ..exceptions import FileReadError
from ..logging_config import get_logger
from .filetypes import FileTypeConfig, accepts, detect_file_type
from .models import FileRecord, LineCounts

logger = get_logger(__name__)


# Unicode White_Space property. U+001C..U+001F are not whitespace.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def split_lines(content: str) -> list[str]:
    """Split at ``\\n`` boundaries, dropping the terminator and a trailing ``\\r``.

    A final newline does not start an extra empty line, and empty content
    has no lines at all. Other Unicode line breaks are ordinary characters.
    """
    if not content:
        return []
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def count_lines(content: str, config: FileTypeConfig) -> LineCounts:
    """Classify every line of ``content`` as blank, comment, or code."""
    lines = split_lines(content)
    comments = 0
    blanks = 0

    for line in lines:
        trimmed = line.strip(WHITESPACE)
        if not trimmed:
            blanks += 1
        elif config.is_comment(trimmed):
            comments += 1

    return LineCounts(lines=len(lines), comments=comments, blanks=blanks)


def read_text(filepath: Union[str, Path]) -> str:
    """Read a whole file as strict UTF-8 without newline translation."""
    try:
        with open(filepath, encoding="utf-8", newline="") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileReadError(filepath, f"invalid UTF-8 at byte {e.start}")
    except OSError as e:
        raise FileReadError(filepath, e.strerror or str(e))


def scan_file(filepath: Union[str, Path], type_filter: str = "all") -> Optional[FileRecord]:
    """
    Scan one file.

    Args:
        filepath: File to scan
        type_filter: One of "xml", "yang", "all"

    Returns:
        The file's record, or None when its extension is unsupported or
        excluded by the filter

    Raises:
        FileReadError: If a matching file cannot be read
    """
    config = detect_file_type(filepath)
    if config is None or not accepts(type_filter, config.file_type):
        return None

    content = read_text(filepath)
    counts = count_lines(content, config)

    record = FileRecord(
        path=str(filepath),
        file_type=config.file_type,
        lines=counts.lines,
        characters=len(content),
        comments=counts.comments,
        blanks=counts.blanks,
    )
    logger.debug(
        f"Scanned {record.path}: {record.lines} lines, "
        f"{record.comments} comments, {record.blanks} blanks"
    )
    return record


def scan_files(paths: Iterable[Union[str, Path]], type_filter: str = "all") -> list[FileRecord]:
    """Scan ``paths`` in order, keeping records for matching files.

    The first unreadable file aborts the whole scan.
    """
    records = []
    skipped = 0
    for filepath in paths:
        record = scan_file(filepath, type_filter)
        if record is None:
            skipped += 1
            continue
        records.append(record)

    logger.info(f"Scan complete: {len(records)} counted, {skipped} skipped")
    return records
