"""Per-type aggregation of file records."""

from dataclasses import dataclass, field
from typing import Iterable

from .scanning.models import FileRecord

TOTAL_LABEL = "Total"


@dataclass
class AggregateRecord:
    """Summed counts for one group of files."""

    label: str
    files: int = 0
    lines: int = 0
    characters: int = 0
    comments: int = 0
    blanks: int = 0

    def add(self, record: FileRecord) -> None:
        self.files += 1
        self.lines += record.lines
        self.characters += record.characters
        self.comments += record.comments
        self.blanks += record.blanks

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "files": self.files,
            "lines": self.lines,
            "characters": self.characters,
            "comments": self.comments,
            "blanks": self.blanks,
        }


@dataclass
class Summary:
    """Type rows sorted by type name, plus the grand total."""

    rows: list[AggregateRecord] = field(default_factory=list)
    total: AggregateRecord = field(default_factory=lambda: AggregateRecord(TOTAL_LABEL))


def summarize(records: Iterable[FileRecord]) -> Summary:
    """Group records by file type and sum their counts.

    Rows are sorted by type name explicitly; insertion order of the grouping
    dict carries no meaning.
    """
    groups: dict[str, AggregateRecord] = {}
    total = AggregateRecord(TOTAL_LABEL)

    for record in records:
        name = record.file_type.value
        if name not in groups:
            groups[name] = AggregateRecord(name)
        groups[name].add(record)
        total.add(record)

    rows = [groups[name] for name in sorted(groups)]
    return Summary(rows=rows, total=total)
