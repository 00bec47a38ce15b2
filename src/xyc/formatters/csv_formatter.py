"""CSV output formatter for xyc."""

import csv
import io
from typing import Sequence

from ..aggregation import summarize
from ..scanning.models import FileRecord
from .base import BaseFormatter

FILE_COLUMNS = ["path", "type", "lines", "characters", "comments", "blanks"]
SUMMARY_COLUMNS = ["label", "files", "lines", "characters", "comments", "blanks"]


class CsvFormatter(BaseFormatter):
    """CSV output holding a single table.

    Detailed mode emits one row per file and nothing else, since summary rows
    have different columns; without it the type rows and the Total row follow
    the header.
    """

    def render(self, records: Sequence[FileRecord], detailed: bool = False) -> None:
        print(self.format(records, detailed), end="")

    def format(self, records: Sequence[FileRecord], detailed: bool = False) -> str:
        output = io.StringIO()

        if detailed:
            writer = csv.DictWriter(output, fieldnames=FILE_COLUMNS, lineterminator="\n")
            writer.writeheader()
            for record in records:
                writer.writerow(record.to_dict())
            return output.getvalue()

        summary = summarize(records)
        writer = csv.DictWriter(output, fieldnames=SUMMARY_COLUMNS, lineterminator="\n")
        writer.writeheader()
        for row in summary.rows:
            writer.writerow(row.to_dict())
        if records:
            writer.writerow(summary.total.to_dict())
        return output.getvalue()
