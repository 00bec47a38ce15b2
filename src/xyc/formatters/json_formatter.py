"""JSON output formatter for xyc."""

import json
from typing import Sequence

from ..aggregation import summarize
from ..scanning.models import FileRecord
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Machine-readable JSON: summary rows, total, and files when detailed."""

    def render(self, records: Sequence[FileRecord], detailed: bool = False) -> None:
        print(self.format(records, detailed))

    def format(self, records: Sequence[FileRecord], detailed: bool = False) -> str:
        summary = summarize(records)
        data = {
            "summary": [row.to_dict() for row in summary.rows],
            "total": summary.total.to_dict(),
        }
        if detailed:
            data["files"] = [r.to_dict() for r in records]
        return json.dumps(data, indent=2)
