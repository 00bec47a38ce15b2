"""Rich terminal formatter for xyc."""

from typing import Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from ..aggregation import AggregateRecord, summarize
from ..scanning.models import FileRecord
from .base import BaseFormatter

TYPE_STYLES = {
    "XML": "bright_yellow",
    "YANG": "bright_cyan",
}

NO_FILES_MESSAGE = "No matching files found"


def _type_label(name: str) -> str:
    style = TYPE_STYLES.get(name, "white")
    return f"[{style}]{name}[/{style}]"


class RichFormatter(BaseFormatter):
    """Colored tables: optional per-file listing, then the per-type summary."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, records: Sequence[FileRecord], detailed: bool = False) -> None:
        if not records:
            self.console.print(f"[bright_yellow]{NO_FILES_MESSAGE}[/bright_yellow]")
            return

        if detailed:
            self.console.print()
            self.console.print(self._file_table(records))

        self.console.print()
        self.console.print(self._summary_table(records))

    def format(self, records: Sequence[FileRecord], detailed: bool = False) -> str:
        with self.console.capture() as capture:
            self.render(records, detailed)
        return capture.get()

    # -- private helpers --

    def _file_table(self, records: Sequence[FileRecord]) -> Table:
        table = Table(
            title="[bold bright_green]Detailed File List[/bold bright_green]",
            title_justify="left",
            box=box.HEAVY_HEAD,
            border_style="bright_blue",
            header_style="bold bright_white",
        )
        table.add_column("File Path", style="bright_white", overflow="fold")
        table.add_column("Type")
        table.add_column("Lines", justify="right", style="bright_magenta")
        table.add_column("Characters", justify="right", style="bright_cyan")
        table.add_column("Comments", justify="right", style="bright_yellow")
        table.add_column("Blanks", justify="right", style="bright_blue")

        for record in records:
            table.add_row(
                Text(record.path),
                _type_label(record.file_type.value),
                str(record.lines),
                str(record.characters),
                str(record.comments),
                str(record.blanks),
            )
        return table

    def _summary_table(self, records: Sequence[FileRecord]) -> Table:
        summary = summarize(records)

        table = Table(
            title="[bold bright_green]Summary[/bold bright_green]",
            title_justify="left",
            box=box.HEAVY_HEAD,
            border_style="bright_blue",
            header_style="bold bright_white",
        )
        table.add_column("Language")
        table.add_column("Files", justify="right", style="bright_white")
        table.add_column("Lines", justify="right", style="bright_white")
        table.add_column("Characters", justify="right", style="bright_cyan")
        table.add_column("Comments", justify="right", style="bright_yellow")
        table.add_column("Blanks", justify="right", style="bright_blue")

        for row in summary.rows:
            table.add_row(_type_label(row.label), *self._counts(row))

        table.add_section()
        table.add_row(
            f"[bold bright_white]{summary.total.label}[/bold bright_white]",
            *self._counts(summary.total),
            style="bold",
        )
        return table

    @staticmethod
    def _counts(row: AggregateRecord) -> list[str]:
        return [
            str(row.files),
            str(row.lines),
            str(row.characters),
            str(row.comments),
            str(row.blanks),
        ]
