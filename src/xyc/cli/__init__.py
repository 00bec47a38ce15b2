"""CLI entry point — registers the counting command."""

import typer

app = typer.Typer(
    name="xyc",
    help="xyc - line statistics for XML and YANG files",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import the command to register it
from .count import main as _main  # noqa: F401, E402


def main() -> None:
    app()
