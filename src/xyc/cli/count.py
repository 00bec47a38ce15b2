"""Counting command: resolve, scan, report."""

import logging
from pathlib import Path
from typing import Optional

import click
import typer
from rich.markup import escape

from ..api import analyze
from ..config import OUTPUT_FORMATS, TYPE_FILTERS
from ..exceptions import XycError
from ..formatters import RichFormatter, get_formatter
from ..logging_config import setup_logging
from . import app
from ._common import console, err_console, resolve_config


@app.command()
def main(
    path: Path = typer.Option(
        Path("."),
        "--path",
        "-p",
        help="File or directory to analyze",
        show_default=True,
    ),
    recursive: bool = typer.Option(
        False,
        "--recursive",
        "-r",
        help="Descend into subdirectories",
    ),
    detailed: bool = typer.Option(
        False,
        "--detailed",
        "-d",
        help="List every file in addition to the summary",
    ),
    file_type: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        help="File types to count: xml | yang | all  [default: all]",
        click_type=click.Choice(list(TYPE_FILTERS), case_sensitive=False),
    ),
    output_format: Optional[str] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: rich | json | csv  [default: rich]",
        click_type=click.Choice(list(OUTPUT_FORMATS), case_sensitive=False),
    ),
    follow_symlinks: bool = typer.Option(
        False,
        "--follow-symlinks",
        help="Follow symbolic links to files and directories",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log progress to stderr",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Count lines, characters, comments and blank lines in XML and YANG files.

    [bold cyan]Examples:[/bold cyan]

      xyc

      xyc -p models/ -r -d

      xyc -p ietf-interfaces.yang

      xyc -r --type yang --format json
    """
    from .. import __version__

    if version:
        console.print(f"[bold cyan]xyc[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit(0)

    logger = setup_logging("verbose" if verbose else "normal")

    try:
        settings = resolve_config(
            config=config,
            recursive=recursive,
            detailed=detailed,
            file_type=file_type,
            output_format=output_format,
            follow_symlinks=follow_symlinks,
            verbose=verbose,
            quiet=quiet,
        )

        logger = setup_logging(settings.verbosity)

        records = analyze(path, config=settings)

        if settings.output_format == "rich":
            formatter = RichFormatter(console=console)
        else:
            formatter = get_formatter(settings.output_format)
        formatter.render(records, detailed=settings.detailed)

    except XycError as e:
        logger.debug(f"{e.__class__.__name__}: {e}")
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        err_console.print(f"[red]Unexpected error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        if logger.isEnabledFor(logging.DEBUG):
            err_console.print_exception()
        raise typer.Exit(1)
