"""Shared CLI helpers."""

from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import CountConfig, load_config

console = Console()
err_console = Console(stderr=True)


def resolve_config(
    config: Optional[Path] = None,
    recursive: bool = False,
    detailed: bool = False,
    file_type: Optional[str] = None,
    output_format: Optional[str] = None,
    follow_symlinks: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> CountConfig:
    """Build configuration from CLI options.

    Flags only ever switch settings on, so an unset flag leaves the value
    from the config file in place.
    """
    overrides = {
        "file_type": file_type,
        "output_format": output_format,
    }
    if recursive:
        overrides["recursive"] = True
    if detailed:
        overrides["detailed"] = True
    if follow_symlinks:
        overrides["follow_symlinks"] = True
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)
