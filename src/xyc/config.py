"""Configuration loading for xyc.

Configuration sources are merged in priority order:
    1. Defaults (defined in CountConfig)
    2. Explicit config file (``--config``, TOML)
    3. CLI overrides (passed as kwargs)

No configuration file is discovered implicitly and no environment variables
are read, so a bare ``xyc`` run always starts from the defaults.

Example:
    >>> config = load_config(recursive=True, file_type="yang")
    >>> config.recursive
    True
    >>> config.file_type
    'yang'
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Literal, Optional

from .exceptions import InvalidConfigError

TypeFilter = Literal["xml", "yang", "all"]
OutputFormat = Literal["rich", "json", "csv"]
Verbosity = Literal["quiet", "normal", "verbose"]

TYPE_FILTERS: tuple[str, ...] = ("xml", "yang", "all")
OUTPUT_FORMATS: tuple[str, ...] = ("rich", "json", "csv")
VERBOSITIES: tuple[str, ...] = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class CountConfig:
    """Settings for a single counting run.

    Attributes:
        recursive: Descend into subdirectories of a directory argument
        detailed: Print the per-file table in addition to the summary
        file_type: Which file types are counted (xml, yang, all)
        output_format: Formatter used for the report (rich, json, csv)
        follow_symlinks: Follow symbolic links to files and directories
        verbosity: Logging verbosity level
    """

    recursive: bool = False
    detailed: bool = False
    file_type: TypeFilter = "all"
    output_format: OutputFormat = "rich"
    follow_symlinks: bool = False
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        for name in ("recursive", "detailed", "follow_symlinks"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise InvalidConfigError(name, value, "expected true or false")

        if self.file_type not in TYPE_FILTERS:
            raise InvalidConfigError(
                "file_type", self.file_type, f"expected one of {', '.join(TYPE_FILTERS)}"
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise InvalidConfigError(
                "output_format", self.output_format, f"expected one of {', '.join(OUTPUT_FORMATS)}"
            )
        if self.verbosity not in VERBOSITIES:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"expected one of {', '.join(VERBOSITIES)}"
            )


DEFAULT_CONFIG = CountConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> CountConfig:
    """Load configuration from an optional TOML file and CLI overrides.

    Overrides whose value is None are ignored, so CLI options left unset fall
    through to the file or the defaults.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated CountConfig instance

    Raises:
        InvalidConfigError: If the file is missing, unparsable, or holds
            unknown keys or invalid values
    """
    merged: dict = {}

    if config_file is not None:
        if not config_file.exists():
            raise InvalidConfigError("config", config_file, "file not found")
        try:
            merged.update(_load_toml_file(config_file))
        except InvalidConfigError:
            raise
        except Exception as e:
            raise InvalidConfigError("config", config_file, str(e))

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    known = {f.name for f in fields(CountConfig)}
    for key in merged:
        if key not in known:
            raise InvalidConfigError(key, merged[key], "unknown configuration key")

    return CountConfig(**merged)


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return the ``[xyc]`` table, or the whole file.

    Args:
        path: Path to TOML file

    Returns:
        Parsed settings as dict
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("xyc", data)
    if not isinstance(section, dict):
        raise InvalidConfigError("xyc", section, "expected a table")
    return section
