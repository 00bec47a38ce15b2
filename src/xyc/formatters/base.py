"""Base formatter interface for xyc output rendering."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..scanning.models import FileRecord


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, records: Sequence[FileRecord], detailed: bool = False) -> None:
        """Write the report to stdout."""

    @abstractmethod
    def format(self, records: Sequence[FileRecord], detailed: bool = False) -> str:
        """Return formatted string representation of the report."""
