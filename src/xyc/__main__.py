"""Allow ``python -m xyc``."""

from .cli import app

app()
