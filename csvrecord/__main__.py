"""Allow running as ``python -m csvrecord``."""

from csvrecord.cli.main import app

app()
