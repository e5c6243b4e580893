"""Allow ``python -m resource_fetch``."""

from .cli import cli

cli()
