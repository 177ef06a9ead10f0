"""Allow ``python -m strext``."""

from strext.cli import cli

cli()
