"""Allow ``python -m blogctl``."""

from blogctl.cli import cli

cli()
