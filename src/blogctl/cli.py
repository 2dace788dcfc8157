"""Entry point for the ``blogctl`` command.

Global flags pick the output mode and locate the blog. Everything below
the root group works on the :class:`AppContext` built here.
"""

from __future__ import annotations

from pathlib import Path

import click

from blogctl import __version__
from blogctl.commands import register_commands
from blogctl.commands._base import BlogGroup
from blogctl.commands._context import AppContext
from blogctl.config.settings import BlogSettings

_ROOT_EXAMPLES = """\
  blogctl list --category rust
  blogctl --json show posts/hello-world.md
  blogctl --root ~/blog check --errors-only
  blogctl -v export html build/"""


@click.group(cls=BlogGroup, invoke_without_command=True, examples=_ROOT_EXAMPLES)
@click.version_option(version=__version__, prog_name="blogctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and per-file timing.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Use this blogctl.toml.")
@click.option(
    "--root",
    "site_root",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Blog checkout to work on (default: where blogctl.toml is found).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    site_root: Path | None,
) -> None:
    """blogctl: front matter and Markdown tooling for a static blog."""
    ctx.obj = AppContext(
        BlogSettings.from_cli(
            config_path=config_path,
            site_root=site_root,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
