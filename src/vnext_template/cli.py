"""Root CLI group for vnext-template with global flags and command registration."""

from __future__ import annotations

import click

from vnext_template import __version__
from vnext_template.commands import register_commands
from vnext_template.commands._context import AppContext
from vnext_template.config.settings import VntSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="vnext-template")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-C",
    "--root",
    default=None,
    type=click.Path(file_okay=False),
    help="Working root to scan for the domain (default: current directory).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    root: str | None,
) -> None:
    """vnext-template — locate a vNext domain and inspect its components."""
    ctx.ensure_object(dict)
    settings = VntSettings.from_cli(
        root=root,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
