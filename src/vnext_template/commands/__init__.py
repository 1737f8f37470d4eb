"""Subcommand modules for vnext-template.

Provides register_commands() which uses deferred imports to keep
``vnext-template --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from vnext_template.commands.components import list_cmd, show
    from vnext_template.commands.domain import config, domain, types
    from vnext_template.commands.validate import validate

    cli.add_command(domain)
    cli.add_command(types)
    cli.add_command(config)
    cli.add_command(list_cmd)
    cli.add_command(show)
    cli.add_command(validate)
