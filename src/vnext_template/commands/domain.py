"""Commands: domain discovery, available types, and domain config."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vnext_template.commands._base import VntCommand
from vnext_template.services.domain import DomainService

if TYPE_CHECKING:
    from vnext_template.commands._context import AppContext


@click.command(
    cls=VntCommand,
    examples="""\
  vnext-template domain
  vnext-template --json domain
  vnext-template -q domain
  vnext-template --root ../my-domain-repo domain""",
)
@click.pass_obj
def domain(app: AppContext) -> None:
    """Show the located domain directory and its component folders."""
    svc = app.service(DomainService)
    app.run("domain", svc.info)


@click.command(
    cls=VntCommand,
    examples="""\
  vnext-template types
  vnext-template --json types""",
)
@click.pass_obj
def types(app: AppContext) -> None:
    """List the component types a domain can carry."""
    app.emit(app.service(DomainService).types())


@click.command(
    cls=VntCommand,
    examples="""\
  vnext-template config
  vnext-template --json config""",
)
@click.pass_obj
def config(app: AppContext) -> None:
    """Print the parsed vnext.config.json, if any."""
    svc = app.service(DomainService)
    app.run("config", svc.config)
