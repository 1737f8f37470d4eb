"""Commands: list and show domain components."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vnext_template.commands._base import VntCommand
from vnext_template.domain.types import available_types
from vnext_template.services.domain import DomainService

if TYPE_CHECKING:
    from vnext_template.commands._context import AppContext

_TYPE_CHOICE = click.Choice(available_types(), case_sensitive=False)


@click.command(
    "list",
    cls=VntCommand,
    examples="""\
  vnext-template list workflows
  vnext-template --json list schemas
  vnext-template -q list tasks""",
)
@click.argument("component_type", type=_TYPE_CHOICE)
@click.pass_obj
def list_cmd(app: AppContext, component_type: str) -> None:
    """List component names of COMPONENT_TYPE in the active domain."""
    svc = app.service(DomainService)
    app.run("list", lambda: svc.list_components(component_type.lower()))


@click.command(
    cls=VntCommand,
    examples="""\
  vnext-template show workflows account-opening
  vnext-template --json show schemas customer""",
)
@click.argument("component_type", type=_TYPE_CHOICE)
@click.argument("name")
@click.pass_obj
def show(app: AppContext, component_type: str, name: str) -> None:
    """Print the JSON document NAME of COMPONENT_TYPE."""
    svc = app.service(DomainService)
    app.run("show", lambda: svc.show_component(component_type.lower(), name))
