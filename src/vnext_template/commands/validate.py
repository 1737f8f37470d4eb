"""Command: structural validation of the domain template."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from vnext_template.commands._base import VntCommand

if TYPE_CHECKING:
    from vnext_template.commands._context import AppContext


@click.command(
    cls=VntCommand,
    examples="""\
  vnext-template validate
  vnext-template --json validate
  vnext-template --root ./checkout validate""",
)
@click.pass_obj
def validate(app: AppContext) -> None:
    """Validate domain structure and JSON syntax. Exits 1 on any issue."""
    from vnext_template.services.validate import ValidateService

    svc = app.service(ValidateService)
    app.run("validate", svc.validate)
