"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Builds services against the configured root and
emits results (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

import click

from vnext_template.output.formatters import OutputSettings, format_result
from vnext_template.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from vnext_template.config.settings import VntSettings
    from vnext_template.services.base import BaseService

S = TypeVar("S", bound="BaseService")


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: VntSettings) -> None:
        self.settings = settings

        from vnext_template.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    def service(self, service_cls: type[S]) -> S:
        """Instantiate a service bound to the configured working root."""
        return service_cls(self.settings.root)

    def run(self, op: str, action: Callable[[], ServiceResult]) -> None:
        """Run *action* and emit its result.

        A directory that cannot be listed is reported as an error result:
        ``ROOT_UNREADABLE`` for the working root itself, ``PATH_UNREADABLE``
        for anything beneath it.
        """
        try:
            result = action()
        except OSError as exc:
            result = ServiceResult(ok=False, op=op, error=self._read_error(exc))
        self.emit(result)

    def _read_error(self, exc: OSError) -> ServiceError:
        root = self.settings.root
        failed = Path(os.fsdecode(exc.filename)) if exc.filename is not None else root
        if failed == root:
            return ServiceError(
                code="ROOT_UNREADABLE",
                message=f"Cannot read working root {root}: {exc}",
                detail={"root": str(root)},
            )
        return ServiceError(
            code="PATH_UNREADABLE",
            message=f"Cannot read {failed}: {exc}",
            detail={"root": str(root), "path": str(failed)},
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
        # In JSON mode, warnings are already in the serialized payload.
        if not settings.json_output and not settings.quiet:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if not result.ok:
            raise SystemExit(1)
