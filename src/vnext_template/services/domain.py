"""DomainService — read-only views of the active domain for the CLI.

Wraps the locator, loader, and domain config reader in ServiceResult so
load failures surface as warnings instead of only going to the log.
"""

from __future__ import annotations

from vnext_template.config.discovery import load_domain_config
from vnext_template.domain.types import ComponentType, available_types
from vnext_template.infrastructure.filesystem import (
    ComponentScan,
    find_component_dirs,
    scan_components,
)
from vnext_template.services.base import BaseService
from vnext_template.services.result import ServiceError, ServiceResult


def _failure_warnings(scan: ComponentScan) -> list[str]:
    return [f"Could not load {f.path.name}: {f.reason}" for f in scan.failures]


class DomainService(BaseService):
    """Domain discovery and component listing."""

    def info(self) -> ServiceResult:
        """Report the located domain and which component directories it has."""
        domain = self._locate()
        directories = (
            find_component_dirs(self._domain_path(domain), fs=self._fs) if domain else []
        )
        config = load_domain_config(self._root, fs=self._fs)
        warnings = [] if domain else [f"No domain directory found under {self._root}"]
        return ServiceResult(
            ok=True,
            op="domain",
            data={
                "name": domain,
                "root": str(self._root),
                "directories": directories,
                "config_found": config is not None,
            },
            warnings=warnings,
        )

    def types(self) -> ServiceResult:
        return ServiceResult(ok=True, op="types", data={"types": available_types()})

    def config(self) -> ServiceResult:
        """Return the parsed ``vnext.config.json`` (None when absent or invalid)."""
        config = load_domain_config(self._root, fs=self._fs)
        return ServiceResult(
            ok=True,
            op="config",
            data={"config": config, "found": config is not None},
        )

    def _scan(self, kind: ComponentType) -> tuple[str | None, ComponentScan]:
        domain = self._locate()
        if domain is None:
            return None, ComponentScan()
        return domain, scan_components(self._domain_path(domain) / kind.directory, fs=self._fs)

    def list_components(self, component_type: ComponentType | str) -> ServiceResult:
        """List component names of one type, sorted."""
        kind = ComponentType(component_type)
        domain, scan = self._scan(kind)
        warnings = _failure_warnings(scan)
        if domain is None:
            warnings.append(f"No domain directory found under {self._root}")
        items = sorted(scan.components)
        return ServiceResult(
            ok=True,
            op="list",
            data={"type": kind.value, "domain": domain, "items": items, "count": len(items)},
            warnings=warnings,
        )

    def show_component(self, component_type: ComponentType | str, name: str) -> ServiceResult:
        """Return a single component document by name."""
        kind = ComponentType(component_type)
        domain, scan = self._scan(kind)
        if domain is None:
            return ServiceResult(
                ok=False,
                op="show",
                error=ServiceError(
                    code="NO_DOMAIN",
                    message=f"No domain directory found under {self._root}",
                ),
            )
        if name not in scan.components:
            return ServiceResult(
                ok=False,
                op="show",
                warnings=_failure_warnings(scan),
                error=ServiceError(
                    code="NOT_FOUND",
                    message=f"No {kind.value} component named {name!r}",
                    detail={"domain": domain, "available": sorted(scan.components)},
                ),
            )
        return ServiceResult(
            ok=True,
            op="show",
            data={
                "type": kind.value,
                "name": name,
                "domain": domain,
                "document": scan.components[name],
            },
            warnings=_failure_warnings(scan),
        )
