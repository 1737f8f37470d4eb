"""Public accessors for the active domain's components.

Each call locates the domain afresh and re-reads its JSON files. No
process-wide state is kept, so repeated or concurrent calls never see
stale data and never interfere with each other.

All accessors take an optional *root*; when omitted the current working
directory at call time is used.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from vnext_template.config.discovery import load_domain_config
from vnext_template.domain.types import ComponentType, available_types
from vnext_template.infrastructure.filesystem import load_components, locate_domain

if TYPE_CHECKING:
    from vnext_template.infrastructure.filesystem import Filesystem


def get_domain_config(root: Path | None = None, *, fs: Filesystem | None = None) -> Any:
    """Parsed ``vnext.config.json``, or None when absent or malformed."""
    return load_domain_config(root, fs=fs)


def get_domain_name(root: Path | None = None, *, fs: Filesystem | None = None) -> str | None:
    """Name of the domain directory, or None if the root has no domain."""
    return locate_domain(root, fs=fs)


def get_available_types() -> list[str]:
    return available_types()


def get_components(
    component_type: ComponentType | str,
    root: Path | None = None,
    *,
    fs: Filesystem | None = None,
) -> dict[str, Any]:
    """Load every component of *component_type* from the active domain.

    Returns an empty mapping when there is no domain or the domain has no
    directory for this type.

    Raises:
        ValueError: *component_type* is not one of the six known types.
    """
    kind = ComponentType(component_type)
    base = root if root is not None else Path.cwd()
    domain = locate_domain(base, fs=fs)
    if domain is None:
        return {}
    return load_components(base / domain / kind.directory, fs=fs)


def get_schemas(root: Path | None = None, *, fs: Filesystem | None = None) -> dict[str, Any]:
    return get_components(ComponentType.SCHEMAS, root, fs=fs)


def get_workflows(root: Path | None = None, *, fs: Filesystem | None = None) -> dict[str, Any]:
    return get_components(ComponentType.WORKFLOWS, root, fs=fs)


def get_tasks(root: Path | None = None, *, fs: Filesystem | None = None) -> dict[str, Any]:
    return get_components(ComponentType.TASKS, root, fs=fs)


def get_views(root: Path | None = None, *, fs: Filesystem | None = None) -> dict[str, Any]:
    return get_components(ComponentType.VIEWS, root, fs=fs)


def get_functions(root: Path | None = None, *, fs: Filesystem | None = None) -> dict[str, Any]:
    return get_components(ComponentType.FUNCTIONS, root, fs=fs)


def get_extensions(root: Path | None = None, *, fs: Filesystem | None = None) -> dict[str, Any]:
    return get_components(ComponentType.EXTENSIONS, root, fs=fs)
