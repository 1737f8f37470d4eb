"""Component types and domain layout constants.

A domain directory holds one subdirectory per component type, each a flat
folder of ``<name>.json`` documents. The six types and their order are a
fixed contract, not something discovered from disk.
"""

from __future__ import annotations

from enum import StrEnum


class ComponentType(StrEnum):
    """Component categories a domain can carry, in canonical order."""

    SCHEMAS = "schemas"
    WORKFLOWS = "workflows"
    TASKS = "tasks"
    VIEWS = "views"
    FUNCTIONS = "functions"
    EXTENSIONS = "extensions"

    @property
    def directory(self) -> str:
        """On-disk directory name (``Schemas``, ``Workflows``, ...)."""
        return self.value.capitalize()


# Subdirectories whose presence marks a directory as a domain.
MARKER_DIRS: tuple[str, ...] = (
    ComponentType.SCHEMAS.directory,
    ComponentType.WORKFLOWS.directory,
    ComponentType.TASKS.directory,
)

# Sibling directories that never hold a domain (dependency installs, build output).
RESERVED_DIRS = frozenset({"node_modules", "dist", "build", "__pycache__", "venv"})

HIDDEN_PREFIX = "."

COMPONENT_SUFFIX = ".json"

DOMAIN_CONFIG_FILENAME = "vnext.config.json"


def available_types() -> list[str]:
    """Return the six component type names in canonical order."""
    return [t.value for t in ComponentType]


def is_candidate_domain(name: str) -> bool:
    """Whether a root-level directory name may be considered as a domain."""
    return not name.startswith(HIDDEN_PREFIX) and name not in RESERVED_DIRS


def component_stem(filename: str) -> str | None:
    """Return the component name for *filename*, or None if it is not a component file."""
    if not filename.endswith(COMPONENT_SUFFIX):
        return None
    return filename.removesuffix(COMPONENT_SUFFIX)
