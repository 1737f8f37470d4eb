"""vnext-template — locate a vNext domain and load its JSON components."""

from __future__ import annotations

from vnext_template.accessors import (
    get_available_types,
    get_components,
    get_domain_config,
    get_domain_name,
    get_extensions,
    get_functions,
    get_schemas,
    get_tasks,
    get_views,
    get_workflows,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "get_available_types",
    "get_components",
    "get_domain_config",
    "get_domain_name",
    "get_extensions",
    "get_functions",
    "get_schemas",
    "get_tasks",
    "get_views",
    "get_workflows",
]
