"""Domain config discovery and loading.

The domain-wide configuration is a single ``vnext.config.json`` at the
working root. It is optional: a missing or broken file reads as None so
callers can treat "nothing configured" as the normal case.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from vnext_template.domain.types import DOMAIN_CONFIG_FILENAME
from vnext_template.infrastructure.filesystem import JSON_READ_ERRORS, read_json

if TYPE_CHECKING:
    from vnext_template.infrastructure.filesystem import Filesystem

logger = logging.getLogger(__name__)


def config_path(root: Path | None = None) -> Path:
    """Return where the domain config lives for *root* (default: cwd)."""
    return (root if root is not None else Path.cwd()) / DOMAIN_CONFIG_FILENAME


def load_domain_config(root: Path | None = None, *, fs: Filesystem | None = None) -> Any:
    """Read and parse ``vnext.config.json`` under *root*.

    Returns None if the file is absent, unreadable, or not valid JSON.
    """
    path = config_path(root)
    try:
        return read_json(path, fs=fs)
    except JSON_READ_ERRORS as exc:
        logger.debug("No usable domain config at %s: %s", path, exc)
        return None
