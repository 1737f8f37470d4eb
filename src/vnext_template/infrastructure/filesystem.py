"""Filesystem operations for domain discovery and component loading.

INVARIANT: Files are truth. Nothing here caches; every call re-reads the
working root so callers always see the current state of disk.

Pure naming rules live in :mod:`vnext_template.domain.types`
(correct dependency direction: infrastructure -> domain). This module
handles the actual directory listing and file I/O behind a small
:class:`Filesystem` protocol so the heuristics can run over a fake.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from vnext_template.domain.types import (
    MARKER_DIRS,
    ComponentType,
    component_stem,
    is_candidate_domain,
)

logger = logging.getLogger(__name__)

# What reading one JSON document can raise. JSONDecodeError and
# UnicodeDecodeError are both ValueError; deeply nested arrays or objects
# exhaust the decoder's recursion limit.
JSON_READ_ERRORS: tuple[type[Exception], ...] = (OSError, ValueError, RecursionError)


class Filesystem(Protocol):
    """Read-only view of a directory tree.

    Listings return bare entry names, sorted lexically.
    """

    def list_directories(self, path: Path) -> list[str]: ...

    def list_files(self, path: Path) -> list[str]: ...

    def is_dir(self, path: Path) -> bool: ...

    def is_file(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...


class LocalFilesystem:
    """:class:`Filesystem` backed by the real disk.

    Symlinks are followed, so a symlinked directory lists as a directory.
    """

    def list_directories(self, path: Path) -> list[str]:
        return sorted(entry.name for entry in path.iterdir() if entry.is_dir())

    def list_files(self, path: Path) -> list[str]:
        return sorted(entry.name for entry in path.iterdir() if entry.is_file())

    def is_dir(self, path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError:
            return False

    def is_file(self, path: Path) -> bool:
        try:
            return path.is_file()
        except OSError:
            return False

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")


_LOCAL = LocalFilesystem()


def _resolve(root: Path | None, fs: Filesystem | None) -> tuple[Path, Filesystem]:
    return (root if root is not None else Path.cwd()), (fs or _LOCAL)


# ---------------------------------------------------------------------------
# Domain discovery
# ---------------------------------------------------------------------------


def locate_domain(root: Path | None = None, *, fs: Filesystem | None = None) -> str | None:
    """Return the name of the domain directory under *root* (default: cwd).

    The domain is the first non-hidden, non-reserved subdirectory holding a
    ``Schemas``, ``Workflows`` or ``Tasks`` directory. Returns None when no
    subdirectory qualifies.

    Raises:
        OSError: *root* itself cannot be listed.
    """
    root, fs = _resolve(root, fs)
    for name in fs.list_directories(root):
        if not is_candidate_domain(name):
            continue
        if _has_marker(root / name, fs):
            logger.debug("Located domain %s under %s", name, root)
            return name
    logger.debug("No domain directory under %s", root)
    return None


def _has_marker(candidate: Path, fs: Filesystem) -> bool:
    # An unreadable sibling is just not a domain; only the root listing is fatal.
    try:
        return any(fs.is_dir(candidate / marker) for marker in MARKER_DIRS)
    except OSError as exc:
        logger.debug("Skipping unreadable directory %s: %s", candidate, exc)
        return False


def find_component_dirs(domain_path: Path, *, fs: Filesystem | None = None) -> list[str]:
    """Return the component directory names present under *domain_path*."""
    fs = fs or _LOCAL
    return [t.directory for t in ComponentType if fs.is_dir(domain_path / t.directory)]


# ---------------------------------------------------------------------------
# Component loading
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LoadFailure:
    """A component file that was skipped during loading."""

    path: Path
    reason: str


@dataclass
class ComponentScan:
    """Result of walking one component directory."""

    components: dict[str, Any] = field(default_factory=dict)
    failures: list[LoadFailure] = field(default_factory=list)


def read_json(path: Path, *, fs: Filesystem | None = None) -> Any:
    """Read and parse a single JSON document.

    Raises:
        OSError: The file could not be read.
        ValueError: The content is not valid UTF-8 JSON.
        RecursionError: The document nests too deeply to decode.
    """
    fs = fs or _LOCAL
    return json.loads(fs.read_text(path))


def scan_components(dir_path: Path, *, fs: Filesystem | None = None) -> ComponentScan:
    """Parse every ``*.json`` file directly inside *dir_path*.

    A missing directory yields an empty scan. Subdirectories are ignored.
    A file that cannot be read or parsed is recorded as a failure and the
    walk continues with the remaining files.
    """
    fs = fs or _LOCAL
    scan = ComponentScan()
    if not fs.is_dir(dir_path):
        return scan

    for filename in fs.list_files(dir_path):
        stem = component_stem(filename)
        if stem is None:
            continue
        path = dir_path / filename
        try:
            scan.components[stem] = read_json(path, fs=fs)
        except JSON_READ_ERRORS as exc:
            scan.failures.append(LoadFailure(path=path, reason=str(exc)))
    return scan


def load_components(dir_path: Path, *, fs: Filesystem | None = None) -> dict[str, Any]:
    """Load a component directory into a ``{name: document}`` mapping.

    Files that fail to parse are logged as warnings and left out.
    """
    scan = scan_components(dir_path, fs=fs)
    for failure in scan.failures:
        logger.warning("Could not load %s: %s", failure.path.name, failure.reason)
    return scan.components


def walk_json_files(path: Path, *, fs: Filesystem | None = None) -> list[Path]:
    """Return every ``*.json`` file under *path*, recursively, in sorted order."""
    fs = fs or _LOCAL
    if not fs.is_dir(path):
        return []
    results = [path / name for name in fs.list_files(path) if component_stem(name) is not None]
    for name in fs.list_directories(path):
        results.extend(walk_json_files(path / name, fs=fs))
    return results
