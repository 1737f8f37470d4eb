"""Shared pytest fixtures and test helpers for vnext-template tests."""

from __future__ import annotations

import errno
import json
import logging
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path, PurePosixPath
from typing import Any

import pytest
from click.testing import CliRunner

FAKE_ROOT = Path("/repo")


class MemoryFilesystem:
    """In-memory ``Filesystem`` for deterministic locator/loader tests.

    Paths are given relative to :data:`FAKE_ROOT`. Parent directories of
    every file and directory are created implicitly. Directories listed in
    *unreadable* refuse both listing and lookups of their entries.
    """

    def __init__(
        self,
        files: dict[str, str] | None = None,
        dirs: Iterable[str] = (),
        unreadable: Iterable[str] = (),
    ) -> None:
        self.root = FAKE_ROOT
        self._files: dict[str, str] = {}
        self._dirs: set[str] = {self._key(FAKE_ROOT)}
        self._unreadable = {self._key(FAKE_ROOT / p) for p in unreadable}
        self.listings = 0
        for rel, content in (files or {}).items():
            path = FAKE_ROOT / rel
            self._files[self._key(path)] = content
            self._add_dir(path.parent)
        for rel in dirs:
            self._add_dir(FAKE_ROOT / rel)

    @staticmethod
    def _key(path: Path | PurePosixPath) -> str:
        return PurePosixPath(path).as_posix()

    def _add_dir(self, path: Path) -> None:
        self._dirs.add(self._key(path))
        for parent in path.parents:
            self._dirs.add(self._key(parent))

    def _children(self, path: Path, pool: Iterable[str]) -> list[str]:
        key = self._key(path)
        if key in self._unreadable:
            raise PermissionError(errno.EACCES, "Permission denied", key)
        if key not in self._dirs:
            raise FileNotFoundError(errno.ENOENT, "No such directory", key)
        self.listings += 1
        return sorted(
            PurePosixPath(p).name for p in pool if PurePosixPath(p).parent.as_posix() == key
        )

    def list_directories(self, path: Path) -> list[str]:
        return self._children(path, (d for d in self._dirs if d != "/"))

    def list_files(self, path: Path) -> list[str]:
        return self._children(path, self._files)

    def _stat(self, path: Path) -> str:
        key = self._key(path)
        if self._key(PurePosixPath(key).parent) in self._unreadable:
            raise PermissionError(errno.EACCES, "Permission denied", key)
        return key

    def is_dir(self, path: Path) -> bool:
        return self._stat(path) in self._dirs

    def is_file(self, path: Path) -> bool:
        return self._stat(path) in self._files

    def read_text(self, path: Path) -> str:
        key = self._key(path)
        if key not in self._files:
            raise FileNotFoundError(errno.ENOENT, "No such file", key)
        return self._files[key]


@pytest.fixture
def make_fs() -> Callable[..., MemoryFilesystem]:
    """Factory for :class:`MemoryFilesystem` instances rooted at ``/repo``."""
    return MemoryFilesystem


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Restore logger state that configure_logging() mutates."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("vnext_template")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


def write_json(path: Path, data: Any) -> Path:
    """Write *data* as JSON to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def domain_repo(tmp_path: Path) -> Path:
    """Repository root with a ``core`` domain and a handful of components.

    Layout::

        vnext.config.json
        node_modules/pkg/Schemas/        (reserved, never a domain)
        core/Schemas/customer.json
        core/Schemas/account.json
        core/Workflows/flow1.json
        core/Tasks/notify.json
        core/Tasks/README.md
    """
    write_json(tmp_path / "vnext.config.json", {"domain": "core", "version": "1.0.0"})
    (tmp_path / "node_modules" / "pkg" / "Schemas").mkdir(parents=True)
    write_json(tmp_path / "core" / "Schemas" / "customer.json", {"key": "customer"})
    write_json(tmp_path / "core" / "Schemas" / "account.json", {"key": "account"})
    write_json(tmp_path / "core" / "Workflows" / "flow1.json", {"key": "flow1"})
    write_json(tmp_path / "core" / "Tasks" / "notify.json", {"key": "notify"})
    (tmp_path / "core" / "Tasks" / "README.md").write_text("not a component\n")
    return tmp_path


@pytest.fixture
def _in_domain_repo(domain_repo: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the ``domain_repo`` root.

    Use via ``@pytest.mark.usefixtures("_in_domain_repo")``.
    """
    monkeypatch.chdir(domain_repo)
