"""BaseService — shared foundation for vnext-template services.

Every service is bound to a working root and a :class:`Filesystem`.
Services hold no state beyond those two: each operation locates the
domain again and re-reads disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from vnext_template.infrastructure.filesystem import LocalFilesystem, locate_domain

if TYPE_CHECKING:
    from vnext_template.infrastructure.filesystem import Filesystem


class BaseService:
    """Base for service-layer classes.

    Usage::

        class DomainService(BaseService):
            def info(self) -> ServiceResult:
                domain = self._locate()
                ...
    """

    def __init__(self, root: Path | None = None, *, fs: Filesystem | None = None) -> None:
        self._root = root if root is not None else Path.cwd()
        self._fs: Filesystem = fs or LocalFilesystem()

    @property
    def root(self) -> Path:
        return self._root

    def _locate(self) -> str | None:
        """Locate the domain under the service root.

        OSError from an unreadable root propagates to the caller.
        """
        return locate_domain(self._root, fs=self._fs)

    def _domain_path(self, domain: str) -> Path:
        return self._root / domain
