"""ValidateService — structural validation of a domain template.

Checks run in order:

1. ``vnext.config.json``, if present, parses and holds a JSON object.
2. A domain directory can be located. An empty template (no domain) is
   valid, with a warning.
3. Every ``*.json`` file under the domain, at any depth, parses.

Unlike the accessors, which skip bad files, any issue here fails the
result so the CLI exits non-zero.
"""

from __future__ import annotations

from typing import Any

from vnext_template.config.discovery import config_path
from vnext_template.infrastructure.filesystem import (
    JSON_READ_ERRORS,
    find_component_dirs,
    read_json,
    walk_json_files,
)
from vnext_template.services.base import BaseService
from vnext_template.services.result import ServiceError, ServiceResult

CHECK_CONFIG = "config"
CHECK_JSON = "json_syntax"


def _issue(check: str, path: str, message: str) -> dict[str, Any]:
    return {"check": check, "path": path, "message": message}


class ValidateService(BaseService):
    """Validates the domain layout and JSON syntax under a working root."""

    def validate(self) -> ServiceResult:
        issues: list[dict[str, Any]] = []
        warnings: list[str] = []
        json_files = self._check_config(issues)

        domain = self._locate()
        directories: list[str] = []
        if domain is None:
            warnings.append("No domain directory found (template will be empty)")
        else:
            domain_path = self._domain_path(domain)
            directories = find_component_dirs(domain_path, fs=self._fs)
            for path in walk_json_files(domain_path, fs=self._fs):
                json_files += 1
                try:
                    read_json(path, fs=self._fs)
                except JSON_READ_ERRORS as exc:
                    rel = path.relative_to(self._root).as_posix()
                    issues.append(_issue(CHECK_JSON, rel, f"Invalid JSON: {exc}"))

        data = {
            "domain": domain,
            "directories": directories,
            "json_files": json_files,
            "issues": issues,
            "valid": not issues,
        }
        if issues:
            return ServiceResult(
                ok=False,
                op="validate",
                data=data,
                warnings=warnings,
                error=ServiceError(
                    code="VALIDATION_FAILED",
                    message=f"{len(issues)} validation issue(s) found",
                    detail={"issues": issues},
                ),
            )
        return ServiceResult(ok=True, op="validate", data=data, warnings=warnings)

    def _check_config(self, issues: list[dict[str, Any]]) -> int:
        """Validate the domain config; return the number of files checked."""
        path = config_path(self._root)
        if not self._fs.is_file(path):
            return 0
        try:
            config = read_json(path, fs=self._fs)
        except JSON_READ_ERRORS as exc:
            issues.append(_issue(CHECK_CONFIG, path.name, f"Invalid JSON: {exc}"))
            return 1
        if not isinstance(config, dict):
            issues.append(_issue(CHECK_CONFIG, path.name, "Must contain a JSON object"))
        return 1
