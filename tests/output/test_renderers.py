"""Tests for the Rich renderers."""

from vnext_template.output.console import VNT_THEME, create_console, get_output
from vnext_template.output.renderers import render_quiet, render_result
from vnext_template.services.result import ServiceError, ServiceResult


class TestConsole:
    def test_no_color(self) -> None:
        console = create_console(no_color=True)
        console.print("[vnt.ok]hello[/vnt.ok]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_theme_styles(self) -> None:
        assert "vnt.error" in VNT_THEME.styles


class TestRenderResult:
    def test_domain(self) -> None:
        result = ServiceResult(
            ok=True,
            op="domain",
            data={
                "name": "core",
                "root": "/repo",
                "directories": ["Schemas", "Tasks"],
                "config_found": False,
            },
        )
        output = render_result(result)
        assert "OK" in output
        assert "name: core" in output
        assert "directories: Schemas, Tasks" in output

    def test_domain_none(self) -> None:
        result = ServiceResult(ok=True, op="domain", data={"name": None, "directories": []})
        output = render_result(result)
        assert "name: (none)" in output
        assert "directories: -" in output

    def test_generic_types(self) -> None:
        result = ServiceResult(ok=True, op="types", data={"types": ["schemas", "workflows"]})
        assert "types: schemas, workflows" in render_result(result)

    def test_show_panel(self) -> None:
        result = ServiceResult(
            ok=True,
            op="show",
            data={"type": "tasks", "name": "notify", "document": {"key": "[notify]"}},
        )
        output = render_result(result)
        assert "notify" in output
        assert '"key": "[notify]"' in output

    def test_error_with_issues(self) -> None:
        issues = [{"check": "json_syntax", "path": "core/Tasks/bad.json", "message": "bad"}]
        result = ServiceResult(
            ok=False,
            op="validate",
            error=ServiceError(
                code="VALIDATION_FAILED",
                message="1 validation issue(s) found",
                detail={"issues": issues},
            ),
        )
        output = render_result(result)
        assert "ERROR" in output
        assert "1 validation issue(s) found" in output
        assert "core/Tasks/bad.json" in output

    def test_verbose_error_detail(self) -> None:
        result = ServiceResult(
            ok=False,
            op="show",
            error=ServiceError(code="NOT_FOUND", message="missing", detail={"domain": "core"}),
        )
        assert "domain: core" in render_result(result, verbose=True)
        assert "domain: core" not in render_result(result)


class TestRenderQuiet:
    def test_ok_without_items(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="validate")) == "OK: validate"

    def test_domain_name(self) -> None:
        result = ServiceResult(ok=True, op="domain", data={"name": "core"})
        assert render_quiet(result) == "core"
