"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vnext_template.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from vnext_template.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items") or result.data.get("types")
    if items and isinstance(items, list):
        return "\n".join(str(item) for item in items)
    if result.op == "domain":
        return str(result.data.get("name") or "")
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "vnt.ok"), (f"  {result.op}", "vnt.op")))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="vnt.key")
    if key in ("name", "domain"):
        v = Text(str(value), style="vnt.name")
    elif key in ("root", "path"):
        v = Text(str(value), style="vnt.path")
    elif isinstance(value, list):
        v = Text(", ".join(str(x) for x in value) if value else "-")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="vnt.error")
    op = Text(f"  {result.op}", style="vnt.op")
    console.print(label, op, " — ", Text(msg))

    if err and err.detail:
        issues = err.detail.get("issues")
        if issues:
            console.print(_issue_table(issues))
        if verbose:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                if k != "issues":
                    console.print(f"    {k}: {v}")


# ── Op renderers ──────────────────────────────────────────────────────


def _render_domain(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "name", d.get("name") or "(none)")
    _field(console, "root", d.get("root", ""))
    _field(console, "directories", d.get("directories", []))
    _field(console, "config_found", d.get("config_found", False))


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Name", style="vnt.name", no_wrap=True)
    for name in items:
        table.add_row(str(name))
    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} {result.data.get('type', 'items')}")


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    body = Text(json.dumps(d.get("document"), indent=2, ensure_ascii=False))
    title = f"{d.get('type', '?')} — {d.get('name', '?')}"
    console.print(Panel(body, title=title, border_style="dim", expand=False))


def _render_config(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    if not result.data.get("found"):
        _field(console, "config", "(none)")
        return
    console.print(Text(json.dumps(result.data.get("config"), indent=2, ensure_ascii=False)))


def _issue_table(issues: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Check")
    table.add_column("Path", style="vnt.path")
    table.add_column("Message")
    for issue in issues:
        table.add_row(
            str(issue.get("check", "")),
            str(issue.get("path", "")),
            str(issue.get("message", "")),
        )
    return table


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    _field(console, "domain", d.get("domain") or "(none)")
    _field(console, "directories", d.get("directories", []))
    _field(console, "json_files", d.get("json_files", 0))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "domain": _render_domain,
    "list": _render_list,
    "show": _render_show,
    "config": _render_config,
    "validate": _render_validate,
}
