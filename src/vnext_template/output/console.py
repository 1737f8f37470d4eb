"""Rich Console factory and theme for vnext-template output.

Consoles render to a StringIO buffer, preserving the
``format_result() -> str`` contract. In non-TTY environments (tests,
pipes) Rich disables color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

VNT_THEME = Theme(
    {
        "vnt.ok": "bold green",
        "vnt.error": "bold red",
        "vnt.warning": "bold yellow",
        "vnt.op": "bold cyan",
        "vnt.key": "dim",
        "vnt.name": "bold blue",
        "vnt.path": "dim",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=VNT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
