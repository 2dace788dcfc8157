"""Rich Console factory and theme for blogctl output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

BLOG_THEME = Theme(
    {
        "blog.ok": "bold green",
        "blog.error": "bold red",
        "blog.warning": "bold yellow",
        "blog.op": "bold cyan",
        "blog.key": "dim",
        "blog.path": "bold blue",
        "blog.title": "bold",
        "blog.date": "cyan",
        "blog.draft": "yellow",
        "blog.category": "magenta",
    }
)

_SEVERITY_STYLES: dict[str, str] = {
    "error": "blog.error",
    "warning": "blog.warning",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=BLOG_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_severity(severity: str) -> str:
    return _SEVERITY_STYLES.get(severity, "")
