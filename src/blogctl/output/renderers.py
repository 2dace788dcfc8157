"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from blogctl.output.console import create_console, get_output, style_for_severity

if TYPE_CHECKING:
    from rich.console import Console

    from blogctl.services.result import ServiceResult


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

    items = result.data.get("items") or result.data.get("issues")
    if items and isinstance(items, list):
        return "\n".join(str(item["path"]) for item in items if isinstance(item, dict))
    if result.op == "fmt" and result.data.get("changed"):
        return "\n".join(result.data["changed"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="blog.ok"), Text(f"  {result.op}", style="blog.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="blog.key")
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    if key in ("path", "output", "output_dir"):
        v = Text(str(value), style="blog.path")
    elif key == "title":
        v = Text(str(value), style="blog.title")
    elif key == "date":
        v = Text(str(value), style="blog.date")
    else:
        v = Text(str(value))
    console.print(k + v)


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including the telemetry span tree (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=4)
        else:
            console.print(Text(f"    {k}: {v}"))


def _render_telemetry_tree(console: Console, span: dict[str, Any], indent: int = 4) -> None:
    duration = span.get("duration_ms", 0.0)
    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = Text(" " * indent)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {span.get('name', '?')}")
    annotations = span.get("annotations")
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    console.print(line)

    for child in span.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _issue_line(issue: dict[str, Any]) -> Text:
    severity = str(issue.get("severity", "warning"))
    line = Text("  ")
    line.append(severity, style=style_for_severity(severity))
    line.append(" ")
    line.append(str(issue.get("path", "")), style="blog.path")
    line.append(f" [{issue.get('code', '')}] {issue.get('message', '')}")
    return line


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="blog.error"),
        Text(f"  {result.op}", style="blog.op"),
        Text(f" — {msg}"),
    )
    if err is None:
        return

    for issue in err.detail.get("issues", []):
        console.print(_issue_line(issue))
    for path in err.detail.get("changed", []):
        console.print(Text(f"  would reformat {path}"))

    if verbose:
        extra = {k: v for k, v in err.detail.items() if k not in ("issues", "changed")}
        for k, v in extra.items():
            console.print(Text(f"    {k}: {v}", style="dim"))


# ── Record renderers ──────────────────────────────────────────────────


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("path", "title", "date", "format", "template_page"):
        if d.get(key) is not None:
            _field(console, key, d[key])
    if d.get("draft"):
        console.print(Text("  draft", style="blog.draft"))
    if d.get("categories"):
        _field(console, "categories", ", ".join(d["categories"]))
    _field(console, "words", d.get("words", 0))
    if verbose:
        _field(console, "front_matter", d.get("front_matter", {}))
        _render_meta(console, result)


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Date", style="blog.date", no_wrap=True)
    table.add_column("Title", style="blog.title")
    table.add_column("Categories", style="blog.category")
    table.add_column("Path", style="blog.path")
    if verbose:
        table.add_column("Template", style="dim")

    for item in items:
        title = Text(str(item.get("title") or "(untitled)"))
        if item.get("draft"):
            title.append("  draft", style="blog.draft")
        row: list[Any] = [
            str(item.get("date") or "—"),
            title,
            ", ".join(item.get("categories", [])),
            str(item.get("path", "")),
        ]
        if verbose:
            row.append(str(item.get("template_page") or ""))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} records")


def _render_render(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("path", "output"):
        if key in result.data:
            _field(console, key, result.data[key])
    _field(console, "bytes", len(result.data.get("html", "").encode("utf-8")))
    if verbose:
        _render_meta(console, result)


# ── Maintenance renderers ─────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    issues = d.get("issues", [])
    if not issues:
        console.print(
            Text("OK", style="blog.ok"),
            Text(f"  {d.get('files', 0)} files checked, no issues found."),
        )
    else:
        for issue in issues:
            console.print(_issue_line(issue))
        console.print(f"\n{d.get('errors', 0)} errors, {d.get('warnings', 0)} warnings")
    if verbose:
        _render_meta(console, result)


def _render_fmt(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    verb = "would reformat" if d.get("check") else "reformatted"
    for path in d.get("changed", []):
        console.print(Text(f"  {verb} {path}"))
    _field(console, "changed", d.get("count", 0))
    _field(console, "unchanged", d.get("unchanged", 0))
    if verbose:
        _render_meta(console, result)


def _render_export(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    for key in ("output_dir", "path", "file_count", "records", "categories"):
        if key in d:
            _field(console, key, d[key])
    if verbose:
        for f in d.get("files", []):
            console.print(Text(f"    {f}"))
        _render_meta(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Any] = {
    "show": _render_show,
    "list": _render_list,
    "render": _render_render,
    "check": _render_check,
    "fmt": _render_fmt,
    "export_html": _render_export,
    "export_index": _render_export,
}
