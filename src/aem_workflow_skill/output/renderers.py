"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from aem_workflow_skill.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from aem_workflow_skill.services.result import ServiceResult

BANNER_TITLE = "AEM Workflow Development - AI Assistant Skill"
BANNER_TAGLINE = "Expert guidance for Adobe Experience Manager workflows"

USAGE_HINTS = (
    "How do I create a custom workflow process step in AEM Cloud Service?",
    "Show me how to implement a post-processing workflow for assets",
    "What's the correct way to programmatically start a workflow?",
)


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
    """Render minimal output for ``--quiet`` mode: one path per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "list_platforms":
        return "\n".join(str(item["id"]) for item in result.data.get("items", []))

    paths = [entry["path"] for entry in _touched(result)]
    if paths:
        return "\n".join(paths)
    return f"OK: {result.op}"


def render_banner() -> str:
    """Render the startup banner shown in human output mode."""
    console = create_console()
    body = Text(justify="center")
    body.append(BANNER_TITLE, style="aem.banner")
    body.append("\n\n")
    body.append(BANNER_TAGLINE)
    console.print(Panel(body, expand=False, padding=(1, 4)))
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _touched(result: ServiceResult) -> list[dict[str, Any]]:
    """Entries for files written or removed by an install/uninstall."""
    keys = ("installed",) if result.op == "install" else ("removed", "legacy_removed")
    entries: list[dict[str, Any]] = []
    for key in keys:
        entries.extend(result.data.get(key, []))
    return entries


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="aem.done")
    op = Text(f"  {result.op}", style="aem.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="aem.label")
    if key == "path":
        v = Text(str(value), style="aem.path")
    elif key == "scope":
        v = Text(str(value), style="aem.scope")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _entry_line(console: Console, marker: str, style: str, entry: dict[str, Any]) -> None:
    line = Text(f"  {marker} ", style=style)
    line.append(f"{entry.get('platform', '?'):<9}", style="aem.platform")
    line.append(" ")
    if "reason" in entry:
        line.append(str(entry["reason"]))
    else:
        line.append(str(entry.get("path", "")), style="aem.path")
    console.print(line)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="aem.failed")
    op = Text(f"  {result.op}", style="aem.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    # Partial failures still report what succeeded.
    for entry in _touched(result):
        _entry_line(console, "ok", "aem.done", entry)
    for entry in result.data.get("failed", []):
        _entry_line(console, "failed", "aem.failed", entry)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}", markup=False)


# ── Operation renderers ───────────────────────────────────────────────


def _render_install(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render install results followed by usage hints."""
    _status_line(console, result)
    _field(console, "scope", result.data.get("scope", ""))
    installed = result.data.get("installed", [])
    for entry in installed:
        _entry_line(console, "installed", "aem.done", entry)
        if verbose:
            console.print(f"      [aem.label]{entry.get('name', '')}[/aem.label]")

    if not installed:
        return
    console.print()
    console.print("Installation complete! Ask your assistant about AEM workflows, for example:")
    for hint in USAGE_HINTS:
        console.print(f'  - "{hint}"')


def _render_uninstall(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render removed, missing, and legacy files."""
    _status_line(console, result)
    _field(console, "scope", result.data.get("scope", ""))
    for entry in result.data.get("removed", []):
        _entry_line(console, "removed", "aem.done", entry)
    for entry in result.data.get("legacy_removed", []):
        _entry_line(console, "removed", "aem.done", entry)
    for entry in result.data.get("missing", []):
        _entry_line(console, "not found", "aem.missing", entry)
    for entry in result.data.get("legacy_skipped", []):
        _entry_line(console, "kept", "aem.kept", entry)
        if verbose:
            console.print("      [aem.label]not created by this installer[/aem.label]")


def _render_platforms(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the platform registry as a table."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="aem.platform", no_wrap=True)
    table.add_column("Name")
    table.add_column("Project path", style="aem.path")
    table.add_column("Global path", style="aem.path")
    if verbose:
        table.add_column("Legacy file", style="dim")

    for item in result.data.get("items", []):
        row = [
            str(item.get("id", "")),
            str(item.get("name", "")),
            str(item.get("path", "")),
            str(item.get("global_path") or "-"),
        ]
        if verbose:
            row.append(str(item.get("legacy") or "-"))
        table.add_row(*row)

    console.print(table)
    console.print("\nUse -p <id> or -p all to choose platforms.")


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "install": _render_install,
    "uninstall": _render_uninstall,
    "list_platforms": _render_platforms,
}
