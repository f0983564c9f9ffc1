"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from papilio.output.console import create_console, get_output, hue_style

if TYPE_CHECKING:
    from rich.console import Console

    from papilio.services.result import ServiceResult

_BAR_WIDTH = 20


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
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

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if "id" in item)
    if result.data.get("changed") and "id" in result.data:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="pl.ok")
    op = Text(f"  {result.op}", style="pl.op")
    console.print(label, op)


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="pl.key")
    if key == "id":
        v = Text(str(value), style="pl.id")
    elif key in ("domain", "active"):
        v = Text(str(value), style="pl.domain")
    elif key == "points":
        v = Text(str(value), style="pl.points")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def progress_bar(percent: int, width: int = _BAR_WIDTH) -> str:
    """Text progress bar, e.g. ``█████░░░░░``."""
    filled = round(width * max(0, min(percent, 100)) / 100)
    return "█" * filled + "░" * (width - filled)


def _points_footer(console: Console, result: ServiceResult) -> None:
    if "points" in result.data:
        console.print(Text.assemble("\npoints: ", (str(result.data["points"]), "pl.points")))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pl.error")
    op = Text(f"  {result.op}", style="pl.op")
    console.print(label, op, Text(" — "), msg)
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Mutation renderers ────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add/submit/toggle/delete results."""
    _status_line(console, result)
    d = result.data
    if not d.get("changed"):
        console.print(Text("  no change", style="dim"))
    for key in ("id", "domain", "text", "completed", "points"):
        if key in d:
            _field(console, key, d[key])
    if verbose and "created" in d:
        _field(console, "created", d["created"])


def _render_panel(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "state", result.data.get("state"))
    if result.data.get("active"):
        _field(console, "active", result.data["active"])


# ── Table renderers ───────────────────────────────────────────────────


def _render_domains(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Slug", style="pl.id", no_wrap=True)
    table.add_column("Domain")
    table.add_column("Done", justify="right")
    table.add_column("Progress")
    if verbose:
        table.add_column("Hue", justify="right", style="dim")

    for item in result.data.get("items", []):
        pct = int(item.get("percent", 0))
        row: list[Any] = [
            str(item.get("order", "")),
            str(item.get("id", "")),
            Text(str(item.get("label", "")), style=hue_style(float(item.get("hue", 0)))),
            f"{item.get('completed', 0)}/{item.get('total', 0)}",
            f"{progress_bar(pct)} {pct:>3}%",
        ]
        if verbose:
            row.append(f"{item.get('hue', 0):g}")
        table.add_row(*row)

    console.print(table)
    _points_footer(console, result)


def _render_tasks(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    items = d.get("items", [])
    if "domain" in d:
        pct = int(d.get("percent", 0))
        console.print(
            Text.assemble(
                (str(d["domain"]), "pl.domain"),
                f"  {d.get('completed', 0)}/{d.get('total', 0)}  {progress_bar(pct)} {pct}%",
            )
        )

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("", no_wrap=True)
    table.add_column("ID", style="pl.id", no_wrap=True)
    table.add_column("Task")
    if "domain" not in d:
        table.add_column("Domain", style="pl.domain")
    if verbose:
        table.add_column("Created", style="dim")

    for item in items:
        done = bool(item.get("completed"))
        row: list[Any] = [
            Text("[x]", style="pl.done") if done else Text("[ ]", style="pl.open"),
            str(item.get("id", "")),
            Text(str(item.get("text", "")), style="strike dim" if done else ""),
        ]
        if "domain" not in d:
            row.append(str(item.get("domain", "")))
        if verbose:
            row.append(str(item.get("created", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{d.get('count', len(items))} tasks")
    _points_footer(console, result)


def _render_wheel(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Segment", no_wrap=True)
    table.add_column("Arc", justify="right", style="dim")
    table.add_column("Progress")
    if verbose:
        table.add_column("Path", style="dim")

    active = result.data.get("active")
    for seg in result.data.get("segments", []):
        pct = int(seg.get("percent", 0))
        marker = "▶ " if seg.get("id") == active else "  "
        row: list[Any] = [
            Text(marker + str(seg.get("label", "")), style=hue_style(float(seg.get("hue", 0)))),
            f"{seg.get('start', 0):g}°–{seg.get('end', 0):g}°",
            f"{progress_bar(pct)} {pct:>3}%",
        ]
        if verbose:
            row.append(str(seg.get("path", "")))
        table.add_row(*row)

    console.print(table)
    _points_footer(console, result)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Mutations
    "add_task": _render_mutation,
    "submit_task": _render_mutation,
    "toggle_task": _render_mutation,
    "delete_task": _render_mutation,
    # Panel
    "select_domain": _render_panel,
    "close_panel": _render_panel,
    # Views
    "list_domains": _render_domains,
    "list_tasks": _render_tasks,
    "wheel": _render_wheel,
}
