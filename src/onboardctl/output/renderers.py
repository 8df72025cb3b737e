"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  Renderers
are dispatched by ``result.op`` in :func:`render_result`; unknown ops
fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from onboardctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from onboardctl.services.result import ServiceResult


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
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="onb.ok")
    op = Text(f"  {result.op}", style="onb.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="onb.key")
    v = Text(str(value), style="onb.value")
    console.print(k, v, end="")
    console.print()


def _values_table(values: dict[str, Any]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Field", style="onb.field", no_wrap=True)
    table.add_column("Value", style="onb.value")
    for key, value in values.items():
        table.add_row(key, str(value))
    return table


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text("  warning: ", style="onb.warning"), Text(warning))


# ── Renderers ─────────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="onb.error")
    op = Text(f"  {result.op}", style="onb.op")
    console.print(label, op, Text(" — "), Text(msg))

    if err and "field" in err.detail:
        _field(console, "field", err.detail["field"])
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))
    _render_warnings(console, result)


def _render_values(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render validate_form / submit_profile: a field/value table."""
    _status_line(console, result)
    values = result.data.get("values") or result.data.get("submitted") or {}
    if values:
        console.print(_values_table(values))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "validate_form": _render_values,
    "submit_profile": _render_values,
    "validate_field": _render_generic,
    "verify_corporation": _render_generic,
}
