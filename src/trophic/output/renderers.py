"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Failures of any op go to the shared error renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table
from rich.text import Text

from trophic.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from trophic.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        _OP_RENDERERS[result.op](result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    entity = result.data.get("entity")
    if isinstance(entity, dict):
        return _entity_ref(entity)
    refs = [_entity_ref(v) for v in result.data.values() if isinstance(v, dict) and "kind" in v]
    if refs:
        return "\n".join(refs)
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _entity_ref(entity: dict[str, Any]) -> str:
    return f"{entity.get('kind', '?')}:{entity.get('id', '?')}"


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="trophic.ok")
    op = Text(f"  {result.op}", style="trophic.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    style = "trophic.id" if key == "id" or key.endswith("_id") else ""
    console.print(Text.assemble((f"  {key}: ", "trophic.key"), (str(value), style)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta block including telemetry span trees (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    _render_meta_items(console, result.meta, indent=4)


def _render_meta_items(console: Console, meta: dict[str, Any], *, indent: int) -> None:
    prefix = " " * indent
    for k, v in meta.items():
        if k == "telemetry":
            _render_telemetry_tree(console, v, indent=indent)
        elif isinstance(v, dict):
            console.print(Text(f"{prefix}{k}:"))
            _render_meta_items(console, v, indent=indent + 2)
        else:
            console.print(Text(f"{prefix}{k}: {v}"))


def _render_telemetry_tree(
    console: Console,
    span_data: dict[str, Any],
    indent: int = 4,
) -> None:
    """Render a hierarchical span tree with color-coded timing."""
    prefix = " " * indent
    name = span_data.get("name", "?")
    duration = span_data.get("duration_ms", 0.0)

    if duration > 1000:
        style = "bold red"
    elif duration > 100:
        style = "yellow"
    else:
        style = "dim"

    line = f"{prefix}[{style}]{duration:>8.2f}ms[/{style}]  {escape(str(name))}"

    if span_data.get("annotations"):
        extras = [f"{ak}={av}" for ak, av in span_data["annotations"].items()]
        line += f"  ({escape(', '.join(extras))})"

    console.print(line)

    for child in span_data.get("children", []):
        _render_telemetry_tree(console, child, indent=indent + 4)


def _entity_table(rows: list[tuple[str, dict[str, Any]]]) -> Table:
    """Build a Rich Table with one row per resolved entity."""
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Query")
    table.add_column("Kind")
    table.add_column("ID", style="trophic.id", justify="right")
    table.add_column("Eaten by", justify="right")
    for query, entity in rows:
        kind = str(entity.get("kind", ""))
        table.add_row(
            query,
            Text(kind, style=style_for_kind(kind)),
            str(entity.get("id", "")),
            str(entity.get("eaten_by", "")),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="trophic.error")
    op = Text(f"  {result.op}", style="trophic.op")
    code = Text(f"  [{err.code}]" if err else "", style="trophic.warning")
    console.print(label, op, code, Text(f"  {msg}"))

    if err and err.detail:
        failed = err.detail.get("failed")
        if isinstance(failed, dict):
            for kind, error in failed.items():
                message = escape(str(error.get("message")))
                console.print(f"  [trophic.error]{kind}[/trophic.error]: {message}")
        if verbose:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(Text(f"    {k}: {v}"))

    if verbose:
        _render_meta(console, result)


# ── Resolution renderers ──────────────────────────────────────────────


def _render_run(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the three zero-identity queries as a table."""
    _status_line(console, result)
    rows = [
        (f"{kind} from 0", entity)
        for kind, entity in result.data.items()
        if isinstance(entity, dict)
    ]
    console.print(_entity_table(rows))
    if verbose:
        _render_meta(console, result)


def _render_resolve(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single two-hop query."""
    _status_line(console, result)
    d = result.data
    _field(console, "from", f"{d.get('from_kind')}:{d.get('from_id')}")
    entity = d.get("entity") or {}
    for key in ("kind", "id", "eaten_by"):
        if key in entity:
            _field(console, key, entity[key])
    if verbose:
        _render_meta(console, result)


def _render_catalog_check(
    result: ServiceResult, console: Console, *, verbose: bool = False
) -> None:
    _status_line(console, result)
    for key in ("path", "snakes", "slugs", "frogs"):
        if key in result.data:
            _field(console, key, result.data[key])
    for issue in result.data.get("issues", []):
        console.print(f"  [trophic.warning]issue[/trophic.warning] {escape(issue)}")
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "run": _render_run,
    "resolve_snake": _render_resolve,
    "resolve_slug": _render_resolve,
    "resolve_frog": _render_resolve,
    "catalog_check": _render_catalog_check,
}
