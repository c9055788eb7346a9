"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a StringIO-backed Console; ``render_result``
returns the captured text. Renderers are dispatched by ``result.op``;
unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from plotctl.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from plotctl.services.result import ServiceResult

# Width of the longest bar in the owners chart.
_BAR_WIDTH = 40


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: one id (or address) per line for lists."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(key for key in map(_item_key, items) if key)
    if result.op == "image":
        return str(result.data.get("path") or result.data.get("data_uri", ""))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _item_key(item: Any) -> str:
    if isinstance(item, dict):
        for key in ("id", "address"):
            val = item.get(key)
            if val is not None:
                return str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="plot.ok"), Text(f"  {result.op}", style="plot.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="plot.key")
    if key == "id":
        v = Text(str(value), style="plot.id")
    elif key == "path":
        v = Text(str(value), style="plot.path")
    elif key == "owner":
        v = Text(str(value), style="plot.address")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _status_text(status: str) -> Text:
    return Text(status.upper(), style=style_for_status(status))


def _range(values: Any) -> str:
    lo, hi = values
    return f"{lo:.2f}° .. {hi:.2f}°"


def _pixel_rows(matrix: list[list[str]]) -> list[Text]:
    rows: list[Text] = []
    for row in matrix:
        line = Text()
        for color in row:
            line.append("██", style=color)
        rows.append(line)
    return rows


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Meta block, including the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(Text(f"    {key}: {value}"))


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"
    line = Text(" " * indent)
    line.append(f"{duration:>8.2f}ms", style=style)
    line.append(f"  {span.get('name', '?')}")
    notes = span.get("annotations") or {}
    if notes:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in notes.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="plot.error"),
        Text(f"  {result.op}", style="plot.op"),
        " — ",
        Text(msg),
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Plot renderers ────────────────────────────────────────────────────


def _render_search(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    items = d.get("items", [])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="plot.id", justify="right", no_wrap=True)
    table.add_column("Status")
    table.add_column("Owner", style="plot.address")
    table.add_column("Longitude")
    table.add_column("Latitude")
    for item in items:
        table.add_row(
            str(item["id"]),
            _status_text(item["status"]),
            Text(item.get("owner") or "—"),
            _range(item["longitude"]),
            _range(item["latitude"]),
        )
    console.print(table)

    footer = f"\n{d.get('count', len(items))} plots found"
    if d.get("pages"):
        footer += f" · page {d['page']} of {d['pages']}"
    console.print(footer)
    if verbose:
        console.print(f"  rule: {d.get('rule')}  sort: {d.get('sort')}  status: {d.get('status')}")


def _render_plot(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    lines = Text()
    lines.append("Status: ")
    lines.append_text(_status_text(d["status"]))
    lines.append(f"\nOwner: {d.get('owner') or '—'}")
    lines.append(f"\nLongitude: {_range(d['longitude'])}")
    lines.append(f"\nLatitude: {_range(d['latitude'])}")
    mapped = d.get("coordination")
    if mapped:
        lines.append(f"\nMap longitude: {_range(mapped['longitude'])}")
        lines.append(f"\nMap latitude: {_range(mapped['latitude'])}")
    if verbose and d.get("image_url"):
        lines.append(f"\nImage URL: {d['image_url']}")
    console.print(Panel(lines, title=f"Plot #{d['id']}", border_style="dim", expand=False))


def _render_image(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "id", d["id"])
    if "path" in d:
        _field(console, "path", d["path"])
    console.print()
    for row in _pixel_rows(d.get("matrix", [])):
        console.print(Text("  ").append_text(row))
    if verbose:
        console.print()
        _field(console, "data_uri", d["data_uri"])


def _render_stats(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column(style="plot.key")
    table.add_column(style="plot.number", justify="right")
    table.add_row("Total plots", f"{d['total']:,}")
    table.add_row("Sold", f"{d['sold']:,}")
    table.add_row("Available", f"{d['available']:,}")
    table.add_row("Sold share", f"{d['sold_percentage']}%")
    console.print(table)


def _render_owners(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    items = d.get("items", [])

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Address", style="plot.address", no_wrap=True)
    table.add_column("Plots", justify="right", style="plot.number")
    table.add_column("Share", justify="right")
    for rank, item in enumerate(items, start=1):
        address = item["address"] if verbose else item["short"]
        table.add_row(str(rank), Text(address), str(item["plots"]), f"{item['percentage']:.2f}%")
    console.print(table)

    console.print(
        f"\n{d.get('owners', 0)} owners · {d.get('owned_plots', 0)} owned plots"
        f" · {d.get('average_per_owner', 0)} plots per owner on average"
    )

    chart = d.get("chart", [])
    if chart:
        console.print()
        peak = max(row["plots"] for row in chart) or 1
        label_width = max(len(row["label"]) for row in chart)
        for row in chart:
            bar = "█" * max(1, round(row["plots"] / peak * _BAR_WIDTH))
            line = Text(f"  {row['label']:<{label_width}}  ")
            line.append(bar, style="plot.address")
            line.append(f" {row['plots']} ({row['percentage']:.2f}%)")
            console.print(line)


def _render_generate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("path", "total", "sold"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "search": _render_search,
    "get": _render_plot,
    "image": _render_image,
    "stats": _render_stats,
    "owners": _render_owners,
    "generate": _render_generate,
}
