"""Rich Console factory and theme for plotctl output.

Consoles render into a StringIO buffer so every renderer keeps the
``format_result() -> str`` contract. Outside a terminal (tests, pipes)
Rich drops the color codes on its own.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

PLOT_THEME = Theme(
    {
        "plot.ok": "bold green",
        "plot.error": "bold red",
        "plot.warning": "bold yellow",
        "plot.op": "bold cyan",
        "plot.key": "dim",
        "plot.id": "bold blue",
        "plot.address": "magenta",
        "plot.path": "dim",
        "plot.status.sold": "#f85266",
        "plot.status.available": "green",
        "plot.number": "bold",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width (keeps test output stable).
    """
    return Console(
        file=StringIO(),
        theme=PLOT_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_status(status: str) -> str:
    """Rich style name for a plot status (``sold`` / ``available``)."""
    return f"plot.status.{status}" if status in ("sold", "available") else ""
