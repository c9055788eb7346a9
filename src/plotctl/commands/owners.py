"""Command: owners — owner-concentration report."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from plotctl.commands._base import PlotCommand
from plotctl.services.owners import SORT_KEYS, OwnerService

if TYPE_CHECKING:
    from plotctl.commands._context import AppContext


@click.command(
    cls=PlotCommand,
    examples="""\
  plotctl owners
  plotctl owners --limit 20
  plotctl owners --search 0xab
  plotctl owners --sort-by percentage --order asc
  plotctl -q owners --limit 5""",
)
@click.option("--search", "query", default=None, help="Filter by address substring.")
@click.option(
    "--sort-by",
    type=click.Choice(SORT_KEYS),
    default="plots",
    show_default=True,
    help="Sort key.",
)
@click.option(
    "--order",
    type=click.Choice(["asc", "desc"]),
    default="desc",
    show_default=True,
    help="Sort direction.",
)
@click.option("--limit", default=None, type=click.IntRange(min=1), help="Max owners listed.")
@click.pass_obj
def owners(
    app: AppContext,
    query: str | None,
    sort_by: str,
    order: str,
    limit: int | None,
) -> None:
    """Report how many plots each owner holds."""
    result = OwnerService(app.store).report(
        query=query,
        sort_by=sort_by,
        order=order,
        limit=limit,
        chart_top=app.settings.owners.chart_top,
    )
    app.emit(result)
