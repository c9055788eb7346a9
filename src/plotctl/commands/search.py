"""Command: search — find plots by id pattern."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from plotctl.commands._base import PlotCommand
from plotctl.domain.types import PatternRule, SortOrder, StatusFilter
from plotctl.services.search import SearchService

if TYPE_CHECKING:
    from plotctl.commands._context import AppContext


@click.command(
    cls=PlotCommand,
    examples="""\
  plotctl search --pattern palindrome
  plotctl search --pattern round --status available
  plotctl search --pattern custom --wildcard "1*1*1"
  plotctl search --pattern repeating --sort id-desc
  plotctl search --status sold --sort sold-first --page 3 --per-page 50
  plotctl --json search --pattern combination""",
)
@click.option(
    "--pattern",
    "rule",
    type=click.Choice([r.value for r in PatternRule]),
    default=PatternRule.ALL.value,
    show_default=True,
    help="Special-number pattern to match.",
)
@click.option("--wildcard", default=None, help="Custom pattern; '*' is any single digit.")
@click.option(
    "--sort",
    type=click.Choice([s.value for s in SortOrder]),
    default=SortOrder.ID_ASC.value,
    show_default=True,
    help="Result order.",
)
@click.option(
    "--status",
    type=click.Choice([s.value for s in StatusFilter]),
    default=StatusFilter.ALL.value,
    show_default=True,
    help="Filter by sold/available status.",
)
@click.option("--page", default=1, type=click.IntRange(min=1), help="Page number.")
@click.option(
    "--per-page",
    default=None,
    type=click.IntRange(min=1),
    help="Plots per page (default from [display] per_page).",
)
@click.pass_obj
def search(
    app: AppContext,
    rule: str,
    wildcard: str | None,
    sort: str,
    status: str,
    page: int,
    per_page: int | None,
) -> None:
    """Find plots whose id matches a number pattern."""
    if rule == PatternRule.CUSTOM and wildcard is None:
        raise click.UsageError("--pattern custom requires --wildcard")
    result = SearchService(app.store).search(
        rule,
        wildcard=wildcard,
        sort=sort,
        status=status,
        page=page,
        per_page=per_page or app.settings.display.per_page,
    )
    app.emit(result)
