"""Command: stats — catalogue totals."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from plotctl.commands._base import PlotCommand
from plotctl.services.catalog import CatalogService

if TYPE_CHECKING:
    from plotctl.commands._context import AppContext


@click.command(
    cls=PlotCommand,
    examples="""\
  plotctl stats
  plotctl --json stats
  plotctl --data public/data/test_lands.json stats""",
)
@click.pass_obj
def stats(app: AppContext) -> None:
    """Show total, sold, and available plot counts."""
    app.emit(CatalogService(app.store).stats())
