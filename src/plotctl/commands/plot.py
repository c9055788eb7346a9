"""Command group: single-plot details and images."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from plotctl.commands._base import PlotGroup
from plotctl.services.catalog import CatalogService

if TYPE_CHECKING:
    from plotctl.commands._context import AppContext

_PLOT_EXAMPLES = """\
  plotctl plot get 12321
  plotctl plot image 12321
  plotctl plot image 12321 --output art/12321.svg
  plotctl --json plot image 5000"""


@click.group(cls=PlotGroup, examples=_PLOT_EXAMPLES)
def plot() -> None:
    """Inspect a single plot."""


@plot.command(
    examples="""\
  plotctl plot get 1
  plotctl -v plot get 21000
  plotctl --json plot get 12321"""
)
@click.argument("plot_id", type=click.IntRange(min=1))
@click.pass_obj
def get(app: AppContext, plot_id: int) -> None:
    """Show status, owner, and coordinates of PLOT_ID."""
    app.emit(CatalogService(app.store, app.coordination()).get(plot_id))


@plot.command(
    examples="""\
  plotctl plot image 777
  plotctl plot image 777 --output 777.svg
  plotctl -q plot image 777"""
)
@click.argument("plot_id", type=click.IntRange(min=1))
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the SVG to this file.",
)
@click.pass_obj
def image(app: AppContext, plot_id: int, output: Path | None) -> None:
    """Render the pixel image of PLOT_ID (any positive id)."""
    app.emit(CatalogService(app.store).image(plot_id, output=output))
