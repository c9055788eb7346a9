"""Command: generate — write a synthetic plot dataset."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from plotctl.commands._base import PlotCommand
from plotctl.services.generate import GenerateService

if TYPE_CHECKING:
    from plotctl.commands._context import AppContext


@click.command(
    cls=PlotCommand,
    examples="""\
  plotctl generate
  plotctl generate --total 500 --sold 245 --output data/test_lands.json
  plotctl generate --seed 42 --owner-pool 300""",
)
@click.option("--total", default=None, type=click.IntRange(min=1), help="Number of plots.")
@click.option("--sold", default=None, type=click.IntRange(min=0), help="Number of sold plots.")
@click.option("--seed", default=None, type=int, help="Random seed for reproducible output.")
@click.option(
    "--owner-pool",
    default=0,
    type=click.IntRange(min=0),
    help="Draw owners from this many wallets (0 = one wallet per sold plot).",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Destination file (default: the configured dataset path).",
)
@click.pass_obj
def generate(
    app: AppContext,
    total: int | None,
    sold: int | None,
    seed: int | None,
    owner_pool: int,
    output: Path | None,
) -> None:
    """Generate a synthetic plot dataset."""
    defaults = app.settings.generate
    result = GenerateService(app.store).generate(
        total=total if total is not None else defaults.total,
        sold=sold if sold is not None else defaults.sold,
        seed=seed,
        owner_pool=owner_pool,
        output=output,
    )
    app.emit(result)
