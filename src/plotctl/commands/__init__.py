"""Subcommand modules for plotctl.

``register_commands()`` imports command modules lazily so that
``plotctl --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``plot`` group and the standalone commands on the root group."""
    from plotctl.commands.generate import generate
    from plotctl.commands.owners import owners
    from plotctl.commands.plot import plot
    from plotctl.commands.search import search
    from plotctl.commands.stats import stats

    cli.add_command(plot)
    cli.add_command(search)
    cli.add_command(owners)
    cli.add_command(stats)
    cli.add_command(generate)
