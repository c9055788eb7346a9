"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. The plot store and coordination index are opened
lazily, so ``--help`` and ``--version`` never touch the dataset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from plotctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from plotctl.config.settings import PlotSettings
    from plotctl.infrastructure.coordination import CoordinationIndex
    from plotctl.infrastructure.dataset import PlotStore
    from plotctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: PlotSettings) -> None:
        self.settings = settings
        self._store: PlotStore | None = None

        from plotctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from plotctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def store(self) -> PlotStore:
        """The plot store (created lazily on first access)."""
        if self._store is None:
            from plotctl.infrastructure.dataset import PlotStore

            self._store = PlotStore(self.settings.dataset_path)
        return self._store

    def coordination(self) -> CoordinationIndex | None:
        """Load the configured coordination index, if any.

        A configured but unreadable file is a usage error, reported before
        any service runs.
        """
        path = self.settings.coordination_path
        if path is None:
            return None

        from plotctl.infrastructure.coordination import CoordinationIndex
        from plotctl.infrastructure.dataset import DatasetError

        try:
            return CoordinationIndex.from_file(path)
        except DatasetError as exc:
            raise click.ClickException(f"Cannot load coordination data: {exc}") from exc

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings to stderr unless in JSON mode, where
          they are already part of the payload.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
