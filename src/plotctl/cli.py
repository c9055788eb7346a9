"""Root CLI group for plotctl with global flags and command registration."""

from __future__ import annotations

import click

from plotctl import __version__
from plotctl.commands import register_commands
from plotctl.commands._context import AppContext
from plotctl.config.settings import PlotSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="plotctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--data", "data_path", default=None, help="Override the plot dataset path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    data_path: str | None,
) -> None:
    """plotctl — Zero Colony land plot explorer."""
    flags: dict[str, object] = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
    }
    if data_path:
        flags["data_path"] = data_path
    settings = PlotSettings.from_cli(config_path=config_path, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
