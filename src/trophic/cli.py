"""Root CLI group for trophic with global flags and command registration."""

from __future__ import annotations

import click

from trophic import __version__
from trophic.commands import register_commands
from trophic.commands._context import AppContext
from trophic.config.settings import TrophicSettings
from trophic.domain.types import Strategy


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="trophic")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--log-sql", is_flag=True, help="Log SQLAlchemy statements to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in Strategy]),
    default=None,
    help="Wiring strategy (overrides [wiring] strategy).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    log_sql: bool,
    config_path: str | None,
    strategy: str | None,
) -> None:
    """trophic: two-hop resolution around the snake, slug and frog food chain."""
    settings = TrophicSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        log_sql=log_sql or None,
    )
    app = AppContext(settings, strategy=Strategy(strategy) if strategy else None)
    ctx.obj = app
    ctx.call_on_close(app.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
