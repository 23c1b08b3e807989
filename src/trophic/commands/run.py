"""Command: run the three zero-identity two-hop queries."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

import click

from trophic.commands._base import TrophicCommand

if TYPE_CHECKING:
    from trophic.commands._context import AppContext


@click.command(
    cls=TrophicCommand,
    examples=[
        ("trophic run", "resolve a snake, a slug and a frog from zero identities"),
        ("trophic run --concurrent", "await the three queries together"),
        ("trophic --strategy bound run --catalog chain.toml", "bound wiring over a catalog"),
        ("trophic --json run", "machine-readable result"),
    ],
)
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Resolve against a catalog TOML file instead of the database.",
)
@click.option("--concurrent", is_flag=True, help="Await the three queries together.")
@click.pass_obj
def run(app: AppContext, catalog_path: Path | None, concurrent: bool) -> None:
    """Resolve a snake, a slug and a frog from zero identities."""
    from trophic.domain.errors import ResolutionError
    from trophic.handler import summarize
    from trophic.services.result import ServiceResult

    try:
        stack = app.stack(catalog_path=catalog_path)
    except ResolutionError as exc:
        app.emit(ServiceResult.failure("run", exc))
        return

    results = asyncio.run(stack.handler.run_each(concurrent=concurrent))
    app.emit(summarize(results))
