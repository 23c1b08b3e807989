"""Command group: catalog file utilities."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from trophic.commands._base import TrophicGroup

if TYPE_CHECKING:
    from trophic.commands._context import AppContext


@click.group(
    cls=TrophicGroup,
    examples=[("trophic --json catalog check chain.toml", "issues as JSON")],
)
def catalog() -> None:
    """Inspect catalog files."""


@catalog.command(
    examples=[("trophic catalog check chain.toml", "report missing entities and open chains")]
)
@click.argument("path", type=click.Path(path_type=Path, dir_okay=False))
@click.pass_obj
def check(app: AppContext, path: Path) -> None:
    """Validate a catalog file and report missing entities and open chains."""
    from trophic.services.inspection import check_catalog

    app.emit(check_catalog(path))
