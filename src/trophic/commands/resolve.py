"""Command: resolve one entity two hops away from a given identity."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING

import click

from trophic.commands._base import TrophicCommand
from trophic.domain.types import EntityKind

if TYPE_CHECKING:
    from trophic.commands._context import AppContext


@click.command(
    cls=TrophicCommand,
    examples=[
        ("trophic resolve snake 0", "snake eating the frog eating slug 0"),
        ("trophic resolve slug frog:3", "slug eating the snake eating frog 3"),
        ("trophic resolve frog 1 --catalog chain.toml", "frog two hops from snake 1"),
    ],
)
@click.argument("kind", type=click.Choice([k.value for k in EntityKind]))
@click.argument("far_id", metavar="ID", default="0")
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Resolve against a catalog TOML file instead of the database.",
)
@click.pass_obj
def resolve(app: AppContext, kind: str, far_id: str, catalog_path: Path | None) -> None:
    """Resolve the KIND eating whatever is eaten by the entity ID.

    ID identifies the kind that eats KIND: a slug for a snake, a frog for
    a slug, a snake for a frog.
    """
    from trophic.domain.errors import ResolutionError
    from trophic.domain.ids import parse_id
    from trophic.domain.types import eater_of
    from trophic.services.result import ServiceResult

    entity_kind = EntityKind(kind)
    op = f"resolve_{entity_kind}"
    try:
        start = parse_id(eater_of(entity_kind), far_id)
        stack = app.stack(catalog_path=catalog_path)
    except ResolutionError as exc:
        app.emit(ServiceResult.failure(op, exc))
        return

    app.emit(asyncio.run(stack.handler.query(entity_kind, start)))
