"""Typed payload contracts for the entry-point boundary.

Payloads are validated before they leave the handler so shape regressions
fail fast in tests.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, NonNegativeInt

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class EntityData(BaseModel):
    """One resolved entity."""

    kind: Literal["snake", "slug", "frog"]
    id: NonNegativeInt
    eaten_by: NonNegativeInt


class ResolveResultData(BaseModel):
    """Payload contract for ``Handler.resolve``."""

    from_kind: Literal["snake", "slug", "frog"]
    from_id: NonNegativeInt
    entity: EntityData


class RunResultData(BaseModel):
    """Payload contract for ``Handler.run_each`` when every query succeeded."""

    snake: EntityData
    slug: EntityData
    frog: EntityData


class CatalogCheckData(BaseModel):
    """Payload contract for ``check_catalog``."""

    path: str
    snakes: NonNegativeInt
    slugs: NonNegativeInt
    frogs: NonNegativeInt
    issues: list[str]
