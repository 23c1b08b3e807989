"""Entity kinds and wiring strategies.

The food cycle is fixed at three kinds: the snake eats frogs, the frog eats
slugs, and the slug eats snakes.
"""

from __future__ import annotations

from enum import StrEnum


class EntityKind(StrEnum):
    """The three nodes of the food cycle."""

    SNAKE = "snake"
    SLUG = "slug"
    FROG = "frog"


class Strategy(StrEnum):
    """How layer dependencies are wired together."""

    PER_CALL = "per_call"
    SHARED = "shared"
    BOUND = "bound"


# kind -> the kind it is eaten by
_EATEN_BY: dict[EntityKind, EntityKind] = {
    EntityKind.SNAKE: EntityKind.SLUG,
    EntityKind.SLUG: EntityKind.FROG,
    EntityKind.FROG: EntityKind.SNAKE,
}

_EATS: dict[EntityKind, EntityKind] = {eater: prey for prey, eater in _EATEN_BY.items()}


def eater_of(kind: EntityKind) -> EntityKind:
    """Return the kind that eats *kind*."""
    return _EATEN_BY[kind]


def prey_of(kind: EntityKind) -> EntityKind:
    """Return the kind that *kind* eats."""
    return _EATS[kind]
