"""Entity snapshots for the three kinds of the food cycle.

Lookups return fresh, immutable snapshots. Callers compare entities by
value, never by object identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from trophic.domain.ids import EntityID, FrogID, SlugID, SnakeID
from trophic.domain.types import EntityKind


class _EntityMixin:
    """Shared rendering for entity snapshots."""

    kind: EntityKind
    id: EntityID
    eaten_by: EntityID

    def to_dict(self) -> dict[str, Any]:
        return {"kind": str(self.kind), "id": self.id.value, "eaten_by": self.eaten_by.value}


@dataclass(frozen=True)
class Snake(_EntityMixin):
    """A snake, eaten by a slug."""

    id: SnakeID = field(default_factory=SnakeID)
    eaten_by: SlugID = field(default_factory=SlugID)

    kind = EntityKind.SNAKE


@dataclass(frozen=True)
class Slug(_EntityMixin):
    """A slug, eaten by a frog."""

    id: SlugID = field(default_factory=SlugID)
    eaten_by: FrogID = field(default_factory=FrogID)

    kind = EntityKind.SLUG


@dataclass(frozen=True)
class Frog(_EntityMixin):
    """A frog, eaten by a snake."""

    id: FrogID = field(default_factory=FrogID)
    eaten_by: SnakeID = field(default_factory=SnakeID)

    kind = EntityKind.FROG


Entity = Snake | Slug | Frog
