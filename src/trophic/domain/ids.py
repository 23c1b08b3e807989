"""Identity value types.

Each entity kind has its own identity type so a SnakeID can never be passed
where a SlugID is expected. The zero value is the default identity.

INVARIANT: Identities are immutable. Equality requires matching type and value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from trophic.domain.errors import InvalidIdentity
from trophic.domain.types import EntityKind


@dataclass(frozen=True)
class EntityID:
    """Opaque, non-negative integer identity.

    The base class belongs to no kind; use one of the per-kind subclasses.
    """

    value: int = 0

    kind: ClassVar[EntityKind | None] = None

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidIdentity(
                f"{type(self).__name__} value must be an integer",
                value=repr(self.value),
            )
        if self.value < 0:
            raise InvalidIdentity(
                f"{type(self).__name__} value must be non-negative",
                value=self.value,
            )

    def __str__(self) -> str:
        return f"{self.kind}:{self.value}"


@dataclass(frozen=True)
class SnakeID(EntityID):
    kind = EntityKind.SNAKE


@dataclass(frozen=True)
class SlugID(EntityID):
    kind = EntityKind.SLUG


@dataclass(frozen=True)
class FrogID(EntityID):
    kind = EntityKind.FROG


ID_TYPES: dict[EntityKind, type[EntityID]] = {
    EntityKind.SNAKE: SnakeID,
    EntityKind.SLUG: SlugID,
    EntityKind.FROG: FrogID,
}


def parse_id(kind: EntityKind | str, raw: str | int) -> EntityID:
    """Build the identity type for *kind* from user input.

    Accepts ``"7"``, ``7`` or the rendered form ``"snake:7"``.
    Raises InvalidIdentity for unknown kinds or malformed values.
    """
    try:
        entity_kind = EntityKind(kind)
    except ValueError as exc:
        raise InvalidIdentity(f"Unknown entity kind: {kind}", kind=str(kind)) from exc

    text = str(raw).strip()
    prefix = f"{entity_kind}:"
    if text.startswith(prefix):
        text = text[len(prefix) :]
    try:
        value = int(text)
    except ValueError as exc:
        raise InvalidIdentity(f"Malformed {entity_kind} identity: {raw!r}", raw=str(raw)) from exc
    return ID_TYPES[entity_kind](value)
