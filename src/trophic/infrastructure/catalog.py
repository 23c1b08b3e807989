"""In-memory catalog of seeded entities.

A data-access adapter with consistent backing data: lookups return the
stored snapshot and unknown identities raise NotFound. Catalogs come from
a TOML file or from a single closed chain; :meth:`Catalog.check` reports
references to missing entities and chains that do not close as a 3-cycle.

TOML layout::

    [[snake]]
    id = 1
    eaten_by = 2

    [[slug]]
    id = 2
    eaten_by = 3

    [[frog]]
    id = 3
    eaten_by = 1
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, NonNegativeInt, ValidationError

from trophic.domain.entities import Frog, Slug, Snake
from trophic.domain.errors import InvalidIdentity, NotFound, Unavailable
from trophic.domain.ids import FrogID, SlugID, SnakeID

if TYPE_CHECKING:
    from pathlib import Path

    from trophic.domain.entities import Entity
    from trophic.domain.ids import EntityID

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# File contract
# ---------------------------------------------------------------------------


class _Record(BaseModel):
    model_config = {"frozen": True, "extra": "forbid"}

    id: NonNegativeInt
    eaten_by: NonNegativeInt


class CatalogFile(BaseModel):
    """Validated shape of a catalog TOML file."""

    model_config = {"frozen": True, "extra": "forbid"}

    snake: list[_Record] = Field(default_factory=list)
    slug: list[_Record] = Field(default_factory=list)
    frog: list[_Record] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


@dataclass
class Catalog:
    """Seeded snapshots keyed by identity."""

    snakes: dict[SnakeID, Snake] = field(default_factory=dict)
    slugs: dict[SlugID, Slug] = field(default_factory=dict)
    frogs: dict[FrogID, Frog] = field(default_factory=dict)

    def add(self, *entities: Snake | Slug | Frog) -> Catalog:
        """Store *entities*, replacing any snapshot with the same identity."""
        for entity in entities:
            match entity:
                case Snake():
                    self.snakes[entity.id] = entity
                case Slug():
                    self.slugs[entity.id] = entity
                case Frog():
                    self.frogs[entity.id] = entity
        return self

    @classmethod
    def from_chain(cls, snake: int, slug: int, frog: int) -> Catalog:
        """Build one closed cycle: the slug eats the snake, the frog eats the
        slug, and the snake eats the frog."""
        return cls().add(
            Snake(id=SnakeID(snake), eaten_by=SlugID(slug)),
            Slug(id=SlugID(slug), eaten_by=FrogID(frog)),
            Frog(id=FrogID(frog), eaten_by=SnakeID(snake)),
        )

    @classmethod
    def from_file(cls, data: CatalogFile) -> Catalog:
        catalog = cls()
        catalog.add(*(Snake(id=SnakeID(r.id), eaten_by=SlugID(r.eaten_by)) for r in data.snake))
        catalog.add(*(Slug(id=SlugID(r.id), eaten_by=FrogID(r.eaten_by)) for r in data.slug))
        catalog.add(*(Frog(id=FrogID(r.id), eaten_by=SnakeID(r.eaten_by)) for r in data.frog))
        return catalog

    def __len__(self) -> int:
        return len(self.snakes) + len(self.slugs) + len(self.frogs)

    def check(self) -> list[str]:
        """Return one message per integrity problem.

        Reports every ``eaten_by`` pointing at a missing entity, then every
        entity whose three-hop chain does not come back to itself.
        """
        entities: list[Entity] = [
            *self.snakes.values(),
            *self.slugs.values(),
            *self.frogs.values(),
        ]
        issues = [
            f"{entity.id} is eaten by missing {entity.eaten_by}"
            for entity in entities
            if self.lookup(entity.eaten_by) is None
        ]
        for entity in entities:
            chain = self._chain_from(entity)
            if chain is not None and chain[-1] != entity.id:
                issues.append(f"{entity.id} does not close: {' -> '.join(map(str, chain))}")
        return issues

    def lookup(self, id: EntityID) -> Entity | None:
        """Return the snapshot stored under *id*, or None."""
        match id:
            case SnakeID():
                return self.snakes.get(id)
            case SlugID():
                return self.slugs.get(id)
            case FrogID():
                return self.frogs.get(id)
        return None

    def _chain_from(self, start: Entity) -> list[EntityID] | None:
        """Identities visited by three hops from *start*; None on a dangling hop."""
        chain: list[EntityID] = [start.id]
        current = start
        for _ in range(3):
            found = self.lookup(current.eaten_by)
            if found is None:
                return None
            chain.append(found.id)
            current = found
        return chain


def load_catalog(path: Path) -> Catalog:
    """Read and validate a catalog TOML file.

    Raises:
        Unavailable: The file cannot be read.
        InvalidIdentity: The file is not valid TOML or breaks the layout.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise Unavailable(f"Cannot read catalog {path}: {exc}", path=str(path)) from exc
    try:
        data = CatalogFile.model_validate(tomllib.loads(raw))
    except (tomllib.TOMLDecodeError, ValidationError) as exc:
        raise InvalidIdentity(f"Invalid catalog {path}: {exc}", path=str(path)) from exc

    catalog = Catalog.from_file(data)
    logger.debug("Loaded catalog %s with %d entities", path, len(catalog))
    return catalog


class CatalogRepository:
    """All three repository roles backed by a :class:`Catalog`.

    Also a repository provider whose accessors return ``self``, for the
    shared strategy. The per-call strategy uses
    :class:`CatalogRepositoryProvider` instead.
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    async def get_snake(self, id: SnakeID) -> Snake:
        try:
            return self._catalog.snakes[id]
        except KeyError:
            raise NotFound(f"No snake with identity {id.value}", id=id.value) from None

    async def get_slug(self, id: SlugID) -> Slug:
        try:
            return self._catalog.slugs[id]
        except KeyError:
            raise NotFound(f"No slug with identity {id.value}", id=id.value) from None

    async def get_frog(self, id: FrogID) -> Frog:
        try:
            return self._catalog.frogs[id]
        except KeyError:
            raise NotFound(f"No frog with identity {id.value}", id=id.value) from None

    def snake_repository(self) -> CatalogRepository:
        return self

    def slug_repository(self) -> CatalogRepository:
        return self

    def frog_repository(self) -> CatalogRepository:
        return self


class CatalogRepositoryProvider:
    """Per-call provider: each accessor returns a new repository over the catalog."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    def snake_repository(self) -> CatalogRepository:
        return CatalogRepository(self._catalog)

    def slug_repository(self) -> CatalogRepository:
        return CatalogRepository(self._catalog)

    def frog_repository(self) -> CatalogRepository:
        return CatalogRepository(self._catalog)
