"""Reference data-access layer over the database and message-queue handles.

Each lookup acquires both handles, then returns a fresh snapshot carrying
the requested identity and a zero ``eaten_by``. Lookups never fail while
both handles are open; a closed handle surfaces as Unavailable.

Two wiring shapes share the same lookup code:

- :class:`RepositoryProviderImpl` builds a new per-entity repository on
  every accessor call, borrowing the handles by reference.
- :class:`Repository` implements all three repositories itself and its
  provider accessors return ``self``. The same object also serves as a
  capability set for bound wiring.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from trophic.domain.entities import Frog, Slug, Snake

if TYPE_CHECKING:
    from trophic.domain.ids import EntityID, FrogID, SlugID, SnakeID
    from trophic.infrastructure.database import Database
    from trophic.infrastructure.message_queue import MessageQueue

logger = logging.getLogger(__name__)


class _HandleRepository:
    """Holds the borrowed database and message-queue handles."""

    def __init__(self, database: Database, message_queue: MessageQueue) -> None:
        self._database = database
        self._message_queue = message_queue

    def _acquire(self, id: EntityID) -> None:
        self._database.conn()
        self._message_queue.conn()
        logger.debug("lookup %s", id)


class SnakeRepositoryImpl(_HandleRepository):
    async def get_snake(self, id: SnakeID) -> Snake:
        self._acquire(id)
        return Snake(id=id)


class SlugRepositoryImpl(_HandleRepository):
    async def get_slug(self, id: SlugID) -> Slug:
        self._acquire(id)
        return Slug(id=id)


class FrogRepositoryImpl(_HandleRepository):
    async def get_frog(self, id: FrogID) -> Frog:
        self._acquire(id)
        return Frog(id=id)


class RepositoryProviderImpl:
    """Per-call provider: each accessor returns a new lightweight repository."""

    def __init__(self, database: Database, message_queue: MessageQueue) -> None:
        self._database = database
        self._message_queue = message_queue

    def snake_repository(self) -> SnakeRepositoryImpl:
        return SnakeRepositoryImpl(self._database, self._message_queue)

    def slug_repository(self) -> SlugRepositoryImpl:
        return SlugRepositoryImpl(self._database, self._message_queue)

    def frog_repository(self) -> FrogRepositoryImpl:
        return FrogRepositoryImpl(self._database, self._message_queue)


class Repository(SnakeRepositoryImpl, SlugRepositoryImpl, FrogRepositoryImpl):
    """One object playing all three repository roles."""

    def snake_repository(self) -> Repository:
        return self

    def slug_repository(self) -> Repository:
        return self

    def frog_repository(self) -> Repository:
        return self
