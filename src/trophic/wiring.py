"""Process wiring: assemble the layers for one strategy.

The three strategies build the same resolution chain and return
observably identical results; they differ only in how often the
per-entity objects are instantiated:

- ``per_call``: providers build a new per-entity object on every accessor call.
- ``shared``: one object per layer plays all three roles.
- ``bound``: each layer receives the layer below as a capability set.

A catalog, when given, replaces the database-backed reference repository
at the bottom of the chain.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from trophic.domain.types import Strategy
from trophic.handler import Handler
from trophic.infrastructure.catalog import (
    CatalogRepository,
    CatalogRepositoryProvider,
    load_catalog,
)
from trophic.infrastructure.database import open_database
from trophic.infrastructure.message_queue import open_message_queue
from trophic.infrastructure.repository import Repository, RepositoryProviderImpl
from trophic.services.composition import BoundService, Service, ServiceProviderImpl
from trophic.use_cases.orchestration import BoundUseCase, UseCase, UseCaseProviderImpl

if TYPE_CHECKING:
    from pathlib import Path

    from trophic.config.settings import TrophicSettings
    from trophic.domain.ports import AllRepositories, RepositoryProvider
    from trophic.infrastructure.catalog import Catalog
    from trophic.infrastructure.database import Database
    from trophic.infrastructure.message_queue import MessageQueue

logger = logging.getLogger(__name__)


def build_handler(
    strategy: Strategy,
    *,
    database: Database | None = None,
    message_queue: MessageQueue | None = None,
    catalog: Catalog | None = None,
) -> Handler:
    """Wire repositories, use cases, services and the handler for *strategy*.

    Either *catalog* or both *database* and *message_queue* must be given.
    """
    if catalog is None and (database is None or message_queue is None):
        raise ValueError("build_handler needs a catalog or both database and message_queue")

    strategy = Strategy(strategy)
    logger.debug("Wiring %s stack (catalog=%s)", strategy, catalog is not None)

    match strategy:
        case Strategy.PER_CALL:
            repositories: RepositoryProvider
            if catalog is not None:
                repositories = CatalogRepositoryProvider(catalog)
            else:
                repositories = RepositoryProviderImpl(database, message_queue)  # type: ignore[arg-type]
            return Handler.from_provider(ServiceProviderImpl(UseCaseProviderImpl(repositories)))
        case Strategy.SHARED:
            return Handler.from_provider(
                Service(UseCase(_repository(database, message_queue, catalog)))
            )
        case Strategy.BOUND:
            return Handler.from_service(
                BoundService(BoundUseCase(_repository(database, message_queue, catalog)))
            )


def _repository(
    database: Database | None,
    message_queue: MessageQueue | None,
    catalog: Catalog | None,
) -> AllRepositories:
    if catalog is not None:
        return CatalogRepository(catalog)
    return Repository(database, message_queue)  # type: ignore[arg-type]


@dataclass
class Stack:
    """A wired handler plus the handles it borrows."""

    handler: Handler
    strategy: Strategy
    database: Database | None = None
    message_queue: MessageQueue | None = None
    catalog: Catalog | None = field(default=None, repr=False)

    def close(self) -> None:
        if self.database is not None:
            self.database.close()
        if self.message_queue is not None:
            self.message_queue.close()


def open_stack(
    settings: TrophicSettings,
    *,
    strategy: Strategy | None = None,
    catalog_path: Path | None = None,
) -> Stack:
    """Open the collaborators named by *settings* and wire a handler.

    *strategy* and *catalog_path* override the ``[wiring]`` section.
    """
    chosen = Strategy(strategy or settings.wiring.strategy)
    path = catalog_path or settings.wiring.catalog
    if path is not None:
        catalog = load_catalog(path)
        return Stack(build_handler(chosen, catalog=catalog), chosen, catalog=catalog)

    database = open_database(settings.database.url)
    try:
        message_queue = open_message_queue(settings.message_queue.url)
    except Exception:
        database.close()
        raise
    handler = build_handler(chosen, database=database, message_queue=message_queue)
    return Stack(handler, chosen, database=database, message_queue=message_queue)
