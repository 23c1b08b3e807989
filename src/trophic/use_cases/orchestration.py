"""Use cases: direct lookups plus "the X eating this Y".

A one-hop lookup resolves the prey first to read its ``eaten_by``, then
resolves the eater by that identity. The second lookup is awaited only
after the first has returned; any exception from either propagates
untouched.

Wiring shapes:

- :class:`UseCaseProviderImpl` builds a fresh per-entity use case on every
  accessor call from the repository provider's handles.
- :class:`UseCase` plays all three roles and its accessors return ``self``.
- :class:`BoundUseCase` takes one object satisfying every repository role,
  with no provider in between.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from trophic.domain.entities import Frog, Slug, Snake
    from trophic.domain.ids import FrogID, SlugID, SnakeID
    from trophic.domain.ports import (
        AllRepositories,
        FrogRepository,
        RepositoryProvider,
        SlugRepository,
        SnakeRepository,
    )

logger = logging.getLogger(__name__)


class SnakeUseCaseImpl:
    """Snake lookups. The snake eats frogs."""

    _snake_repository: SnakeRepository
    _frog_repository: FrogRepository

    def __init__(self, snake_repository: SnakeRepository, frog_repository: FrogRepository) -> None:
        self._snake_repository = snake_repository
        self._frog_repository = frog_repository

    async def get_snake(self, id: SnakeID) -> Snake:
        return await self._snake_repository.get_snake(id)

    async def get_snake_eating_frog(self, frog_id: FrogID) -> Snake:
        frog = await self._frog_repository.get_frog(frog_id)
        logger.debug("hop %s -> %s", frog.id, frog.eaten_by)
        return await self._snake_repository.get_snake(frog.eaten_by)


class SlugUseCaseImpl:
    """Slug lookups. The slug eats snakes."""

    _slug_repository: SlugRepository
    _snake_repository: SnakeRepository

    def __init__(self, slug_repository: SlugRepository, snake_repository: SnakeRepository) -> None:
        self._slug_repository = slug_repository
        self._snake_repository = snake_repository

    async def get_slug(self, id: SlugID) -> Slug:
        return await self._slug_repository.get_slug(id)

    async def get_slug_eating_snake(self, snake_id: SnakeID) -> Slug:
        snake = await self._snake_repository.get_snake(snake_id)
        logger.debug("hop %s -> %s", snake.id, snake.eaten_by)
        return await self._slug_repository.get_slug(snake.eaten_by)


class FrogUseCaseImpl:
    """Frog lookups. The frog eats slugs."""

    _frog_repository: FrogRepository
    _slug_repository: SlugRepository

    def __init__(self, frog_repository: FrogRepository, slug_repository: SlugRepository) -> None:
        self._frog_repository = frog_repository
        self._slug_repository = slug_repository

    async def get_frog(self, id: FrogID) -> Frog:
        return await self._frog_repository.get_frog(id)

    async def get_frog_eating_slug(self, slug_id: SlugID) -> Frog:
        slug = await self._slug_repository.get_slug(slug_id)
        logger.debug("hop %s -> %s", slug.id, slug.eaten_by)
        return await self._frog_repository.get_frog(slug.eaten_by)


class UseCaseProviderImpl:
    """Per-call provider over a repository provider."""

    def __init__(self, repository: RepositoryProvider) -> None:
        self._repository = repository

    def snake_use_case(self) -> SnakeUseCaseImpl:
        return SnakeUseCaseImpl(
            self._repository.snake_repository(),
            self._repository.frog_repository(),
        )

    def slug_use_case(self) -> SlugUseCaseImpl:
        return SlugUseCaseImpl(
            self._repository.slug_repository(),
            self._repository.snake_repository(),
        )

    def frog_use_case(self) -> FrogUseCaseImpl:
        return FrogUseCaseImpl(
            self._repository.frog_repository(),
            self._repository.slug_repository(),
        )


class UseCase(SnakeUseCaseImpl, SlugUseCaseImpl, FrogUseCaseImpl):
    """One object playing all three use-case roles.

    Resolves its repositories from the provider once, at construction.
    """

    def __init__(self, repository: RepositoryProvider) -> None:
        self._snake_repository = repository.snake_repository()
        self._slug_repository = repository.slug_repository()
        self._frog_repository = repository.frog_repository()

    def snake_use_case(self) -> UseCase:
        return self

    def slug_use_case(self) -> UseCase:
        return self

    def frog_use_case(self) -> UseCase:
        return self


class BoundUseCase(SnakeUseCaseImpl, SlugUseCaseImpl, FrogUseCaseImpl):
    """All three use-case roles over a single repository capability set."""

    def __init__(self, repository: AllRepositories) -> None:
        self._snake_repository = repository
        self._slug_repository = repository
        self._frog_repository = repository
