"""Composition services: "the X eating the Z eating this Y".

A two-hop lookup asks the adjacent use case for the middle entity, then
asks its own use case for the entity eating that middle one. Both calls
are awaited in order and exceptions propagate untouched.

Wiring shapes mirror the orchestration layer: :class:`ServiceProviderImpl`
(per call), :class:`Service` (self as all roles) and :class:`BoundService`
(one use-case capability set, no provider).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from trophic.domain.entities import Frog, Slug, Snake
    from trophic.domain.ids import FrogID, SlugID, SnakeID
    from trophic.domain.ports import (
        AllUseCases,
        FrogUseCase,
        SlugUseCase,
        SnakeUseCase,
        UseCaseProvider,
    )

logger = logging.getLogger(__name__)


class SnakeServiceImpl:
    _snake_use_case: SnakeUseCase
    _frog_use_case: FrogUseCase

    def __init__(self, snake_use_case: SnakeUseCase, frog_use_case: FrogUseCase) -> None:
        self._snake_use_case = snake_use_case
        self._frog_use_case = frog_use_case

    async def get_snake_eating_frog_eating_slug(self, slug_id: SlugID) -> Snake:
        frog = await self._frog_use_case.get_frog_eating_slug(slug_id)
        logger.debug("middle %s", frog.id)
        return await self._snake_use_case.get_snake_eating_frog(frog.id)


class SlugServiceImpl:
    _slug_use_case: SlugUseCase
    _snake_use_case: SnakeUseCase

    def __init__(self, slug_use_case: SlugUseCase, snake_use_case: SnakeUseCase) -> None:
        self._slug_use_case = slug_use_case
        self._snake_use_case = snake_use_case

    async def get_slug_eating_snake_eating_frog(self, frog_id: FrogID) -> Slug:
        snake = await self._snake_use_case.get_snake_eating_frog(frog_id)
        logger.debug("middle %s", snake.id)
        return await self._slug_use_case.get_slug_eating_snake(snake.id)


class FrogServiceImpl:
    _frog_use_case: FrogUseCase
    _slug_use_case: SlugUseCase

    def __init__(self, frog_use_case: FrogUseCase, slug_use_case: SlugUseCase) -> None:
        self._frog_use_case = frog_use_case
        self._slug_use_case = slug_use_case

    async def get_frog_eating_slug_eating_snake(self, snake_id: SnakeID) -> Frog:
        slug = await self._slug_use_case.get_slug_eating_snake(snake_id)
        logger.debug("middle %s", slug.id)
        return await self._frog_use_case.get_frog_eating_slug(slug.id)


class ServiceProviderImpl:
    """Per-call provider over a use-case provider."""

    def __init__(self, use_case: UseCaseProvider) -> None:
        self._use_case = use_case

    def snake_service(self) -> SnakeServiceImpl:
        return SnakeServiceImpl(self._use_case.snake_use_case(), self._use_case.frog_use_case())

    def slug_service(self) -> SlugServiceImpl:
        return SlugServiceImpl(self._use_case.slug_use_case(), self._use_case.snake_use_case())

    def frog_service(self) -> FrogServiceImpl:
        return FrogServiceImpl(self._use_case.frog_use_case(), self._use_case.slug_use_case())


class Service(SnakeServiceImpl, SlugServiceImpl, FrogServiceImpl):
    """One object playing all three service roles."""

    def __init__(self, use_case: UseCaseProvider) -> None:
        self._snake_use_case = use_case.snake_use_case()
        self._slug_use_case = use_case.slug_use_case()
        self._frog_use_case = use_case.frog_use_case()

    def snake_service(self) -> Service:
        return self

    def slug_service(self) -> Service:
        return self

    def frog_service(self) -> Service:
        return self


class BoundService(SnakeServiceImpl, SlugServiceImpl, FrogServiceImpl):
    """All three service roles over a single use-case capability set."""

    def __init__(self, use_case: AllUseCases) -> None:
        self._snake_use_case = use_case
        self._slug_use_case = use_case
        self._frog_use_case = use_case
