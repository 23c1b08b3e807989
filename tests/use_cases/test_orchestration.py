"""Tests for one-hop use cases and their wiring shapes."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from trophic.domain.entities import Frog, Slug, Snake
from trophic.domain.errors import NotFound, Unavailable
from trophic.domain.ids import FrogID, SlugID, SnakeID
from trophic.domain.ports import AllUseCases, UseCaseProvider
from trophic.infrastructure.catalog import Catalog, CatalogRepository
from trophic.use_cases.orchestration import (
    BoundUseCase,
    FrogUseCaseImpl,
    SlugUseCaseImpl,
    SnakeUseCaseImpl,
    UseCase,
    UseCaseProviderImpl,
)


class TestOneHop:
    @pytest.mark.asyncio
    async def test_snake_eating_frog(self, chain: Catalog) -> None:
        repo = CatalogRepository(chain)
        use_case = SnakeUseCaseImpl(repo, repo)
        snake = await use_case.get_snake_eating_frog(FrogID(3))
        assert snake == Snake(id=SnakeID(1), eaten_by=SlugID(2))

    @pytest.mark.asyncio
    async def test_slug_eating_snake(self, chain: Catalog) -> None:
        repo = CatalogRepository(chain)
        slug = await SlugUseCaseImpl(repo, repo).get_slug_eating_snake(SnakeID(1))
        assert slug.id == SlugID(2)

    @pytest.mark.asyncio
    async def test_frog_eating_slug(self, chain: Catalog) -> None:
        repo = CatalogRepository(chain)
        frog = await FrogUseCaseImpl(repo, repo).get_frog_eating_slug(SlugID(2))
        assert frog.id == FrogID(3)

    @pytest.mark.asyncio
    async def test_direct_lookup(self, chain: Catalog) -> None:
        repo = CatalogRepository(chain)
        assert await SnakeUseCaseImpl(repo, repo).get_snake(SnakeID(1)) == chain.snakes[SnakeID(1)]

    @pytest.mark.asyncio
    async def test_follows_eaten_by(self) -> None:
        frogs = AsyncMock()
        frogs.get_frog.return_value = Frog(id=FrogID(4), eaten_by=SnakeID(9))
        snakes = AsyncMock()
        snakes.get_snake.return_value = Snake(id=SnakeID(9))

        await SnakeUseCaseImpl(snakes, frogs).get_snake_eating_frog(FrogID(4))

        frogs.get_frog.assert_awaited_once_with(FrogID(4))
        snakes.get_snake.assert_awaited_once_with(SnakeID(9))


class TestFailFast:
    @pytest.mark.asyncio
    async def test_first_lookup_failure_skips_second(self) -> None:
        error = NotFound("No frog with identity 4", id=4)
        frogs = AsyncMock()
        frogs.get_frog.side_effect = error
        snakes = AsyncMock()

        with pytest.raises(NotFound) as exc_info:
            await SnakeUseCaseImpl(snakes, frogs).get_snake_eating_frog(FrogID(4))

        assert exc_info.value is error
        assert frogs.get_frog.await_count == 1
        assert snakes.get_snake.await_count == 0

    @pytest.mark.asyncio
    async def test_second_lookup_failure_propagates(self) -> None:
        error = Unavailable("Database connection is closed")
        snakes = AsyncMock()
        snakes.get_snake.return_value = Snake(id=SnakeID(1), eaten_by=SlugID(2))
        slugs = AsyncMock()
        slugs.get_slug.side_effect = error

        with pytest.raises(Unavailable) as exc_info:
            await SlugUseCaseImpl(slugs, snakes).get_slug_eating_snake(SnakeID(1))

        assert exc_info.value is error
        assert snakes.get_snake.await_count == 1
        assert slugs.get_slug.await_count == 1


class TestWiringShapes:
    def test_provider_builds_fresh_use_cases(self, chain: Catalog) -> None:
        provider = UseCaseProviderImpl(CatalogRepository(chain))
        assert isinstance(provider, UseCaseProvider)
        assert provider.frog_use_case() is not provider.frog_use_case()

    def test_provider_asks_repository_provider_per_call(self) -> None:
        repositories = MagicMock()
        provider = UseCaseProviderImpl(repositories)
        provider.snake_use_case()
        provider.snake_use_case()
        assert repositories.snake_repository.call_count == 2
        assert repositories.frog_repository.call_count == 2

    def test_use_case_returns_self(self, chain: Catalog) -> None:
        use_case = UseCase(CatalogRepository(chain))
        assert use_case.snake_use_case() is use_case
        assert use_case.slug_use_case() is use_case
        assert use_case.frog_use_case() is use_case

    def test_bound_use_case_plays_every_role(self, chain: Catalog) -> None:
        assert isinstance(BoundUseCase(CatalogRepository(chain)), AllUseCases)

    @pytest.mark.asyncio
    async def test_shapes_agree(self, chain: Catalog) -> None:
        repo = CatalogRepository(chain)
        per_call = UseCaseProviderImpl(repo).slug_use_case()
        shared = UseCase(repo).slug_use_case()
        bound = BoundUseCase(repo)
        expected = Slug(id=SlugID(2), eaten_by=FrogID(3))
        for use_case in (per_call, shared, bound):
            assert await use_case.get_slug_eating_snake(SnakeID(1)) == expected
