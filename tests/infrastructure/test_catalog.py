"""Tests for the in-memory catalog and its TOML loader."""

from __future__ import annotations

from pathlib import Path

import pytest

from trophic.domain.entities import Frog, Slug, Snake
from trophic.domain.errors import InvalidIdentity, NotFound, Unavailable
from trophic.domain.ids import FrogID, SlugID, SnakeID
from trophic.infrastructure.catalog import (
    Catalog,
    CatalogRepository,
    CatalogRepositoryProvider,
    load_catalog,
)


class TestCatalog:
    def test_from_chain_closes_cycle(self, chain: Catalog) -> None:
        assert len(chain) == 3
        assert chain.snakes[SnakeID(1)].eaten_by == SlugID(2)
        assert chain.slugs[SlugID(2)].eaten_by == FrogID(3)
        assert chain.frogs[FrogID(3)].eaten_by == SnakeID(1)
        assert chain.check() == []

    def test_add_replaces_same_identity(self) -> None:
        catalog = Catalog().add(Snake(id=SnakeID(1), eaten_by=SlugID(1)))
        catalog.add(Snake(id=SnakeID(1), eaten_by=SlugID(9)))
        assert len(catalog) == 1
        assert catalog.snakes[SnakeID(1)].eaten_by == SlugID(9)

    def test_check_reports_dangling(self) -> None:
        catalog = Catalog().add(
            Slug(id=SlugID(2), eaten_by=FrogID(8)),
            Frog(id=FrogID(3), eaten_by=SnakeID(1)),
        )
        issues = catalog.check()
        assert issues == [
            "slug:2 is eaten by missing frog:8",
            "frog:3 is eaten by missing snake:1",
        ]

    def test_check_reports_chain_that_does_not_close(self) -> None:
        catalog = Catalog().add(
            Snake(id=SnakeID(1), eaten_by=SlugID(2)),
            Slug(id=SlugID(2), eaten_by=FrogID(3)),
            Frog(id=FrogID(3), eaten_by=SnakeID(4)),
            Snake(id=SnakeID(4), eaten_by=SlugID(2)),
        )
        assert catalog.check() == [
            "snake:1 does not close: snake:1 -> slug:2 -> frog:3 -> snake:4",
        ]

    def test_two_closed_chains_are_clean(self) -> None:
        other = Catalog.from_chain(4, 5, 6)
        catalog = Catalog.from_chain(1, 2, 3).add(
            *other.snakes.values(), *other.slugs.values(), *other.frogs.values()
        )
        assert len(catalog) == 6
        assert catalog.check() == []

    def test_lookup(self, chain: Catalog) -> None:
        assert chain.lookup(FrogID(3)) == Frog(id=FrogID(3), eaten_by=SnakeID(1))
        assert chain.lookup(SlugID(9)) is None


class TestLoadCatalog:
    def test_loads_chain(self, chain_file: Path, chain: Catalog) -> None:
        assert load_catalog(chain_file) == chain

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(Unavailable, match="Cannot read catalog"):
            load_catalog(tmp_path / "missing.toml")

    def test_bad_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.toml"
        path.write_text("[[snake]\n", encoding="utf-8")
        with pytest.raises(InvalidIdentity, match="Invalid catalog"):
            load_catalog(path)

    def test_negative_identity(self, tmp_path: Path) -> None:
        path = tmp_path / "neg.toml"
        path.write_text("[[frog]]\nid = -1\neaten_by = 0\n", encoding="utf-8")
        with pytest.raises(InvalidIdentity):
            load_catalog(path)

    def test_unknown_section(self, tmp_path: Path) -> None:
        path = tmp_path / "newt.toml"
        path.write_text("[[newt]]\nid = 1\neaten_by = 0\n", encoding="utf-8")
        with pytest.raises(InvalidIdentity):
            load_catalog(path)


class TestCatalogRepository:
    @pytest.mark.asyncio
    async def test_returns_stored_snapshot(self, chain: Catalog) -> None:
        repo = CatalogRepository(chain)
        assert await repo.get_snake(SnakeID(1)) == Snake(id=SnakeID(1), eaten_by=SlugID(2))

    @pytest.mark.asyncio
    async def test_unknown_identity(self, chain: Catalog) -> None:
        repo = CatalogRepository(chain)
        with pytest.raises(NotFound) as exc_info:
            await repo.get_frog(FrogID(0))
        assert exc_info.value.code == "NOT_FOUND"
        assert exc_info.value.detail == {"id": 0}

    def test_is_its_own_provider(self, chain: Catalog) -> None:
        repo = CatalogRepository(chain)
        assert repo.snake_repository() is repo
        assert repo.frog_repository() is repo


class TestCatalogRepositoryProvider:
    def test_new_repository_per_call(self, chain: Catalog) -> None:
        provider = CatalogRepositoryProvider(chain)
        assert isinstance(provider.snake_repository(), CatalogRepository)
        assert provider.snake_repository() is not provider.snake_repository()
        assert provider.slug_repository() is not provider.frog_repository()

    @pytest.mark.asyncio
    async def test_repositories_share_the_catalog(self, chain: Catalog) -> None:
        provider = CatalogRepositoryProvider(chain)
        slug = await provider.slug_repository().get_slug(SlugID(2))
        assert slug == Slug(id=SlugID(2), eaten_by=FrogID(3))
