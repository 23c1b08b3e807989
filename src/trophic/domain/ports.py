"""Capability interfaces for every layer.

One protocol per entity role per layer. The food cycle means the snake
capability needs the frog capability, which needs the slug capability,
which needs the snake capability again. Splitting each layer into three
narrow roles (plus a provider that hands them out) breaks that cycle at
the type level while the call chain keeps it at runtime.

Layers, bottom-up:
- Repository: resolve one entity by its own identity.
- UseCase: one hop, "the X eating this Y".
- Service: two hops, "the X eating the Z eating this Y".
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from trophic.domain.entities import Frog, Slug, Snake
from trophic.domain.ids import FrogID, SlugID, SnakeID

# ---------------------------------------------------------------------------
# Data access
# ---------------------------------------------------------------------------


@runtime_checkable
class SnakeRepository(Protocol):
    async def get_snake(self, id: SnakeID) -> Snake: ...


@runtime_checkable
class SlugRepository(Protocol):
    async def get_slug(self, id: SlugID) -> Slug: ...


@runtime_checkable
class FrogRepository(Protocol):
    async def get_frog(self, id: FrogID) -> Frog: ...


@runtime_checkable
class RepositoryProvider(Protocol):
    """Hands out the per-entity repositories for the orchestration layer."""

    def snake_repository(self) -> SnakeRepository: ...

    def slug_repository(self) -> SlugRepository: ...

    def frog_repository(self) -> FrogRepository: ...


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------


@runtime_checkable
class SnakeUseCase(Protocol):
    async def get_snake(self, id: SnakeID) -> Snake: ...

    async def get_snake_eating_frog(self, frog_id: FrogID) -> Snake: ...


@runtime_checkable
class SlugUseCase(Protocol):
    async def get_slug(self, id: SlugID) -> Slug: ...

    async def get_slug_eating_snake(self, snake_id: SnakeID) -> Slug: ...


@runtime_checkable
class FrogUseCase(Protocol):
    async def get_frog(self, id: FrogID) -> Frog: ...

    async def get_frog_eating_slug(self, slug_id: SlugID) -> Frog: ...


@runtime_checkable
class UseCaseProvider(Protocol):
    """Hands out the per-entity use cases for the composition layer."""

    def snake_use_case(self) -> SnakeUseCase: ...

    def slug_use_case(self) -> SlugUseCase: ...

    def frog_use_case(self) -> FrogUseCase: ...


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


@runtime_checkable
class SnakeService(Protocol):
    async def get_snake_eating_frog_eating_slug(self, slug_id: SlugID) -> Snake: ...


@runtime_checkable
class SlugService(Protocol):
    async def get_slug_eating_snake_eating_frog(self, frog_id: FrogID) -> Slug: ...


@runtime_checkable
class FrogService(Protocol):
    async def get_frog_eating_slug_eating_snake(self, snake_id: SnakeID) -> Frog: ...


@runtime_checkable
class ServiceProvider(Protocol):
    """Hands out the per-entity services for the entry point."""

    def snake_service(self) -> SnakeService: ...

    def slug_service(self) -> SlugService: ...

    def frog_service(self) -> FrogService: ...


# ---------------------------------------------------------------------------
# Capability sets (bound wiring)
# ---------------------------------------------------------------------------


@runtime_checkable
class AllRepositories(SnakeRepository, SlugRepository, FrogRepository, Protocol):
    """Everything a bound use case needs from one object."""


@runtime_checkable
class AllUseCases(SnakeUseCase, SlugUseCase, FrogUseCase, Protocol):
    """Everything a bound service needs from one object."""


@runtime_checkable
class AllServices(SnakeService, SlugService, FrogService, Protocol):
    """Everything a bound handler needs from one object."""
