"""Handler: the entry point issuing the three two-hop queries.

Each query starts from the zero identity of the kind two hops away:

- snake eating the frog eating slug 0
- slug eating the snake eating frog 0
- frog eating the slug eating snake 0

:meth:`Handler.run` fails on the first error. :meth:`Handler.run_each`
evaluates every query on its own and reports one ServiceResult per kind.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from trophic.domain.errors import InvalidIdentity, ResolutionError
from trophic.domain.ids import ID_TYPES, FrogID, SlugID, SnakeID
from trophic.domain.types import EntityKind, eater_of
from trophic.services.contracts import (
    ResolveResultData,
    RunResultData,
    dump_validated,
)
from trophic.services.result import ServiceError, ServiceResult
from trophic.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from trophic.domain.entities import Entity, Frog, Slug, Snake
    from trophic.domain.ids import EntityID
    from trophic.domain.ports import AllServices, ServiceProvider

logger = logging.getLogger(__name__)

KINDS: tuple[EntityKind, ...] = (EntityKind.SNAKE, EntityKind.SLUG, EntityKind.FROG)


class Handler:
    """Runs two-hop queries against the services handed out by a provider.

    The provider is asked for the service of a kind on every query, so
    service lifetime follows the provider's strategy.
    """

    def __init__(self, services: ServiceProvider) -> None:
        self._services = services

    @classmethod
    def from_provider(cls, provider: ServiceProvider) -> Handler:
        return cls(provider)

    @classmethod
    def from_service(cls, service: AllServices) -> Handler:
        """Use a single object satisfying every service role."""
        return cls(_BoundServices(service))

    # ------------------------------------------------------------------
    # Raising API
    # ------------------------------------------------------------------

    async def run(self) -> tuple[Snake, Slug, Frog]:
        """Resolve all three kinds from zero identities, in order.

        Raises the first ResolutionError encountered; no partial result.
        """
        snake = await self._services.snake_service().get_snake_eating_frog_eating_slug(SlugID())
        slug = await self._services.slug_service().get_slug_eating_snake_eating_frog(FrogID())
        frog = await self._services.frog_service().get_frog_eating_slug_eating_snake(SnakeID())
        return snake, slug, frog

    async def resolve(self, kind: EntityKind, far_id: EntityID) -> Entity:
        """Resolve the *kind* entity two hops away from *far_id*.

        *far_id* must identify the kind that eats *kind*: for a snake that
        is a slug, and so on around the cycle.

        Raises:
            InvalidIdentity: *far_id* has the wrong kind.
        """
        expected = eater_of(kind)
        if type(far_id) is not ID_TYPES[expected]:
            raise InvalidIdentity(
                f"Resolving a {kind} needs a {expected} identity, got {type(far_id).__name__}",
                kind=str(kind),
                expected=str(expected),
            )
        match kind:
            case EntityKind.SNAKE:
                snake_service = self._services.snake_service()
                return await snake_service.get_snake_eating_frog_eating_slug(far_id)  # type: ignore[arg-type]
            case EntityKind.SLUG:
                slug_service = self._services.slug_service()
                return await slug_service.get_slug_eating_snake_eating_frog(far_id)  # type: ignore[arg-type]
            case EntityKind.FROG:
                frog_service = self._services.frog_service()
                return await frog_service.get_frog_eating_slug_eating_snake(far_id)  # type: ignore[arg-type]

    # ------------------------------------------------------------------
    # ServiceResult API
    # ------------------------------------------------------------------

    @traced
    async def query(self, kind: EntityKind, far_id: EntityID | None = None) -> ServiceResult:
        """Run one two-hop query and capture its outcome.

        Defaults *far_id* to the zero identity of the eating kind.
        """
        op = f"resolve_{kind}"
        start = far_id if far_id is not None else ID_TYPES[eater_of(kind)]()
        try:
            with trace_span(f"{kind}.two_hop") as span:
                entity = await self.resolve(kind, start)
                if span:
                    span.annotate("far_id", str(start))
        except ResolutionError as exc:
            logger.debug("%s failed: %s %s", op, exc.code, exc.message)
            return ServiceResult.failure(op, exc)

        data = dump_validated(
            ResolveResultData,
            {"from_kind": str(start.kind), "from_id": start.value, "entity": entity.to_dict()},
        )
        return ServiceResult(ok=True, op=op, data=data)

    async def run_each(self, *, concurrent: bool = False) -> dict[EntityKind, ServiceResult]:
        """Evaluate the three zero-identity queries independently.

        A failure in one query leaves the other two untouched. With
        *concurrent*, the queries are awaited together via asyncio.gather.
        """
        if concurrent:
            results = await asyncio.gather(*(self.query(kind) for kind in KINDS))
            return dict(zip(KINDS, results, strict=True))
        return {kind: await self.query(kind) for kind in KINDS}


class _BoundServices:
    """Provider view of one object that plays every service role."""

    def __init__(self, service: AllServices) -> None:
        self._service = service

    def snake_service(self) -> AllServices:
        return self._service

    def slug_service(self) -> AllServices:
        return self._service

    def frog_service(self) -> AllServices:
        return self._service


def summarize(results: dict[EntityKind, ServiceResult]) -> ServiceResult:
    """Fold per-kind results into one ``run`` result.

    Succeeds only when every query succeeded. On failure, the error carries
    the first failing query's code and the failed queries in ``detail``;
    entities resolved by the other queries are not reported.
    """
    warnings = [w for result in results.values() for w in result.warnings]
    meta = {str(kind): result.meta for kind, result in results.items() if result.meta}

    failed = {kind: result for kind, result in results.items() if not result.ok}
    if not failed:
        data = dump_validated(
            RunResultData,
            {str(kind): result.data["entity"] for kind, result in results.items()},
        )
        return ServiceResult(ok=True, op="run", data=data, warnings=warnings, meta=meta or None)

    first = next(iter(failed.values()))
    assert first.error is not None
    detail = {
        "failed": {
            str(kind): result.error.model_dump()
            for kind, result in failed.items()
            if result.error is not None
        },
    }
    error = ServiceError(
        code=first.error.code,
        message=f"{len(failed)} of {len(results)} queries failed: {first.error.message}",
        detail=detail,
    )
    return ServiceResult(ok=False, op="run", error=error, warnings=warnings, meta=meta or None)
