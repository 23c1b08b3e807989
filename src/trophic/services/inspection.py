"""Catalog inspection: load a catalog file and report its integrity issues."""

from __future__ import annotations

from typing import TYPE_CHECKING

from trophic.domain.errors import ResolutionError
from trophic.infrastructure.catalog import load_catalog
from trophic.services.contracts import CatalogCheckData, dump_validated
from trophic.services.result import ServiceResult
from trophic.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from pathlib import Path


@traced
def check_catalog(path: Path) -> ServiceResult:
    """Validate the catalog at *path*.

    A file that cannot be loaded yields a failed result. Integrity issues
    leave the result ok and add a warning.
    """
    try:
        with trace_span("catalog.load"):
            catalog = load_catalog(path)
    except ResolutionError as exc:
        return ServiceResult.failure("catalog_check", exc)

    with trace_span("catalog.check") as span:
        issues = catalog.check()
        if span:
            span.annotate("issues", len(issues))

    data = dump_validated(
        CatalogCheckData,
        {
            "path": str(path),
            "snakes": len(catalog.snakes),
            "slugs": len(catalog.slugs),
            "frogs": len(catalog.frogs),
            "issues": issues,
        },
    )
    warnings = [f"{len(issues)} integrity issue(s)"] if issues else []
    return ServiceResult(ok=True, op="catalog_check", data=data, warnings=warnings)
