"""structlog configuration for trophic.

Records from the resolution chain are tagged with the layer that emitted
them, so ``-v`` output reads as one line per hop::

    debug  hop slug:2 -> frog:3  layer=orchestration logger=trophic.use_cases.orchestration

Output goes to stderr as console lines, or as JSON lines with ``--log-json``.
SQLAlchemy stays at WARNING unless ``log_sql`` asks for its statement log.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

# Logger-name prefix -> chain layer, most specific first.
LAYERS: tuple[tuple[str, str], ...] = (
    ("trophic.infrastructure", "data_access"),
    ("trophic.use_cases", "orchestration"),
    ("trophic.services.composition", "composition"),
    ("trophic.handler", "entry_point"),
    ("trophic.wiring", "wiring"),
)


def layer_of(logger_name: str) -> str | None:
    """Return the chain layer owning *logger_name*, if any."""
    for prefix, layer in LAYERS:
        if logger_name == prefix or logger_name.startswith(prefix + "."):
            return layer
    return None


def add_layer(_logger: Any, _method: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog processor: tag events from the chain with their ``layer``."""
    layer = layer_of(str(event_dict.get("logger", "")))
    if layer is not None:
        event_dict.setdefault("layer", layer)
    return event_dict


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    log_sql: bool = False,
) -> None:
    """Route stdlib and structlog records through one stderr handler.

    Args:
        verbose: Show the per-hop DEBUG records. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        log_sql: Show SQLAlchemy's INFO statement log.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_layer,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(logging.WARNING)

    logging.getLogger("trophic").setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if log_sql else logging.WARNING)
