"""Storage collaborator: an opaque database handle.

The data-access layer only acquires and holds the handle; it issues no
queries against it. SQLAlchemy engines connect lazily, so building a
Database never touches the network or the filesystem.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.exc import ArgumentError, NoSuchModuleError

from trophic.domain.errors import Unavailable

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """The raw connection handle owned by a :class:`Database`."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    @property
    def url(self) -> str:
        return self.engine.url.render_as_string(hide_password=True)


class Database:
    """Holds a :class:`DatabaseConnection` for the lifetime of the process."""

    def __init__(self, conn: DatabaseConnection) -> None:
        self._conn = conn
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def conn(self) -> DatabaseConnection:
        """Return the held connection.

        Raises:
            Unavailable: The database has been closed.
        """
        if self._closed:
            raise Unavailable("Database connection is closed", url=self._conn.url)
        return self._conn

    def close(self) -> None:
        """Dispose of the engine. Idempotent."""
        if self._closed:
            return
        self._conn.engine.dispose()
        self._closed = True
        logger.debug("Database closed: %s", self._conn.url)


def open_database(url: str) -> Database:
    """Build a :class:`Database` for *url* without connecting.

    Raises:
        Unavailable: The URL is malformed, names an unknown dialect, or its
            driver is not installed.
    """
    try:
        engine = create_engine(url)
    except (ArgumentError, NoSuchModuleError, ImportError) as exc:
        raise Unavailable(f"Cannot open database {url!r}: {exc}", url=url) from exc
    logger.debug("Database opened: %s", url)
    return Database(DatabaseConnection(engine))
