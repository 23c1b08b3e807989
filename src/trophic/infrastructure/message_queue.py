"""Message-queue collaborator: an opaque connection handle.

Held by the data-access layer alongside the database. No messages are
published or consumed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from trophic.domain.errors import Unavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MessageQueueConnection:
    """Connection details for the queue broker."""

    url: str = "memory://"


class MessageQueue:
    """Holds a :class:`MessageQueueConnection` for the lifetime of the process."""

    def __init__(self, conn: MessageQueueConnection) -> None:
        self._conn = conn
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def conn(self) -> MessageQueueConnection:
        """Return the held connection.

        Raises:
            Unavailable: The queue has been closed.
        """
        if self._closed:
            raise Unavailable("Message queue connection is closed", url=self._conn.url)
        return self._conn

    def close(self) -> None:
        self._closed = True
        logger.debug("Message queue closed: %s", self._conn.url)


def open_message_queue(url: str) -> MessageQueue:
    """Build a :class:`MessageQueue` for *url*.

    Raises:
        Unavailable: *url* has no scheme.
    """
    if "://" not in url:
        raise Unavailable(f"Cannot open message queue {url!r}: missing scheme", url=url)
    logger.debug("Message queue opened: %s", url)
    return MessageQueue(MessageQueueConnection(url))
