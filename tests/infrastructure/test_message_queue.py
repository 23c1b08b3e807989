"""Tests for the message-queue handle."""

from __future__ import annotations

import pytest

from trophic.domain.errors import Unavailable
from trophic.infrastructure.message_queue import (
    MessageQueue,
    MessageQueueConnection,
    open_message_queue,
)


class TestMessageQueue:
    def test_open(self) -> None:
        mq = open_message_queue("amqp://broker:5672")
        assert mq.conn() == MessageQueueConnection("amqp://broker:5672")

    def test_missing_scheme(self) -> None:
        with pytest.raises(Unavailable, match="missing scheme"):
            open_message_queue("broker")

    def test_closed(self, message_queue: MessageQueue) -> None:
        message_queue.close()
        assert message_queue.closed
        with pytest.raises(Unavailable):
            message_queue.conn()
