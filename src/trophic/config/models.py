"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, trophic.toml only contains overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from trophic.domain.types import Strategy

# --- trophic.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    url: str = "sqlite://"


class MessageQueueConfig(BaseModel):
    """[message_queue] section."""

    model_config = {"frozen": True}

    url: str = "memory://"


class WiringConfig(BaseModel):
    """[wiring] section."""

    model_config = {"frozen": True}

    strategy: Strategy = Strategy.PER_CALL
    catalog: Path | None = None


class TrophicConfig(BaseModel):
    """Full trophic.toml contents."""

    model_config = {"frozen": True}

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    message_queue: MessageQueueConfig = Field(default_factory=MessageQueueConfig)
    wiring: WiringConfig = Field(default_factory=WiringConfig)
