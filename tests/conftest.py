"""Shared pytest fixtures for trophic tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from trophic.infrastructure.catalog import Catalog
from trophic.infrastructure.database import Database, open_database
from trophic.infrastructure.message_queue import MessageQueue, open_message_queue
from trophic.services.telemetry import _current_span, disable_telemetry

CHAIN_TOML = """\
[[snake]]
id = 1
eaten_by = 2

[[slug]]
id = 2
eaten_by = 3

[[frog]]
id = 3
eaten_by = 1
"""


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by AppContext."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    trophic_level = logging.getLogger("trophic").level
    sql_level = logging.getLogger("sqlalchemy.engine").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("trophic").setLevel(trophic_level)
    logging.getLogger("sqlalchemy.engine").setLevel(sql_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty directory with no trophic.toml and no TROPHIC_* env."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TROPHIC_CONFIG", raising=False)
    monkeypatch.delenv("TROPHIC_DATABASE__URL", raising=False)
    monkeypatch.delenv("TROPHIC_MESSAGE_QUEUE__URL", raising=False)
    monkeypatch.delenv("TROPHIC_WIRING__STRATEGY", raising=False)
    monkeypatch.delenv("TROPHIC_WIRING__CATALOG", raising=False)


@pytest.fixture
def database() -> Generator[Database]:
    """In-memory SQLite database handle."""
    db = open_database("sqlite://")
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def message_queue() -> Generator[MessageQueue]:
    mq = open_message_queue("memory://")
    try:
        yield mq
    finally:
        mq.close()


@pytest.fixture
def chain() -> Catalog:
    """Snake 1 is eaten by slug 2, slug 2 by frog 3, frog 3 by snake 1."""
    return Catalog.from_chain(snake=1, slug=2, frog=3)


@pytest.fixture
def chain_file(tmp_path: Path) -> Path:
    """The same chain as :func:`chain`, written as a catalog TOML file."""
    path = tmp_path / "chain.toml"
    path.write_text(CHAIN_TOML, encoding="utf-8")
    return path
