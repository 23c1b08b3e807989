"""Tests for TrophicSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from trophic.config.settings import TrophicSettings
from trophic.domain.types import Strategy


@pytest.mark.usefixtures("_isolated_cwd")
class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = TrophicSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.database.url == "sqlite://"
        assert settings.message_queue.url == "memory://"
        assert settings.wiring.strategy is Strategy.PER_CALL
        assert settings.wiring.catalog is None

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TrophicSettings.from_cli(start=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


@pytest.mark.usefixtures("_isolated_cwd")
class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "trophic.toml").write_text(
            '[database]\nurl = "sqlite:///food.db"\n[wiring]\nstrategy = "bound"\n'
        )
        settings = TrophicSettings.from_cli(start=tmp_path)
        assert settings.config_path == tmp_path / "trophic.toml"
        assert settings.database.url == "sqlite:///food.db"
        assert settings.wiring.strategy is Strategy.BOUND
        assert settings.message_queue.url == "memory://"  # default preserved

    def test_relative_catalog_anchored_at_config(self, tmp_path: Path) -> None:
        (tmp_path / "trophic.toml").write_text('[wiring]\ncatalog = "data/chain.toml"\n')
        child = tmp_path / "sub"
        child.mkdir()
        settings = TrophicSettings.from_cli(start=child)
        assert settings.wiring.catalog == tmp_path / "data" / "chain.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[message_queue]\nurl = "amqp://custom"\n')
        settings = TrophicSettings.from_cli(config_path=str(custom))
        assert settings.message_queue.url == "amqp://custom"
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "trophic.toml").write_text("[database\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TrophicSettings.from_cli(start=tmp_path)

    def test_unknown_strategy(self, tmp_path: Path) -> None:
        (tmp_path / "trophic.toml").write_text('[wiring]\nstrategy = "lazy"\n')
        with pytest.raises(ValidationError):
            TrophicSettings.from_cli(start=tmp_path)


@pytest.mark.usefixtures("_isolated_cwd")
class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = TrophicSettings.from_cli(start=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_none_flags_are_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TROPHIC_QUIET", "true")
        settings = TrophicSettings.from_cli(start=tmp_path, quiet=None)
        assert settings.quiet is True

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "trophic.toml").write_text('[database]\nurl = "sqlite:///toml.db"\n')
        monkeypatch.setenv("TROPHIC_DATABASE__URL", "sqlite:///env.db")
        settings = TrophicSettings.from_cli(start=tmp_path)
        assert settings.database.url == "sqlite:///env.db"
