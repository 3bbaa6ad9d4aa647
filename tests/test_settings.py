"""Unit tests for Settings."""

from pathlib import Path

import pytest

from ee_draws.connectors.ircc import IRCC_ROUNDS_URL
from ee_draws.errors import ConfigError
from ee_draws.models.settings import Settings


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("EE_DRAWS_SOURCE_URL", "EE_DRAWS_SNAPSHOT_PATH", "EE_DRAWS_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self) -> None:
        settings = Settings.load()
        assert settings.source_url == IRCC_ROUNDS_URL
        assert settings.snapshot_path == Path("database/draws.json")
        assert settings.timeout == 60.0

    def test_from_yaml_nested(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text(
            """
ingest:
  source_url: https://example.com/rounds.json
  timeout: 15
store:
  snapshot_path: /var/lib/ee-draws/draws.json
"""
        )
        settings = Settings.from_yaml(path)
        assert settings.source_url == "https://example.com/rounds.json"
        assert settings.timeout == 15
        assert settings.snapshot_path == Path("/var/lib/ee-draws/draws.json")

    def test_from_yaml_flat(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("snapshot_path: data/draws.json\n")
        settings = Settings.from_yaml(path)
        assert settings.snapshot_path == Path("data/draws.json")
        assert settings.source_url == IRCC_ROUNDS_URL

    def test_empty_yaml_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("")
        assert Settings.from_yaml(path).timeout == 60.0

    def test_env_overrides_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("snapshot_path: data/draws.json\ntimeout: 10\n")
        monkeypatch.setenv("EE_DRAWS_SNAPSHOT_PATH", "/tmp/other.json")
        monkeypatch.setenv("EE_DRAWS_TIMEOUT", "5")
        settings = Settings.load(path)
        assert settings.snapshot_path == Path("/tmp/other.json")
        assert settings.timeout == 5.0

    def test_invalid_timeout_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EE_DRAWS_TIMEOUT", "soon")
        with pytest.raises(ConfigError):
            Settings.load()

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError):
            Settings.from_yaml(tmp_path / "nope.yaml")

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "settings.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            Settings.from_yaml(path)
