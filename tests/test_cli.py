"""CLI tests: ingest into a temp snapshot, then query it."""

import json
from pathlib import Path

import pytest

from ee_draws.cli.main import main
from ee_draws.models.draw import DrawCollection
from ee_draws.store import JsonSnapshotStore


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("EE_DRAWS_SOURCE_URL", "EE_DRAWS_SNAPSHOT_PATH", "EE_DRAWS_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def db_path(tmp_path: Path, collection: DrawCollection) -> Path:
    path = tmp_path / "draws.json"
    JsonSnapshotStore(path).save(collection)
    return path


class TestIngestCommand:
    """Tests for `ee-draws ingest`."""

    def test_ingest_writes_snapshot(self, ircc_connector_patched, tmp_path: Path, capsys) -> None:
        db = tmp_path / "database" / "draws.json"
        with ircc_connector_patched:
            main(["--db", str(db), "ingest"])
        result = json.loads(capsys.readouterr().out)
        assert result["fetched"] == 9
        assert result["saved"] == 6
        assert JsonSnapshotStore(db).load().total_draws == 6

    def test_ingest_output_file(self, ircc_connector_patched, tmp_path: Path) -> None:
        output = tmp_path / "out.json"
        with ircc_connector_patched:
            main(["--db", str(tmp_path / "draws.json"), "ingest", "--output", str(output)])
        assert json.loads(output.read_text())["totalDraws"] == 6

    def test_invalid_upstream_exits_nonzero(self, tmp_path: Path, capsys) -> None:
        from unittest.mock import patch

        with patch("ee_draws.connectors.ircc.connector.IrccConnector._fetch_json", return_value={}):
            with pytest.raises(SystemExit) as exc_info:
                main(["--db", str(tmp_path / "draws.json"), "ingest"])
        assert exc_info.value.code == 1
        assert '"status": 502' in capsys.readouterr().err
        assert not (tmp_path / "draws.json").exists()


class TestQueryCommands:
    """Tests for draws, draw, latest and stats."""

    def test_draws_with_filters(self, db_path: Path, capsys) -> None:
        main(["--db", str(db_path), "draws", "--year", "2024", "--category", "pnp"])
        body = json.loads(capsys.readouterr().out)
        assert body["count"] == 1
        assert body["draws"][0]["drawNumber"] == 330

    def test_draw_by_id(self, db_path: Path, capsys) -> None:
        main(["--db", str(db_path), "draw", "325"])
        assert json.loads(capsys.readouterr().out)["roundType"] == "General"

    def test_draw_invalid_id(self, db_path: Path, capsys) -> None:
        with pytest.raises(SystemExit):
            main(["--db", str(db_path), "draw", "abc"])
        assert '"status": 400' in capsys.readouterr().err

    def test_latest(self, db_path: Path, capsys) -> None:
        main(["--db", str(db_path), "latest"])
        assert json.loads(capsys.readouterr().out)["date"] == "2025-03-21"

    def test_stats_year(self, db_path: Path, capsys) -> None:
        main(["--db", str(db_path), "stats", "--year", "2025"])
        body = json.loads(capsys.readouterr().out)
        assert body["totalDraws"] == 4
        assert body["filter"] == {"year": "2025"}

    def test_missing_snapshot(self, tmp_path: Path, capsys) -> None:
        with pytest.raises(SystemExit):
            main(["--db", str(tmp_path / "none.json"), "latest"])
        err = capsys.readouterr().err
        assert '"status": 404' in err
        assert "fetch data first" in err

    @pytest.mark.parametrize("limit", ["-1", "²"])
    def test_bad_limit(self, db_path: Path, capsys, limit: str) -> None:
        with pytest.raises(SystemExit):
            main(["--db", str(db_path), "draws", "--limit", limit])
        assert '"status": 400' in capsys.readouterr().err
