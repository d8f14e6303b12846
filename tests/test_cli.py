"""Tests for the command-line entry points."""

import json
from pathlib import Path

import pytest

from emote_catalog.cli import main, repair_main
from emote_catalog.store import EmoteStore

from conftest import emote, write_manifest


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "temp"
    packages = root / "packages"
    write_manifest(
        packages,
        "alpha",
        [
            (
                "Alpha Pack",
                [
                    emote("smile", "[tv_smile]", "https://x.com/e/a1.png"),
                    emote("", "[tv_doge]", "https://x.com/e/hash01.png"),
                ],
            )
        ],
    )
    (packages / "alpha" / "smile.png").write_bytes(b"smile")
    (packages / "alpha" / "hash01.png").write_bytes(b"doge")
    return root


class TestMain:
    """Test the composable store operations."""

    def test_full_run(self, workspace: Path, capsys) -> None:
        """Test init, ingest, exports and relocation in one invocation."""
        main(
            [
                "--workspace", str(workspace),
                "--initdb", "--ingest", "--csv", "--json", "--json-min", "--img",
            ]
        )

        for name in ["emote.db", "emote.csv", "emote.json", "emote.min.json"]:
            assert (workspace / name).exists()
        assert (workspace / "emotes" / "[tv_smile].png").read_bytes() == b"smile"
        assert (workspace / "packages" / "alpha" / "smile.png").exists()

        rejections = json.loads((workspace / "invalid_emotes.json").read_text(encoding="utf-8"))
        assert rejections["missing_emote_name"][0]["danmaku_name"] == "[tv_doge]"

        err = capsys.readouterr().err
        assert "Imported 1 emotes from 1 folders" in err
        assert "Run time:" in err

    def test_move_flag(self, workspace: Path) -> None:
        """Test that --move relocates instead of copying."""
        main(["--workspace", str(workspace), "--initdb", "--ingest", "--img", "--move"])

        assert (workspace / "emotes" / "[tv_smile].png").exists()
        assert not (workspace / "packages" / "alpha" / "smile.png").exists()

    def test_path_overrides(self, workspace: Path, tmp_path: Path) -> None:
        """Test that per-path flags override the workspace layout."""
        db_path = tmp_path / "custom" / "store.db"
        main(
            [
                "--workspace", str(workspace),
                "--db", str(db_path),
                "--emotes-dir", str(tmp_path / "out"),
                "--initdb", "--ingest", "--img",
            ]
        )

        with EmoteStore(db_path) as store:
            assert store.count() == 1
        assert (tmp_path / "out" / "[tv_smile].png").exists()

    def test_export_empty_store_exits(self, workspace: Path, capsys) -> None:
        """Test that exporting an empty store exits with an error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--workspace", str(workspace), "--initdb", "--csv"])

        assert exc_info.value.code == 1
        assert "Nothing to export" in capsys.readouterr().err
        assert not (workspace / "emote.csv").exists()

    def test_ingest_without_initdb_exits(self, workspace: Path, capsys) -> None:
        """Test that ingesting into an uninitialized store exits with guidance."""
        with pytest.raises(SystemExit):
            main(["--workspace", str(workspace), "--ingest"])

        assert "--initdb" in capsys.readouterr().err

    def test_sql_verbose_traces(self, workspace: Path, capsys) -> None:
        """Test that --sql-verbose prints SQL statements."""
        main(["--workspace", str(workspace), "--initdb", "--sql-verbose"])

        assert "CREATE TABLE IF NOT EXISTS emotes" in capsys.readouterr().err


class TestRepairMain:
    """Test the repair entry point."""

    def test_repair_after_ingest(self, workspace: Path, capsys) -> None:
        """Test that repairing then re-ingesting stores the recovered emote."""
        main(["--workspace", str(workspace), "--initdb", "--ingest"])
        repair_main(
            [
                "--packages-dir", str(workspace / "packages"),
                "--rejections", str(workspace / "invalid_emotes.json"),
            ]
        )
        main(["--workspace", str(workspace), "--ingest"])

        assert (workspace / "packages" / "alpha" / "doge.png").exists()
        with EmoteStore(workspace / "emote.db") as store:
            stored = store.get_by_danmaku_name("[tv_doge]")
        assert stored is not None
        assert stored["emote_name"] == "doge"
        assert "Repaired 1 emotes" in capsys.readouterr().err

    def test_missing_packages_dir_exits(self, tmp_path: Path) -> None:
        """Test that a missing packages directory is reported."""
        with pytest.raises(SystemExit) as exc_info:
            repair_main(["--packages-dir", str(tmp_path / "missing")])

        assert exc_info.value.code == 1
