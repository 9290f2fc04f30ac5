"""Tests for the command-line entry point."""

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from account_intake.cli import build_parser, main
from account_intake.store import AccountStore

ENV_VARS = {"ACCOUNT_DB_PATH", "FLUSH_ON_WRITE", "CSV_PATH", "AUTO_INGEST", "HOST", "PORT", "LOG_LEVEL", "LOG_FORMAT"}

ROWS = [
    ["A1", "Ann Smith", "", "10", "", ""],
    ["A2", "Bob Jones", "", "abc", "", ""],
]


@pytest.fixture(autouse=True)
def isolated(restore_root_logger: None) -> Iterator[None]:
    """Keep the caller's environment and root log handlers out of each test."""
    keep = {k: v for k, v in os.environ.items() if k not in ENV_VARS}
    with patch.dict(os.environ, keep, clear=True):
        yield


class TestParser:
    """Tests for argument parsing."""

    def test_ingest_defaults(self) -> None:
        args = build_parser().parse_args(["ingest"])

        assert args.command == "ingest"
        assert args.csv_path is None
        assert args.db is None

    def test_serve_options(self) -> None:
        args = build_parser().parse_args(["--db", "x.db", "serve", "--port", "8080", "--no-ingest"])

        assert args.command == "serve"
        assert args.db == Path("x.db")
        assert args.port == 8080
        assert args.no_ingest is True

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestIngestCommand:
    """Tests for `account-intake ingest`."""

    def test_ingest(self, tmp_path: Path, write_csv, capsys: pytest.CaptureFixture) -> None:
        db_path = tmp_path / "accounts.db"

        code = main(["--db", str(db_path), "ingest", str(write_csv(ROWS))])

        assert code == 0
        out = capsys.readouterr().out
        assert "New records inserted: 1" in out
        assert "Rows skipped:         1" in out
        assert "Row 3: Invalid balance 'abc' - must be numeric" in out

        store = AccountStore(db_path)
        store.initialize()
        assert store.count() == 1
        store.close()

    def test_missing_file_exits_nonzero(self, tmp_path: Path) -> None:
        code = main(["--db", str(tmp_path / "accounts.db"), "ingest", str(tmp_path / "missing.csv")])

        assert code == 1

    def test_invalid_env_config(self, tmp_path: Path) -> None:
        with patch.dict(os.environ, {"PORT": "not-a-port"}):
            assert main(["ingest"]) == 2


class TestServeCommand:
    """Tests for `account-intake serve`."""

    def test_serve_runs_uvicorn(self, tmp_path: Path) -> None:
        with patch("uvicorn.run") as run:
            code = main(
                ["--db", str(tmp_path / "accounts.db"), "serve", "--host", "127.0.0.1", "--port", "8080", "--no-ingest"]
            )

        assert code == 0
        run.assert_called_once()
        app = run.call_args.args[0]
        assert run.call_args.kwargs["host"] == "127.0.0.1"
        assert run.call_args.kwargs["port"] == 8080
        assert app.state.config.ingest.auto_ingest is False
        assert app.state.store.path == tmp_path / "accounts.db"
