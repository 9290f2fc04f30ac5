"""Pytest configuration and fixtures."""

import csv
import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from account_intake.models import ACCOUNT_COLUMNS
from account_intake.store import AccountStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Location of the store file for one test."""
    return tmp_path / "accounts.db"


@pytest.fixture
def store(db_path: Path) -> Iterator[AccountStore]:
    """Create a fresh, initialized store for each test."""
    store = AccountStore(db_path)
    store.initialize()
    yield store
    store.close()


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Write rows under a header and return the file path."""

    def _write(
        rows: list[list[str]],
        header: list[str] | None = None,
        name: str = "inventory.csv",
    ) -> Path:
        path = tmp_path / name
        with open(path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(header if header is not None else list(ACCOUNT_COLUMNS))
            writer.writerows(rows)
        return path

    return _write


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Undo handler and level changes made by ``setup_logging``."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
