"""Embedded account store with a single durable database image."""

import logging
import os
import sqlite3
import threading
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path

from account_intake.exceptions import StoreError, StoreNotInitializedError
from account_intake.models import AccountRecord

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS accounts (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    account_number TEXT UNIQUE NOT NULL CHECK (account_number <> ''),
    debtor_name TEXT,
    phone_number TEXT,
    balance TEXT NOT NULL DEFAULT '0',
    status TEXT,
    client_name TEXT,
    created_at TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
CREATE INDEX IF NOT EXISTS idx_account_number ON accounts(account_number);
"""

UPSERT_SQL = """
INSERT INTO accounts (
    account_number, debtor_name, phone_number, balance, status, client_name,
    created_at, updated_at
)
VALUES (?, ?, ?, ?, ?, ?, ?, ?)
ON CONFLICT(account_number) DO UPDATE SET
    debtor_name = excluded.debtor_name,
    phone_number = excluded.phone_number,
    balance = excluded.balance,
    status = excluded.status,
    client_name = excluded.client_name,
    updated_at = excluded.updated_at
"""

SELECT_SQL = """
SELECT account_number, debtor_name, phone_number, balance, status, client_name,
       created_at, updated_at
FROM accounts
WHERE account_number = ?
"""

DELETE_SQL = "DELETE FROM accounts WHERE account_number = ?"

RESTORE_SQL = """
UPDATE accounts
SET debtor_name = ?, phone_number = ?, balance = ?, status = ?, client_name = ?,
    created_at = ?, updated_at = ?
WHERE account_number = ?
"""


class AccountStore:
    """Keyed account table held in memory and mirrored to one file.

    The working database lives in an in-memory SQLite connection.
    ``initialize()`` copies the file image in (when it exists) and
    ``flush()`` copies the whole image back out. Uniqueness of
    ``account_number`` is enforced by the table constraint.

    Every operation takes the same re-entrant lock, so a single logical
    writer touches the connection at a time.

    Parameters
    ----------
    path : str | Path
        Location of the durable database file.
    flush_on_write : bool
        Flush after every upsert instead of only on explicit ``flush()``.
    """

    def __init__(self, path: str | Path, flush_on_write: bool = False) -> None:
        self.path = Path(path)
        self.flush_on_write = flush_on_write
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.RLock()

    @property
    def initialized(self) -> bool:
        return self._conn is not None

    def initialize(self) -> None:
        """Load the persisted image, or start empty. Later calls are no-ops."""
        with self._lock:
            if self._conn is not None:
                return

            conn = sqlite3.connect(":memory:", check_same_thread=False)
            try:
                if self.path.exists():
                    logger.info("Loading account store from %s", self.path)
                    source = sqlite3.connect(str(self.path))
                    try:
                        source.backup(conn)
                    finally:
                        source.close()
                else:
                    logger.info("No account store at %s, starting empty", self.path)
                conn.executescript(SCHEMA)
            except sqlite3.Error as e:
                conn.close()
                raise StoreError(f"Could not load account store {self.path}: {e}") from e

            self._conn = conn
            try:
                self.flush()
            except StoreError:
                self.close()
                raise

    def close(self) -> None:
        """Release the in-memory database. Unflushed changes are discarded."""
        with self._lock:
            if self._conn is None:
                return
            self._conn.close()
            self._conn = None

    def upsert(self, record: AccountRecord) -> None:
        """Insert the account, or overwrite every mutable field of the existing row.

        With ``flush_on_write`` the write and the flush succeed or fail
        together: when the flush fails the row is put back the way it was
        and the ``StoreError`` is re-raised.
        """
        now = _utcnow()
        with self._lock:
            conn = self._require_conn()
            try:
                previous = None
                if self.flush_on_write:
                    previous = conn.execute(SELECT_SQL, (record.account_number,)).fetchone()
                with conn:
                    conn.execute(
                        UPSERT_SQL,
                        (
                            record.account_number,
                            record.debtor_name,
                            record.phone_number,
                            str(record.balance),
                            record.status,
                            record.client_name,
                            now,
                            now,
                        ),
                    )
            except sqlite3.Error as e:
                raise StoreError(str(e)) from e

            if self.flush_on_write:
                try:
                    self.flush()
                except StoreError:
                    self._restore(record.account_number, previous)
                    raise

    def find_by_key(self, account_number: str) -> AccountRecord | None:
        """Exact, case-sensitive lookup by account number."""
        with self._lock:
            conn = self._require_conn()
            try:
                row = conn.execute(SELECT_SQL, (account_number,)).fetchone()
            except sqlite3.Error as e:
                raise StoreError(str(e)) from e
        return _row_to_record(row) if row is not None else None

    def count(self) -> int:
        """Return the number of stored accounts."""
        with self._lock:
            conn = self._require_conn()
            try:
                (total,) = conn.execute("SELECT COUNT(*) FROM accounts").fetchone()
            except sqlite3.Error as e:
                raise StoreError(str(e)) from e
        return total

    def flush(self) -> None:
        """Write the database image to disk.

        The image is written to a sibling temp file and renamed over the
        target, so a reader never sees a half-written file.
        """
        with self._lock:
            conn = self._require_conn()
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = self.path.with_name(self.path.name + ".tmp")
            try:
                # A leftover from an interrupted flush is not a usable target.
                tmp_path.unlink(missing_ok=True)
                target = sqlite3.connect(str(tmp_path))
                try:
                    conn.backup(target)
                finally:
                    target.close()
                os.replace(tmp_path, self.path)
            except (sqlite3.Error, OSError) as e:
                _discard(tmp_path)
                raise StoreError(f"Could not flush account store to {self.path}: {e}") from e
            logger.debug("Flushed account store to %s", self.path)

    def _restore(self, account_number: str, previous: tuple | None) -> None:
        """Undo an unflushed upsert: drop a new row, or rewrite the old one."""
        conn = self._require_conn()
        try:
            with conn:
                if previous is None:
                    conn.execute(DELETE_SQL, (account_number,))
                else:
                    conn.execute(RESTORE_SQL, (*previous[1:], account_number))
        except sqlite3.Error as e:
            raise StoreError(f"Could not roll back account {account_number!r}: {e}") from e

    def _require_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreNotInitializedError(
                "Account store not initialized. Call initialize() first."
            )
        return self._conn


def _discard(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError:
        logger.warning("Could not remove partial store image %s", path)


def _utcnow() -> str:
    return datetime.now(timezone.utc).isoformat()


def _row_to_record(row: tuple) -> AccountRecord:
    (
        account_number,
        debtor_name,
        phone_number,
        balance,
        status,
        client_name,
        created_at,
        updated_at,
    ) = row
    return AccountRecord(
        account_number=account_number,
        debtor_name=debtor_name,
        phone_number=phone_number,
        balance=Decimal(balance),
        status=status,
        client_name=client_name,
        created_at=datetime.fromisoformat(created_at),
        updated_at=datetime.fromisoformat(updated_at),
    )
