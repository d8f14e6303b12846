"""SQLite-backed emote store.

Persists normalized emote records in a single ``emotes`` table whose
``danmaku_name`` column is the unique natural key.

Usage::

    from emote_catalog.store import EmoteStore

    store = EmoteStore(Path("temp/emote.db"))
    store.initialize()
    try:
        store.create_schema()
        duplicates = store.insert_batch(records)
    finally:
        store.close()
"""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Callable

from .core.errors import StoreNotInitializedError
from .core.types import EmoteRecord, StoredEmote

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS emotes (
    id INTEGER PRIMARY KEY,
    folder_name TEXT NOT NULL,
    og_file_name TEXT,
    package_name TEXT NOT NULL,
    emote_name TEXT NOT NULL,
    danmaku_name TEXT NOT NULL UNIQUE
)
"""

INSERT_SQL = """
INSERT INTO emotes (folder_name, og_file_name, package_name, emote_name, danmaku_name)
VALUES (:folder_name, :og_file_name, :package_name, :emote_name, :danmaku_name)
ON CONFLICT(danmaku_name) DO NOTHING
"""

SELECT_SQL = (
    "SELECT id, folder_name, og_file_name, package_name, emote_name, danmaku_name "
    "FROM emotes"
)


class EmoteStore:
    """Append-only keyed collection of emote records.

    No update or delete of single records is exposed; a new ingestion run
    starts with ``clear()``.

    Args:
        db_path: SQLite database file.
        trace: Optional callback receiving every executed SQL statement.
    """

    def __init__(self, db_path: Path | str, trace: Callable[[str], None] | None = None) -> None:
        self._db_path = Path(db_path)
        self._trace = trace
        self._conn: sqlite3.Connection | None = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Open the SQLite connection, creating parent directories if needed."""
        if self._conn is not None:
            return
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

        # Autocommit mode; transactions are opened explicitly with BEGIN IMMEDIATE
        conn = sqlite3.connect(str(self._db_path), isolation_level=None)
        conn.row_factory = sqlite3.Row
        if self._trace is not None:
            conn.set_trace_callback(self._trace)
        conn.execute("PRAGMA synchronous=NORMAL")
        self._conn = conn

    def close(self) -> None:
        """Close the SQLite connection. Safe to call multiple times."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> EmoteStore:
        self.initialize()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def path(self) -> Path:
        return self._db_path

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("EmoteStore is not open; call initialize() first")
        return self._conn

    def create_schema(self) -> None:
        """Create the emotes table if it does not exist yet."""
        self.conn.execute(SCHEMA_SQL)

    def has_schema(self) -> bool:
        row = self.conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'emotes'"
        ).fetchone()
        return row is not None

    def _require_schema(self) -> None:
        if not self.has_schema():
            raise StoreNotInitializedError(
                f"No emotes table in {self._db_path}; run with --initdb first"
            )

    # ------------------------------------------------------------------
    # Write methods
    # ------------------------------------------------------------------

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Run a block inside one write transaction.

        Commits on success and rolls back on any exception, so readers see
        either none or all of the block's writes.
        """
        conn = self.conn
        conn.execute("BEGIN IMMEDIATE")
        try:
            yield conn
        except BaseException:
            conn.execute("ROLLBACK")
            raise
        conn.execute("COMMIT")

    def clear(self) -> None:
        """Remove every record."""
        self._require_schema()
        with self.transaction() as conn:
            conn.execute("DELETE FROM emotes")

    def try_insert(self, record: EmoteRecord) -> bool:
        """Insert a record unless its danmaku_name is already stored.

        The key check and the insert are one statement, so no two inserts
        can both observe the key as absent.

        Returns:
            True if the record was accepted, False if it is a duplicate.
        """
        cursor = self.conn.execute(INSERT_SQL, dict(record))
        return cursor.rowcount == 1

    def insert_batch(self, records: Iterable[EmoteRecord]) -> list[EmoteRecord]:
        """Insert records in order within one transaction.

        Duplicates do not abort the batch; they are returned to the caller.

        Returns:
            Records rejected because their danmaku_name already exists.
        """
        self._require_schema()
        duplicates: list[EmoteRecord] = []
        with self.transaction():
            for record in records:
                if not self.try_insert(record):
                    duplicates.append(record)
        return duplicates

    # ------------------------------------------------------------------
    # Read methods
    # ------------------------------------------------------------------

    def count(self) -> int:
        self._require_schema()
        return int(self.conn.execute("SELECT count(*) FROM emotes").fetchone()[0])

    def all_records(self) -> list[StoredEmote]:
        """Return every record in insertion (id) order."""
        self._require_schema()
        rows = self.conn.execute(f"{SELECT_SQL} ORDER BY id").fetchall()
        return [StoredEmote(**dict(row)) for row in rows]  # type: ignore[typeddict-item]

    def get(self, emote_id: int) -> StoredEmote | None:
        self._require_schema()
        row = self.conn.execute(f"{SELECT_SQL} WHERE id = ?", (emote_id,)).fetchone()
        return StoredEmote(**dict(row)) if row is not None else None  # type: ignore[typeddict-item]

    def get_by_danmaku_name(self, danmaku_name: str) -> StoredEmote | None:
        self._require_schema()
        row = self.conn.execute(
            f"{SELECT_SQL} WHERE danmaku_name = ?", (danmaku_name,)
        ).fetchone()
        return StoredEmote(**dict(row)) if row is not None else None  # type: ignore[typeddict-item]
