"""SQLite host store for certiweb.

Durable key-value service backed by a single local SQLite file. Each
collection name is one row holding the collection's JSON blob, which is
exactly the persisted layout the registry expects from its host: nine
named values and nothing else.
"""

import contextlib
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterator, List, Optional

from certiweb.protocols import StorageError

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS collections (
    name TEXT PRIMARY KEY,
    blob TEXT NOT NULL,
    updated_at TEXT NOT NULL
)
"""


class SQLiteStore:
    """SQLite-backed key-value store.

    Outside a transaction every ``set`` commits on its own. Inside
    ``transaction()`` all reads and writes share one connection and are
    committed together when the block exits normally, or rolled back if an
    exception escapes.
    """

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._conn: Optional[sqlite3.Connection] = None
        self._init_db()

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA busy_timeout=5000")
        return conn

    @contextlib.contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Yield a connection for one statement group.

        Inside ``transaction()`` this is the invocation's connection, and the
        invocation decides commit or rollback. Otherwise a fresh connection
        is committed on success, rolled back on error, and closed.
        """
        if self._conn is not None:
            yield self._conn
            return

        conn = self._get_conn()
        try:
            yield conn
            conn.commit()
        except Exception as e:
            logger.debug(f"Statement on {self.db_path} failed, rolling back: {e}")
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_db(self) -> None:
        try:
            with self._connect() as conn:
                conn.execute(SCHEMA)
        except sqlite3.Error as e:
            raise StorageError(f"Cannot initialize {self.db_path}: {e}") from e

    def get(self, name: str) -> Optional[str]:
        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT blob FROM collections WHERE name = ?", (name,)
                ).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot read collection {name}: {e}") from e
        return row[0] if row else None

    def set(self, name: str, blob: str) -> None:
        now = datetime.now(timezone.utc).isoformat()
        try:
            with self._connect() as conn:
                conn.execute(
                    "INSERT OR REPLACE INTO collections (name, blob, updated_at) VALUES (?, ?, ?)",
                    (name, blob, now),
                )
        except sqlite3.Error as e:
            raise StorageError(f"Cannot write collection {name}: {e}") from e

    def names(self) -> List[str]:
        """Names that currently hold a value."""
        try:
            with self._connect() as conn:
                rows = conn.execute("SELECT name FROM collections ORDER BY name").fetchall()
        except sqlite3.Error as e:
            raise StorageError(f"Cannot list collections in {self.db_path}: {e}") from e
        return [row[0] for row in rows]

    @contextlib.contextmanager
    def transaction(self) -> Iterator[None]:
        """Run one invocation on a single connection, all or nothing."""
        if self._conn is not None:
            # Nested invocation joins the outer one.
            yield
            return

        conn = self._get_conn()
        self._conn = conn
        try:
            yield
            conn.commit()
        except BaseException as e:
            logger.debug(f"Invocation failed, rolling back: {e!r}")
            conn.rollback()
            raise
        finally:
            self._conn = None
            conn.close()
