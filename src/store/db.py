"""
PlanetStore — SQLite-backed persistence layer for planet records.

Usage::

    store = PlanetStore(db_path="~/.planetas/planetas.db")

    planet_id = store.create(Planet(name="Marte", distance_from_sun=1.52, size=6779))
    for planet in store.read_all():
        print(planet)

    store.update(Planet(id=planet_id, name="Marte", distance_from_sun=1.52,
                        size=6779, nickname="Planeta Vermelho"))
    store.delete(planet_id)

update() and delete() return the number of affected rows; a missing id is
reported as 0, never as an error.
"""

import logging
import sqlite3
import threading
from pathlib import Path
from typing import Optional

from src.exceptions import SchemaVersionError, StoreError
from src.store.models import Planet

__all__ = ["PlanetStore", "DEFAULT_DB_PATH", "SCHEMA_VERSION"]

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = "~/.planetas/planetas.db"
SCHEMA_VERSION = 1

# Path to the SQL schema file bundled with this package
_SCHEMA_PATH = Path(__file__).parent / "migrations" / "schema.sql"

_MEMORY = ":memory:"


class PlanetStore:
    """
    CRUD interface for the local ``planetas`` table.

    One connection is opened lazily on first use and reused by every
    operation until close().  Opening is guarded by a lock, so concurrent
    first use never creates two connections or runs the schema twice; the
    same lock serialises every statement on the shared connection.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH) -> None:
        if db_path == _MEMORY:
            self._db_path = _MEMORY
        else:
            path = Path(db_path).expanduser()
            path.parent.mkdir(parents=True, exist_ok=True)
            self._db_path = str(path)
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()

    @property
    def db_path(self) -> str:
        return self._db_path

    # ── Connection lifecycle ──────────────────────────────────────────────

    def initialize(self) -> sqlite3.Connection:
        """
        Open (or create) the database file and make sure the schema exists.

        Safe to call any number of times; only the first call opens the
        connection.

        Raises:
            SchemaVersionError: the file was written by a newer schema.
            StoreError: the file cannot be opened.
        """
        with self._lock:
            if self._conn is not None:
                return self._conn
            conn = None
            try:
                conn = sqlite3.connect(self._db_path, check_same_thread=False)
                conn.row_factory = sqlite3.Row
                self._ensure_schema(conn)
            except sqlite3.Error as exc:
                if conn is not None:
                    conn.close()
                logger.error("Cannot open database %s: %s", self._db_path, exc)
                raise StoreError(f"cannot open database {self._db_path}: {exc}") from exc
            self._conn = conn
            logger.info("Opened planet database %s", self._db_path)
            return conn

    def close(self) -> None:
        """Close the connection; the next operation reopens it."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.debug("Closed planet database %s", self._db_path)

    @staticmethod
    def _ensure_schema(conn: sqlite3.Connection) -> None:
        version = conn.execute("PRAGMA user_version").fetchone()[0]
        if version == SCHEMA_VERSION:
            return
        if version != 0:
            conn.close()
            raise SchemaVersionError(
                f"unsupported schema version {version} (expected {SCHEMA_VERSION})"
            )
        logger.info("Creating planetas schema v%d", SCHEMA_VERSION)
        conn.executescript(_SCHEMA_PATH.read_text(encoding="utf-8"))
        conn.execute(f"PRAGMA user_version = {SCHEMA_VERSION}")
        conn.commit()

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Run one write statement in its own transaction."""
        with self._lock:
            conn = self.initialize()
            try:
                with conn:
                    return conn.execute(sql, params)
            except sqlite3.Error as exc:
                logger.error("Statement failed (%s): %s", sql.split()[0], exc)
                raise StoreError(str(exc)) from exc

    def _query(self, sql: str, params: tuple = ()) -> list[sqlite3.Row]:
        with self._lock:
            conn = self.initialize()
            try:
                return conn.execute(sql, params).fetchall()
            except sqlite3.Error as exc:
                logger.error("Query failed: %s", exc)
                raise StoreError(str(exc)) from exc

    # ── Public API ────────────────────────────────────────────────────────

    def create(self, planet: Planet) -> int:
        """
        Insert *planet* as a new row.  Any ``id`` on it is ignored.

        Returns:
            The id assigned by SQLite.
        """
        row = planet.to_row()
        row.pop("id", None)
        columns = ", ".join(row)
        placeholders = ", ".join("?" for _ in row)
        cur = self._execute(
            f"INSERT INTO planetas ({columns}) VALUES ({placeholders})",
            tuple(row.values()),
        )
        logger.debug("Inserted planet %r as id %d", planet.name, cur.lastrowid)
        return cur.lastrowid  # type: ignore[return-value]

    def read_all(self) -> list[Planet]:
        """Return every stored planet, in SQLite's natural row order."""
        rows = self._query("SELECT * FROM planetas")
        return [Planet.from_row(r) for r in rows]

    def update(self, planet: Planet) -> int:
        """
        Replace every non-key column of the row with ``planet.id``.

        Returns:
            Number of rows updated (0 if the id does not exist).

        Raises:
            ValueError: ``planet.id`` is None.
        """
        if planet.id is None:
            raise ValueError("cannot update a planet without an id")
        row = planet.to_row()
        planet_id = row.pop("id")
        assignments = ", ".join(f"{col}=?" for col in row)
        cur = self._execute(
            f"UPDATE planetas SET {assignments} WHERE id=?",
            (*row.values(), planet_id),
        )
        logger.debug("Updated planet id %d (%d row(s))", planet_id, cur.rowcount)
        return cur.rowcount

    def delete(self, planet_id: int) -> int:
        """
        Delete the planet with *planet_id*.

        Returns:
            Number of rows deleted (0 if the id does not exist).
        """
        cur = self._execute("DELETE FROM planetas WHERE id=?", (planet_id,))
        logger.debug("Deleted planet id %d (%d row(s))", planet_id, cur.rowcount)
        return cur.rowcount
