"""SQLite connection handling for the tutoring records."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Sequence

DEFAULT_PATH = "mydatabase.db"


class DatabaseError(Exception):
    """Raised when the database cannot be opened or a statement fails."""


class Database:
    """A single SQLite connection with explicit transaction control."""

    def __init__(self, path: str | Path) -> None:
        self.path = str(path)
        self._connection: sqlite3.Connection | None = None
        self.open(self.path)

    def open(self, path: str | Path) -> None:
        """Open the database file at *path*, replacing any open connection."""
        self.close()
        try:
            connection = sqlite3.connect(str(path), isolation_level=None)
        except sqlite3.Error as exc:
            raise DatabaseError(f"Can't open database: {exc}") from exc
        self.path = str(path)
        self._connection = connection

    def close(self) -> None:
        """Close the connection if it is open."""
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def is_open(self) -> bool:
        return self._connection is not None

    def set_path(self, path: str | Path) -> None:
        """Switch to another database file; nothing happens if it is the same."""
        if str(path) != self.path:
            self.open(path)

    def _require_connection(self) -> sqlite3.Connection:
        if self._connection is None:
            raise DatabaseError("database is not open")
        return self._connection

    def execute(self, sql: str, params: Sequence[Any] = ()) -> list[tuple]:
        """Run one statement and return all rows it produced."""
        connection = self._require_connection()
        try:
            cursor = connection.execute(sql, tuple(params))
            return cursor.fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc

    @contextmanager
    def transaction(self) -> Iterator[Database]:
        """Commit the enclosed statements together, or roll all back on error."""
        connection = self._require_connection()
        if connection.in_transaction:
            yield self
            return
        try:
            connection.execute("BEGIN")
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        try:
            yield self
        except BaseException:
            if connection.in_transaction:
                connection.execute("ROLLBACK")
            raise
        else:
            try:
                connection.execute("COMMIT")
            except sqlite3.Error as exc:
                connection.execute("ROLLBACK")
                raise DatabaseError(str(exc)) from exc

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


_default: Database | None = None


def default_database() -> Database:
    """Return the shared database opened at the default path."""
    global _default
    if _default is None:
        _default = Database(DEFAULT_PATH)
    return _default