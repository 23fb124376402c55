"""
Persistence for ``User`` entities.

``UserRepository`` is the interface the service layer depends on.
``SQLiteUserRepository`` stores users in the SQLite database managed
by ``core.db``; ``InMemoryUserRepository`` keeps them in a dict and is
meant for tests and throwaway local runs.

All queries use parameterized statements.  Database errors are not
caught here; they propagate to the caller unchanged.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import replace
from datetime import date
from typing import Dict, List, Optional, Protocol

from ..core.db import get_connection
from ..models.user import User


logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Abstract storage for users keyed by id."""

    def save(self, user: User) -> User:
        """Insert ``user`` if it has no id, otherwise overwrite the stored row.

        Returns the stored entity, with ``id`` assigned on insert.
        """
        ...

    def find_by_id(self, user_id: int) -> Optional[User]:
        ...

    def find_all(self) -> List[User]:
        ...

    def exists_by_id(self, user_id: int) -> bool:
        ...

    def delete_by_id(self, user_id: int) -> None:
        ...


class SQLiteUserRepository:
    """``UserRepository`` backed by the ``users`` table.

    A new connection is opened for every call and closed before the
    call returns.
    """

    _COLUMNS = "id, first_name, last_name, email, date_of_birth"

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_url = database_url

    def save(self, user: User) -> User:
        conn = get_connection(self.database_url)
        try:
            cursor = conn.cursor()
            dob = user.date_of_birth.isoformat() if user.date_of_birth else None
            if user.id is None:
                cursor.execute(
                    "INSERT INTO users (first_name, last_name, email, date_of_birth) "
                    "VALUES (?, ?, ?, ?)",
                    (user.first_name, user.last_name, user.email, dob),
                )
                conn.commit()
                logger.debug("Inserted user %s", cursor.lastrowid)
                return replace(user, id=cursor.lastrowid)
            cursor.execute(
                """
                INSERT INTO users (id, first_name, last_name, email, date_of_birth)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    first_name = excluded.first_name,
                    last_name = excluded.last_name,
                    email = excluded.email,
                    date_of_birth = excluded.date_of_birth,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (user.id, user.first_name, user.last_name, user.email, dob),
            )
            conn.commit()
            logger.debug("Saved user %s", user.id)
            return replace(user)
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def find_by_id(self, user_id: int) -> Optional[User]:
        conn = get_connection(self.database_url)
        try:
            row = conn.execute(
                f"SELECT {self._COLUMNS} FROM users WHERE id = ?",
                (user_id,),
            ).fetchone()
            return self._row_to_user(row) if row else None
        finally:
            conn.close()

    def find_all(self) -> List[User]:
        conn = get_connection(self.database_url)
        try:
            rows = conn.execute(
                f"SELECT {self._COLUMNS} FROM users ORDER BY id ASC"
            ).fetchall()
            return [self._row_to_user(row) for row in rows]
        finally:
            conn.close()

    def exists_by_id(self, user_id: int) -> bool:
        conn = get_connection(self.database_url)
        try:
            row = conn.execute("SELECT 1 FROM users WHERE id = ?", (user_id,)).fetchone()
            return row is not None
        finally:
            conn.close()

    def delete_by_id(self, user_id: int) -> None:
        conn = get_connection(self.database_url)
        try:
            conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
            conn.commit()
            logger.debug("Deleted user %s", user_id)
        finally:
            conn.close()

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        dob = row["date_of_birth"]
        return User(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
            date_of_birth=date.fromisoformat(dob) if dob else None,
        )


class InMemoryUserRepository:
    """``UserRepository`` keeping users in a dict.

    Ids start at 1 and are never reused, mirroring SQLite's
    ``AUTOINCREMENT``.  Stored entities are copied on the way in and
    out so callers cannot mutate the store behind its back.
    """

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._next_id = 1

    def save(self, user: User) -> User:
        if user.id is None:
            user = replace(user, id=self._next_id)
        self._next_id = max(self._next_id, user.id + 1)
        self._users[user.id] = replace(user)
        return replace(user)

    def find_by_id(self, user_id: int) -> Optional[User]:
        user = self._users.get(user_id)
        return replace(user) if user else None

    def find_all(self) -> List[User]:
        return [replace(user) for user in self._users.values()]

    def exists_by_id(self, user_id: int) -> bool:
        return user_id in self._users

    def delete_by_id(self, user_id: int) -> None:
        self._users.pop(user_id, None)
