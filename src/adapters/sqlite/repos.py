import sqlite3
from datetime import datetime
from typing import Any
from uuid import UUID

from src.domain.entities import User
from src.domain.errors import EMAIL_ALREADY_USED, bad_request


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteUserRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        conn.execute("PRAGMA foreign_keys = ON;")
        return conn

    def save(self, user: User) -> User:
        """Insert a new user. A concurrent signup for the same email is a client error."""
        conn = self._get_conn()
        try:
            conn.execute(
                "INSERT INTO users (id, first_name, last_name, email, password, created_at) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (
                    str(user.id),
                    user.first_name,
                    user.last_name,
                    user.email,
                    user.password,
                    user.created_at.isoformat(),
                ),
            )
            conn.commit()
        except sqlite3.IntegrityError as e:
            if "users.email" in str(e):
                raise bad_request(EMAIL_ALREADY_USED) from e
            raise
        finally:
            conn.close()
        return user

    def get_by_email(self, email: str) -> User | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM users WHERE email = ?", (email,)).fetchone()
            if not row:
                return None
            return self._map_row_to_user(row)
        finally:
            conn.close()

    def _map_row_to_user(self, row: dict[str, Any]) -> User:
        return User(
            id=UUID(row["id"]),
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
            password=row["password"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )
