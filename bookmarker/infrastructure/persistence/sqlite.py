import sqlite3
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional

from ...domain.errors import ConflictError
from ...domain.models import Bookmark, User
from ...domain.ports.persistence import PersistenceGateway


class SQLitePersistence(PersistenceGateway):
    """SQLite-backed implementation of the persistence gateway."""

    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.Lock()
        self._initialize()

    def _initialize(self) -> None:
        self._conn.execute("PRAGMA foreign_keys = ON")
        with self._conn:
            self._conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    email TEXT NOT NULL UNIQUE,
                    password_hash TEXT NOT NULL,
                    is_email_verified INTEGER NOT NULL DEFAULT 0,
                    email_verification_token TEXT,
                    first_name TEXT,
                    last_name TEXT,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );

                CREATE INDEX IF NOT EXISTS idx_users_email_verification_token
                    ON users(email_verification_token);

                CREATE TABLE IF NOT EXISTS bookmarks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER NOT NULL,
                    title TEXT NOT NULL,
                    description TEXT,
                    link TEXT NOT NULL,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL,
                    FOREIGN KEY(user_id) REFERENCES users(id) ON DELETE CASCADE
                );

                CREATE INDEX IF NOT EXISTS idx_bookmarks_user_id
                    ON bookmarks(user_id);
                """
            )

    def close(self) -> None:
        self._conn.close()

    # UserRepository API ----------------------------------------------------
    def create_user(
        self,
        email: str,
        password_hash: str,
        email_verification_token: Optional[str],
    ) -> User:
        normalized = email.strip().lower()
        now = self._now()
        try:
            with self._lock, self._conn:
                cur = self._conn.execute(
                    """
                    INSERT INTO users (
                        email, password_hash, is_email_verified,
                        email_verification_token, created_at, updated_at
                    )
                    VALUES (?, ?, 0, ?, ?, ?)
                    """,
                    (normalized, password_hash, email_verification_token, now, now),
                )
                user_id = cur.lastrowid
                cur = self._conn.execute("SELECT * FROM users WHERE id = ?", (user_id,))
                row = cur.fetchone()
        except sqlite3.IntegrityError as exc:
            if "UNIQUE constraint failed: users.email" in str(exc):
                raise ConflictError("Credentials taken") from exc
            raise
        if not row:
            raise RuntimeError("Failed to persist user.")
        return self._row_to_user(row)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            cur = self._conn.execute("SELECT * FROM users WHERE id = ?", (user_id,))
            row = cur.fetchone()
        return self._row_to_user(row) if row else None

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            cur = self._conn.execute(
                "SELECT * FROM users WHERE email = ?", (email.strip().lower(),)
            )
            row = cur.fetchone()
        return self._row_to_user(row) if row else None

    def get_user_by_verification_token(self, token: str) -> Optional[User]:
        with self._lock:
            cur = self._conn.execute(
                "SELECT * FROM users WHERE email_verification_token = ? ORDER BY id LIMIT 1",
                (token,),
            )
            row = cur.fetchone()
        return self._row_to_user(row) if row else None

    def mark_email_verified(self, user_id: int) -> bool:
        with self._lock, self._conn:
            cur = self._conn.execute(
                """
                UPDATE users
                SET is_email_verified = 1, email_verification_token = NULL, updated_at = ?
                WHERE id = ? AND email_verification_token IS NOT NULL
                """,
                (self._now(), user_id),
            )
            return cur.rowcount > 0

    def update_user_profile(
        self,
        user_id: int,
        *,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        updates = []
        params: List[Any] = []
        if first_name is not None:
            updates.append("first_name = ?")
            params.append(first_name)
        if last_name is not None:
            updates.append("last_name = ?")
            params.append(last_name)

        if updates:
            updates.append("updated_at = ?")
            params.append(self._now())
            params.append(user_id)
            statement = f"UPDATE users SET {', '.join(updates)} WHERE id = ?"
            with self._lock, self._conn:
                self._conn.execute(statement, params)
        with self._lock:
            cur = self._conn.execute("SELECT * FROM users WHERE id = ?", (user_id,))
            row = cur.fetchone()
        if not row:
            raise ValueError(f"User {user_id} not found.")
        return self._row_to_user(row)

    # BookmarkRepository API ------------------------------------------------
    def create_bookmark(
        self,
        user_id: int,
        title: str,
        link: str,
        description: Optional[str],
    ) -> Bookmark:
        now = self._now()
        with self._lock, self._conn:
            cur = self._conn.execute(
                """
                INSERT INTO bookmarks (user_id, title, description, link, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (user_id, title, description, link, now, now),
            )
            bookmark_id = cur.lastrowid
            cur = self._conn.execute("SELECT * FROM bookmarks WHERE id = ?", (bookmark_id,))
            row = cur.fetchone()
        if not row:
            raise RuntimeError("Failed to persist bookmark.")
        return self._row_to_bookmark(row)

    def get_bookmark(self, bookmark_id: int) -> Optional[Bookmark]:
        with self._lock:
            cur = self._conn.execute("SELECT * FROM bookmarks WHERE id = ?", (bookmark_id,))
            row = cur.fetchone()
        return self._row_to_bookmark(row) if row else None

    def get_bookmarks_for_user(self, user_id: int) -> List[Bookmark]:
        with self._lock:
            cur = self._conn.execute(
                "SELECT * FROM bookmarks WHERE user_id = ? ORDER BY id ASC",
                (user_id,),
            )
            rows = cur.fetchall()
        return [self._row_to_bookmark(row) for row in rows]

    def update_bookmark(
        self,
        bookmark_id: int,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        link: Optional[str] = None,
    ) -> Bookmark:
        updates = []
        params: List[Any] = []
        if title is not None:
            updates.append("title = ?")
            params.append(title)
        if description is not None:
            updates.append("description = ?")
            params.append(description)
        if link is not None:
            updates.append("link = ?")
            params.append(link)

        if updates:
            updates.append("updated_at = ?")
            params.append(self._now())
            params.append(bookmark_id)
            statement = f"UPDATE bookmarks SET {', '.join(updates)} WHERE id = ?"
            with self._lock, self._conn:
                self._conn.execute(statement, params)
        with self._lock:
            cur = self._conn.execute("SELECT * FROM bookmarks WHERE id = ?", (bookmark_id,))
            row = cur.fetchone()
        if not row:
            raise ValueError(f"Bookmark {bookmark_id} not found.")
        return self._row_to_bookmark(row)

    def delete_bookmark(self, bookmark_id: int) -> None:
        with self._lock, self._conn:
            self._conn.execute("DELETE FROM bookmarks WHERE id = ?", (bookmark_id,))

    # Helpers ----------------------------------------------------------------
    @staticmethod
    def _now() -> str:
        return datetime.now(timezone.utc).replace(microsecond=0).isoformat()

    @staticmethod
    def _parse_datetime(value: str) -> datetime:
        result = datetime.fromisoformat(value)
        if result.tzinfo is None:
            return result.replace(tzinfo=timezone.utc)
        return result.astimezone(timezone.utc)

    def _row_to_user(self, row: sqlite3.Row) -> User:
        return User(
            id=row["id"],
            email=row["email"],
            password_hash=row["password_hash"],
            is_email_verified=bool(row["is_email_verified"]),
            email_verification_token=row["email_verification_token"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            created_at=self._parse_datetime(row["created_at"]),
            updated_at=self._parse_datetime(row["updated_at"]),
        )

    def _row_to_bookmark(self, row: sqlite3.Row) -> Bookmark:
        return Bookmark(
            id=row["id"],
            user_id=row["user_id"],
            title=row["title"],
            description=row["description"],
            link=row["link"],
            created_at=self._parse_datetime(row["created_at"]),
            updated_at=self._parse_datetime(row["updated_at"]),
        )
