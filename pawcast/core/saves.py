"""Lightweight database helpers for storing users' saved items."""
from __future__ import annotations

import json
import logging
import os
import sqlite3
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Callable, Iterator, List, Optional
from urllib.parse import unquote, urlparse

try:  # Optional import for MySQL support
    import pymysql
    from pymysql.cursors import DictCursor
except ImportError:  # pragma: no cover - pymysql is optional
    pymysql = None  # type: ignore
    DictCursor = None  # type: ignore

from pawcast.core.abstractions import CurrentUser, SavedItem, SavedItemRepository

logger = logging.getLogger(__name__)

CONTENT_TYPES = ("place", "product", "youtube", "web")


class SavedItemError(ValueError):
    """Raised for saved item requests that can never succeed."""


class DatabaseSession:
    """Minimal DB-API session wrapper with context aware placeholders."""

    def __init__(self, connection, placeholder: str):
        self.connection = connection
        self.placeholder = placeholder

    def _prepare_sql(self, sql: str) -> str:
        if self.placeholder == "?":
            return sql
        return sql.replace("?", self.placeholder)

    def execute(self, sql: str, params: tuple = ()):
        cursor = self.connection.cursor()
        cursor.execute(self._prepare_sql(sql), params)
        return cursor

    def fetchone(self, sql: str, params: tuple = ()):
        cursor = self.execute(sql, params)
        row = cursor.fetchone()
        cursor.close()
        return row

    def fetchall(self, sql: str, params: tuple = ()):
        cursor = self.execute(sql, params)
        rows = cursor.fetchall()
        cursor.close()
        return rows

    def commit(self) -> None:
        self.connection.commit()

    def rollback(self) -> None:
        self.connection.rollback()

    def close(self) -> None:
        self.connection.close()


class SessionFactory:
    def __init__(self, url: str):
        self.url = url
        self.driver, self.placeholder = detect_driver(url)

    def __call__(self) -> DatabaseSession:
        connection = create_connection(self.url, self.driver)
        return DatabaseSession(connection, self.placeholder)


def default_database_url() -> str:
    return os.getenv("SAVES_DATABASE_URL", "sqlite:///./pawcast.db")


def detect_driver(url: str) -> tuple[str, str]:
    parsed = urlparse(url)
    if parsed.scheme.startswith("mysql"):
        if pymysql is None:
            raise RuntimeError("PyMySQL is required for MySQL connections")
        return "mysql", "%s"
    if parsed.scheme.startswith("sqlite") or parsed.scheme == "":
        return "sqlite", "?"
    raise ValueError(f"Unsupported database scheme: {parsed.scheme}")


def create_connection(url: str, driver: str):
    parsed = urlparse(url)
    if driver == "sqlite":
        path = unquote(parsed.path or parsed.netloc or ":memory:")
        if path.startswith("/./"):
            path = path[1:]
        db_path = path if path.startswith("/") or path == ":memory:" else os.path.abspath(path)
        connection = sqlite3.connect(db_path, check_same_thread=False)
        connection.row_factory = sqlite3.Row
        return connection

    if driver == "mysql":
        assert pymysql is not None and DictCursor is not None
        return pymysql.connect(
            host=parsed.hostname or "localhost",
            user=parsed.username,
            password=parsed.password,
            database=parsed.path.lstrip("/") or None,
            port=parsed.port or 3306,
            cursorclass=DictCursor,
            autocommit=False,
            charset="utf8mb4",
        )

    raise ValueError(f"Unsupported driver: {driver}")


@contextmanager
def session_scope(factory: SessionFactory) -> Iterator[DatabaseSession]:
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _decode_content(value: Any) -> Any:
    if value is None or isinstance(value, (dict, list)):
        return value
    try:
        return json.loads(value)
    except (TypeError, ValueError):
        return value


def _item_from_row(row) -> SavedItem:
    return SavedItem(
        id=row["id"],
        user_id=row["user_id"],
        content_type=row["content_type"],
        content_id=row["content_id"],
        content_data=_decode_content(row["content_data"]),
        created_at=row["created_at"],
    )


class SavedItemStore(SavedItemRepository):
    """``user_saves`` table access; every query is scoped to one user."""

    def __init__(self, session_factory: SessionFactory, clock: Callable[[], str] = utcnow_iso) -> None:
        self._session_factory = session_factory
        self._clock = clock
        self.run_migrations()

    @classmethod
    def from_url(cls, url: Optional[str] = None) -> "SavedItemStore":
        return cls(SessionFactory(url or default_database_url()))

    def run_migrations(self) -> None:
        with session_scope(self._session_factory) as session:
            session.execute(
                """
                CREATE TABLE IF NOT EXISTS user_saves (
                    id VARCHAR(36) PRIMARY KEY,
                    user_id VARCHAR(64) NOT NULL,
                    content_type VARCHAR(16) NOT NULL,
                    content_id VARCHAR(255) NOT NULL,
                    content_data TEXT,
                    created_at VARCHAR(40) NOT NULL,
                    UNIQUE (user_id, content_type, content_id)
                )
                """
            )

    def list_for(self, user: CurrentUser) -> List[SavedItem]:
        with session_scope(self._session_factory) as session:
            rows = session.fetchall(
                "SELECT * FROM user_saves WHERE user_id = ? ORDER BY created_at DESC",
                (user.id,),
            )
        return [_item_from_row(row) for row in rows]

    def get(self, user: CurrentUser, content_type: str, content_id: str) -> Optional[SavedItem]:
        with session_scope(self._session_factory) as session:
            row = self._find(session, user, content_type, content_id)
        return _item_from_row(row) if row else None

    def is_saved(self, user: CurrentUser, content_type: str, content_id: str) -> bool:
        return self.get(user, content_type, content_id) is not None

    def save(self, user: CurrentUser, content_type: str, content_id: str, content_data: Any) -> SavedItem:
        """Bookmark an item; saving the same item twice returns the first row."""
        _check_content(content_type, content_id)
        with session_scope(self._session_factory) as session:
            existing = self._find(session, user, content_type, content_id)
            if existing:
                return _item_from_row(existing)
            item = SavedItem(
                id=str(uuid.uuid4()),
                user_id=user.id,
                content_type=content_type,
                content_id=content_id,
                content_data=content_data if content_data is not None else {},
                created_at=self._clock(),
            )
            session.execute(
                """
                INSERT INTO user_saves (id, user_id, content_type, content_id, content_data, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    item.id,
                    item.user_id,
                    item.content_type,
                    item.content_id,
                    json.dumps(item.content_data, ensure_ascii=False),
                    item.created_at,
                ),
            )
        logger.info("User %s saved %s:%s", user.id, content_type, content_id)
        return item

    def delete(self, user: CurrentUser, content_type: str, content_id: str) -> bool:
        with session_scope(self._session_factory) as session:
            cursor = session.execute(
                "DELETE FROM user_saves WHERE user_id = ? AND content_type = ? AND content_id = ?",
                (user.id, content_type, content_id),
            )
            deleted = cursor.rowcount > 0
            cursor.close()
        return deleted

    def _find(self, session: DatabaseSession, user: CurrentUser, content_type: str, content_id: str):
        return session.fetchone(
            "SELECT * FROM user_saves WHERE user_id = ? AND content_type = ? AND content_id = ?",
            (user.id, content_type, content_id),
        )


def _check_content(content_type: str, content_id: str) -> None:
    if content_type not in CONTENT_TYPES:
        raise SavedItemError(f"content_type must be one of {', '.join(CONTENT_TYPES)}")
    if not content_id:
        raise SavedItemError("content_id must be provided")


__all__ = [
    "CONTENT_TYPES",
    "SavedItemError",
    "SavedItemStore",
    "SessionFactory",
    "session_scope",
]
