"""Device-local key/value store.

Every piece of persisted state lives under a fixed string key as a string value
(JSON for structured data). Reads always hit the backing table so a value
written by the reminder thread is visible to the next UI read.
"""
from __future__ import annotations

import logging
import threading

from sqlalchemy import create_engine, text as sql_text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from boostme.exceptions import StoreError

logger = logging.getLogger(__name__)

KV_TABLE = "kv_store"


class KeyValueStore:
    def get(self, key: str) -> str | None:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def keys(self) -> list[str]:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None):
        self._data = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key):
        with self._lock:
            return self._data.get(key)

    def set(self, key, value):
        with self._lock:
            self._data[key] = str(value)

    def remove(self, key):
        with self._lock:
            self._data.pop(key, None)

    def keys(self):
        with self._lock:
            return sorted(self._data.keys())

    def clear(self):
        with self._lock:
            self._data.clear()


def build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            future=True,
        )
    return create_engine(database_url, pool_pre_ping=True, future=True)


class SqlStore(KeyValueStore):
    def __init__(self, engine: Engine):
        self._engine = engine
        self._init_table()

    @classmethod
    def from_url(cls, database_url: str) -> "SqlStore":
        return cls(build_engine(database_url))

    def _init_table(self):
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    sql_text(
                        f"""
                        CREATE TABLE IF NOT EXISTS {KV_TABLE} (
                            key TEXT PRIMARY KEY,
                            value TEXT NOT NULL
                        )
                        """
                    )
                )
        except SQLAlchemyError as exc:
            raise StoreError(f"Unable to initialize store: {exc}") from exc

    def get(self, key):
        try:
            with self._engine.connect() as conn:
                row = conn.execute(
                    sql_text(f"SELECT value FROM {KV_TABLE} WHERE key = :key"),
                    {"key": key},
                ).fetchone()
        except SQLAlchemyError as exc:
            raise StoreError(f"Unable to read {key}: {exc}") from exc
        return row[0] if row else None

    def set(self, key, value):
        try:
            with self._engine.begin() as conn:
                conn.execute(
                    sql_text(
                        f"INSERT INTO {KV_TABLE} (key, value) VALUES (:key, :value) "
                        "ON CONFLICT(key) DO UPDATE SET value=EXCLUDED.value"
                    ),
                    {"key": key, "value": str(value)},
                )
        except SQLAlchemyError as exc:
            raise StoreError(f"Unable to write {key}: {exc}") from exc

    def remove(self, key):
        try:
            with self._engine.begin() as conn:
                conn.execute(sql_text(f"DELETE FROM {KV_TABLE} WHERE key = :key"), {"key": key})
        except SQLAlchemyError as exc:
            raise StoreError(f"Unable to remove {key}: {exc}") from exc

    def keys(self):
        try:
            with self._engine.connect() as conn:
                rows = conn.execute(sql_text(f"SELECT key FROM {KV_TABLE} ORDER BY key")).fetchall()
        except SQLAlchemyError as exc:
            raise StoreError(f"Unable to list keys: {exc}") from exc
        return [row[0] for row in rows]

    def clear(self):
        # One statement: reset is all-or-nothing.
        try:
            with self._engine.begin() as conn:
                conn.execute(sql_text(f"DELETE FROM {KV_TABLE}"))
        except SQLAlchemyError as exc:
            raise StoreError(f"Unable to clear store: {exc}") from exc
        logger.info("Store cleared")
