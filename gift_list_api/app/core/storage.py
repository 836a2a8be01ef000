"""
Per-list key‑value storage units and the registry that owns them.

A ``StorageUnit`` is an isolated store scoped to one logical list
name.  It exposes ``list``, ``get``, ``put`` and ``delete`` over string
keys and JSON‑serialisable dict values, persisted in the
``gift_store`` SQLite table.  Each operation runs in its own
transaction, so every single call is atomic.

``StorageRegistry`` maps list names to storage units.  Requests for
the same name always receive the same unit instance, and therefore
the same ``asyncio.Lock``; callers hold that lock to serialise
operations addressed to one list.  Units for different names share no
mutable state.
"""

from __future__ import annotations

import asyncio
import json
import logging
import sqlite3
from typing import Any, Dict, List, Optional

from .db import get_cursor, init_db
from .errors import BadRequest, StorageFailure

logger = logging.getLogger(__name__)


class StorageUnit:
    """Durable key‑value store for a single list name."""

    def __init__(self, name: str, database_url: Optional[str] = None) -> None:
        self.name = name
        self.database_url = database_url
        self.lock = asyncio.Lock()

    def __repr__(self) -> str:
        return f"StorageUnit(name={self.name!r})"

    async def list(self) -> List[Dict[str, Any]]:
        """Return every stored value ordered by key.

        An empty store yields an empty list.
        """
        try:
            with get_cursor(self.database_url) as cursor:
                rows = cursor.execute(
                    "SELECT key, value FROM gift_store WHERE list_name = ? ORDER BY key",
                    (self.name,),
                ).fetchall()
        except sqlite3.Error as exc:
            raise StorageFailure() from exc
        return [self._decode(row["key"], row["value"]) for row in rows]

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Point lookup; returns ``None`` when the key is absent."""
        try:
            with get_cursor(self.database_url) as cursor:
                row = cursor.execute(
                    "SELECT value FROM gift_store WHERE list_name = ? AND key = ?",
                    (self.name, key),
                ).fetchone()
        except sqlite3.Error as exc:
            raise StorageFailure() from exc
        if row is None:
            return None
        return self._decode(key, row["value"])

    async def put(self, key: str, value: Dict[str, Any]) -> None:
        """Unconditional upsert; the whole record is overwritten."""
        encoded = json.dumps(value)
        try:
            with get_cursor(self.database_url) as cursor:
                cursor.execute(
                    "INSERT INTO gift_store (list_name, key, value) VALUES (?, ?, ?)"
                    " ON CONFLICT(list_name, key) DO UPDATE SET value = excluded.value,"
                    " updated_at = CURRENT_TIMESTAMP",
                    (self.name, key, encoded),
                )
        except sqlite3.Error as exc:
            raise StorageFailure() from exc
        logger.debug("Stored key %s in %s", key, self.name)

    async def delete(self, key: str) -> None:
        """Remove ``key`` if present.  Deleting a missing key is a no-op."""
        try:
            with get_cursor(self.database_url) as cursor:
                cursor.execute(
                    "DELETE FROM gift_store WHERE list_name = ? AND key = ?",
                    (self.name, key),
                )
        except sqlite3.Error as exc:
            raise StorageFailure() from exc
        logger.debug("Deleted key %s from %s", key, self.name)

    async def clear(self) -> None:
        """Remove every record of this list."""
        try:
            with get_cursor(self.database_url) as cursor:
                cursor.execute("DELETE FROM gift_store WHERE list_name = ?", (self.name,))
        except sqlite3.Error as exc:
            raise StorageFailure() from exc
        logger.info("Cleared storage unit %s", self.name)

    def _decode(self, key: str, raw: str) -> Dict[str, Any]:
        try:
            value = json.loads(raw)
        except (TypeError, json.JSONDecodeError) as exc:
            logger.error("Corrupted value for key %s in %s", key, self.name)
            raise StorageFailure() from exc
        if not isinstance(value, dict):
            logger.error("Unexpected value type for key %s in %s", key, self.name)
            raise StorageFailure()
        return value


class StorageRegistry:
    """Resolve list names to their single ``StorageUnit``.

    Units are created lazily on first lookup.  The database schema is
    created (or migrated) when the registry is opened.
    """

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_url = database_url
        self._units: Dict[str, StorageUnit] = {}

    def open(self) -> "StorageRegistry":
        """Apply migrations to the backing database and return ``self``."""
        try:
            init_db(self.database_url)
        except sqlite3.Error as exc:
            raise StorageFailure() from exc
        logger.info("Storage registry opened")
        return self

    def get(self, name: str) -> StorageUnit:
        """Return the storage unit for ``name``, creating it if needed."""
        if not name:
            raise BadRequest("List name is required")
        unit = self._units.get(name)
        if unit is None:
            unit = StorageUnit(name, self.database_url)
            self._units[name] = unit
            logger.debug("Created storage unit %s", name)
        return unit

    def names(self) -> List[str]:
        """Names of the units resolved so far."""
        return sorted(self._units)
