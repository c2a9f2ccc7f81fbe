# -*- coding: utf-8 -*-
"""
Token Storage - durable key/value storage for auth tokens.

Values are JSON-encoded into a single SQLite table so that they
survive restarts.
"""

import json
import sqlite3
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Tuple, Union

from app.config import Config
from utils.logger import get_logger

logger = get_logger(__name__)


class TokenStorage:
    """Persistent key/value store (the desktop counterpart of browser local storage)."""

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        """
        Open (and create if needed) the storage database.

        Args:
            db_path: SQLite file path, ":memory:" for a throwaway store;
                defaults to Config.STORAGE_PATH
        """
        if db_path is None:
            db_path = Config.STORAGE_PATH
        if str(db_path) != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

        self.db_path = db_path
        self._lock = threading.Lock()
        # API calls read tokens from worker threads
        self._connection = sqlite3.connect(str(db_path), check_same_thread=False)
        self._ensure_tables()

    def _ensure_tables(self):
        with self._lock:
            self._connection.execute("""
                CREATE TABLE IF NOT EXISTS key_value_store (
                    store_key TEXT PRIMARY KEY,
                    store_value TEXT,
                    updated_at TEXT
                )
            """)
            self._connection.commit()

    def get_value(self, key: str, default: Any = None) -> Any:
        """Get a stored value, or `default` when missing or unreadable."""
        try:
            with self._lock:
                row = self._connection.execute(
                    "SELECT store_value FROM key_value_store WHERE store_key = ?", (key,)
                ).fetchone()
        except sqlite3.Error as e:
            logger.error(f"Failed to read '{key}' from storage: {e}")
            return default

        if row is None or not row[0]:
            return default

        try:
            return json.loads(row[0])
        except json.JSONDecodeError:
            logger.warning(f"Stored value for '{key}' is not valid JSON")
            return default

    def set_value(self, key: str, value: Any) -> bool:
        """Store a JSON-serializable value; returns False on failure."""
        try:
            encoded = json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.error(f"Value for '{key}' is not JSON serializable: {e}")
            return False

        try:
            with self._lock:
                self._connection.execute("""
                    INSERT OR REPLACE INTO key_value_store (store_key, store_value, updated_at)
                    VALUES (?, ?, ?)
                """, (key, encoded, datetime.now().isoformat()))
                self._connection.commit()
            return True
        except sqlite3.Error as e:
            logger.error(f"Failed to write '{key}' to storage: {e}")
            return False

    def delete_value(self, key: str) -> bool:
        try:
            with self._lock:
                self._connection.execute(
                    "DELETE FROM key_value_store WHERE store_key = ?", (key,)
                )
                self._connection.commit()
            return True
        except sqlite3.Error as e:
            logger.error(f"Failed to delete '{key}' from storage: {e}")
            return False

    # ==================== Tokens ====================

    def get_access_token(self) -> Optional[str]:
        return self.get_value(Config.ACCESS_TOKEN_KEY)

    def get_tokens(self) -> Tuple[Optional[str], Optional[str]]:
        """Return (access_token, refresh_token)."""
        return (
            self.get_value(Config.ACCESS_TOKEN_KEY),
            self.get_value(Config.REFRESH_TOKEN_KEY),
        )

    def save_tokens(self, access_token: str, refresh_token: Optional[str] = None) -> bool:
        saved = self.set_value(Config.ACCESS_TOKEN_KEY, access_token)
        if refresh_token is not None:
            saved = self.set_value(Config.REFRESH_TOKEN_KEY, refresh_token) and saved
        return saved

    def clear_tokens(self):
        self.delete_value(Config.ACCESS_TOKEN_KEY)
        self.delete_value(Config.REFRESH_TOKEN_KEY)

    def close(self):
        with self._lock:
            self._connection.close()
