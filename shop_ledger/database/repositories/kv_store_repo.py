"""
Key-value store for named record collections.

Each collection (products, sales, expenses, payments) is one row in
`kv_store`, holding a JSON array of plain dicts in insertion order. The
store knows nothing about the records; it only round-trips them:

    get(key)  -> list[dict]   (empty list when the key is absent)
    set(key, records)         (replaces the whole collection)

Several collections can be written in a single IMMEDIATE transaction via
`set_many`, so a sale and the stock deduction it caused land together.
"""

from __future__ import annotations

import json
import sqlite3
from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Mapping

from ...constants import COLLECTION_KEYS, TABLE_KV_STORE


class KeyValueStore:
    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn
        # Use Row for named access
        self.conn.row_factory = sqlite3.Row

    # ---------------------------- TX helper ----------------------------

    @contextmanager
    def _immediate_tx(self):
        """
        Start an IMMEDIATE transaction (write lock once first write happens),
        commit on success, rollback on error.
        """
        if self.conn.in_transaction:
            # an implicit transaction from an earlier statement; flush it first
            self.conn.commit()
        cur = self.conn.cursor()
        try:
            cur.execute("BEGIN IMMEDIATE")
            yield
            self.conn.commit()
        except Exception:
            self.conn.rollback()
            raise
        finally:
            cur.close()

    # ---------------------------- API ----------------------------

    def initialize(self, keys: Iterable[str] = COLLECTION_KEYS) -> None:
        """Create any missing key as an empty collection."""
        with self._immediate_tx():
            for key in keys:
                self.conn.execute(
                    f"INSERT OR IGNORE INTO {TABLE_KV_STORE}(key, value) VALUES (?, '[]')",
                    (key,),
                )

    def get(self, key: str) -> List[Dict[str, Any]]:
        row = self.conn.execute(
            f"SELECT value FROM {TABLE_KV_STORE} WHERE key=?", (key,)
        ).fetchone()
        if row is None:
            return []
        data = json.loads(row["value"])
        if not isinstance(data, list):
            raise ValueError(f"Collection '{key}' is not a list (found {type(data).__name__}).")
        return data

    def set(self, key: str, records: Iterable[Mapping[str, Any]]) -> None:
        self.set_many({key: records})

    def set_many(self, collections: Mapping[str, Iterable[Mapping[str, Any]]]) -> None:
        payloads = {
            key: json.dumps([dict(r) for r in records], ensure_ascii=False)
            for key, records in collections.items()
        }
        with self._immediate_tx():
            for key, payload in payloads.items():
                self.conn.execute(
                    f"""
                    INSERT INTO {TABLE_KV_STORE}(key, value) VALUES (?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value
                    """,
                    (key, payload),
                )

