# database/__init__.py
from __future__ import annotations

from pathlib import Path
import sqlite3

from ..config import DB_PATH
from ..constants import SCHEMA_VERSION
from . import schema as schema_module
from .versioning import get_current_version, set_current_version
from .seeders.default_data import seed as seed_default_data


def get_connection(db_path: Path | str | None = None) -> sqlite3.Connection:
    """
    Returns a sqlite3.Connection with:
      - WAL mode (file databases only)
      - row_factory = sqlite3.Row (so rows behave like dicts and tuples)
    Ensures schema, version row & empty collections are applied idempotently.

    Pass ":memory:" for a throwaway database (tests).
    """
    target = DB_PATH if db_path is None else db_path
    in_memory = str(target) == ":memory:"
    if not in_memory:
        Path(target).parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(target))
    conn.row_factory = sqlite3.Row
    if not in_memory:
        conn.execute("PRAGMA journal_mode = WAL;")

    schema_module.apply_schema(conn)
    if get_current_version(conn) is None:
        set_current_version(conn, SCHEMA_VERSION)

    # Seeders should be safe to run repeatedly (idempotent).
    seed_default_data(conn)

    conn.commit()
    return conn


__all__ = [
    "get_connection",
]
