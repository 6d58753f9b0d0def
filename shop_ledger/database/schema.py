from pathlib import Path
import sqlite3
import sys

SQL = r"""
/* ======================== CORE TABLES ======================== */

/* -------- schema version (single row) -------- */
CREATE TABLE IF NOT EXISTS schema_version (
    id      INTEGER PRIMARY KEY CHECK (id = 1),
    version TEXT NOT NULL
);

/* -------- named collections --------
   One row per collection key; value is a JSON array of records, in
   insertion order. Whole collections are rewritten on every change. */
CREATE TABLE IF NOT EXISTS kv_store (
    key        TEXT PRIMARY KEY,
    value      TEXT NOT NULL DEFAULT '[]' CHECK (json_valid(value)),
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
);

CREATE TRIGGER IF NOT EXISTS trg_kv_store_touch
AFTER UPDATE OF value ON kv_store
FOR EACH ROW
BEGIN
    UPDATE kv_store SET updated_at = CURRENT_TIMESTAMP WHERE key = NEW.key;
END;
"""


def apply_schema(conn: sqlite3.Connection) -> None:
    """Apply the (idempotent) schema on an open connection."""
    conn.executescript(SQL)
    conn.commit()


def init_schema(db_path: Path | str = "shop_ledger.db") -> None:
    db_path = Path(db_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)
    with sqlite3.connect(db_path) as conn:
        conn.execute("PRAGMA journal_mode=WAL;")
        apply_schema(conn)
    print(f"✓ DB applied to {db_path}")

if __name__ == "__main__":
    target = sys.argv[1] if len(sys.argv) > 1 else Path(__file__).resolve().parents[1] / "data" / "shop_ledger.db"
    init_schema(target)
