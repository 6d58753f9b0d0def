from ...constants import COLLECTION_KEYS, TABLE_KV_STORE

def seed(conn):
    # every collection key must exist (as an empty list) before the first read
    for key in COLLECTION_KEYS:
        conn.execute(
            f"INSERT OR IGNORE INTO {TABLE_KV_STORE}(key, value) VALUES (?, '[]')",
            (key,),
        )
    conn.commit()
