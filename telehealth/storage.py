"""
Durable key/value storage for client-side state (session record, locale).
"""

import sys
from typing import Dict, Optional

from sqlalchemy import create_engine, text

from telehealth.config import STORAGE_URI, STORAGE_TABLE


class MemoryStorage:
    """Dict-backed storage; lives only as long as the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self):
        return sorted(self._data)


class SqlStorage:
    """Key/value rows in a single SQL table, written through immediately."""

    def __init__(self, engine, table: str = STORAGE_TABLE):
        self.engine = engine
        self.table = table
        self._create_table()

    def _create_table(self) -> None:
        sql = text(f"""
            CREATE TABLE IF NOT EXISTS {self.table} (
                storage_key VARCHAR(128) PRIMARY KEY,
                storage_value TEXT NOT NULL
            )
        """)
        with self.engine.begin() as conn:
            conn.execute(sql)

    def get(self, key: str) -> Optional[str]:
        sql = text(f"SELECT storage_value FROM {self.table} WHERE storage_key = :k")
        with self.engine.connect() as conn:
            row = conn.execute(sql, {"k": key}).mappings().first()
        return None if row is None else str(row["storage_value"])

    def set(self, key: str, value: str) -> None:
        with self.engine.begin() as conn:
            conn.execute(text(f"DELETE FROM {self.table} WHERE storage_key = :k"), {"k": key})
            conn.execute(
                text(f"INSERT INTO {self.table} (storage_key, storage_value) VALUES (:k, :v)"),
                {"k": key, "v": value},
            )

    def remove(self, key: str) -> None:
        with self.engine.begin() as conn:
            conn.execute(text(f"DELETE FROM {self.table} WHERE storage_key = :k"), {"k": key})

    def keys(self):
        sql = text(f"SELECT storage_key FROM {self.table} ORDER BY storage_key")
        with self.engine.connect() as conn:
            return [row["storage_key"] for row in conn.execute(sql).mappings()]


def init_storage(uri: str = STORAGE_URI) -> SqlStorage:
    """Create the SQLAlchemy engine and the storage table."""
    engine = create_engine(uri, echo=False, future=True)
    try:
        storage = SqlStorage(engine)
    except Exception as e:
        print("ERROR: could not open storage:", e, file=sys.stderr)
        sys.exit(1)
    print(f"[init] Storage ready ({engine.url.drivername}).")
    return storage
