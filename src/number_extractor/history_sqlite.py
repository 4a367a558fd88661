"""Persistent history backed by SQLite — survives process restarts.

Drop-in replacement for History when you need durability.

Usage:
    history = SqliteHistory(db_path="~/.number-extractor/history.db")
    # Same API as History: add, add_result, items, dump, clear
"""

from __future__ import annotations
import sqlite3
import time
from pathlib import Path

from .history import DEFAULT_LIMIT, _check_limit
from .types import ClassificationResult, HistoryItem, NumberType


_SCHEMA = """
CREATE TABLE IF NOT EXISTS history (
    number TEXT NOT NULL,
    type TEXT NOT NULL,
    timestamp REAL NOT NULL,
    PRIMARY KEY (number, type)
);
CREATE INDEX IF NOT EXISTS idx_history_timestamp
    ON history(timestamp);
"""

# REPLACE gives the row a fresh rowid, which breaks timestamp ties.
_NEWEST_FIRST = "ORDER BY timestamp DESC, rowid DESC"


class SqliteHistory:
    """Persistent history store."""

    __slots__ = ("_db", "_limit")

    def __init__(self, *, db_path: str | Path = "history.db", limit: int = DEFAULT_LIMIT) -> None:
        self._limit = _check_limit(limit)
        db_path = Path(db_path).expanduser()
        db_path.parent.mkdir(parents=True, exist_ok=True)
        self._db = sqlite3.connect(str(db_path), check_same_thread=False)
        self._db.executescript(_SCHEMA)

    def add(self, number: str, type: NumberType | str) -> HistoryItem:
        item = HistoryItem(number=number, type=NumberType(type), timestamp=time.time())
        self._db.execute(
            "INSERT OR REPLACE INTO history (number, type, timestamp) VALUES (?, ?, ?)",
            (item.number, item.type.value, item.timestamp),
        )
        self._db.execute(
            f"DELETE FROM history WHERE rowid NOT IN "
            f"(SELECT rowid FROM history {_NEWEST_FIRST} LIMIT ?)",
            (self._limit,),
        )
        self._db.commit()
        return item

    def add_result(self, result: ClassificationResult) -> None:
        for phone in sorted(result.phones):
            self.add(phone, NumberType.PHONE)
        for card in sorted(result.cards):
            self.add(card, NumberType.CARD)

    def items(self) -> list[HistoryItem]:
        rows = self._db.execute(
            f"SELECT number, type, timestamp FROM history {_NEWEST_FIRST}"
        ).fetchall()
        return [HistoryItem(number=n, type=NumberType(t), timestamp=ts) for n, t, ts in rows]

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def size(self) -> int:
        return self._db.execute("SELECT COUNT(*) FROM history").fetchone()[0]

    def dump(self) -> list[dict]:
        return [i.to_dict() for i in self.items()]

    def clear(self) -> None:
        self._db.execute("DELETE FROM history")
        self._db.commit()

    def close(self) -> None:
        self._db.close()
