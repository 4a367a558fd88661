"""History — the most recent numbers a user has extracted, newest first.

Behaviour:
  - Re-adding a known (number, type) pair moves it to the top with a
    fresh timestamp; it is never duplicated
  - New entries are prepended and the list is capped at ``limit``
"""

from __future__ import annotations
import time

from .types import ClassificationResult, HistoryItem, NumberType

DEFAULT_LIMIT = 30


def _check_limit(limit: int) -> int:
    if limit < 1:
        raise ValueError(f"history limit must be positive, got {limit}")
    return limit


class History:
    """In-memory history store."""

    __slots__ = ("_items", "_limit")

    def __init__(self, *, limit: int = DEFAULT_LIMIT) -> None:
        self._limit = _check_limit(limit)
        self._items: list[HistoryItem] = []

    # ------------------------------------------------------------------
    # Core API
    # ------------------------------------------------------------------

    def add(self, number: str, type: NumberType | str) -> HistoryItem:
        """Record a number, moving it to the top if already present."""
        item = HistoryItem(number=number, type=NumberType(type), timestamp=time.time())
        rest = [i for i in self._items if i != item]
        self._items = [item, *rest][: self._limit]
        return item

    def add_result(self, result: ClassificationResult) -> None:
        """Record every phone, then every card, of a classification."""
        for phone in sorted(result.phones):
            self.add(phone, NumberType.PHONE)
        for card in sorted(result.cards):
            self.add(card, NumberType.CARD)

    def items(self) -> list[HistoryItem]:
        return list(self._items)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def size(self) -> int:
        return len(self._items)

    def dump(self) -> list[dict]:
        """Return the history as plain dicts (for JSON output)."""
        return [i.to_dict() for i in self._items]

    def clear(self) -> None:
        self._items.clear()

    def close(self) -> None:
        pass
