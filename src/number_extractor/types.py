"""Core types."""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, IntEnum


class Category(str, Enum):
    PHONE = "phone"
    CARD = "card"


# History entries use the same two labels as the classifier.
NumberType = Category


class Tier(IntEnum):
    """Evaluation order of the pattern catalogue (lower runs first)."""
    UKRAINIAN_PHONE = 0
    GENERIC_PHONE = 1
    CARD = 2


class TrunkPrefix(str, Enum):
    """Noise accepted in front of the "380" marker.  Always discarded."""
    PAREN_EIGHT = "(8"
    ONE_EIGHT = "1 8"
    EIGHT = "8"
    NONE = ""


@dataclass(frozen=True, slots=True)
class NumberMatch:
    """A single candidate span found in repaired text."""
    category: Category
    pattern: str           # name of the catalogue entry that fired
    start: int
    end: int
    text: str
    digits: str            # ASCII digits of the span, "+" excluded
    has_plus: bool
    canonical: str
    trunk_prefix: TrunkPrefix | None = None


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Phones and cards found in one piece of OCR text."""
    phones: frozenset[str] = frozenset()
    cards: frozenset[str] = frozenset()

    def __bool__(self) -> bool:
        return bool(self.phones or self.cards)

    def to_dict(self) -> dict[str, list[str]]:
        return {"phones": sorted(self.phones), "cards": sorted(self.cards)}


@dataclass(frozen=True, slots=True)
class HistoryItem:
    """One remembered number."""
    number: str
    type: NumberType
    timestamp: float = field(compare=False)   # seconds since epoch

    def to_dict(self) -> dict:
        return {"number": self.number, "type": self.type.value, "timestamp": self.timestamp}
