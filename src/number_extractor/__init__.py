"""number-extractor — phone and payment-card numbers from noisy OCR text."""

from .engine import Engine, EngineConfig, classify
from .glyphs import repair
from .phones import resolve_phones
from .cards import resolve_cards
from .validators import is_likely_card, luhn_valid
from .history import History
from .history_sqlite import SqliteHistory
from .config import create_engine, create_history, load_config, load_from_yaml
from .types import Category, ClassificationResult, HistoryItem, NumberMatch, NumberType

__all__ = [
    "Engine", "EngineConfig", "classify",
    "repair", "resolve_phones", "resolve_cards",
    "is_likely_card", "luhn_valid",
    "History", "SqliteHistory",
    "create_engine", "create_history", "load_config", "load_from_yaml",
    "Category", "ClassificationResult", "HistoryItem", "NumberMatch", "NumberType",
]
__version__ = "0.1.0"
