"""Engine — the main API.  Repair, then phones, then cards.

Usage:
    from number_extractor import Engine, classify

    result = classify("8 380 99 123 4567 дзвоніть")
    print(result.phones)         # frozenset({'+380991234567'})

    engine = Engine(EngineConfig(strict_ukrainian_length=True))
    engine.classify(ocr_text).to_dict()

The engine is pure and keeps no state between calls; one instance can
serve any number of threads.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from .cards import resolve_cards
from .glyphs import repair
from .log import get_logger
from .phones import resolve_phones
from .types import ClassificationResult

log = get_logger(__name__)


@dataclass
class EngineConfig:
    """Configuration for the Engine."""
    # Only accept "380" numbers with exactly nine subscriber digits
    strict_ukrainian_length: bool = False
    # Canonical values that should NEVER be reported (still masked as phones)
    ignore: set[str] = field(default_factory=set)


class Engine:
    """Phone/card classifier for OCR text.

    Step 1: glyph repair
    Step 2: phones ("380" marker first, generic formats only if it found none)
    Step 3: cards, with every phone span masked out
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def classify(self, raw_text: str | None) -> ClassificationResult:
        """Classify the numbers in one OCR result.  Never raises."""
        if not isinstance(raw_text, str):
            if raw_text is not None:
                log.warning("non-text input ignored", input_type=type(raw_text).__name__)
            return ClassificationResult()

        repaired = repair(raw_text)
        if not repaired.strip():
            return ClassificationResult()

        phones = resolve_phones(
            repaired, strict_ukrainian_length=self.config.strict_ukrainian_length,
        )
        cards = resolve_cards(repaired, phones)

        result = ClassificationResult(
            phones=frozenset(phones - self.config.ignore),
            cards=frozenset(cards - self.config.ignore),
        )
        log.debug(
            "classified",
            text_length=len(raw_text),
            phones=len(result.phones),
            cards=len(result.cards),
        )
        return result


_default_engine = Engine()


def classify(raw_text: str | None) -> ClassificationResult:
    """Classify with the default configuration."""
    return _default_engine.classify(raw_text)
