"""Tests for the OCR adapter (recognizer injected, no Tesseract needed)."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from number_extractor import ClassificationResult, Engine, EngineConfig
from number_extractor.ocr import CHAR_WHITELIST, extract_from_image


def test_recognized_text_is_classified():
    result = extract_from_image("card.png", recognizer=lambda _: "Card: 4l49 b09o 1222 28oo")
    assert result.cards == {"4149 8090 1222 2800"}


def test_recognizer_failure_is_empty_text():
    def broken(_):
        raise RuntimeError("tesseract not installed")

    assert extract_from_image("photo.jpg", recognizer=broken) == ClassificationResult()


def test_custom_engine():
    engine = Engine(EngineConfig(ignore={"+380991234567"}))
    result = extract_from_image(object(), engine, recognizer=lambda _: "8 380 99 123 4567")
    assert result.phones == set()


def test_whitelist_covers_repairable_glyphs():
    for ch in "0123456789+-()oOiIlLzZbBgGsStT":
        assert ch in CHAR_WHITELIST
