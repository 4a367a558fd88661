"""Tests for glyph repair."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from number_extractor.glyphs import repair


# ── Substitution ─────────────────────────────────────────────────────

def test_confusable_letters_become_digits():
    assert repair("oO iIlL zZ bB gG sS tT") == "00 1111 22 88 99 55 77"


def test_letters_inside_a_digit_run():
    assert repair("4149b09o1222 28oo") == "414980901222 2800"


def test_whole_words_are_rewritten_too():
    # Known trade-off: recall on numbers over fidelity of words
    assert repair("Tools") == "70015"


def test_other_scripts_untouched():
    assert repair("дзвоніть") == "дзвоніть"


# ── Punctuation and whitespace ───────────────────────────────────────

def test_phone_separators_kept():
    assert repair("+1 (050) 123-4") == "+1 (050) 123-4"


def test_other_punctuation_stripped():
    assert repair("Card: 4149-6090.1222") == "Card 4149-60901222"
    assert repair("12_34") == "1234"


def test_whitespace_collapsed():
    assert repair("x\n\n  y\t w") == "x y w"


# ── Edge cases ───────────────────────────────────────────────────────

def test_empty_and_none():
    assert repair("") == ""
    assert repair(None) == ""


def test_pure():
    text = "Tel: 8 (050) 111-22-33"
    assert repair(text) == repair(text)
    assert text == "Tel: 8 (050) 111-22-33"
