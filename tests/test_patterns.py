"""Tests for the pattern catalogue."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from dataclasses import replace

import pytest

from number_extractor.patterns import (
    PATTERNS,
    drop_overlaps,
    group_card_digits,
    patterns_for,
    scan,
)
from number_extractor.types import Category, Tier, TrunkPrefix


# ── Catalogue shape ──────────────────────────────────────────────────

def test_catalogue_is_in_tier_order():
    tiers = [p.tier for p in PATTERNS]
    assert tiers == sorted(tiers)


def test_one_ukrainian_pattern_per_trunk_prefix():
    ukrainian = patterns_for(Tier.UKRAINIAN_PHONE)
    assert [p.trunk_prefix for p in ukrainian] == list(TrunkPrefix)
    assert all(p.category is Category.PHONE for p in ukrainian)


def test_names_unique():
    names = [p.name for p in PATTERNS]
    assert len(names) == len(set(names))


# ── Ukrainian marker ─────────────────────────────────────────────────

def _ukrainian(text):
    return drop_overlaps(scan(text, Tier.UKRAINIAN_PHONE))


def test_trunk_eight():
    [m] = _ukrainian("8 380 99 123 4567")
    assert m.trunk_prefix is TrunkPrefix.EIGHT
    assert m.canonical == "+380991234567"
    assert (m.start, m.end) == (0, 17)


def test_trunk_one_eight():
    [m] = _ukrainian("1 8 380501112233")
    assert m.trunk_prefix is TrunkPrefix.ONE_EIGHT
    assert m.canonical == "+380501112233"


def test_trunk_paren_eight():
    [m] = _ukrainian("(8)380501112233")
    assert m.trunk_prefix is TrunkPrefix.PAREN_EIGHT
    assert m.canonical == "+380501112233"


def test_no_trunk_with_plus():
    [m] = _ukrainian("+380 (50) 111-22-33")
    assert m.trunk_prefix is TrunkPrefix.NONE
    assert m.has_plus
    assert m.canonical == "+380501112233"


def test_digits_before_marker_dropped():
    [m] = _ukrainian("12380991234567")
    assert m.canonical == "+380991234567"
    assert m.digits == "380991234567"


def test_tail_stops_before_long_group():
    [m] = _ukrainian("+380501112233 4000123456789010")
    assert m.canonical == "+380501112233"
    assert m.end == 13


@pytest.mark.parametrize("text", [
    "+380501112233 4000 1234 5678 9010",
    "+380501112233 2024",
    "+380 50 111 22 33 4149 6090",
])
def test_tail_stops_after_nine_digits(text):
    [m] = _ukrainian(text)
    assert m.canonical == "+380501112233"


def test_short_tail_leaves_next_group_alone():
    [m] = _ukrainian("8 380 99 123 456 4149 6090 1222 2800")
    assert m.canonical == "+38099123456"
    assert m.text == "8 380 99 123 456"


def test_long_glued_tail_kept_whole():
    [m] = _ukrainian("+3805011122334")
    assert m.canonical == "+3805011122334"


# ── Cards ────────────────────────────────────────────────────────────

def test_group_card_digits():
    assert group_card_digits("4149609012222800") == "4149 6090 1222 2800"
    assert group_card_digits("1234567890123456789") == "1234 5678 9012 3456 789"


def test_grouped_card_beats_fallback_run():
    matches = drop_overlaps(scan("4149 6090 1222 2800", Tier.CARD))
    assert [m.pattern for m in matches] == ["card_grouped"]


def test_catalogue_rank_beats_span_length():
    [grouped] = [m for m in scan("4149 6090 1222 2800", Tier.CARD) if m.pattern == "card_grouped"]
    longer = replace(grouped, pattern="card_run", end=grouped.end + 5)
    assert drop_overlaps([longer, grouped]) == [grouped]
    assert drop_overlaps([]) == []


def test_fallback_run_needs_the_whole_run():
    matches = scan("1234 5678 9012 3456 7890 1234", Tier.CARD)
    assert "card_run" not in {m.pattern for m in matches}


def test_amex_layout():
    matches = drop_overlaps(scan("3782 822463 10005", Tier.CARD))
    assert [m.pattern for m in matches] == ["card_amex"]
    assert matches[0].canonical == "3782 8224 6310 005"
