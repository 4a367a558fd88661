"""Card resolver.

Runs after the phone resolver.  Every span that produced a phone is
masked first, so the same digits can never be reported twice.
"""

from __future__ import annotations
from typing import Iterable

from .patterns import drop_overlaps, scan
from .types import NumberMatch, Tier
from .validators import is_likely_card

MASK_CHAR = "#"
_ASCII_DIGITS = frozenset("0123456789")


def mask_spans(text: str, spans: Iterable[tuple[int, int]]) -> str:
    """Blank out spans with MASK_CHAR, offsets unchanged.

    Each span is widened over digits glued directly to it: a run that
    turned out to be a phone is a phone from its first digit.
    """
    chars = list(text)
    for start, end in spans:
        while start > 0 and text[start - 1] in _ASCII_DIGITS:
            start -= 1
        while end < len(text) and text[end] in _ASCII_DIGITS:
            end += 1
        chars[start:end] = MASK_CHAR * (end - start)
    return "".join(chars)


def phone_spans(text: str, phones: Iterable[str]) -> list[tuple[int, int]]:
    """Spans of every phone-pattern match whose canonical value is in *phones*."""
    wanted = set(phones)
    if not wanted:
        return []
    return [
        (m.start, m.end)
        for tier in (Tier.UKRAINIAN_PHONE, Tier.GENERIC_PHONE)
        for m in scan(text, tier)
        if m.canonical in wanted
    ]


def find_cards(text: str, masked_spans: Iterable[tuple[int, int]] = ()) -> list[NumberMatch]:
    """Validated card matches in repaired text, overlaps resolved."""
    masked = mask_spans(text, masked_spans)
    # Validate before resolving overlaps: a rejected candidate must not
    # shadow a valid one over the same digits.
    accepted = [m for m in scan(masked, Tier.CARD) if is_likely_card(m.digits)]
    return drop_overlaps(accepted)


def resolve_cards(text: str, phones: Iterable[str] = ()) -> set[str]:
    """Canonical card numbers in repaired text, given the phones already found."""
    return {m.canonical for m in find_cards(text, phone_spans(text, phones))}
