"""Pattern catalogue — every phone and card shape the extractor knows.

Entries are data, grouped in tiers that run in order:

  tier 0  Ukrainian phones, anchored on the "380" marker
  tier 1  generic international / local phones
  tier 2  payment-card shapes

Within a tier, catalogue position is the tie-breaker when two matches
overlap (then the longer span wins).  Nothing here validates digits;
that is validators.py's job.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from enum import Enum

from .types import Category, NumberMatch, Tier, TrunkPrefix
from .validators import UA_SUBSCRIBER_DIGITS, UKRAINIAN_MARKER, digits_of


class Normalization(str, Enum):
    FROM_MARKER = "from_marker"    # "+" and the digits from "380" onwards
    PLUS_DIGITS = "plus_digits"    # "+" and every digit of the span
    CARD_BLOCKS = "card_blocks"    # digits in blocks of four


@dataclass(frozen=True, slots=True)
class NumberPattern:
    name: str
    category: Category
    tier: Tier
    regex: re.Pattern
    normalization: Normalization
    trunk_prefix: TrunkPrefix | None = None


# Separators between digit groups (whitespace is already collapsed).
_SEP = r"[ \-()]{1,3}"

# Digits after the marker.  Separated digits are taken up to a full
# subscriber number and only up to the end of a group, so whatever is
# printed next (a card, a year) stays out of the phone.  A longer glued
# run is kept whole.
_UA_TAIL = (
    rf"(?:(?:(?:{_SEP})?\d){{1,{UA_SUBSCRIBER_DIGITS}}}(?!\d)"
    rf"|(?:{_SEP})?\d{{{UA_SUBSCRIBER_DIGITS + 1},}})?"
)
_UA_MARKER = rf"\+?(?P<marker>{UKRAINIAN_MARKER})"

_TRUNK_LEADS: dict[TrunkPrefix, str] = {
    TrunkPrefix.PAREN_EIGHT: r"\( ?8 ?\)? ?",
    TrunkPrefix.ONE_EIGHT: r"(?<!\d)1 8[ \-]?",
    TrunkPrefix.EIGHT: r"(?<!\d)8[ \-]?",
    TrunkPrefix.NONE: "",
}


def _compile(expr: str) -> re.Pattern:
    return re.compile(expr, re.ASCII)


def _ukrainian_patterns() -> list[NumberPattern]:
    # TrunkPrefix is declared most specific first; keep that order.
    return [
        NumberPattern(
            name=f"ua_{prefix.name.lower()}",
            category=Category.PHONE,
            tier=Tier.UKRAINIAN_PHONE,
            regex=_compile(_TRUNK_LEADS[prefix] + _UA_MARKER + _UA_TAIL),
            normalization=Normalization.FROM_MARKER,
            trunk_prefix=prefix,
        )
        for prefix in TrunkPrefix
    ]


def _phone(name: str, expr: str) -> NumberPattern:
    return NumberPattern(name, Category.PHONE, Tier.GENERIC_PHONE,
                         _compile(expr), Normalization.PLUS_DIGITS)


def _card(name: str, expr: str) -> NumberPattern:
    return NumberPattern(name, Category.CARD, Tier.CARD,
                         _compile(expr), Normalization.CARD_BLOCKS)


PATTERNS: tuple[NumberPattern, ...] = (
    *_ukrainian_patterns(),

    # +CC (area) group group, country code of 1-4 digits
    _phone("intl", r"(?<![\d+])\+\d{1,4}[ \-]?\(?\d{1,4}\)?[ \-]?\d{1,4}[ \-]?\d{1,9}(?!\d)"),
    # 0XX XXX XX XX
    _phone("local_split", r"(?<!\d)\(?0\d{2}\)?[ \-]?\d{3}[ \-]?\d{2}[ \-]?\d{2}(?!\d)"),
    # 0XX XXX XXXX
    _phone("local", r"(?<!\d)\(?0\d{2}\)?[ \-]?\d{3}[ \-]?\d{4}(?!\d)"),
    _phone("bare", r"(?<!\d)\d{9,}(?!\d)"),

    # XXXX XXXX XXXX XXXX[ XXX]
    _card("card_grouped", r"(?<!\d)\d{4}(?:[ \-]\d{4}){3}(?:[ \-]?\d{1,3})?(?!\d)"),
    # Amex layout, XXXX XXXXXX XXXXX
    _card("card_amex", r"(?<!\d)3[47]\d{2}[ \-]\d{6}[ \-]\d{5}(?!\d)"),
    _card("card_contiguous", r"(?<!\d)\d{13,19}(?!\d)"),
    # Fallback: a whole 13-19 digit run, any single space/dash layout
    _card("card_run", r"(?<!\d)(?<!\d[ \-])\d(?:[ \-]?\d){12,18}(?![ \-]?\d)"),
)

_RANK = {p.name: i for i, p in enumerate(PATTERNS)}


def patterns_for(tier: Tier) -> list[NumberPattern]:
    return [p for p in PATTERNS if p.tier == tier]


def group_card_digits(digits: str) -> str:
    """'4149609012222800' -> '4149 6090 1222 2800'."""
    return " ".join(digits[i:i + 4] for i in range(0, len(digits), 4))


def scan(text: str, tier: Tier) -> list[NumberMatch]:
    """Run every pattern of *tier* over text.  Overlaps are kept."""
    matches: list[NumberMatch] = []
    for pattern in patterns_for(tier):
        for m in pattern.regex.finditer(text):
            matches.append(_to_match(pattern, m))
    return matches


def _to_match(pattern: NumberPattern, m: re.Match) -> NumberMatch:
    span = m.group()
    digits = digits_of(span)
    if pattern.normalization is Normalization.FROM_MARKER:
        canonical = "+" + digits_of(m.string[m.start("marker"):m.end()])
    elif pattern.normalization is Normalization.PLUS_DIGITS:
        canonical = "+" + digits
    else:
        canonical = group_card_digits(digits)
    return NumberMatch(
        category=pattern.category,
        pattern=pattern.name,
        start=m.start(),
        end=m.end(),
        text=span,
        digits=digits,
        has_plus="+" in span,
        canonical=canonical,
        trunk_prefix=pattern.trunk_prefix,
    )


def _rank(m: NumberMatch) -> tuple[int, int]:
    return _RANK[m.pattern], m.start - m.end


def drop_overlaps(matches: list[NumberMatch]) -> list[NumberMatch]:
    """Keep one match per stretch of text, in text order.

    An entry earlier in the catalogue beats a later one whatever the
    span lengths; two hits of the same entry go to the longer span.  The
    trunk-prefixed Ukrainian forms therefore win over the bare "380"
    form inside them.
    """
    kept: list[NumberMatch] = []
    for m in sorted(matches, key=_rank):
        if all(m.end <= k.start or m.start >= k.end for k in kept):
            kept.append(m)
    kept.sort(key=lambda m: m.start)
    return kept
