"""Phone resolver.

Tier 0 (numbers carrying the "380" marker) is authoritative: when it
yields anything, the generic tier is never consulted.  Generic matches
that look more like a payment card are left for the card resolver.
"""

from __future__ import annotations

from .patterns import drop_overlaps, scan
from .types import NumberMatch, Tier
from .validators import UA_SUBSCRIBER_DIGITS, UKRAINIAN_MARKER, is_likely_card, is_likely_phone


def find_phones(text: str, *, strict_ukrainian_length: bool = False) -> list[NumberMatch]:
    """Phone matches in repaired text, overlaps resolved, in text order.

    With ``strict_ukrainian_length`` a "380" number is only accepted when
    exactly nine subscriber digits follow the marker.  Anything else is
    rejected, never trimmed.
    """
    ukrainian = [
        m for m in scan(text, Tier.UKRAINIAN_PHONE)
        if not strict_ukrainian_length or _has_full_subscriber(m)
    ]
    if ukrainian:
        return drop_overlaps(ukrainian)

    generic = [
        m for m in scan(text, Tier.GENERIC_PHONE)
        if _is_generic_phone(m, strict_ukrainian_length)
    ]
    return drop_overlaps(generic)


def resolve_phones(text: str, *, strict_ukrainian_length: bool = False) -> set[str]:
    """Canonical phone numbers found in repaired text."""
    return {m.canonical for m in find_phones(text, strict_ukrainian_length=strict_ukrainian_length)}


def _has_full_subscriber(m: NumberMatch) -> bool:
    # canonical is "+380" followed by the subscriber digits
    return len(m.canonical) - 1 - len(UKRAINIAN_MARKER) == UA_SUBSCRIBER_DIGITS


def _is_generic_phone(m: NumberMatch, strict_ukrainian_length: bool) -> bool:
    if not is_likely_phone(m.digits, m.has_plus):
        return False
    if UKRAINIAN_MARKER in m.digits:
        # Marker beats the card reading; in strict mode tier 0 already said no.
        return not strict_ukrainian_length
    return not is_likely_card(m.digits)
