"""Checks applied to a candidate's digits once a shape pattern has fired."""

from __future__ import annotations
import re

UKRAINIAN_MARKER = "380"
UA_SUBSCRIBER_DIGITS = 9

CARD_MIN_DIGITS = 13
CARD_MAX_DIGITS = 19
# Visa, Mastercard, Amex, Discover/UnionPay and the rest of the 6-range
CARD_PREFIXES = ("4", "5", "34", "37", "6")

PHONE_MIN_LENGTH = 10   # counts the leading "+"
PHONE_MAX_LENGTH = 15

_NON_DIGIT = re.compile(r"[^0-9]")


def digits_of(text: str) -> str:
    """ASCII digits of *text*, everything else dropped."""
    return _NON_DIGIT.sub("", text)


def luhn_valid(digits: str) -> bool:
    """Luhn checksum: double every second digit from the right, sum mod 10."""
    total = 0
    for i, ch in enumerate(reversed(digits)):
        n = int(ch)
        if i % 2 == 1:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total % 10 == 0


def is_likely_card(number: str) -> bool:
    """True if *number* may be a payment card.

    The Ukrainian marker vetoes the card reading outright; this is the
    one place that rule lives.
    """
    digits = digits_of(number)
    if UKRAINIAN_MARKER in digits:
        return False
    if not CARD_MIN_DIGITS <= len(digits) <= CARD_MAX_DIGITS:
        return False
    if digits.startswith(CARD_PREFIXES):
        return True
    return luhn_valid(digits)


def is_likely_phone(digits: str, has_plus: bool = False) -> bool:
    """Length and leading-digit plausibility for generic phone candidates."""
    length = len(digits) + (1 if has_plus else 0)
    if not PHONE_MIN_LENGTH <= length <= PHONE_MAX_LENGTH:
        return False
    return has_plus or digits.startswith(("0", UKRAINIAN_MARKER))
