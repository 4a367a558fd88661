"""Glyph repair — undo the letter/digit confusions OCR makes on numbers.

Substitution runs over the whole text, not only inside digit runs: OCR
drops a letter glyph right in the middle of a 16-digit card number as
often as next to it.  Ordinary words get rewritten too ("Tools" turns
into "70015"); numbers are what we are after, so recall wins.
"""

from __future__ import annotations
import re

_CONFUSABLES = str.maketrans({
    "o": "0", "O": "0",
    "i": "1", "I": "1", "l": "1", "L": "1",
    "z": "2", "Z": "2",
    "b": "8", "B": "8",
    "g": "9", "G": "9",
    "s": "5", "S": "5",
    "t": "7", "T": "7",
})

# Anything that is not a letter/digit (any script), whitespace or one of
# the phone separators + - ( ).  \w covers "_", so strip it explicitly.
_PUNCTUATION = re.compile(r"[^\w\s+\-()]|_")
_WHITESPACE = re.compile(r"\s+")


def repair(text: str | None) -> str:
    """Return a fresh, repaired copy of raw OCR text."""
    if not text:
        return ""
    repaired = text.translate(_CONFUSABLES)
    repaired = _PUNCTUATION.sub("", repaired)
    return _WHITESPACE.sub(" ", repaired)
