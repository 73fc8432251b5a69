"""Text normalization for card content comparison.

Policy:
- Lowercase, delete the fixed punctuation set (no space inserted).
- Split on whitespace, drop tokens under 3 characters and stop words.
"""

from __future__ import annotations

from typing import Optional, Set

STOP_WORDS = frozenset(["a", "the", "is", "of", "and", "to", "in", "for", "with", "on", "my"])

# Apostrophes, quotes and question marks are not part of the set.
PUNCTUATION = ".,/#!$%^&*;:{}=-_`~()"
MIN_TOKEN_LENGTH = 3

_PUNCT_TABLE = str.maketrans("", "", PUNCTUATION)


def card_content(title: Optional[str], description: Optional[str] = None) -> str:
    """Return the lowercase ``title + " " + description`` used by all rules."""
    return f"{title or ''} {description or ''}".lower()


def strip_punctuation(text: str) -> str:
    return text.translate(_PUNCT_TABLE)


def tokenize(text: Optional[str]) -> Set[str]:
    """Normalize text into a set of comparable tokens.

    Steps: lowercase -> delete punctuation -> split on whitespace ->
    drop short tokens and stop words.
    """
    if not text:
        return set()
    words = strip_punctuation(text.lower()).split()
    return {w for w in words if len(w) >= MIN_TOKEN_LENGTH and w not in STOP_WORDS}
