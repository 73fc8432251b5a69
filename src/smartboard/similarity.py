"""Set-overlap similarity between normalized card contents."""

from __future__ import annotations

from typing import AbstractSet

from .models import Card
from .normalize import card_content, tokenize


def jaccard_similarity(tokens_a: AbstractSet[str], tokens_b: AbstractSet[str]) -> float:
    """Return |A & B| / |A | B|, or 0.0 when either set is empty."""
    if not tokens_a or not tokens_b:
        return 0.0
    return len(tokens_a & tokens_b) / len(tokens_a | tokens_b)


def text_similarity(text_a: str, text_b: str) -> float:
    return jaccard_similarity(tokenize(text_a), tokenize(text_b))


def card_similarity(card_a: Card, card_b: Card) -> float:
    """Similarity of two cards' title + description."""
    return text_similarity(
        card_content(card_a.title, card_a.description),
        card_content(card_b.title, card_b.description),
    )
