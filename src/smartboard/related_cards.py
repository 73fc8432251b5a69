"""Related-card ranking for a target card against its siblings.

Levels:
- Score every sibling (target excluded by id) with Jaccard similarity
- Keep scores strictly above the threshold
- Rank descending, ties keep input order, cap at the limit
"""

from __future__ import annotations

from typing import Iterable, List

from .models import Card, RelatedCard
from .normalize import card_content, tokenize
from .similarity import jaccard_similarity

RELATED_THRESHOLD = 0.25
MAX_RELATED_CARDS = 3


def score_candidates(target: Card, cards: Iterable[Card]) -> List[RelatedCard]:
    """Score each sibling against the target, preserving input order.

    Args:
        target: Card to find relatives for
        cards: Candidate pool (may include the target itself)

    Returns:
        One RelatedCard per candidate whose id differs from the target's
    """
    target_tokens = tokenize(card_content(target.title, target.description))
    scored: List[RelatedCard] = []
    for card in cards:
        if card.id == target.id:
            continue
        tokens = tokenize(card_content(card.title, card.description))
        scored.append(RelatedCard(card=card, similarity=jaccard_similarity(target_tokens, tokens)))
    return scored


def find_related_cards(
    target: Card,
    cards: Iterable[Card],
    threshold: float = RELATED_THRESHOLD,
    limit: int = MAX_RELATED_CARDS,
) -> List[RelatedCard]:
    """Return the top siblings whose similarity is strictly above ``threshold``.

    Args:
        target: Card to find relatives for
        cards: Candidate pool, in the order ties should be resolved
        threshold: Exclusive lower bound on similarity
        limit: Maximum number of cards returned

    Returns:
        Ranked list (highest similarity first); empty if nothing qualifies
    """
    above = [r for r in score_candidates(target, cards) if r.similarity > threshold]
    # sorted() is stable, also with reverse=True
    ranked = sorted(above, key=lambda r: r.similarity, reverse=True)
    return ranked[:limit]
