"""Recommendation aggregation for a single card.

Output order is fixed: date suggestion, move suggestion, related cards.
Nothing is cached; callers re-run ``get_recommendations`` whenever the card
or its siblings change.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Optional

from .models import (
    BoardList,
    Card,
    DateSuggestion,
    MoveSuggestion,
    Recommendation,
    RelatedCardsSuggestion,
)
from .related_cards import MAX_RELATED_CARDS, RELATED_THRESHOLD, find_related_cards
from .suggestion_rules import suggest_due_date, suggest_move


def board_siblings(card: Card, cards: Iterable[Card]) -> List[Card]:
    """Return the cards on the same board as ``card`` (all cards if it has no board id)."""
    if not card.board_id:
        return list(cards)
    return [c for c in cards if c.board_id == card.board_id]


def get_recommendations(
    card: Card,
    cards: Iterable[Card],
    today: Optional[date] = None,
    threshold: float = RELATED_THRESHOLD,
    limit: int = MAX_RELATED_CARDS,
) -> List[Recommendation]:
    """Build the ordered recommendation list for a card.

    Args:
        card: Target card
        cards: All cards on the board (the target may be included; it is skipped)
        today: Reference date for due-date suggestions
        threshold: Exclusive similarity bound for related cards
        limit: Maximum related cards

    Returns:
        Zero to three recommendations: date, move, related (in that order)
    """
    recs: List[Recommendation] = []

    date_rec = suggest_due_date(card, today=today)
    if date_rec is not None:
        recs.append(date_rec)

    move_rec = suggest_move(card)
    if move_rec is not None:
        recs.append(move_rec)

    related = find_related_cards(card, cards, threshold=threshold, limit=limit)
    if related:
        recs.append(RelatedCardsSuggestion(ranked_cards=related))

    return recs


def resolve_update(rec: Recommendation, lists: Iterable[BoardList]) -> Optional[Dict[str, str]]:
    """Translate an applied recommendation into the card fields to update.

    Args:
        rec: Recommendation the user chose to apply
        lists: Lists on the card's board

    Returns:
        {"due_date": ISO date} or {"list_id": id}; None for related cards or
        when no list carries the target title
    """
    if isinstance(rec, DateSuggestion):
        return {"due_date": rec.proposed_date.isoformat()}
    if isinstance(rec, MoveSuggestion):
        for lst in lists:
            if lst.title == rec.target_list_title:
                return {"list_id": lst.id}
        return None
    return None
