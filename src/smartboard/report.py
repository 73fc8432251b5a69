"""Reporting utilities for board recommendation runs."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from .ingest import write_csv
from .models import (
    Card,
    DateSuggestion,
    MoveSuggestion,
    Recommendation,
    RelatedCardsSuggestion,
)

NO_RECOMMENDATIONS = "No smart recommendations for this card right now."

CardResult = Tuple[Card, List[Recommendation]]


def recommendation_value(rec: Recommendation) -> str:
    """Return the proposed value of a recommendation as display text."""
    if isinstance(rec, DateSuggestion):
        return rec.proposed_date.isoformat()
    if isinstance(rec, MoveSuggestion):
        return rec.target_list_title
    if isinstance(rec, RelatedCardsSuggestion):
        return "; ".join(f"{r.card.title} ({r.percent})" for r in rec.ranked_cards)
    return ""


def recommendations_to_rows(card: Card, recommendations: Iterable[Recommendation]) -> List[dict]:
    return [
        {
            "card_id": card.id,
            "card_title": card.title,
            "list_title": card.list_title,
            "kind": rec.kind,
            "text": rec.text,
            "value": recommendation_value(rec),
            "rationale": rec.rationale,
        }
        for rec in recommendations
    ]


def write_results_csv(path: str, results: Iterable[CardResult]) -> None:
    """Write one row per (card, recommendation) pair.

    Cards without recommendations produce no rows.
    """
    rows: List[dict] = []
    for card, recs in results:
        rows.extend(recommendations_to_rows(card, recs))
    write_csv(path, rows)


def format_recommendations(recommendations: Sequence[Recommendation]) -> List[str]:
    """Render one card's recommendations as display lines."""
    if not recommendations:
        return [NO_RECOMMENDATIONS]
    lines: List[str] = []
    for rec in recommendations:
        lines.append(rec.text)
        if isinstance(rec, RelatedCardsSuggestion):
            for related in rec.ranked_cards:
                lines.append(f"  - {related.card.title} ({related.percent})")
        lines.append(f"    {rec.rationale}")
    return lines


def print_summary(results: Iterable[CardResult]) -> None:
    """Print per-kind counts for a board run."""
    results_list = list(results)
    counts: Dict[str, int] = {"date": 0, "move": 0, "related": 0}
    without = 0
    for _card, recs in results_list:
        if not recs:
            without += 1
        for rec in recs:
            counts[rec.kind] = counts.get(rec.kind, 0) + 1

    print("Recommendation Summary:")
    for kind in ("date", "move", "related"):
        print(f"  {kind:>7}: {counts.get(kind, 0)}")
    print(f"  no recs: {without}")
    print(f"  cards  : {len(results_list)}")
