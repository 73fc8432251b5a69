"""Keyword rules proposing a due date or a list move for a card.

Both rule tables are ordered; the first matching row wins. Keywords are
plain substrings of the lowercase title + description (no word boundaries),
so "asap" inside a longer word still matches.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional, Tuple

from .models import Card, DateSuggestion, MoveSuggestion
from .normalize import card_content


@dataclass(frozen=True)
class DateRule:
    """Due-date rule.

    Attributes:
        keywords: Any of these substrings in the content triggers the rule
        offset_days: Days after today for the proposed date
        rationale: Explanation shown with the suggestion
    """
    keywords: Tuple[str, ...]
    offset_days: int
    rationale: str


@dataclass(frozen=True)
class MoveRule:
    """List-move rule.

    Attributes:
        list_label: Substring the card's current list title must contain (case-sensitive)
        keywords: Any of these substrings in the content triggers the rule
        target_list: Title of the list to move to
        rationale: Explanation shown with the suggestion
    """
    list_label: str
    keywords: Tuple[str, ...]
    target_list: str
    rationale: str


DATE_RULES: Tuple[DateRule, ...] = (
    DateRule(("today", "urgent", "asap"), 0, "Based on urgent keywords."),
    DateRule(("tomorrow", "next day"), 1, "Based on short-term keywords."),
    DateRule(("next week", "7 days"), 7, "Based on medium-term keywords."),
)

MOVE_RULES: Tuple[MoveRule, ...] = (
    MoveRule("To Do", ("started", "working on"), "In Progress", "Keywords suggest work has begun."),
    MoveRule("In Progress", ("done", "complete"), "Done", "Keywords suggest task is complete."),
)


def _contains_any(content: str, keywords: Tuple[str, ...]) -> bool:
    return any(k in content for k in keywords)


def match_date_rule(content: str) -> Optional[DateRule]:
    for rule in DATE_RULES:
        if _contains_any(content, rule.keywords):
            return rule
    return None


def match_move_rule(content: str, list_title: str) -> Optional[MoveRule]:
    for rule in MOVE_RULES:
        if rule.list_label in list_title and _contains_any(content, rule.keywords):
            return rule
    return None


def suggest_due_date(card: Card, today: Optional[date] = None) -> Optional[DateSuggestion]:
    """Propose a due date from urgency keywords.

    Args:
        card: Card to inspect
        today: Reference date (defaults to the local calendar date)

    Returns:
        DateSuggestion, or None if the card already has a due date or no rule matches
    """
    if card.due_date:
        return None
    rule = match_date_rule(card_content(card.title, card.description))
    if rule is None:
        return None
    base = today or date.today()
    return DateSuggestion(proposed_date=base + timedelta(days=rule.offset_days), rationale=rule.rationale)


def suggest_move(card: Card) -> Optional[MoveSuggestion]:
    """Propose moving the card to the next list when its text says so."""
    rule = match_move_rule(card_content(card.title, card.description), card.list_title or "")
    if rule is None:
        return None
    return MoveSuggestion(target_list_title=rule.target_list, rationale=rule.rationale)
