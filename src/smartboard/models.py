"""Card, list and recommendation types shared across the engine.

Recommendations are ephemeral: they are recomputed for every request and
never written back to the board.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Union


@dataclass
class Card:
    """A single card on a board.

    Attributes:
        id: Identifier, unique within the board
        title: Short card title
        description: Optional free-text body
        due_date: Calendar due date (None when unset)
        list_id: Identifier of the containing list
        list_title: Denormalized title of the containing list (used by move rules)
        board_id: Identifier of the owning board
    """
    id: str
    title: str
    description: Optional[str] = None
    due_date: Optional[date] = None
    list_id: str = ""
    list_title: str = ""
    board_id: str = ""


@dataclass
class BoardList:
    id: str
    title: str
    order: int = 0


@dataclass
class RelatedCard:
    """A sibling card paired with its similarity to the target (0.0-1.0)."""
    card: Card
    similarity: float

    @property
    def percent(self) -> str:
        return f"{round(self.similarity * 100)}%"


@dataclass
class DateSuggestion:
    proposed_date: date
    rationale: str
    kind: str = field(default="date", init=False)

    @property
    def text(self) -> str:
        return f"Suggest Due Date: {self.proposed_date.isoformat()}"


@dataclass
class MoveSuggestion:
    target_list_title: str
    rationale: str
    kind: str = field(default="move", init=False)

    @property
    def text(self) -> str:
        return f"Suggest Move: {self.target_list_title}"


@dataclass
class RelatedCardsSuggestion:
    ranked_cards: List[RelatedCard]
    rationale: str = "Content similarity analysis."
    kind: str = field(default="related", init=False)

    @property
    def text(self) -> str:
        return "Suggested Related Cards:"


Recommendation = Union[DateSuggestion, MoveSuggestion, RelatedCardsSuggestion]
