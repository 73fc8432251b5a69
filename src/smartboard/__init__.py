"""SmartBoard recommendation engine.

Focus: due-date, list-move and related-card suggestions for task board cards.

Modules are pure functions over in-memory cards; file I/O lives in ingest/report/cli.
"""

__all__ = [
    "models",
    "normalize",
    "similarity",
    "related_cards",
    "suggestion_rules",
    "recommender",
    "ingest",
    "report",
]
