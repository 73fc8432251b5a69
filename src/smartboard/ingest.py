"""Board snapshot ingest (JSON export or card CSV) and CSV writing.

JSON schema: {"lists": [{id, title, order}], "cards": [{id, title, description,
dueDate, listId, listTitle, boardId}]}. An empty dueDate means "unset".
CSV schema: id, title, description, due_date, list_title (list_id, board_id optional).
"""

from __future__ import annotations

import csv
import json
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .models import BoardList, Card


@dataclass
class Board:
    lists: List[BoardList] = field(default_factory=list)
    cards: List[Card] = field(default_factory=list)

    def find_card(self, card_id: str) -> Optional[Card]:
        for card in self.cards:
            if card.id == card_id:
                return card
        return None


def parse_due_date(value: Any) -> Optional[date]:
    """Parse an ISO calendar date; empty values mean no due date.

    A time-of-day suffix ("2026-11-02T09:30:00Z") is dropped; anything else
    after the date is rejected.
    """
    if value is None or value == "":
        return None
    if isinstance(value, date):
        return value
    day = str(value).strip().split("T", 1)[0]
    try:
        return date.fromisoformat(day)
    except ValueError:
        raise ValueError(f"Invalid due date: {value!r}")


def _require(raw: Dict[str, Any], key: str, what: str) -> str:
    value = raw.get(key)
    if value is None or not str(value).strip():
        raise ValueError(f"{what} is missing required field '{key}': {raw}")
    return str(value)


def _records(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    records = data.get(key, [])
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise ValueError(f"Board field '{key}' must be a list of objects")
    return records


def read_board_json(path: str | Path) -> Board:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Board file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in board file: {e}")
    if not isinstance(data, dict):
        raise ValueError(f"Board file must contain a JSON object, got {type(data).__name__}")

    board = Board()
    for raw in _records(data, "lists"):
        board.lists.append(
            BoardList(
                id=_require(raw, "id", "List"),
                title=_require(raw, "title", "List"),
                order=int(raw.get("order", 0)),
            )
        )
    titles = {lst.id: lst.title for lst in board.lists}

    for raw in _records(data, "cards"):
        list_id = str(raw.get("listId") or "")
        board.cards.append(
            Card(
                id=_require(raw, "id", "Card"),
                title=_require(raw, "title", "Card"),
                description=raw.get("description") or None,
                due_date=parse_due_date(raw.get("dueDate")),
                list_id=list_id,
                list_title=raw.get("listTitle") or titles.get(list_id, ""),
                board_id=str(raw.get("boardId") or ""),
            )
        )
    return board


def read_cards_csv(path: str | Path) -> List[Card]:
    """Load cards from CSV; header names are matched case-insensitively."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Cards file not found: {path}")
    cards: List[Card] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        expected = {"id", "title", "description", "due_date", "list_title"}
        missing = expected - set(h.strip().lower() for h in reader.fieldnames or [])
        if missing:
            raise ValueError(f"Missing required columns in {path}: {sorted(missing)}")
        for line_no, row in enumerate(reader, start=2):
            r = {(k or "").strip().lower(): v for k, v in row.items()}
            cards.append(
                Card(
                    id=_require(r, "id", f"Row {line_no}"),
                    title=_require(r, "title", f"Row {line_no}"),
                    description=r.get("description") or None,
                    due_date=parse_due_date(r.get("due_date")),
                    list_id=r.get("list_id") or "",
                    list_title=r.get("list_title") or "",
                    board_id=r.get("board_id") or "",
                )
            )
    return cards


def read_board(path: str | Path) -> Board:
    """Load a board from a .json export or a .csv card list."""
    path = Path(path)
    if path.suffix.lower() == ".csv":
        return Board(cards=read_cards_csv(path))
    return read_board_json(path)


def write_csv(path: str | Path, rows: Iterable[dict]) -> None:
    """Write dict rows with a header taken from the first row.

    No rows produce an empty file (no header).
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    rows = list(rows)
    with path.open("w", encoding="utf-8", newline="") as f:
        if rows:
            writer = csv.DictWriter(f, fieldnames=list(rows[0]))
            writer.writeheader()
            writer.writerows(rows)
