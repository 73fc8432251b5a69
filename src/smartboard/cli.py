"""CLI entrypoint for the SmartBoard recommendation engine.

Usage:
  python -m smartboard.cli recommend --board board.json --card c1
  python -m smartboard.cli lint-board --board board.json --out out/recommendations.csv
"""

from __future__ import annotations

import argparse
import json
from datetime import date
from pathlib import Path
from typing import List, Optional

from .ingest import read_board
from .recommender import board_siblings, get_recommendations, resolve_update
from .related_cards import MAX_RELATED_CARDS, RELATED_THRESHOLD
from .report import format_recommendations, print_summary, write_results_csv


def load_config(path: str | Path) -> dict:
    """Load engine settings, falling back to built-in defaults.

    Raises:
        ValueError: If the file is not valid JSON or a setting is out of range
    """
    cfg = {
        "related_threshold": RELATED_THRESHOLD,
        "max_related_cards": MAX_RELATED_CARDS,
    }
    path = Path(path)
    if not path.exists():
        return cfg
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in config file: {e}")
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a JSON object")
    cfg.update(data)

    threshold = cfg["related_threshold"]
    if isinstance(threshold, bool) or not isinstance(threshold, (int, float)) or not 0 <= threshold <= 1:
        raise ValueError(f"related_threshold must be between 0 and 1, got {threshold!r}")
    limit = cfg["max_related_cards"]
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
        raise ValueError(f"max_related_cards must be a positive integer, got {limit!r}")
    return cfg


def _parse_today(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Invalid --today date (expected YYYY-MM-DD): {value}")


def cmd_recommend(args: argparse.Namespace) -> int:
    """Print recommendations for one card."""
    try:
        cfg = load_config(args.config)
        today = _parse_today(args.today)
        board = read_board(args.board)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    card = board.find_card(args.card)
    if card is None:
        print(f"Error: Card not found: {args.card}")
        return 1

    recs = get_recommendations(
        card,
        board_siblings(card, board.cards),
        today=today,
        threshold=cfg["related_threshold"],
        limit=cfg["max_related_cards"],
    )
    print(f"Smart Recommendations for '{card.title}' ({card.list_title or 'no list'}):")
    for line in format_recommendations(recs):
        print(f"  {line}")

    for rec in recs:
        update = resolve_update(rec, board.lists)
        if update is not None:
            print(f"  apply '{rec.text}' -> {update}")
    return 0


def cmd_lint_board(args: argparse.Namespace) -> int:
    """Run the engine over every card of a board and write a CSV report."""
    try:
        cfg = load_config(args.config)
        today = _parse_today(args.today)
        board = read_board(args.board)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(f"Loaded {len(board.cards)} cards, {len(board.lists)} lists from: {args.board}")
    results = []
    for card in board.cards:
        recs = get_recommendations(
            card,
            board_siblings(card, board.cards),
            today=today,
            threshold=cfg["related_threshold"],
            limit=cfg["max_related_cards"],
        )
        results.append((card, recs))

    write_results_csv(args.out, results)
    print_summary(results)
    print(f"Wrote report: {args.out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="smartboard", description="Task board smart recommendations")
    sub = p.add_subparsers(dest="cmd", required=True)

    def _common(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--board", required=True, help="Path to board export (.json) or card list (.csv)")
        sp.add_argument(
            "--config",
            default="resources/config.json",
            help="Path to config.json (optional; defaults will be used if missing)",
        )
        sp.add_argument("--today", help="Reference date for due-date suggestions (YYYY-MM-DD)")

    rec = sub.add_parser("recommend", help="Show recommendations for one card")
    _common(rec)
    rec.add_argument("--card", required=True, help="Card id")
    rec.set_defaults(func=cmd_recommend)

    lint = sub.add_parser("lint-board", help="Write recommendations for every card to CSV")
    _common(lint)
    lint.add_argument("--out", required=True, help="Path to output CSV report")
    lint.set_defaults(func=cmd_lint_board)

    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
