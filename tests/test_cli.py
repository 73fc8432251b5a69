"""Tests for the command-line interface and config loading."""

import csv
import json

import pytest

from smartboard.cli import build_parser, load_config, main

BOARD = {
    "lists": [
        {"id": "l1", "title": "To Do", "order": 0},
        {"id": "l2", "title": "In Progress", "order": 1},
        {"id": "l3", "title": "Done", "order": 2},
    ],
    "cards": [
        {"id": "c1", "title": "Fix login bug", "description": "urgent, users cannot sign in today", "dueDate": "", "listId": "l1", "boardId": "b1"},
        {"id": "c2", "title": "Fix signup bug", "description": "users cannot create accounts", "dueDate": "", "listId": "l1", "boardId": "b1"},
        {"id": "c3", "title": "Update README", "dueDate": "", "listId": "l1", "boardId": "b1"},
        {"id": "c4", "title": "Release notes", "description": "started working on the draft", "dueDate": "2026-11-02", "listId": "l1", "boardId": "b1"},
        {"id": "c5", "title": "Migrate database", "description": "schema migration complete, due next week", "dueDate": "", "listId": "l2", "boardId": "b1"},
        {"id": "x1", "title": "Fix signup bug", "description": "users cannot create accounts", "dueDate": "", "listId": "l1", "boardId": "other"},
    ],
}


@pytest.fixture
def board_path(tmp_path):
    path = tmp_path / "board.json"
    path.write_text(json.dumps(BOARD), encoding="utf-8")
    return str(path)


@pytest.fixture
def no_config(tmp_path):
    return str(tmp_path / "missing-config.json")


class TestLoadConfig:
    """Test config defaults, overrides and validation."""

    def test_defaults_when_missing(self, tmp_path):
        cfg = load_config(tmp_path / "nope.json")
        assert cfg == {"related_threshold": 0.25, "max_related_cards": 3}

    def test_override(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"max_related_cards": 5}), encoding="utf-8")
        cfg = load_config(path)
        assert cfg["max_related_cards"] == 5
        assert cfg["related_threshold"] == 0.25

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON object"):
            load_config(path)

    @pytest.mark.parametrize(
        "data",
        [
            {"related_threshold": 1.5},
            {"related_threshold": "high"},
            {"related_threshold": True},
            {"max_related_cards": 0},
            {"max_related_cards": 2.5},
            {"max_related_cards": True},
        ],
    )
    def test_out_of_range(self, tmp_path, data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        with pytest.raises(ValueError):
            load_config(path)


class TestRecommendCommand:
    """Test the single-card command."""

    def test_prints_recommendations_and_updates(self, board_path, no_config, capsys):
        code = main(["recommend", "--board", board_path, "--card", "c1", "--today", "2026-03-10", "--config", no_config])
        out = capsys.readouterr().out
        assert code == 0
        assert "Smart Recommendations for 'Fix login bug' (To Do):" in out
        assert "Suggest Due Date: 2026-03-10" in out
        assert "Based on urgent keywords." in out
        assert "- Fix signup bug (36%)" in out
        assert "apply 'Suggest Due Date: 2026-03-10' -> {'due_date': '2026-03-10'}" in out

    def test_related_cards_limited_to_same_board(self, board_path, no_config, capsys):
        """Test that a matching card on another board is not suggested."""
        main(["recommend", "--board", board_path, "--card", "c1", "--today", "2026-03-10", "--config", no_config])
        out = capsys.readouterr().out
        assert out.count("Fix signup bug") == 1

    def test_move_apply_resolves_list_id(self, board_path, no_config, capsys):
        code = main(["recommend", "--board", board_path, "--card", "c4", "--config", no_config])
        out = capsys.readouterr().out
        assert code == 0
        assert "apply 'Suggest Move: In Progress' -> {'list_id': 'l2'}" in out

    def test_no_recommendations(self, board_path, no_config, capsys):
        code = main(["recommend", "--board", board_path, "--card", "c3", "--config", no_config])
        assert code == 0
        assert "No smart recommendations for this card right now." in capsys.readouterr().out

    def test_unknown_card(self, board_path, no_config, capsys):
        code = main(["recommend", "--board", board_path, "--card", "zz", "--config", no_config])
        assert code == 1
        assert "Error: Card not found: zz" in capsys.readouterr().out

    def test_missing_board(self, tmp_path, no_config, capsys):
        code = main(["recommend", "--board", str(tmp_path / "none.json"), "--card", "c1", "--config", no_config])
        assert code == 1
        assert "Error: Board file not found" in capsys.readouterr().out

    def test_board_not_an_object(self, tmp_path, no_config, capsys):
        """Test that a JSON array board is reported, not raised."""
        path = tmp_path / "board.json"
        path.write_text(json.dumps([{"id": "c1"}]), encoding="utf-8")
        code = main(["recommend", "--board", str(path), "--card", "c1", "--config", no_config])
        assert code == 1
        assert "Error: Board file must contain a JSON object" in capsys.readouterr().out

    def test_bad_today(self, board_path, no_config, capsys):
        code = main(["recommend", "--board", board_path, "--card", "c1", "--today", "tomorrow", "--config", no_config])
        assert code == 1
        assert "Invalid --today date" in capsys.readouterr().out


class TestLintBoardCommand:
    """Test the whole-board report command."""

    def test_writes_report(self, board_path, no_config, tmp_path, capsys):
        out_path = tmp_path / "out" / "recs.csv"
        code = main(
            ["lint-board", "--board", board_path, "--out", str(out_path), "--today", "2026-03-10", "--config", no_config]
        )
        assert code == 0

        with out_path.open("r", encoding="utf-8", newline="") as f:
            rows = list(csv.DictReader(f))
        pairs = [(r["card_id"], r["kind"], r["value"]) for r in rows]
        assert pairs == [
            ("c1", "date", "2026-03-10"),
            ("c1", "related", "Fix signup bug (36%)"),
            ("c2", "related", "Fix login bug (36%)"),
            ("c4", "move", "In Progress"),
            ("c5", "date", "2026-03-17"),
            ("c5", "move", "Done"),
        ]

        out = capsys.readouterr().out
        assert "Loaded 6 cards, 3 lists" in out
        assert "  no recs: 2" in out
        assert "Wrote report:" in out

    def test_invalid_config(self, board_path, tmp_path, capsys):
        cfg = tmp_path / "config.json"
        cfg.write_text(json.dumps({"related_threshold": -1}), encoding="utf-8")
        code = main(["lint-board", "--board", board_path, "--out", str(tmp_path / "r.csv"), "--config", str(cfg)])
        assert code == 1
        assert "Error: related_threshold" in capsys.readouterr().out


class TestParser:
    def test_subcommand_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])
