"""
Integration tests for the dragonboat command line.
"""

import json
import logging

import pytest

from dragonboat.bootstrap.entrypoints import cli_main


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def lineup_files(tmp_path):
    roster = [
        {"id": "drum", "full_name": "Drummer", "weight_kg": 60, "gender": "female"},
        {"id": "p0", "full_name": "Port Zero", "weight_kg": 78, "gender": "male"},
        {"id": "s0", "full_name": "Starboard Zero", "weight_kg": 65, "gender": "female"},
        {"id": "steer", "full_name": "Steer", "weight_kg": 55, "gender": "male"},
        {"id": "spare", "full_name": "Spare", "weight_kg": 70},
        {"id": "bench", "full_name": "Bench", "weight_kg": 50},
    ]
    lineup = {
        "drummer": "drum",
        "steersperson": "steer",
        "paddlers": {
            "left": ["p0", None, None, None, None],
            "right": ["s0", None, None, None, None],
        },
        "alternates": [None, None, None, None],
        "paddlers_secondary": {"left": ["spare"], "right": []},
    }
    roster_path = tmp_path / "roster.json"
    lineup_path = tmp_path / "lineup.json"
    roster_path.write_text(json.dumps(roster))
    lineup_path.write_text(json.dumps(lineup))
    return str(roster_path), str(lineup_path)


class TestLayoutCommand:
    """Tests for `dragonboat layout`."""

    def test_text(self, capsys):
        assert cli_main(["layout", "--rows", "5"]) == 0
        out = capsys.readouterr().out
        assert "standard-5" in out
        assert "row4-starboard" in out
        assert "drummer" in out

    def test_json(self, capsys):
        assert cli_main(["layout", "--rows", "4", "--no-steer", "--format", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["id"] == "standard-4"
        assert len(data["seats"]) == 9
        assert "steer" not in [seat["id"] for seat in data["seats"]]


class TestBalanceCommand:
    """Tests for `dragonboat balance`."""

    def test_json_report(self, lineup_files, capsys):
        roster_path, lineup_path = lineup_files
        code = cli_main(["balance", "--roster", roster_path, "--lineup", lineup_path, "--format", "json"])
        assert code == 0

        data = json.loads(capsys.readouterr().out)
        assert data["layout_id"] == "standard-5"
        assert data["primary"]["center_of_gravity"]["total_weight"] == 258
        assert data["primary"]["left_right"]["status"] == "Port heavy"
        assert data["pool"] == ["bench"]
        assert "secondary" not in data

    def test_comparison(self, lineup_files, capsys):
        roster_path, lineup_path = lineup_files
        code = cli_main([
            "balance", "--roster", roster_path, "--lineup", lineup_path,
            "--format", "json", "--comparison",
        ])
        assert code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["secondary"]["left_right"]["port_weight"] == 70
        assert data["secondary"]["center_of_gravity"]["total_weight"] == 70
        assert data["primary"]["left_right"]["starboard_weight"] == 65

    def test_text_in_kilograms(self, lineup_files, capsys):
        roster_path, lineup_path = lineup_files
        code = cli_main(["balance", "--roster", roster_path, "--lineup", lineup_path, "--unit", "kg"])
        assert code == 0
        out = capsys.readouterr().out
        assert "258.0 kg" in out
        assert "Port heavy" in out
        assert "Unassigned: 1" in out

    def test_missing_file(self, tmp_path, capsys):
        code = cli_main([
            "balance", "--roster", str(tmp_path / "nope.json"),
            "--lineup", str(tmp_path / "nope.json"),
        ])
        assert code == 1

    def test_invalid_roster(self, tmp_path, lineup_files):
        _roster_path, lineup_path = lineup_files
        bad = tmp_path / "bad_roster.json"
        bad.write_text(json.dumps([{"full_name": "No Id"}]))
        assert cli_main(["balance", "--roster", str(bad), "--lineup", lineup_path]) == 1


class TestNoCommand:
    """Running without a subcommand prints help."""

    def test_help(self, capsys):
        assert cli_main([]) == 2
        assert "dragonboat" in capsys.readouterr().out
