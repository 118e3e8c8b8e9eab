"""Tests for the command line interface."""

import json

import pytest

from hyrox_analyzer.cli import build_parser, main


@pytest.fixture
def race_file(tmp_path, elite_split_payload):
    """Race file with splits written as clock strings."""
    splits = {
        key: f"{seconds // 60}:{seconds % 60:02d}"
        for key, seconds in elite_split_payload.items()
    }
    path = tmp_path / "race.json"
    path.write_text(json.dumps({
        "splits": splits,
        "athleteInfo": {"gender": "male", "age": 32},
    }))
    return path


class TestParser:
    """Tests for argument parsing."""

    def test_plan_defaults(self):
        args = build_parser().parse_args(["plan"])
        assert args.level == "intermediate"
        assert args.weeks == 8
        assert args.weakness is None

    def test_rejects_unknown_station(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["plan", "--weakness", "swimming"])


class TestAnalyzeCommand:
    """Tests for `analyze`."""

    def test_json_output(self, race_file, capsys):
        exit_code = main(["analyze", str(race_file), "--no-ai", "--json"])

        assert exit_code == 0
        result = json.loads(capsys.readouterr().out)
        assert result["level"] == "elite"
        assert result["totalTime"] == 3560
        assert result["overallScore"] == 100

    def test_report_output(self, race_file, capsys):
        exit_code = main(["analyze", str(race_file), "--no-ai"])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "HYROX Race Analysis" in out
        assert "59:20" in out
        assert "Sled Push" in out

    def test_missing_file(self, tmp_path, capsys):
        exit_code = main(["analyze", str(tmp_path / "nope.json"), "--no-ai"])

        assert exit_code == 1
        assert "File not found" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        assert main(["analyze", str(path), "--no-ai"]) == 1
        assert "Invalid JSON" in capsys.readouterr().err

    def test_missing_split(self, race_file, capsys):
        payload = json.loads(race_file.read_text())
        payload["splits"]["wallBalls"] = ""
        race_file.write_text(json.dumps(payload))

        exit_code = main(["analyze", str(race_file), "--no-ai"])

        assert exit_code == 1
        assert "Missing splits: wallBalls" in capsys.readouterr().err


class TestBenchmarksCommand:
    """Tests for `benchmarks`."""

    def test_prints_every_level(self, capsys):
        assert main(["benchmarks", "--gender", "female"]) == 0

        out = capsys.readouterr().out
        assert "HYROX Benchmarks (female)" in out
        for level in ("Elite", "Intermediate", "Beginner"):
            assert level in out
        assert "Wall Balls" in out


class TestPlanCommand:
    """Tests for `plan`."""

    def test_json_plan(self, capsys):
        exit_code = main([
            "plan", "--level", "advanced", "-w", "sledPush", "--weeks", "3", "--json",
        ])

        assert exit_code == 0
        plan = json.loads(capsys.readouterr().out)
        assert plan["name"] == "3-Week Advanced Plan"
        assert len(plan["weeks"]) == 3

    def test_invalid_weeks(self, capsys):
        assert main(["plan", "--weeks", "0"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()
