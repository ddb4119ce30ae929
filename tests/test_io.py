import csv
import json
from pathlib import Path

import pytest
from mastermind.harness import Session, read_history, write_history, write_csv, write_report


def _result():
    return {
        "solver_id": "minimax", "secret": "3456", "success": True, "guesses": 2,
        "time_ms": 1.23456, "history": [("1122", "0,0"), ("3456", "4,0")],
    }


def test_write_csv_expands_history(tmp_path: Path):
    out = write_csv([_result()], str(tmp_path / "runs" / "r.csv"), max_turns=3)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    row = rows[0]
    assert list(row)[5:] == ["guess_1", "fb_1", "guess_2", "fb_2", "guess_3", "fb_3"]
    assert row["secret"] == "'3456" and row["guess_1"] == "'1122" and row["fb_2"] == "'4,0"
    assert row["guess_3"] == "" and row["time_ms"] == "1.235"


def test_write_report(tmp_path: Path):
    config = {"solver": "minimax", "seed": 1}
    summary = {"games": 1, "histogram": {2: 1}}
    csv_path, json_path = write_report([_result()], summary, config, str(tmp_path / "out"),
                                       max_turns=10)
    assert Path(csv_path).name.startswith("run_minimax_") and Path(csv_path).exists()
    data = json.loads(Path(json_path).read_text(encoding="utf-8"))
    assert data["solver_id"] == "minimax" and data["config"] == config
    assert data["summary"]["histogram"] == {"2": 1}


def test_history_file_roundtrip(tmp_path: Path):
    p = tmp_path / "game.json"
    assert read_history(str(p)).steps == []

    s = Session(notes="board photo")
    s.add("1122", (1, 0))
    write_history(s, str(p))
    again = read_history(str(p))
    assert again.steps == s.steps and again.notes == "board photo"


def test_history_file_malformed(tmp_path: Path):
    p = tmp_path / "bad.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        read_history(str(p))


def test_history_path_is_directory(tmp_path: Path):
    with pytest.raises(ValueError, match="cannot read"):
        read_history(str(tmp_path))
    with pytest.raises(ValueError, match="cannot write"):
        write_history(Session(), str(tmp_path))
