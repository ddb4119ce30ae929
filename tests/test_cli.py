import json
from pathlib import Path

import pytest

from apps.cli import run, solve


def test_solve_one_shot(capsys):
    assert solve.main(["--step", "1122:0,0", "--step", "3344:0,0"]) == 0
    out = capsys.readouterr().out
    # Only 5s and 6s left: 2 ** 4 codes
    assert "Remaining solutions: 16" in out
    assert "5555" in out and "Recommended guess:" in out


def test_solve_rejects_bad_step(capsys):
    assert solve.main(["--step", "1122:3,2"]) == 2
    assert "Invalid feedback" in capsys.readouterr().err


def test_solve_history_and_eliminated(tmp_path: Path, capsys):
    hist = tmp_path / "game.json"
    assert solve.main(["--history", str(hist), "--step", "1122 1,0"]) == 0
    assert json.loads(hist.read_text(encoding="utf-8"))["steps"][0]["guess"] == "1122"
    capsys.readouterr()

    assert solve.main(["--history", str(hist), "--show", "eliminated"]) == 0
    out = capsys.readouterr().out
    assert "Total 1296" in out
    assert "1111  Out 1" in out and "1345  In" in out


def test_solve_interactive(monkeypatch, tmp_path: Path, capsys):
    lines = iter(["3456 4,0", "undo", "bogus", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    hist = tmp_path / "s.json"
    assert solve.main(["--interactive", "--history", str(hist)]) == 0
    out = capsys.readouterr().out
    assert "Solved: 3456" in out
    assert "Invalid code" in out
    assert json.loads(hist.read_text(encoding="utf-8"))["steps"] == []


def test_run_cli_writes_outputs(tmp_path: Path, capsys):
    run.main(["--solver", "minimax", "--sample", "3", "--seed", "4",
              "--outdir", str(tmp_path), "--progress", "plain"])
    assert len(list(tmp_path.glob("run_minimax_*.csv"))) == 1
    summaries = list(tmp_path.glob("run_minimax_*_summary.json"))
    report = json.loads(summaries[0].read_text(encoding="utf-8"))
    assert report["config"]["sample"] == 3
    assert report["summary"]["games"] == report["summary"]["wins"] == 3
    captured = capsys.readouterr()
    assert "games=3" in captured.out
    assert "3/3 secrets" in captured.err


@pytest.mark.parametrize("sample", ["0", "-5"])
def test_run_cli_rejects_empty_sample(tmp_path: Path, sample, capsys):
    with pytest.raises(SystemExit) as exc:
        run.main(["--sample", sample, "--outdir", str(tmp_path), "--progress", "off"])
    assert exc.value.code == 2
    assert "--sample must be >= 1" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_solve_history_directory_reports_error(tmp_path: Path, capsys):
    assert solve.main(["--history", str(tmp_path)]) == 2
    assert "cannot read session file" in capsys.readouterr().err


def test_solve_interactive_survives_write_failure(monkeypatch, tmp_path: Path, capsys):
    def read_only(*args, **kwargs):
        raise PermissionError("read-only file system")

    lines = iter(["1122 1,0", "undo", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    monkeypatch.setattr(Path, "write_text", read_only)

    assert solve.main(["--interactive", "--history", str(tmp_path / "game.json")]) == 0
    out = capsys.readouterr().out
    # Both saves fail, the session keeps going and still reaches "quit"
    assert out.count("warning:") == 2
    assert "cannot write session file" in out
    assert "Recommended guess:" in out
