"""
Files written by the CLIs.

- write_csv / write_report: benchmark results, one CSV row per game plus a
  JSON summary of the run.
- read_history / write_history: the advisor's session file. Any failure to
  read or write it surfaces as ValueError so the CLI can report it.

Codes and feedback go into the CSV with a leading apostrophe ("'1122",
"'2,1") so spreadsheet apps keep them as text instead of numbers/dates.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple
import csv
import json
import datetime as dt

from .session import Session


def _as_text(value: str) -> str:
    return "'" + value if value else value


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    One row per game: solver, secret, success, guesses, time_ms, then a
    guess_i / fb_i column pair for every turn up to `max_turns` (blank after
    the game ended). Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turn_cols = [f"{kind}_{i}" for i in range(1, max_turns + 1) for kind in ("guess", "fb")]
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f)
        w.writerow(["solver", "secret", "success", "guesses", "time_ms"] + turn_cols)
        for r in results:
            turns = [_as_text(x) for step in r.get("history", [])[:max_turns] for x in step]
            turns += [""] * (len(turn_cols) - len(turns))
            w.writerow([r.get("solver_id", "?"), _as_text(r["secret"]), r["success"],
                        r["guesses"], round(float(r["time_ms"]), 3)] + turns)
    return str(p)


def write_report(results: List[Dict], summary: Dict, config: Dict, outdir: str,
                 max_turns: int) -> Tuple[str, str]:
    """
    Write one benchmark run as <outdir>/run_<solver>_<UTC stamp>.csv plus a
    matching _summary.json ({"solver_id", "created", "config", "summary"}).

    Returns (csv_path, json_path).
    """
    now = dt.datetime.now(dt.timezone.utc)
    solver_id = config.get("solver", "?")
    stem = Path(outdir) / f"run_{solver_id}_{now:%Y%m%dT%H%M%SZ}"

    csv_path = write_csv(results, f"{stem}.csv", max_turns=max_turns)
    json_path = Path(f"{stem}_summary.json")
    json_path.write_text(json.dumps({
        "solver_id": solver_id,
        "created": now.isoformat(timespec="seconds"),
        "config": config,
        "summary": summary,
    }, indent=2) + "\n", encoding="utf-8")
    return csv_path, str(json_path)


def read_history(path: str) -> Session:
    """
    Load a session file written by write_history. A missing file is an empty
    session; unreadable files, malformed JSON or bad steps raise ValueError.
    """
    p = Path(path)
    if not p.exists():
        return Session()
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{p}: not valid JSON ({e})") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"{p}: cannot read session file ({e})") from e
    return Session.from_dict(data)


def write_history(session: Session, path: str) -> str:
    """Save `session` as JSON; ValueError if the file cannot be written."""
    p = Path(path)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(session.to_dict(), indent=2) + "\n", encoding="utf-8")
    except OSError as e:
        raise ValueError(f"{p}: cannot write session file ({e})") from e
    return str(p)
