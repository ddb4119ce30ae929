# apps/cli/run.py
"""
Benchmark a solver against every secret in the 1296-code space, or a seeded
sample of it.

Prints one summary line (games, wins, mean/max guesses, histogram) and writes
a per-game CSV plus a JSON summary into --outdir.

Example:
    python -m apps.cli.run --solver minimax --sample 200 --progress bar
"""

from __future__ import annotations

import argparse
import sys
import time

import numpy as np
from tqdm import tqdm

from mastermind.engine import ALL_CODES
from mastermind.harness.core import MAX_TURNS, run_batch, summarize
from mastermind.harness.io import write_report
from mastermind.solvers import SOLVERS, make_solver


def _pick_secrets(sample: int | None, seed: int) -> list:
    """All codes, or `sample` of them drawn without replacement (sorted)."""
    if sample is None or sample >= len(ALL_CODES):
        return list(ALL_CODES)
    picks = np.random.default_rng(seed).choice(len(ALL_CODES), size=sample, replace=False)
    return [ALL_CODES[i] for i in sorted(picks)]


class _StderrTicker:
    """Single overwritten stderr line, refreshed at most once a second."""

    def __init__(self, total: int):
        self.total = total
        self.done = self.solved = 0
        self.t0 = time.perf_counter()
        self.shown = 0.0

    def __call__(self, result: dict) -> None:
        self.done += 1
        self.solved += bool(result["success"])
        now = time.perf_counter()
        if now - self.shown < 1.0 and self.done < self.total:
            return
        self.shown = now
        sys.stderr.write(f"\r{self.done}/{self.total} secrets | solved {self.solved} "
                         f"| {now - self.t0:6.1f}s")
        sys.stderr.flush()

    def close(self) -> None:
        sys.stderr.write("\n")
        sys.stderr.flush()


def _summary_line(summary: dict) -> str:
    hist = " ".join(f"{k}:{v}" for k, v in sorted(summary["histogram"].items()))
    return (
        f"games={summary['games']} | wins={summary['wins']} "
        f"| mean={summary['mean_guesses']} | max={summary['max_guesses']} "
        f"| histogram {hist or '-'}"
    )


def main(argv=None):
    ap = argparse.ArgumentParser(description="mastermind: benchmark a solver")
    ap.add_argument("--solver", default="minimax", choices=sorted(SOLVERS))
    ap.add_argument("--sample", type=int, help="play only this many secrets (picked by --seed)")
    ap.add_argument("--seed", type=int, default=123, help="sampling and solver RNG seed")
    ap.add_argument("--max-turns", type=int, default=MAX_TURNS, help="turn budget per game")
    ap.add_argument("--outdir", default="reports", help="directory for the CSV and summary")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="progress display on stderr (auto: bar on a terminal, else plain)")
    args = ap.parse_args(argv)

    if args.max_turns < 1:
        ap.error("--max-turns must be >= 1")
    if args.sample is not None and args.sample < 1:
        ap.error("--sample must be >= 1")

    solver = make_solver(args.solver)
    secrets = _pick_secrets(args.sample, args.seed)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    if mode == "bar":
        bar = tqdm(total=len(secrets), ncols=80, desc=solver.id, unit="game")
        on_result, close = (lambda r: bar.update()), bar.close
    elif mode == "plain":
        ticker = _StderrTicker(len(secrets))
        on_result, close = ticker, ticker.close
    else:
        on_result, close = None, None

    try:
        results = run_batch(solver, secrets, max_turns=args.max_turns, seed=args.seed,
                            on_result=on_result)
    finally:
        if close is not None:
            close()

    summary = summarize(results)
    print(_summary_line(summary))

    csv_path, json_path = write_report(results, summary, vars(args), args.outdir,
                                       max_turns=args.max_turns)
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {json_path}")


if __name__ == "__main__":
    main()
