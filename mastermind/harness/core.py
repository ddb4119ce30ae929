"""
Game runner for benchmarking solvers.

run_case plays one solver against one known secret: ask for a guess, score
it, narrow the candidates, repeat until four blacks or the turn budget runs
out. run_batch does that for a list of secrets and summarize() reduces the
results to guess-count statistics.

Secrets always come from the caller; nothing here picks one.
"""

from __future__ import annotations
import time
from typing import Callable, Dict, Iterable, List

import numpy as np

from mastermind.engine import ALL_CODES, Step, filter_remaining, format_code, score
from mastermind.engine.codes import CODE_LENGTH, Code

# Rows on a classic board
MAX_TURNS = 10


def _assert_turns(max_turns: int) -> None:
    """Guardrail: a game needs at least one turn."""
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def format_feedback(fb) -> str:
    """(2, 1) -> "2,1" (the form stored in result histories)."""
    return f"{fb[0]},{fb[1]}"


def run_case(
        solver,
        secret: Code,
        *,
        all_codes: Iterable[Code] = ALL_CODES,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
) -> Dict:
    """
    Play one game of `solver` against `secret`.

    `all_codes` is both the guess pool handed to the solver and the starting
    candidate set. `seed` reseeds the solver's RNG so a game can be replayed.

    Returns {"secret", "success", "guesses", "time_ms", "history"} where
    history is [("1122", "0,1"), ...] in play order.
    """
    _assert_turns(max_turns)
    secret = tuple(secret)
    all_codes = list(all_codes)

    solver.reset(all_codes=all_codes, seed=seed)

    history: List[Step] = []
    candidates = list(all_codes)

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        state = {
            "turn": turn,
            "history": list(history),
            "candidates": candidates,
            "all_codes": all_codes,
        }

        guess = tuple(solver.next_guess(state))
        fb = score(secret, guess)
        history.append(Step(guess, fb))

        # Win condition: all black
        if fb.black == CODE_LENGTH:
            return _result(secret, True, turn, t0, history)

        # Narrow candidate set using the new feedback before next turn
        candidates = filter_remaining([history[-1]], candidates)

    return _result(secret, False, max_turns, t0, history)


def _result(secret: Code, success: bool, guesses: int, t0: float,
            history: List[Step]) -> Dict:
    return {
        "success": success,
        "guesses": guesses,
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": [(format_code(g), format_feedback(fb)) for g, fb in history],
        "secret": format_code(secret),
    }


def run_batch(
        solver,
        secrets: Iterable[Code],
        *,
        all_codes: Iterable[Code] = ALL_CODES,
        max_turns: int = MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
        on_result: Callable[[Dict], None] | None = None,
) -> List[Dict]:
    """
    Play `solver` against each secret in turn (the first `sample` only, if
    given) and return the run_case results in the same order.

    Game i (1-based) is seeded with seed + i. `on_result` is called with every
    result as soon as its game ends (progress display).
    """
    _assert_turns(max_turns)
    if sample is not None and sample < 1:
        raise ValueError(f"sample must be >= 1; got {sample}")

    cases = [tuple(s) for s in secrets][:sample]
    pool = list(all_codes)

    results: List[Dict] = []
    for i, secret in enumerate(cases, start=1):
        r = run_case(solver, secret, all_codes=pool, max_turns=max_turns,
                     seed=None if seed is None else seed + i)
        r["solver_id"] = solver.id
        results.append(r)
        if on_result is not None:
            on_result(r)
    return results


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate guess counts of a batch: games, wins, mean/max guesses (over
    wins) and a histogram {guesses: games}.
    """
    wins = np.array([r["guesses"] for r in results if r["success"]], dtype=np.int64)
    hist: Dict[int, int] = {}
    if wins.size:
        counts = np.bincount(wins)
        hist = {int(k): int(v) for k, v in enumerate(counts) if v}
    return {
        "games": len(results),
        "wins": int(wins.size),
        "mean_guesses": round(float(wins.mean()), 4) if wins.size else None,
        "max_guesses": int(wins.max()) if wins.size else None,
        "histogram": hist,
        "total_time_ms": round(float(sum(r["time_ms"] for r in results)), 3),
    }
