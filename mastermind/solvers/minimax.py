"""
Minimax solver (Knuth's worst-case partition strategy).

Idea:
  For each guess g, partition the CURRENT candidates by the feedback each of
  them would give against g. worst(g) = size of the largest group. Pick the
  guess with the SMALLEST worst(g).
Tie-break (strict order):
  1) prefer a guess that is itself a candidate (it might win outright)
  2) then the smallest text form ("1122" < "1123")

Acceleration:
  - Partition sizes come from the precomputed feedback table via
    numpy.bincount, one block of candidates at a time.
  - After each block, a guess whose running worst group already EXCEEDS the
    best score so far is abandoned. Guesses that tie on worst are always
    counted to the end, so pruning never changes the chosen guess.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

from .base import BaseSolver
from mastermind.engine import ALL_CODES, first_guess, format_code
from mastermind.engine.codes import CODE_INDEX, Code
from mastermind.engine.table import NUM_OUTCOMES, feedback_table

# Candidates scored per bincount before checking the prune bound
PRUNE_BLOCK = 128


def _worst_partition(row: np.ndarray, cand_idx: np.ndarray, bound: int) -> int:
    """
    Largest feedback group `row` induces over `cand_idx`.

    Stops early once the running worst exceeds `bound`; the partial value is
    returned and is already > bound.
    """
    counts = np.zeros(NUM_OUTCOMES, dtype=np.int64)
    worst = 0
    for start in range(0, len(cand_idx), PRUNE_BLOCK):
        block = row[cand_idx[start:start + PRUNE_BLOCK]]
        counts += np.bincount(block, minlength=NUM_OUTCOMES)
        worst = int(counts.max())
        if worst > bound:
            break
    return worst


def recommend_next_guess(remaining: Iterable[Code],
                         all_guesses: Optional[Iterable[Code]] = None) -> Code:
    """
    Return the minimax next guess for the candidate set `remaining`.

    Args:
      remaining   : codes still consistent with the history
      all_guesses : guess pool to search; None means ALL_CODES

    Degenerate cases:
      - no candidates -> first_guess() (nothing to base a choice on)
      - one candidate -> that code (solved)

    Pure and deterministic: the result does not depend on the order of
    `remaining` or `all_guesses`.
    """
    candidates: List[Code] = [tuple(c) for c in remaining]
    if not candidates:
        return first_guess()
    if len(candidates) == 1:
        return candidates[0]

    pool = ALL_CODES if all_guesses is None else [tuple(g) for g in all_guesses]
    if not pool:
        return first_guess()

    table = feedback_table()
    cand_idx = np.fromiter((CODE_INDEX[c] for c in candidates), dtype=np.intp,
                           count=len(candidates))
    cand_set = set(candidates)

    # (worst, not_a_candidate, text); smaller is better
    best_key = None
    best: Code = first_guess()
    bound = len(candidates)

    for g in pool:
        worst = _worst_partition(table[CODE_INDEX[g]], cand_idx, bound)
        if worst > bound:
            continue  # pruned, strictly worse than the current best

        key = (worst, g not in cand_set, format_code(g))
        if best_key is None or key < best_key:
            best_key, best, bound = key, g, worst

    return best


class MinimaxSolver(BaseSolver):
    id = "minimax"
    name = "Knuth Minimax"

    def next_guess(self, state: dict) -> Code:
        """
        Open with first_guess() when the pool allows it, then play the
        minimax recommendation over the game's guess pool.
        """
        pool = state.get("all_codes") or self.all_codes
        if not state.get("history") and first_guess() in pool:
            return first_guess()
        return recommend_next_guess(state["candidates"], pool)
