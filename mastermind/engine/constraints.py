"""
Candidate filtering given game history.

Given:
  - a universe of codes (by default the full 1296-code space)
  - a history of (guess, feedback) steps

Return:
  - codes that are consistent with ALL feedback seen so far.

This is the core step that turns feedback into a shrinking candidate set.
An empty result is a legitimate outcome: it means no secret could have
produced the recorded feedback (usually a data-entry mistake).
"""

from __future__ import annotations

from typing import Dict, Iterable, List, NamedTuple, Optional

from .codes import ALL_CODES, Code
from .scoring import Feedback, score


class Step(NamedTuple):
    guess: Code
    feedback: Feedback


# History is a sequence of Steps; plain (guess, (black, white)) pairs work too.
History = Iterable[Step]


def _consistent(candidates: Iterable[Code], guess: Code, feedback) -> List[Code]:
    guess = tuple(guess)
    feedback = tuple(feedback)
    return [c for c in candidates if score(c, guess) == feedback]


def filter_remaining(history: History, universe: Optional[Iterable[Code]] = None) -> List[Code]:
    """
    Keep only codes that would produce exactly the recorded feedback for every
    (guess, feedback) in `history`.

    Args:
      history  : iterable of Steps seen so far
      universe : codes to start from; None means ALL_CODES

    Returns:
      List of consistent codes (order preserved as in `universe`). With an
      empty history this is a copy of `universe`.
    """
    remaining = list(ALL_CODES if universe is None else universe)
    for guess, feedback in history:
        remaining = _consistent(remaining, guess, feedback)
    return remaining


def elimination_steps(history: History,
                      universe: Optional[Iterable[Code]] = None) -> Dict[Code, Optional[int]]:
    """
    Map every code in `universe` to the 1-based index of the step that first
    excluded it, or None if it is still consistent.

    Same answer as re-running filter_remaining over each history prefix and
    diffing, since each step only ever narrows the set.
    """
    remaining = list(ALL_CODES if universe is None else universe)
    out: Dict[Code, Optional[int]] = {c: None for c in remaining}

    for idx, (guess, feedback) in enumerate(history, start=1):
        keep = _consistent(remaining, guess, feedback)
        kept = set(keep)
        for c in remaining:
            if c not in kept:
                out[c] = idx
        remaining = keep

    return out
