"""
Mastermind feedback for a single (secret, guess) pair.

Conventions:
  - black : pegs with the right color in the right position
  - white : further pegs with a right color in a wrong position, each peg of
            either code consumed at most once

This implementation is:
  - symmetric (score(a, b) == score(b, a))
  - duplicate-safe (respects true color multiplicities)
  - O(1) per call (4 positions, 6 colors)

Algorithm (single pass + count overlap):
  1) Exact matches count towards black; every other position tallies the
     secret's and the guess's color into fixed-size count arrays.
  2) white = sum over colors of min(secret_count, guess_count).
"""

from __future__ import annotations

from typing import NamedTuple

from .codes import COLORS, Code


class Feedback(NamedTuple):
    black: int
    white: int


def score(secret: Code, guess: Code) -> Feedback:
    """
    Compute Mastermind feedback for `guess` against `secret`.

    Preconditions:
      - both are well-formed codes (enforced by parse_code, not here)

    Examples:
      score((3, 4, 5, 6), (1, 1, 2, 2)) -> Feedback(black=0, white=0)
      score((2, 2, 3, 3), (1, 2, 2, 3)) -> Feedback(black=2, white=1)
    """
    black = 0
    # Index 0 unused; pegs are 1..COLORS
    secret_left = [0] * (COLORS + 1)
    guess_left = [0] * (COLORS + 1)

    for s, g in zip(secret, guess):
        if s == g:
            black += 1
        else:
            secret_left[s] += 1
            guess_left[g] += 1

    white = 0
    for s_count, g_count in zip(secret_left, guess_left):
        white += s_count if s_count < g_count else g_count

    return Feedback(black, white)
