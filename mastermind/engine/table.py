"""
Precomputed feedback table for the whole code space.

table[i, j] == encode_feedback(score(ALL_CODES[i], ALL_CODES[j]))

The table is symmetric, 1296 x 1296 uint8 (~1.6 MB), built once with numpy
on first use and then shared read-only. Solvers index it with CODE_INDEX to
partition candidate sets without calling score() in a Python loop.

Vectorised construction:
  black = number of positions where the two codes agree
  white = sum over colors of min(count_a, count_b) - black
"""

from __future__ import annotations

from functools import lru_cache

import numpy as np

from .codes import ALL_CODES, CODE_LENGTH, PEGS
from .scoring import Feedback

# black * (CODE_LENGTH + 1) + white; (4, 0) -> 20 is the largest used value
NUM_OUTCOMES = (CODE_LENGTH + 1) ** 2


def encode_feedback(fb) -> int:
    black, white = fb
    return black * (CODE_LENGTH + 1) + white


def decode_feedback(key: int) -> Feedback:
    return Feedback(*divmod(int(key), CODE_LENGTH + 1))


@lru_cache(maxsize=1)
def feedback_table() -> np.ndarray:
    """Build (once) and return the read-only feedback table."""
    codes = np.array(ALL_CODES, dtype=np.int8)  # (n, CODE_LENGTH)

    black = (codes[:, None, :] == codes[None, :, :]).sum(axis=2, dtype=np.int8)

    # Color histogram per code: (n, COLORS)
    counts = np.stack([(codes == p).sum(axis=1, dtype=np.int8) for p in PEGS], axis=1)
    common = np.minimum(counts[:, None, :], counts[None, :, :]).sum(axis=2, dtype=np.int8)
    white = common - black

    table = (black * (CODE_LENGTH + 1) + white).astype(np.uint8)
    table.setflags(write=False)
    return table
