"""
Shared solver interface.

A solver plays one game at a time. reset() hands it the guess pool for the
game and reseeds its RNG; next_guess() receives the harness state dict:

    {"turn": int, "history": [Step, ...], "candidates": [Code, ...],
     "all_codes": [Code, ...]}
"""

from __future__ import annotations
import random
from typing import List

from mastermind.engine import ALL_CODES
from mastermind.engine.codes import Code


class BaseSolver:
    id = "base"
    name = "Base"

    def __init__(self):
        self.all_codes: List[Code] = list(ALL_CODES)
        self.rng = random.Random()

    def reset(self, *, all_codes: List[Code] | None = None, seed: int | None = None) -> None:
        self.all_codes = list(ALL_CODES if all_codes is None else all_codes)
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> Code:
        raise NotImplementedError(f"{type(self).__name__} must implement next_guess")
