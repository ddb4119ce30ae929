"""
Baseline solver: play any code that could still be the secret.

Each turn picks one of the remaining candidates with the solver's seeded RNG,
so a game is reproducible from its seed. No attempt is made to split the
candidate set; the minimax solver is measured against this.
"""

from __future__ import annotations

from .base import BaseSolver
from mastermind.engine import first_guess
from mastermind.engine.codes import Code


class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random candidate"

    def next_guess(self, state: dict) -> Code:
        candidates = state["candidates"]
        # Contradictory history: nothing consistent is left to play
        if not candidates:
            return first_guess()
        return self.rng.choice(candidates)
