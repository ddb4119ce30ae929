from __future__ import annotations
from typing import Dict, Type

from .base import BaseSolver
from .minimax import MinimaxSolver, recommend_next_guess
from .random_consistent import RandomConsistentSolver

# Solver ids accepted by the harness and the benchmark CLI
SOLVERS: Dict[str, Type[BaseSolver]] = {
    MinimaxSolver.id: MinimaxSolver,
    RandomConsistentSolver.id: RandomConsistentSolver,
}


def make_solver(solver_id: str) -> BaseSolver:
    """Fresh solver for `solver_id` ("minimax" or "random_consistent")."""
    cls = SOLVERS.get(solver_id)
    if cls is None:
        raise ValueError(f"Unknown solver {solver_id!r}; choose from {', '.join(sorted(SOLVERS))}")
    return cls()


__all__ = ["BaseSolver", "MinimaxSolver", "RandomConsistentSolver", "SOLVERS",
           "make_solver", "recommend_next_guess"]
