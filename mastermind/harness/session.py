"""
Interactive solving session.

A Session is the whole state of a human-driven game: the ordered list of
(guess, feedback) steps the player has entered. Everything else (candidate
set, recommendation, which step eliminated which code) is recomputed from
that list on demand.

States:
  - empty history        -> all 1296 codes possible, recommend first_guess()
  - one candidate left   -> solved
  - no candidate left    -> contradiction (some feedback was entered wrong)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from mastermind.engine import (
    Feedback, Step, elimination_steps, filter_remaining, first_guess, format_code,
    is_valid_feedback, parse_code,
)
from mastermind.engine.codes import CODE_LENGTH, PEGS, Code
from mastermind.solvers import recommend_next_guess


@dataclass
class Session:
    steps: List[Step] = field(default_factory=list)
    # Opaque UI-only text (e.g. a reference link); carried through untouched
    notes: str = ""

    def add(self, guess, feedback) -> Step:
        """
        Validate and append one observation.

        `guess` may be a code tuple or "1122" text; `feedback` a (black, white)
        pair. Raises ValueError (and leaves the session unchanged) if either
        is malformed.
        """
        code = parse_code(guess) if isinstance(guess, str) else _as_code(guess)
        if code is None:
            raise ValueError(f"Invalid code: {guess!r} (expected 4 digits in 1-6)")
        if not is_valid_feedback(feedback):
            raise ValueError(
                f"Invalid feedback: {feedback!r} (black and white must be >= 0 "
                f"and black + white must be 4 or less)")
        step = Step(code, Feedback(*feedback))
        self.steps.append(step)
        return step

    def undo(self) -> Optional[Step]:
        return self.steps.pop() if self.steps else None

    def reset(self) -> None:
        self.steps.clear()

    def remaining(self) -> List[Code]:
        return filter_remaining(self.steps)

    def recommendation(self) -> Code:
        if not self.steps:
            return first_guess()
        return recommend_next_guess(self.remaining())

    def eliminated_at(self) -> Dict[Code, Optional[int]]:
        return elimination_steps(self.steps)

    def is_solved(self) -> bool:
        return len(self.remaining()) == 1

    def is_contradiction(self) -> bool:
        return not self.remaining()

    # ---- (de)serialisation -------------------------------------------------

    def to_dict(self) -> Dict:
        return {
            "steps": [
                {"guess": format_code(s.guess), "black": s.feedback.black,
                 "white": s.feedback.white}
                for s in self.steps
            ],
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> "Session":
        """
        Rebuild a session from to_dict() output. Raises ValueError on a
        malformed blob or an invalid step.
        """
        if not isinstance(data, dict) or not isinstance(data.get("steps"), list):
            raise ValueError("session data must be an object with a 'steps' list")

        notes = data.get("notes", "")
        if not isinstance(notes, str):
            raise ValueError(f"'notes' must be a string, got {type(notes).__name__}")

        sess = cls(notes=notes)
        for i, raw in enumerate(data["steps"], start=1):
            try:
                guess, black, white = raw["guess"], raw["black"], raw["white"]
            except (TypeError, KeyError) as e:
                raise ValueError(f"step {i} is missing a field: {e}") from e
            sess.add(guess, (black, white))
        return sess


def _as_code(value) -> Optional[Code]:
    try:
        code = tuple(value)
    except TypeError:
        return None
    if len(code) != CODE_LENGTH:
        return None
    if any(isinstance(p, bool) or not isinstance(p, int) or p not in PEGS for p in code):
        return None
    return code
