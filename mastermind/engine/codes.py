"""
The Mastermind code space.

Conventions:
  - a peg (color) is an int in 1..COLORS
  - a code is a tuple of exactly CODE_LENGTH pegs, e.g. (1, 1, 2, 2)
  - the canonical text form is the digits concatenated, e.g. "1122"

The full space (6 ** 4 == 1296 codes) is enumerated once at import time and
shared read-only by every other module. Order is lexicographic by peg value,
position 1 varying slowest, so ALL_CODES[0] == (1, 1, 1, 1) and
ALL_CODES[-1] == (6, 6, 6, 6).
"""

from __future__ import annotations

import re
from itertools import product
from typing import Dict, Optional, Tuple

COLORS = 6
CODE_LENGTH = 4
PEGS: Tuple[int, ...] = tuple(range(1, COLORS + 1))

# Type alias; always CODE_LENGTH ints in PEGS
Code = Tuple[int, ...]

_CODE_RE = re.compile(rf"[1-{COLORS}]{{{CODE_LENGTH}}}")


def all_codes() -> Tuple[Code, ...]:
    """
    Enumerate every code in lexicographic order.

    Repeated calls return equal sequences, so the result is safe to use as a
    default universe or guess pool.
    """
    return tuple(product(PEGS, repeat=CODE_LENGTH))


ALL_CODES: Tuple[Code, ...] = all_codes()

# Position of each code in ALL_CODES (row/column of the feedback table)
CODE_INDEX: Dict[Code, int] = {c: i for i, c in enumerate(ALL_CODES)}


def parse_code(text) -> Optional[Code]:
    """
    Parse "1122"-style text into a code.

    Surrounding whitespace is ignored. Anything that is not exactly
    CODE_LENGTH digits in 1..COLORS returns None (never raises).

    Examples:
      parse_code(" 3456 ") -> (3, 4, 5, 6)
      parse_code("1270")   -> None
    """
    if not isinstance(text, str):
        return None
    t = text.strip()
    if not _CODE_RE.fullmatch(t):
        return None
    return tuple(int(ch) for ch in t)


def format_code(code: Code) -> str:
    """Canonical text form; inverse of parse_code for valid codes."""
    return "".join(str(p) for p in code)


def first_guess() -> Code:
    """Knuth's opening guess, independent of any history."""
    return (1, 1, 2, 2)
