"""
Lightweight input validation.

This module answers the question: "Can this observation be used as a
constraint?" Nothing here raises; malformed input maps to False / None so the
caller decides how to react.

Note that is_valid_feedback is a syntactic check only. Feedback such as
(3, 1) passes even though no pair of codes can produce it; a history built
from it simply filters down to nothing.
"""

from __future__ import annotations

import re
from typing import Optional

from .codes import CODE_LENGTH, parse_code
from .scoring import Feedback

# "2,1", "2 1", "2/1" or the compact "21"
_FEEDBACK_RE = re.compile(r"(\d+)\s*[,/ ]\s*(\d+)|(\d)(\d)")


def is_valid_feedback(fb) -> bool:
    """
    Return True if `fb` is a (black, white) pair within range.

    Rules:
      - both counts are ints >= 0
      - black <= CODE_LENGTH and white <= CODE_LENGTH
      - black + white <= CODE_LENGTH
    """
    try:
        black, white = fb
    except (TypeError, ValueError):
        return False
    if not isinstance(black, int) or not isinstance(white, int):
        return False
    if isinstance(black, bool) or isinstance(white, bool):
        return False

    if black < 0 or white < 0:
        return False
    if black > CODE_LENGTH or white > CODE_LENGTH:
        return False
    return black + white <= CODE_LENGTH


def parse_feedback(text) -> Optional[Feedback]:
    """
    Parse user-entered feedback such as "2,1" or "21".

    Returns None for malformed text or out-of-range counts.
    """
    if not isinstance(text, str):
        return None
    m = _FEEDBACK_RE.fullmatch(text.strip())
    if not m:
        return None
    b, w = (m.group(1), m.group(2)) if m.group(1) is not None else (m.group(3), m.group(4))
    fb = Feedback(int(b), int(w))
    return fb if is_valid_feedback(fb) else None


def validate_guess(text) -> bool:
    """Return True if `text` is a well-formed code ("1122" style)."""
    return parse_code(text) is not None
