from .codes import ALL_CODES, all_codes, parse_code, format_code, first_guess
from .scoring import Feedback, score
from .constraints import Step, filter_remaining, elimination_steps
from .validation import is_valid_feedback, parse_feedback, validate_guess

__all__ = [
    "ALL_CODES", "all_codes", "parse_code", "format_code", "first_guess",
    "Feedback", "score",
    "Step", "filter_remaining", "elimination_steps",
    "is_valid_feedback", "parse_feedback", "validate_guess",
]
