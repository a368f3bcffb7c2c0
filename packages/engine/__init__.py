from .states import LetterState, next_state, parse_pattern, to_pattern
from .attempt import Attempt, LetterFeedback
from .constraints import ConstraintSet, build_constraints, filter_candidates, matches
from .ranking import ScoredCandidate, rank_candidates
from .solver import SolveResult, solve
from .feedback import feedback, feedback_attempt
from .validation import MIN_WORD_LENGTH, check_target_length, infer_target_length

__all__ = [
    "LetterState", "next_state", "parse_pattern", "to_pattern",
    "Attempt", "LetterFeedback",
    "ConstraintSet", "build_constraints", "filter_candidates", "matches",
    "ScoredCandidate", "rank_candidates",
    "SolveResult", "solve",
    "feedback", "feedback_attempt",
    "MIN_WORD_LENGTH", "check_target_length", "infer_target_length",
]
