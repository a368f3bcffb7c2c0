"""
Solve entry point.

    attempts -> constraints -> filtered dictionary -> scored ranking

`solve` is a pure function of its three inputs: it reads the dictionary and
attempts, touches no shared state and does no I/O. Everything is recomputed
on each call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple

from .attempt import Attempt
from .constraints import ConstraintSet, build_constraints, filter_candidates
from .ranking import ScoredCandidate, rank_candidates
from .validation import check_target_length


@dataclass(frozen=True)
class SolveResult:
    target_length: int
    constraints: ConstraintSet
    ranked: Tuple[ScoredCandidate, ...]
    dictionary_size: int   # words of the target length considered

    @property
    def count(self) -> int:
        return len(self.ranked)

    @property
    def candidates(self) -> List[str]:
        return [c.word for c in self.ranked]

    def top(self, k: int) -> Tuple[ScoredCandidate, ...]:
        return self.ranked[:k]


def _words_of_length(dictionary: Iterable[str], N: int) -> List[str]:
    """
    Deduplicated words of length N in encounter order, compared after
    strip + uppercase so "etoile" and "ETOILE" count once. Unordered
    containers are sorted first, since set iteration order varies between
    processes.
    """
    if isinstance(dictionary, (set, frozenset)):
        dictionary = sorted(dictionary)
    seen = set()
    out: List[str] = []
    for w in dictionary:
        w = w.strip().upper()
        if len(w) == N and w not in seen:
            seen.add(w)
            out.append(w)
    return out


def solve(target_length: int, attempts: Iterable[Attempt], dictionary: Iterable[str]) -> SolveResult:
    """
    Rank the dictionary words of `target_length` consistent with `attempts`.

    Args:
      target_length : word length, >= 3 (ValueError otherwise)
      attempts      : past guesses with per-letter feedback (may be empty)
      dictionary    : normalized uppercase words, any lengths

    Returns:
      SolveResult with the constraint set (always populated) and candidates
      in descending score order. An empty dictionary or contradictory
      feedback simply yields zero candidates.
    """
    N = check_target_length(target_length)
    constraints = build_constraints(list(attempts), N)

    pool = _words_of_length(dictionary, N)
    candidates = filter_candidates(pool, constraints, N)

    return SolveResult(
        target_length=N,
        constraints=constraints,
        ranked=tuple(rank_candidates(candidates)),
        dictionary_size=len(pool),
    )
