"""
Candidate ranking by distinct-letter coverage.

Idea:
  - Build a letter histogram over the CURRENT candidate set, counting each
    letter at most once per word (document frequency).
  - Score each word as the sum of its DISTINCT letters' frequencies.
  - Words covering many common, distinct letters split the set fastest.

The "probability" attached to each word is a min-max rescaling of the score
over the candidate set. It is a relative rank for display, not a probability.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Sequence


@dataclass(frozen=True)
class ScoredCandidate:
    word: str
    score: int
    probability: float


def letter_document_frequency(words: Iterable[str]) -> Counter:
    """For each letter, the number of words containing it at least once."""
    counts: Counter = Counter()
    for w in words:
        counts.update(set(w))
    return counts


def score_word(word: str, freq: Counter) -> int:
    """
    Sum letter frequencies but count each letter at most once per word
    (prefer 'ETOILE' over 'ENTREE' when counts are similar).
    """
    return sum(freq[ch] for ch in set(word))


def rank_candidates(words: Sequence[str]) -> List[ScoredCandidate]:
    """
    Score and order `words` (already filtered), best first.
    Ties keep the input order; an empty input yields an empty list.
    """
    if not words:
        return []

    freq = letter_document_frequency(words)
    scores = [score_word(w, freq) for w in words]
    lo, hi = min(scores), max(scores)

    scored = [
        ScoredCandidate(w, s, 1.0 if hi == lo else (s - lo) / (hi - lo))
        for w, s in zip(words, scores)
    ]
    # sorted() is stable: equal scores stay in dictionary order
    return sorted(scored, key=lambda c: c.score, reverse=True)
