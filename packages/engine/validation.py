"""
Lightweight input checks around the solver.

  - target length must be an integer >= MIN_WORD_LENGTH
  - when no length is given, it can be inferred from the first non-empty
    attempt word (what a player typically means)
  - a word is usable iff it is A-Z only with the exact target length
"""

from __future__ import annotations

from typing import Iterable, Optional

MIN_WORD_LENGTH = 3


def check_target_length(N: int) -> int:
    """Return N unchanged, or raise ValueError if it cannot be a word length."""
    if isinstance(N, bool) or not isinstance(N, int):
        raise ValueError(f"target length must be an integer; got {N!r}")
    if N < MIN_WORD_LENGTH:
        raise ValueError(f"target length must be >= {MIN_WORD_LENGTH}; got {N}")
    return N


def infer_target_length(words: Iterable[str]) -> Optional[int]:
    """Length of the first non-blank word, or None if there is none."""
    for w in words:
        w = (w or "").strip()
        if w:
            return len(w)
    return None


def is_valid_word(word: str, N: int) -> bool:
    if not isinstance(word, str):
        return False
    w = word.strip().upper()
    return len(w) == N and w.isascii() and w.isalpha()
