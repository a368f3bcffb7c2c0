"""
Board feedback for a single (guess, answer) pair.

Used by the self-play harness to play the role of the game: it produces the
same per-letter states a player would copy from the board.

Two passes, so repeated letters are handled like the real game:
  1) mark CORRECT positions and count the answer letters left unmatched
  2) mark MISPLACED only while that letter still has unmatched copies
"""

from __future__ import annotations

from collections import Counter
from typing import Tuple

from .attempt import Attempt
from .states import LetterState


def feedback(guess: str, answer: str) -> Tuple[LetterState, ...]:
    """
    Examples:
      feedback("ETALER", "ETOILE") -> pattern "GG-YY-"
      feedback("ENTREE", "ETOILE") -> pattern "G-Y--G"
    """
    guess = guess.strip().upper()
    answer = answer.strip().upper()
    if len(guess) != len(answer):
        raise ValueError(f"Guess {guess!r} and answer {answer!r} differ in length")

    states = [LetterState.ABSENT] * len(guess)

    left: Counter = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            states[i] = LetterState.CORRECT
        else:
            left[a] += 1

    for i, g in enumerate(guess):
        if states[i] is LetterState.CORRECT:
            continue
        if left[g] > 0:
            states[i] = LetterState.MISPLACED
            left[g] -= 1

    return tuple(states)


def feedback_attempt(guess: str, answer: str) -> Attempt:
    return Attempt.from_states(guess, feedback(guess, answer))
