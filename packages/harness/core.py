"""
Self-play evaluation primitives.

- run_case:  play one puzzle (one hidden answer) guessing the top-ranked word.
- run_batch: play many puzzles in sequence (optionally a sample prefix).

The game side is simulated with `feedback`; the player side only ever sees
the attempts, exactly like someone copying colors off the board.
"""

from __future__ import annotations

import time
from typing import Dict, Iterable, List, Optional, Tuple

from packages.engine import Attempt, feedback_attempt, solve

# Motus / Wordle turn budget.
MAX_TURNS = 6


def _check_turns(max_turns: int) -> None:
    if max_turns < 1:
        raise ValueError(f"max_turns must be >= 1; got {max_turns}")


def _next_guess(ranked_words: List[str], guessed: Iterable[str]) -> Optional[str]:
    """Best-ranked word not already played (a wrong guess can stay consistent)."""
    done = set(guessed)
    for w in ranked_words:
        if w not in done:
            return w
    return None


def run_case(
        answer: str,
        dictionary: Iterable[str],
        *,
        N: int,
        max_turns: int = MAX_TURNS,
        opener: Optional[str] = None,
) -> Dict:
    """
    Play one game until the answer is found, candidates run out, or the turn
    budget is exhausted.

    Args:
        answer:     the hidden word for this case
        dictionary: words the player may suggest
        N:          word length
        max_turns:  turn budget (default 6)
        opener:     fixed first guess; defaults to the top-ranked word

    Returns:
        dict with keys:
            answer, success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), candidates_per_turn (list[int])
    """
    _check_turns(max_turns)
    answer = answer.strip().upper()
    words = sorted({w for w in dictionary if len(w) == N})

    attempts: List[Attempt] = []
    history: List[Tuple[str, str]] = []
    sizes: List[int] = []
    success = False

    t0 = time.perf_counter()
    for turn in range(1, max_turns + 1):
        result = solve(N, attempts, words)
        sizes.append(result.count)

        if turn == 1 and opener:
            guess = opener.strip().upper()
        else:
            guess = _next_guess(result.candidates, (g for g, _ in history))
        if guess is None:
            break  # over-constrained: nothing left to play

        attempt = feedback_attempt(guess, answer)
        attempts.append(attempt)
        history.append((guess, attempt.pattern))

        if guess == answer:
            success = True
            break

    dt = (time.perf_counter() - t0) * 1000.0
    return {
        "answer": answer,
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "candidates_per_turn": sizes,
    }


def run_batch(
        answers: List[str],
        dictionary: Iterable[str],
        *,
        N: int,
        max_turns: int = MAX_TURNS,
        sample: Optional[int] = None,
        opener: Optional[str] = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers (after filtering to length N) are played.
    """
    _check_turns(max_turns)

    pool = [w.strip().upper() for w in answers if len(w.strip()) == N]
    if sample is not None:
        pool = pool[:sample]

    words = frozenset(dictionary)
    return [
        run_case(ans, words, N=N, max_turns=max_turns, opener=opener)
        for ans in pool
    ]
