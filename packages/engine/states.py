"""
Per-letter feedback states.

Conventions (same symbols as a Wordle-style pattern string):
  - 'G'  : CORRECT   = letter at exactly this position
  - 'Y'  : MISPLACED = letter in the answer, but not at this position
  - '-'  : ABSENT    = letter not in the answer (or already accounted for)

A pattern string like "Y------" describes one attempt, one symbol per letter.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Tuple


class LetterState(Enum):
    ABSENT = "-"
    MISPLACED = "Y"
    CORRECT = "G"

    @property
    def symbol(self) -> str:
        return self.value


# Tile click order: grey -> yellow -> green -> grey
_CYCLE = (LetterState.ABSENT, LetterState.MISPLACED, LetterState.CORRECT)

# Accepted input aliases (case-insensitive).
_ALIASES = {
    "-": LetterState.ABSENT,
    ".": LetterState.ABSENT,
    "_": LetterState.ABSENT,
    "B": LetterState.ABSENT,
    "X": LetterState.ABSENT,
    "0": LetterState.ABSENT,
    "Y": LetterState.MISPLACED,
    "1": LetterState.MISPLACED,
    "G": LetterState.CORRECT,
    "2": LetterState.CORRECT,
}


def next_state(current: LetterState) -> LetterState:
    """Return the state that follows `current` in the click cycle."""
    i = _CYCLE.index(current)
    return _CYCLE[(i + 1) % len(_CYCLE)]


def parse_pattern(pattern: str) -> Tuple[LetterState, ...]:
    """
    Parse a pattern string into states.

    Examples:
      parse_pattern("Y--G")  -> (MISPLACED, ABSENT, ABSENT, CORRECT)
      parse_pattern("1002")  -> same as above

    Raises ValueError on an unknown symbol.
    """
    out = []
    for i, ch in enumerate(pattern.strip().upper(), start=1):
        try:
            out.append(_ALIASES[ch])
        except KeyError:
            raise ValueError(f"Unknown feedback symbol {ch!r} at position {i} in {pattern!r}") from None
    return tuple(out)


def to_pattern(states: Iterable[LetterState]) -> str:
    return "".join(s.symbol for s in states)
