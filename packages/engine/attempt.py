"""
Attempt value types.

An Attempt is one guessed word with a feedback state for each of its letters.
Positions are 1-based, as they appear on the game board.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .states import LetterState, parse_pattern, to_pattern


@dataclass(frozen=True)
class LetterFeedback:
    letter: str          # single uppercase character
    position: int        # 1-based
    state: LetterState


@dataclass(frozen=True)
class Attempt:
    entries: Tuple[LetterFeedback, ...]

    def __post_init__(self):
        positions = [e.position for e in self.entries]
        if len(positions) != len(set(positions)):
            raise ValueError(f"Duplicate positions in attempt: {positions}")

    @classmethod
    def from_states(cls, word: str, states: Iterable[LetterState]) -> "Attempt":
        """
        Pair each letter of `word` with its state.

        Characters outside A-Z are skipped but still take up a position, so a
        stray symbol never shifts the letters that follow it.
        """
        w = word.strip().upper()
        st = tuple(states)
        if len(w) != len(st):
            raise ValueError(f"Word {w!r} has {len(w)} letters but {len(st)} states were given")

        entries = []
        for i, (ch, s) in enumerate(zip(w, st), start=1):
            if "A" <= ch <= "Z":
                entries.append(LetterFeedback(ch, i, s))
        return cls(tuple(entries))

    @classmethod
    def from_pattern(cls, word: str, pattern: str) -> "Attempt":
        """Attempt.from_pattern("ENIGMES", "Y------")"""
        return cls.from_states(word, parse_pattern(pattern))

    @property
    def word(self) -> str:
        return "".join(e.letter for e in sorted(self.entries, key=lambda e: e.position))

    @property
    def states(self) -> Tuple[LetterState, ...]:
        return tuple(e.state for e in sorted(self.entries, key=lambda e: e.position))

    @property
    def pattern(self) -> str:
        return to_pattern(self.states)

    def __len__(self) -> int:
        return len(self.entries)
