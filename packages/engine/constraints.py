"""
Constraint derivation and candidate filtering.

Given:
  - a list of attempts (each letter annotated CORRECT / MISPLACED / ABSENT)
  - target word length N

Build one ConstraintSet:
  - fixed_letter_at     : position -> letter that must sit there (CORRECT)
  - forbidden_positions : letter -> positions it must NOT occupy (MISPLACED)
  - required_letters    : letters that must appear at least once
  - excluded_letters    : letters marked ABSENT and never CORRECT/MISPLACED

A letter that is ABSENT in one place but CORRECT or MISPLACED elsewhere is
required, never excluded (duplicate-letter feedback). Occurrence counts are
not bounded: "exactly one E" and "at least one E" look the same here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Set

from .attempt import Attempt
from .states import LetterState
from .validation import is_valid_word


@dataclass(frozen=True)
class ConstraintSet:
    fixed_letter_at: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))
    forbidden_positions: Mapping[str, FrozenSet[int]] = field(default_factory=lambda: MappingProxyType({}))
    required_letters: FrozenSet[str] = frozenset()
    excluded_letters: FrozenSet[str] = frozenset()

    def __hash__(self) -> int:
        # mapping proxies are unhashable; hash their sorted items instead
        return hash((
            tuple(sorted(self.fixed_letter_at.items())),
            tuple(sorted(self.forbidden_positions.items())),
            self.required_letters,
            self.excluded_letters,
        ))

    @property
    def is_empty(self) -> bool:
        return not (self.fixed_letter_at or self.forbidden_positions
                    or self.required_letters or self.excluded_letters)

    def summary(self) -> Dict[str, List[str]]:
        """
        Display-ready view, e.g.
          {"correct": ["E1"], "misplaced": ["N3"], "required": ["E", "N"], "excluded": ["S"]}
        """
        return {
            "correct": [f"{ch}{pos}" for pos, ch in sorted(self.fixed_letter_at.items())],
            "misplaced": [
                f"{ch}{pos}"
                for ch in sorted(self.forbidden_positions)
                for pos in sorted(self.forbidden_positions[ch])
            ],
            "required": sorted(self.required_letters),
            "excluded": sorted(self.excluded_letters),
        }


def build_constraints(attempts: Iterable[Attempt], target_length: Optional[int] = None) -> ConstraintSet:
    """
    Fold every letter-state entry of every attempt into one ConstraintSet.

    Entries whose position falls outside 1..target_length are ignored when
    `target_length` is given. A later CORRECT at the same position wins.
    """
    fixed: Dict[int, str] = {}
    forbidden: Dict[str, Set[int]] = {}
    required: Set[str] = set()
    raw_absent: Set[str] = set()

    for attempt in attempts:
        for e in attempt.entries:
            if target_length is not None and not (1 <= e.position <= target_length):
                continue

            if e.state is LetterState.CORRECT:
                fixed[e.position] = e.letter
                required.add(e.letter)
            elif e.state is LetterState.MISPLACED:
                required.add(e.letter)
                forbidden.setdefault(e.letter, set()).add(e.position)
            else:
                raw_absent.add(e.letter)

    return ConstraintSet(
        fixed_letter_at=MappingProxyType(fixed),
        forbidden_positions=MappingProxyType({ch: frozenset(p) for ch, p in forbidden.items()}),
        required_letters=frozenset(required),
        excluded_letters=frozenset(raw_absent - required),
    )


def matches(word: str, constraints: ConstraintSet, length: Optional[int] = None) -> bool:
    """
    True iff `word` satisfies every rule of `constraints`:
      fixed letters, no excluded letter, every required letter, and no
      misplaced letter back at a position it was seen at.
    """
    if length is not None and len(word) != length:
        return False

    for pos, ch in constraints.fixed_letter_at.items():
        if pos > len(word) or word[pos - 1] != ch:
            return False

    for ch in constraints.excluded_letters:
        if ch in word:
            return False

    for ch in constraints.required_letters:
        if ch not in word:
            return False

    for ch, positions in constraints.forbidden_positions.items():
        for pos in positions:
            if pos <= len(word) and word[pos - 1] == ch:
                return False

    return True


def filter_candidates(words: Iterable[str], constraints: ConstraintSet, N: int) -> List[str]:
    """
    Keep only words (length == N, A-Z only) that satisfy `constraints`.
    Order is preserved as in `words`; spellings differing only in case or
    surrounding blanks are kept once.
    """
    out: List[str] = []
    seen: Set[str] = set()
    for w in words:
        # Skip anything that isn't a clean N-letter token
        if not is_valid_word(w, N):
            continue
        w = w.strip().upper()
        if w in seen:
            continue
        seen.add(w)

        if matches(w, constraints):
            out.append(w)
    return out
