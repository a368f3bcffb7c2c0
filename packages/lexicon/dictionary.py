"""
Dictionary construction.

Words come from three places, all normalized the same way:
  - BUILTIN_WORDS (always available, tiny)
  - loaded word-list files, merged with `merge_words`
  - free-form custom words typed by the player

There is no global word set: callers own their frozenset and pass it along.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Tuple

from .normalize import iter_words

BUILTIN_WORDS: Tuple[str, ...] = (
    "ENIGME", "ENIGMES", "EPINEUX", "ETOILES", "ETOILE", "ECRASEE",
    "ECRASER", "ETRANGE", "ETUDIER", "ELEGANT", "EVIDENT", "ENTRAIN",
    "ENTRAVE", "ENTREE", "ENTREES", "ESPRIT", "ESPRITS", "ESSAYER",
    "ESSENCE", "ETALES", "ETALER", "ECLATS", "ECLATE",
)


def builtin_dictionary() -> FrozenSet[str]:
    return frozenset(BUILTIN_WORDS)


def merge_words(existing: Iterable[str], text: str) -> Tuple[FrozenSet[str], int]:
    """
    Merge a word list (one word per line) into `existing`.

    Returns (updated_set, added) where `added` counts words that were not
    already present. `existing` itself is never modified.
    """
    words = set(existing)
    before = len(words)
    words.update(iter_words(text, lines=True))
    return frozenset(words), len(words) - before


def build_dictionary(words: Iterable[str], target_length: int, custom_text: str = "") -> FrozenSet[str]:
    """
    Words of `target_length` from `words` plus the custom words.

    Falls back to the builtin words of that length when nothing matches;
    the result may still be empty, which callers report as zero candidates.
    """
    out = {
        w for w in words
        if len(w) == target_length and w.isascii() and w.isalpha() and w.isupper()
    }
    out.update(w for w in iter_words(custom_text) if len(w) == target_length)

    if not out:
        out = {w for w in BUILTIN_WORDS if len(w) == target_length}
    return frozenset(out)
