from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List

from .dictionary import merge_words

logger = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def load_word_file(
        p: Path | str,
        existing: Iterable[str] = frozenset(),
        *,
        missing_ok: bool = False,
) -> FrozenSet[str]:
    """
    Merge the word list at `p` (one word per line) into `existing`.

    With missing_ok=True a missing file is not an error: a warning is logged
    and `existing` comes back unchanged (optional bundled lists).
    """
    p = Path(p)
    if not p.exists():
        if missing_ok:
            logger.warning("Word list %s not found, skipping", p)
            return frozenset(existing)
        raise FileNotFoundError(p)

    words, added = merge_words(existing, "\n".join(read_lines(p)))
    logger.info("Loaded %s new words from %s (total %s)", added, p, len(words))
    return words


def load_word_files(paths: Iterable[Path | str], existing: Iterable[str] = frozenset()) -> FrozenSet[str]:
    words = frozenset(existing)
    for p in paths:
        words = load_word_file(p, words)
    return words
