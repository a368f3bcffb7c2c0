"""
Word normalization.

Every word entering a dictionary goes through `normalize_word`:
  - trim + uppercase
  - NFD decomposition, combining marks dropped  (É -> E, Ç -> C)
  - apostrophes and hyphens removed             (AUJOURD'HUI -> AUJOURDHUI)
  - anything still outside A-Z is rejected      (None)
"""

from __future__ import annotations

import re
import unicodedata
from typing import Iterator, Optional

_STRIP = str.maketrans("", "", "'’-")
_WORD_RE = re.compile(r"^[A-Z]+$")


def normalize_word(raw: str) -> Optional[str]:
    w = (raw or "").strip().upper()
    if not w:
        return None
    w = unicodedata.normalize("NFD", w)
    w = "".join(ch for ch in w if unicodedata.category(ch) != "Mn")
    w = w.translate(_STRIP)
    return w if _WORD_RE.match(w) else None


def iter_words(text: str, *, lines: bool = False) -> Iterator[str]:
    """
    Yield normalized words from free text.

    lines=True  : one entry per line (word-list files)
    lines=False : any whitespace separates entries (pasted custom words)
    """
    chunks = text.splitlines() if lines else text.split()
    for chunk in chunks:
        w = normalize_word(chunk)
        if w:
            yield w
