"""
Word-list diagnostics.

What this module does:
- Read one raw word-list file (one entry per line, any case, accents allowed).
- Run every line through the same normalization the dictionary uses.
- Count accepted / rejected / duplicate lines, compute SHA-256 of the raw
  bytes, and histogram accepted words by length.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from packages.lexicon import report_wordlist, pretty_summary
    rep = report_wordlist("liste_francais.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from collections import Counter
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from .normalize import normalize_word


@dataclass
class WordListReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    lines: int           # non-blank lines read
    accepted: int        # lines that normalized to a word
    rejected: int        # lines that did not
    unique_count: int    # distinct words after normalization
    duplicates: int      # accepted lines that repeated an earlier word
    by_length: Dict[int, int] = field(default_factory=dict)
    samples_rejected: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def report_wordlist(path: str, *, length: Optional[int] = None) -> Dict:
    """
    Diagnose the word list at `path`.

    If `length` is given, only words of that length are counted as unique
    (the histogram still covers every length).

    Returns a JSON-serializable dict (see WordListReport).
    """
    p = Path(path)
    if not p.exists():
        return asdict(WordListReport(str(path), False, "", 0, 0, 0, 0, 0))

    seen = set()
    lines = accepted = rejected = duplicates = 0
    by_length: Counter = Counter()
    bad: List[str] = []

    with p.open("r", encoding="utf-8") as f:
        for raw in f:
            if not raw.strip():
                continue
            lines += 1
            w = normalize_word(raw)
            if w is None:
                rejected += 1
                if len(bad) < 5:
                    bad.append(raw.strip())
                continue
            accepted += 1
            if w in seen:
                duplicates += 1
                continue
            seen.add(w)
            by_length[len(w)] += 1

    unique = by_length[length] if length is not None else len(seen)
    rep = WordListReport(
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        lines=lines,
        accepted=accepted,
        rejected=rejected,
        unique_count=unique,
        duplicates=duplicates,
        by_length=dict(sorted(by_length.items())),
        samples_rejected=bad,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        liste.txt | words=22740 (lines=22801, rejected=12, dup=49, sha=abc123...) | 5:2301 6:4012 7:5550
    """
    if not report["exists"]:
        return f"{report['path']} | MISSING"
    sha = (report.get("sha256") or "")[:12]
    hist = " ".join(f"{n}:{c}" for n, c in report.get("by_length", {}).items())
    return (
        f"{report['path']} | words={report['unique_count']} "
        f"(lines={report['lines']}, rejected={report['rejected']}, "
        f"dup={report['duplicates']}, sha={sha}) | {hist}"
    )
