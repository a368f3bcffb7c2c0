# apps/cli/solve.py
"""
CLI entry point for suggesting the next Motus guess.

This script:
  1) Builds the dictionary: builtin words + optional word-list files
     + optional bundled list + free-form custom words.
  2) Turns each --attempt WORD:PATTERN into per-letter feedback.
  3) Runs the solver and prints the constraint summary and ranked words.

Pattern symbols: G = right place, Y = wrong place, - = absent.

Example:
    python -m apps.cli.solve --attempt ENIGMES:Y------ --dict liste_francais.txt
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Tuple

from packages.engine import MIN_WORD_LENGTH, Attempt, infer_target_length, solve
from packages.lexicon import build_dictionary, builtin_dictionary, load_word_file, load_word_files

MAX_DISPLAY = 80  # ranked words printed before "... and K more"
EMBEDDED_LIST = "liste_francais.txt"


def _split_attempt(arg: str) -> Tuple[str, str]:
    """'ENIGMES:Y------' (or 'ENIGMES=Y------') -> ('ENIGMES', 'Y------')"""
    for sep in (":", "="):
        if sep in arg:
            word, patt = arg.split(sep, 1)
            return word.strip(), patt.strip()
    raise ValueError(f"attempt must look like WORD:PATTERN; got {arg!r}")


def _print_constraints(summary: dict) -> None:
    def fmt(xs: List[str]) -> str:
        return ", ".join(xs) if xs else "none"

    print(f"Correct   : {fmt(summary['correct'])}")
    print(f"Misplaced : {fmt(summary['misplaced'])}")
    print(f"Required  : {fmt(summary['required'])}")
    print(f"Excluded  : {fmt(summary['excluded'])}")


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Motus solver: rank words consistent with past attempts")
    ap.add_argument("--attempt", "-a", action="append", default=[],
                    help="WORD:PATTERN, e.g. ENIGMES:Y------ (repeatable, in play order)")
    ap.add_argument("--length", "-n", type=int,
                    help="word length (default: length of the first attempt)")
    ap.add_argument("--dict", dest="dicts", action="append", default=[],
                    help="word-list file, one word per line (repeatable)")
    ap.add_argument("--embedded", default=EMBEDDED_LIST,
                    help="optional bundled word list, skipped if missing")
    ap.add_argument("--custom", default="",
                    help="extra words separated by spaces")
    ap.add_argument("--top", type=int, default=MAX_DISPLAY, help="number of ranked words to print")
    ap.add_argument("--json", action="store_true", help="print the result as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="log dictionary loading")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.attempt:
        print("Add at least one attempt (--attempt WORD:PATTERN).", file=sys.stderr)
        return 2

    try:
        pairs = [_split_attempt(s) for s in args.attempt]
        attempts = [Attempt.from_pattern(word, patt) for word, patt in pairs]

        N = args.length or infer_target_length(word for word, _ in pairs)
        if not N or N < MIN_WORD_LENGTH:
            print("Cannot determine the word length: pass --length or type a word in an attempt.",
                  file=sys.stderr)
            return 2

        words = load_word_file(args.embedded, builtin_dictionary(), missing_ok=True)
        words = load_word_files(args.dicts, words)
        dictionary = build_dictionary(words, N, args.custom)

        result = solve(N, attempts, dictionary)
    except (ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    summary = result.constraints.summary()

    if args.json:
        print(json.dumps({
            "length": N,
            "dictionary_size": result.dictionary_size,
            "constraints": summary,
            "count": result.count,
            "ranked": [
                {"word": c.word, "score": c.score, "probability": round(c.probability, 4)}
                for c in result.top(args.top)
            ],
        }, indent=2))
        return 0

    print(f"Words loaded: {len(words)} | length {N}: {result.dictionary_size}")
    _print_constraints(summary)
    print(f"Candidates: {result.count}")

    if result.dictionary_size == 0:
        print(f"No dictionary word has {N} letters.")
        return 0
    if result.count == 0:
        print("No word matches these constraints. Load a bigger dictionary or check the colors.")
        return 0

    for idx, c in enumerate(result.top(args.top), 1):
        print(f"{idx:02d}. {c.word:<{N}}  score {c.score:>4}  ~{c.probability * 100:.1f}%")
    if result.count > args.top:
        print(f"... and {result.count - args.top} more possible words.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
