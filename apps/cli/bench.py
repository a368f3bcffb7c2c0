# apps/cli/bench.py
"""
Self-play benchmark for the Motus solver.

This script:
  1) Reports on the word lists (counts + SHA, rejected lines).
  2) Loads the answer pool and the suggestion dictionary.
  3) Plays every answer (or a seeded sample) with a tqdm progress bar, then writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: report with config, word-list diagnostics, git revision, summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List

from tqdm import tqdm

from packages.harness import MAX_TURNS, run_case, write_bench_report, write_csv
from packages.harness.io import bench_stamp
from packages.lexicon import builtin_dictionary, iter_words, load_word_files, pretty_summary, read_lines, report_wordlist


def _load_answers(path: str, N: int) -> List[str]:
    words = iter_words("\n".join(read_lines(path)), lines=True)
    return list(dict.fromkeys(w for w in words if len(w) == N))


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Motus solver: self-play benchmark")
    ap.add_argument("--length", "-n", type=int, required=True, help="word length")
    ap.add_argument("--answers", required=True, help="answer pool, one word per line")
    ap.add_argument("--dict", dest="dicts", action="append", default=[],
                    help="extra suggestion word lists (answers are always included)")
    ap.add_argument("--sample", type=int, help="play only K answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for sampling")
    ap.add_argument("--opener", help="fixed first guess")
    ap.add_argument("--max-turns", type=int, default=MAX_TURNS, help="turn budget per game")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["bar", "off"], default="bar", help="show a progress bar")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    N = args.length
    paths = [args.answers, *args.dicts]

    try:
        reports = [report_wordlist(p, length=N) for p in paths]
        answers = _load_answers(args.answers, N)
        words = load_word_files(paths, builtin_dictionary())
    except (ValueError, FileNotFoundError) as e:
        # UnicodeDecodeError is a ValueError
        print(f"error: cannot read word list: {e}", file=sys.stderr)
        return 1

    for rep in reports:
        print(pretty_summary(rep))

    dictionary = frozenset(w for w in words if len(w) == N)

    cases = list(answers)
    if args.sample and args.sample < len(cases):
        rng = random.Random(args.seed)
        rng.shuffle(cases)
        cases = cases[: args.sample]

    results = []
    try:
        for ans in tqdm(cases, ncols=80, desc="Playing", unit="game", disable=args.progress == "off"):
            results.append(run_case(ans, dictionary, N=N, max_turns=args.max_turns, opener=args.opener))
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    stamp = bench_stamp()
    outdir = Path(args.outdir)
    csv_path = outdir / f"bench_{stamp}.csv"
    report_path = outdir / f"bench_{stamp}_report.json"

    write_csv(results, str(csv_path), max_turns=args.max_turns, N=N)
    summary = write_bench_report(
        results, str(report_path),
        config=vars(args), wordlists=reports,
        dictionary_size=len(dictionary), stamp=stamp,
    )["summary"]

    mean = summary["mean_guesses_on_win"]
    mean_txt = f"{mean:.2f}" if mean is not None else "n/a"
    print(
        f"games={summary['games']} | wins={summary['wins']} "
        f"({summary['win_rate'] * 100:.1f}%) | mean guesses on win={mean_txt}"
    )
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {report_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
