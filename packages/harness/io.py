"""
Output files for self-play runs.

- write_csv:          one row per game, guesses and patterns spread over columns.
- summarize:          win rate / mean guesses over a batch.
- write_bench_report: JSON report (config, word-list diagnostics, summary).

Patterns are written as "'G-Y--" so spreadsheets keep them as text.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, List, Optional


def write_csv(results: List[Dict], path: str, max_turns: int, N: int) -> str:
    """
    Columns: N, answer, success, guesses, time_ms, start_candidates,
    then guess_i / patt_i for every turn up to `max_turns`.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turns = range(1, max_turns + 1)
    header = ["N", "answer", "success", "guesses", "time_ms", "start_candidates"]
    header += [col for i in turns for col in (f"guess_{i}", f"patt_{i}")]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=header)
        w.writeheader()
        for r in results:
            row = {
                "N": N,
                "answer": r["answer"],
                "success": r["success"],
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
                "start_candidates": (r.get("candidates_per_turn") or [0])[0],
            }
            hist = r.get("history", [])
            for i in turns:
                guess, patt = hist[i - 1] if i <= len(hist) else ("", "")
                row[f"guess_{i}"] = guess
                row[f"patt_{i}"] = f"'{patt}" if patt else ""
            w.writerow(row)

    return str(p)


def summarize(results: List[Dict]) -> Dict:
    n = len(results)
    wins = [r for r in results if r["success"]]
    mean = sum(r["guesses"] for r in wins) / len(wins) if wins else None
    return {
        "games": n,
        "wins": len(wins),
        "losses": n - len(wins),
        "win_rate": len(wins) / n if n else 0.0,
        "mean_guesses_on_win": mean,
    }


def bench_stamp() -> str:
    """UTC time as 20251019T081500Z, used in output file names."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def source_revision() -> Optional[str]:
    """Short git hash of the working tree, None outside a checkout."""
    try:
        out = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            capture_output=True, text=True, check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.stdout.strip() or None


def write_bench_report(
        results: List[Dict],
        path: str,
        *,
        config: Dict,
        wordlists: List[Dict],
        dictionary_size: int,
        stamp: Optional[str] = None,
) -> Dict:
    """
    Write the JSON report for one bench run and return it.

    Keys: stamp, revision, config, wordlists, dictionary_size, summary.
    """
    report = {
        "stamp": stamp or bench_stamp(),
        "revision": source_revision(),
        "config": config,
        "wordlists": wordlists,
        "dictionary_size": dictionary_size,
        "summary": summarize(results),
    }
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(report, indent=2), encoding="utf-8")
    return report
