import csv
import json
from pathlib import Path

import pytest
from packages.harness import run_batch, run_case, summarize, write_bench_report, write_csv
from packages.lexicon import BUILTIN_WORDS


def test_run_case_smoke():
    r = run_case("etoile", BUILTIN_WORDS, N=6)
    assert r["success"] is True
    assert r["history"][-1] == ("ETOILE", "GGGGGG")
    assert r["guesses"] <= 6
    assert r["candidates_per_turn"][0] == len([w for w in BUILTIN_WORDS if len(w) == 6])


def test_run_case_with_opener():
    r = run_case("ETOILE", BUILTIN_WORDS, N=6, opener="esprit")
    assert r["history"][0][0] == "ESPRIT"
    assert r["success"] is True


def test_run_case_answer_outside_dictionary_stops_early():
    r = run_case("ETOFFE", BUILTIN_WORDS, N=6)
    assert r["success"] is False
    assert r["guesses"] <= 6
    assert r["candidates_per_turn"][-1] == 0


def test_run_case_rejects_bad_turn_budget():
    with pytest.raises(ValueError):
        run_case("ETOILE", BUILTIN_WORDS, N=6, max_turns=0)


def test_run_batch_all_builtin_seven_letter_words():
    answers = [w for w in BUILTIN_WORDS if len(w) == 7]
    results = run_batch(answers, BUILTIN_WORDS, N=7, sample=5)
    assert len(results) == 5
    # every answer is in the dictionary, so it is never filtered out
    assert all(r["success"] or r["guesses"] == 6 for r in results)


def test_write_outputs(tmp_path: Path):
    results = run_batch(["ETOILE", "ETOFFE"], BUILTIN_WORDS, N=6)
    csv_path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_turns=6, N=6)
    with open(csv_path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert [r["answer"] for r in rows] == ["ETOILE", "ETOFFE"]
    assert rows[0]["patt_1"].startswith("'")

    summary = summarize(results)
    assert summary["games"] == 2 and summary["wins"] == 1
    assert summary["win_rate"] == 0.5

    path = tmp_path / "reports" / "bench.json"
    rep = write_bench_report(
        results, str(path), config={"length": 6}, wordlists=[], dictionary_size=8, stamp="20250101T000000Z",
    )
    on_disk = json.loads(path.read_text(encoding="utf-8"))
    assert on_disk == rep
    assert on_disk["stamp"] == "20250101T000000Z"
    assert on_disk["summary"]["wins"] == 1
    assert on_disk["dictionary_size"] == 8


def test_summarize_empty():
    assert summarize([]) == {
        "games": 0, "wins": 0, "losses": 0, "win_rate": 0.0, "mean_guesses_on_win": None,
    }
