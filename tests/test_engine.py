import pytest
from packages.engine import (
    Attempt, LetterState, build_constraints, feedback, filter_candidates,
    matches, next_state, parse_pattern, to_pattern,
)
from packages.engine.feedback import feedback_attempt
from packages.engine.validation import check_target_length, infer_target_length, is_valid_word

A, M, C = LetterState.ABSENT, LetterState.MISPLACED, LetterState.CORRECT


# --- states & attempts ---
def test_next_state_cycles_through_all_three():
    assert next_state(A) is M
    assert next_state(M) is C
    assert next_state(C) is A


def test_parse_pattern_aliases_and_roundtrip():
    assert parse_pattern("gy-.") == (C, M, A, A)
    assert parse_pattern("2100") == (C, M, A, A)
    assert to_pattern(parse_pattern("G-Y--")) == "G-Y--"


def test_parse_pattern_rejects_unknown_symbol():
    with pytest.raises(ValueError):
        parse_pattern("GZ-")


def test_attempt_from_pattern():
    a = Attempt.from_pattern("enigmes", "Y------")
    assert a.word == "ENIGMES"
    assert a.pattern == "Y------"
    assert [e.position for e in a.entries] == list(range(1, 8))


def test_attempt_length_mismatch_raises():
    with pytest.raises(ValueError):
        Attempt.from_pattern("ENIGME", "GGG")


def test_attempt_skips_non_letters_but_keeps_positions():
    a = Attempt.from_pattern("AB?D", "G-YG")
    assert [(e.letter, e.position) for e in a.entries] == [("A", 1), ("B", 2), ("D", 4)]


# --- constraint builder ---
def test_build_constraints_misplaced_then_absent():
    c = build_constraints([Attempt.from_pattern("ENIGMES", "Y------")], 7)
    assert c.required_letters == {"E"}
    assert dict(c.forbidden_positions) == {"E": frozenset({1})}
    assert c.excluded_letters == {"N", "I", "G", "M", "S"}
    assert dict(c.fixed_letter_at) == {}


def test_correct_in_one_attempt_absent_in_another_stays_required():
    c = build_constraints([
        Attempt.from_pattern("ETOILE", "--G---"),
        Attempt.from_pattern("OSERAI", "------"),
    ], 6)
    assert c.fixed_letter_at[3] == "O"
    assert "O" in c.required_letters
    assert "O" not in c.excluded_letters


def test_confirming_a_letter_lifts_its_exclusion():
    attempts = [
        Attempt.from_pattern("ESPRIT", "------"),
        Attempt.from_pattern("ENIGME", "------"),
    ]
    assert "E" in build_constraints(attempts, 6).excluded_letters

    attempts.append(Attempt.from_pattern("ECLATE", "G-----"))
    c = build_constraints(attempts, 6)
    assert "E" in c.required_letters
    assert "E" not in c.excluded_letters


def test_same_letter_correct_and_absent_in_one_attempt():
    # duplicate E: first one confirmed, the others grey
    c = build_constraints([Attempt.from_pattern("ENTREE", "G-----")], 6)
    assert c.fixed_letter_at[1] == "E"
    assert "E" in c.required_letters
    assert "E" not in c.excluded_letters


def test_positions_outside_target_length_are_ignored():
    c = build_constraints([Attempt.from_pattern("ENIGMES", "------G")], 6)
    assert 7 not in c.fixed_letter_at
    assert "S" not in c.required_letters and "S" not in c.excluded_letters


def test_later_correct_wins_at_same_position():
    c = build_constraints([
        Attempt.from_pattern("ABC", "G--"),
        Attempt.from_pattern("XBC", "G--"),
    ], 3)
    assert c.fixed_letter_at[1] == "X"


def test_empty_attempts_give_unconstrained_set():
    c = build_constraints([], 5)
    assert c.is_empty
    assert c.summary() == {"correct": [], "misplaced": [], "required": [], "excluded": []}


def test_summary_is_sorted_and_labelled():
    c = build_constraints([Attempt.from_pattern("ETALER", "GGY--Y")], 6)
    assert c.summary() == {
        "correct": ["E1", "T2"],
        "misplaced": ["A3", "R6"],
        "required": ["A", "E", "R", "T"],
        "excluded": ["L"],
    }


# --- predicate & filter ---
@pytest.mark.parametrize("word,expected", [
    ("RETABLE", True),    # E away from 1, no excluded letter
    ("ENTRAVE", False),   # E at 1 and contains N
    ("TRAVAUX", False),   # no E
    ("ETALEES", False),   # E at 1, contains S
])
def test_matches_scenario_enigmes(word, expected):
    c = build_constraints([Attempt.from_pattern("ENIGMES", "Y------")], 7)
    assert matches(word, c, 7) is expected


def test_matches_checks_length_when_given():
    c = build_constraints([], 6)
    assert matches("ESPRITS", c, 6) is False
    assert matches("ESPRIT", c, 6) is True


def test_filter_candidates_keeps_order_and_cleans_input():
    c = build_constraints([Attempt.from_pattern("ECLATS", "G-Y-Y-")], 6)
    words = ["ETOILE", " etoile ", "ENTREE", "E7OILE", "ETOILES", "ECLATE"]
    assert filter_candidates(words, c, 6) == ["ETOILE"]


def test_constraint_set_is_hashable():
    a = build_constraints([Attempt.from_pattern("ETALER", "GGY--Y")], 6)
    b = build_constraints([Attempt.from_pattern("ETALER", "GGY--Y")], 6)
    assert a == b and hash(a) == hash(b)
    assert len({a, b, build_constraints([], 6)}) == 2


# --- feedback ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("ETALER", "ETOILE", "GG-YY-"),
    ("ENTREE", "ETOILE", "G-Y--G"),
    ("ECLATS", "ETOILE", "G-Y-Y-"),
    ("EEEEEE", "ETOILE", "G----G"),
    ("ENIGME", "ENIGME", "GGGGGG"),
    ("esprit", "ESPRIT", "GGGGGG"),
])
def test_feedback_golden(guess, answer, expected):
    assert to_pattern(feedback(guess, answer)) == expected


def test_feedback_length_mismatch_raises():
    with pytest.raises(ValueError):
        feedback("ENIGME", "ENIGMES")


@pytest.mark.parametrize("guess,answer", [
    ("ECLATS", "ETOILE"),
    ("ENTREE", "ETALES"),
    ("EEEEEE", "ENTREE"),
    ("ESSENCE", "ESSAYER"),
    ("ETALEES", "ENTREES"),
    ("ENIGMES", "ENTRAVE"),
])
def test_answer_always_satisfies_its_own_feedback(guess, answer):
    c = build_constraints([feedback_attempt(guess, answer)], len(answer))
    assert matches(answer, c, len(answer))


# --- validation ---
def test_check_target_length():
    assert check_target_length(5) == 5
    with pytest.raises(ValueError):
        check_target_length(2)
    with pytest.raises(ValueError):
        check_target_length("6")


def test_infer_target_length_and_word_shape():
    assert infer_target_length(["", "  ", "enigme"]) == 6
    assert infer_target_length([]) is None
    assert is_valid_word("Etoile", 6) is True
    assert is_valid_word("ÉTOILE", 6) is False
