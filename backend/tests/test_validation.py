import copy

import pytest

from scorekeeper.scoring import pickleball
from scorekeeper.scoring.common import ScoreFailure, SetOutcome, SetScore
from scorekeeper.services.live import derive_live_state
from scorekeeper.services.validation import ValidationResult, validate_score


def _sets(*rows):
    sets = [SetScore(i, *row) for i, row in enumerate(rows)]
    while len(sets) < 3:
        sets.append(SetScore(len(sets)))
    return sets


def test_accepts_valid_sets(tennis_rules) -> None:
    result = validate_score(_sets((6, 4), (6, 3)), tennis_rules)
    assert result == ValidationResult.success(2)
    assert result.ok

    assert validate_score(_sets((6, 4), (3, 6), (6, 6, 10, 8)), tennis_rules).ok
    assert validate_score(_sets((7, 5), (6, 6, 7, 2)), tennis_rules).ok


@pytest.mark.parametrize(
    "rows, failure, set_index",
    [
        ([], ScoreFailure.NO_SETS_ENTERED, None),
        ([("", "")], ScoreFailure.NO_SETS_ENTERED, None),
        ([("6", "")], ScoreFailure.NO_SETS_ENTERED, None),
        ([(6, 4)], ScoreFailure.INSUFFICIENT_COMPLETED_SETS, None),
        ([("6", "x")], ScoreFailure.NON_NUMERIC_SCORE, 0),
        ([(8, 6)], ScoreFailure.OUT_OF_RANGE_SCORE, 0),
        ([(7, 6), (6, 4)], ScoreFailure.ILLEGAL_GAME_COMBINATION, 0),
        ([(6, 4), (3, 1)], ScoreFailure.INCOMPLETE_SET, 1),
        ([(6, 4), (6, 6, 7, 6)], ScoreFailure.INVALID_TIEBREAK, 1),
        ([(6, 4), (4, 6), (6, 6, 7, 5)], ScoreFailure.INVALID_TIEBREAK, 2),
    ],
    ids=[
        "empty",
        "blank",
        "half-entered",
        "one-set",
        "non-numeric",
        "out-of-range",
        "seven-six",
        "incomplete",
        "tiebreak-margin",
        "super-tiebreak-short",
    ],
)
def test_rejects_invalid_sheets(tennis_rules, rows, failure, set_index) -> None:
    result = validate_score(_sets(*rows), tennis_rules)
    assert not result.ok
    assert result.failure is failure
    assert result.set_index == set_index
    assert result.detail


@pytest.mark.parametrize(
    "rows",
    [
        [(6, 6)],
        [(6, 4), (6, 6)],
        [(6, 4), (4, 6), (6, 6)],
    ],
    ids=["first-set", "second-set", "third-set"],
)
def test_missing_tiebreak_at_every_index(tennis_rules, rows) -> None:
    result = validate_score(_sets(*rows), tennis_rules)
    assert result.failure is ScoreFailure.MISSING_TIEBREAK
    assert result.set_index == len(rows) - 1


def test_sets_beyond_visible_count_are_ignored(tennis_rules) -> None:
    # straight sets hide the third slot, so its garbage is never checked
    assert validate_score(_sets((6, 4), (6, 3), ("9", "x")), tennis_rules).ok


def test_explicit_sets_to_show(tennis_rules) -> None:
    result = validate_score(_sets((6, 4), (6, 3)), tennis_rules, sets_to_show=1)
    assert result.failure is ScoreFailure.INSUFFICIENT_COMPLETED_SETS
    assert result.completed_sets == 1


def test_validation_is_repeatable_and_read_only(tennis_rules) -> None:
    sets = _sets((6, 4), (2, 6), (6, 6, "", ""))
    before = copy.deepcopy(sets)
    first = validate_score(sets, tennis_rules)
    assert validate_score(sets, tennis_rules) == first
    assert sets == before


def test_pickleball_best_of_three(pickleball_rules) -> None:
    ok = [SetScore(0, 11, 6), SetScore(1, 8, 11), SetScore(2, 13, 11)]
    assert validate_score(ok, pickleball_rules).ok

    one_game = [SetScore(0, 11, 6), SetScore(1), SetScore(2)]
    result = validate_score(one_game, pickleball_rules)
    assert result.failure is ScoreFailure.INSUFFICIENT_COMPLETED_SETS

    short_margin = [SetScore(0, 11, 10), SetScore(1), SetScore(2)]
    result = validate_score(short_margin, pickleball_rules)
    assert result.failure is ScoreFailure.INSUFFICIENT_MARGIN
    assert result.set_index == 0


def test_pickleball_single_game() -> None:
    rules = pickleball.init_rules({})
    assert validate_score([SetScore(0, 7, 11)], rules).ok
    assert (
        validate_score([SetScore(0, 9, 7)], rules).failure
        is ScoreFailure.INCOMPLETE_SET
    )


def test_oversized_entry_is_non_numeric(tennis_rules) -> None:
    sets = _sets(("9" * 5000, "4"))
    state = derive_live_state(sets, tennis_rules)
    assert state.set_outcomes[0] is SetOutcome.UNDECIDED

    result = validate_score(sets, tennis_rules, sets_to_show=1)
    assert result.failure is ScoreFailure.NON_NUMERIC_SCORE
    assert result.set_index == 0
