import logging

import pytest

from scorekeeper.scoring.common import (
    ScoreFailure,
    SetGames,
    SetScore,
    Side,
    TerminationMode,
)
from scorekeeper.services import (
    MatchDescriptor,
    MatchOutcome,
    TerminationOverride,
    build_match_outcome,
    submit_match_outcome,
)


def _sets(*rows):
    sets = [SetScore(i, *row) for i, row in enumerate(rows)]
    while len(sets) < 3:
        sets.append(SetScore(len(sets)))
    return sets


def _override(mode, winner=None):
    return TerminationOverride(mode=mode, manual_winner=winner)


def test_retired_match_skips_score_validation(match, tennis_rules):
    # garbage in the sheet is irrelevant once the match is marked retired
    sets = _sets(("x", "9"))
    result = build_match_outcome(
        match, sets, tennis_rules, _override(TerminationMode.RETIRED, Side.PLAYER1)
    )
    assert result.ok
    assert result.outcome == MatchOutcome(
        match_id="m1",
        winner_id="A",
        loser_id="B",
        winner_name="Alice",
        loser_name="Bea",
        score_text="Retired",
        sets=(),
        termination_mode=TerminationMode.RETIRED,
    )


def test_walkover_winner(match, tennis_rules):
    result = build_match_outcome(
        match, _sets(), tennis_rules, _override(TerminationMode.WALKOVER, Side.PLAYER2)
    )
    assert result.outcome.winner_id == "B"
    assert result.outcome.loser_id == "A"
    assert result.outcome.score_text == "Walkover"
    assert result.outcome.sets == ()


@pytest.mark.parametrize("mode", [TerminationMode.RETIRED, TerminationMode.WALKOVER])
def test_override_requires_manual_winner(match, tennis_rules, mode):
    result = build_match_outcome(match, _sets((6, 4), (6, 4)), tennis_rules, _override(mode))
    assert not result.ok
    assert result.failure is ScoreFailure.MISSING_OVERRIDE_WINNER
    assert result.outcome is None


def test_normal_match_outcome(match, tennis_rules):
    sets = _sets((6, 4), (3, 6), (6, 6, 8, 10))
    result = build_match_outcome(match, sets, tennis_rules)
    assert result.ok
    outcome = result.outcome
    assert (outcome.winner_id, outcome.loser_id) == ("B", "A")
    assert outcome.score_text == "6-4, 3-6, 6-6(8-10)"
    assert outcome.sets == (SetGames(6, 4), SetGames(3, 6), SetGames(6, 6))
    assert outcome.termination_mode is TerminationMode.NORMAL


def test_validation_failure_blocks(match, tennis_rules):
    result = build_match_outcome(match, _sets((6, 4), (6, 6)), tennis_rules)
    assert result.failure is ScoreFailure.MISSING_TIEBREAK
    assert result.set_index == 1


def test_split_sets_without_decider_is_not_complete(match, tennis_rules):
    # two legal sets pass validation but nobody has won the match yet
    result = build_match_outcome(match, _sets((6, 4), (4, 6)), tennis_rules)
    assert not result.ok
    assert result.failure is ScoreFailure.MATCH_NOT_COMPLETE


def test_pickleball_match_needs_deciding_game(match, pickleball_rules):
    games = [SetScore(0, 11, 6), SetScore(1, 8, 11), SetScore(2)]
    result = build_match_outcome(match, games, pickleball_rules)
    assert result.failure is ScoreFailure.MATCH_NOT_COMPLETE


def test_blank_match_id_blocks(tennis_rules):
    match = MatchDescriptor(id="  ", player1_id="A", player2_id="B")
    result = build_match_outcome(match, _sets((6, 4), (6, 4)), tennis_rules)
    assert result.failure is ScoreFailure.INVALID_MATCH_ID


def test_submit_emits_once(match, tennis_rules):
    emitted = []
    result = submit_match_outcome(
        match, _sets((6, 4), (6, 4)), tennis_rules, sink=emitted.append
    )
    assert result.ok
    assert emitted == [result.outcome]


def test_blocked_submit_emits_nothing(match, tennis_rules):
    emitted = []
    result = submit_match_outcome(match, _sets((6, 4)), tennis_rules, sink=emitted.append)
    assert not result.ok
    assert emitted == []


def test_default_sink_logs_result(match, tennis_rules, caplog):
    with caplog.at_level(logging.INFO, logger="scorekeeper.services.outcome"):
        submit_match_outcome(match, _sets((6, 1), (6, 2)), tennis_rules)
    assert "Match m1 recorded" in caplog.text
    assert "'6-1, 6-2'" in caplog.text


def test_outcome_keeps_visible_sets_only(match, tennis_rules):
    sets = _sets((7, 5), (6, 6, 7, 3), ("1", "x"))
    outcome = build_match_outcome(match, sets, tennis_rules).outcome
    assert outcome.score_text == "7-5, 6-6(7-3)"
    assert outcome.sets == (SetGames(7, 5), SetGames(6, 6))
    assert (outcome.winner_name, outcome.loser_name) == ("Alice", "Bea")


@pytest.mark.parametrize(
    "player1_id, player2_id",
    [("", "B"), ("A", "  "), ("A", "A")],
)
def test_descriptor_requires_two_participants(player1_id, player2_id):
    with pytest.raises(ValueError):
        MatchDescriptor(id="m1", player1_id=player1_id, player2_id=player2_id)


def test_descriptor_side_lookup(match):
    assert match.side_of("A") is Side.PLAYER1
    assert match.side_of("B") is Side.PLAYER2
    assert match.side_of("C") is None
    assert match.participant_name(Side.PLAYER2) == "Bea"
