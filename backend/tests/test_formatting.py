from scorekeeper.scoring import pickleball
from scorekeeper.scoring.common import SetGames, SetScore
from scorekeeper.services.formatting import collect_set_games, format_score


def _sets(*rows):
    sets = [SetScore(i, *row) for i, row in enumerate(rows)]
    while len(sets) < 3:
        sets.append(SetScore(len(sets)))
    return sets


def test_format_straight_sets(tennis_rules):
    assert format_score(_sets((6, 4), (6, 3)), tennis_rules) == "6-4, 6-3"


def test_format_tiebreak_sets(tennis_rules):
    assert format_score(_sets((6, 4), (7, 6, 7, 5)), tennis_rules) == "6-4, 7-6(7-5)"
    assert (
        format_score(_sets((6, 4), (4, 6), (6, 6, 10, 8)), tennis_rules)
        == "6-4, 4-6, 6-6(10-8)"
    )


def test_format_skips_hidden_and_unentered_sets(tennis_rules):
    assert format_score(_sets((6, 4), (6, 3), ("1", "x")), tennis_rules) == "6-4, 6-3"
    assert format_score(_sets((6, 4), ("", "2")), tennis_rules) == "6-4"
    assert format_score(_sets(), tennis_rules) == ""


def test_format_explicit_sets_to_show(tennis_rules):
    sets = _sets((6, 4), (6, 3))
    assert format_score(sets, tennis_rules, sets_to_show=1) == "6-4"


def test_format_pickleball(pickleball_rules):
    games = [SetScore(0, 11, 6), SetScore(1, 8, 11), SetScore(2, 13, 11)]
    assert format_score(games, pickleball_rules) == "11-6, 8-11, 13-11"


def test_collect_set_games_drops_tiebreaks(tennis_rules):
    sets = _sets((6, 4), (4, 6), (6, 6, 10, 8))
    assert collect_set_games(sets, tennis_rules) == [
        SetGames(6, 4),
        SetGames(4, 6),
        SetGames(6, 6),
    ]


def test_collect_set_games_skips_partial_sets(tennis_rules):
    sets = _sets((6, 4), ("5", ""))
    assert collect_set_games(sets, tennis_rules) == [SetGames(6, 4)]


def test_collect_single_game():
    rules = pickleball.init_rules({})
    assert collect_set_games([SetScore(0, "11", "9")], rules) == [SetGames(11, 9)]
