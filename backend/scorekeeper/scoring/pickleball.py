"""Pickleball game rules.

Rally scoring to a target number of points (default 11) with a win-by-2
requirement. A match is a single game by default or best-of-3 games. Each
game occupies one slot of the score sheet; tiebreak fields are unused.
"""

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple

from .common import ScoreFailure, SetOutcome, SetScore
from .parsing import ScoreParseError, parse_game_count, parse_lenient

SPORT_ID = "pickleball"


@dataclass(frozen=True)
class PickleballRules:
    sport: ClassVar[str] = SPORT_ID

    points_to: int = 11
    win_by: int = 2
    best_of: int = 1

    @property
    def sets_to_win(self) -> int:
        return self.best_of // 2 + 1

    @property
    def max_sets(self) -> int:
        return self.best_of


def init_rules(config: Optional[Dict] = None) -> PickleballRules:
    """Build rules from a config mapping.

    Config keys:
    - pointsTo: points required to win a game (default 11)
    - winBy: margin required to win a game (default 2)
    - bestOf: best-of value for number of games (default 1)
    """
    config = config or {}
    values = {}
    for key, attr, default in (
        ("pointsTo", "points_to", 11),
        ("winBy", "win_by", 2),
        ("bestOf", "best_of", 1),
    ):
        value = config.get(key)
        if value is None:
            value = default
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"{key} must be a positive integer")
        values[attr] = value
    if values["best_of"] % 2 == 0:
        raise ValueError("bestOf must be odd")
    return PickleballRules(**values)


def resolve_set(score: SetScore, index: int, rules: PickleballRules) -> SetOutcome:
    p1 = parse_lenient(score.player1_games)
    p2 = parse_lenient(score.player2_games)
    if p1 is None or p2 is None:
        return SetOutcome.UNDECIDED
    if abs(p1 - p2) < rules.win_by:
        return SetOutcome.UNDECIDED
    if p1 >= rules.points_to and p1 > p2:
        return SetOutcome.PLAYER1
    if p2 >= rules.points_to and p2 > p1:
        return SetOutcome.PLAYER2
    return SetOutcome.UNDECIDED


def check_set(
    score: SetScore, index: int, rules: PickleballRules
) -> Optional[Tuple[ScoreFailure, str]]:
    label = f"Game #{index + 1}"
    try:
        p1 = parse_game_count(score.player1_games)
        p2 = parse_game_count(score.player2_games)
    except ScoreParseError:
        return ScoreFailure.NON_NUMERIC_SCORE, f"{label} points must be integers."
    if p1 is None or p2 is None:
        return ScoreFailure.INCOMPLETE_SET, f"{label} needs both scores."

    if p1 < 0 or p2 < 0:
        return ScoreFailure.OUT_OF_RANGE_SCORE, f"{label} points must be >= 0."
    if p1 == p2:
        return ScoreFailure.ILLEGAL_GAME_COMBINATION, f"{label} cannot be a tie."
    if max(p1, p2) < rules.points_to:
        return (
            ScoreFailure.INCOMPLETE_SET,
            f"{label} must be played to at least {rules.points_to} points.",
        )
    if abs(p1 - p2) < rules.win_by:
        return (
            ScoreFailure.INSUFFICIENT_MARGIN,
            f"{label} must be won by {rules.win_by} points.",
        )
    return None


def format_set(score: SetScore, index: int, rules: PickleballRules) -> Optional[str]:
    p1 = parse_lenient(score.player1_games)
    p2 = parse_lenient(score.player2_games)
    if p1 is None or p2 is None:
        return None
    return f"{p1}-{p2}"
