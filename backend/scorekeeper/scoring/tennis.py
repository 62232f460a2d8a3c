"""Tennis set rules.

Games per set with a tiebreak at ``gamesPerSet``-all. The last possible set
of the match is decided by a super-tiebreak (``finalSetTiebreakTo``)."""

from dataclasses import dataclass
from typing import ClassVar, Dict, Optional, Tuple

from .common import ScoreFailure, SetOutcome, SetScore
from .parsing import (
    ScoreParseError,
    parse_game_count,
    parse_lenient,
    parse_tiebreak_count,
)

SPORT_ID = "tennis"


@dataclass(frozen=True)
class TennisRules:
    sport: ClassVar[str] = SPORT_ID

    best_of: int = 3
    games_per_set: int = 6
    tiebreak_to: int = 7
    final_set_tiebreak_to: int = 10

    @property
    def sets_to_win(self) -> int:
        return self.best_of // 2 + 1

    @property
    def max_sets(self) -> int:
        return self.best_of

    @property
    def max_games(self) -> int:
        return self.games_per_set + 1

    def tiebreak_target(self, index: int) -> int:
        if index == self.max_sets - 1:
            return self.final_set_tiebreak_to
        return self.tiebreak_to


def _positive_int(config: Dict, key: str, default: int) -> int:
    value = config.get(key, default)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{key} must be a positive integer")
    return value


def init_rules(config: Optional[Dict] = None) -> TennisRules:
    """Build rules from a config mapping.

    Recognised keys are ``sets`` (best-of, default ``3``), ``gamesPerSet``
    (default ``6``, ``4`` for short sets), ``tiebreakTo`` (default ``7``) and
    ``finalSetTiebreakTo`` (default ``10``).
    """
    config = config or {}
    best_of = _positive_int(config, "sets", 3)
    if best_of % 2 == 0:
        raise ValueError("sets must be an odd best-of value")
    games_per_set = _positive_int(config, "gamesPerSet", 6)
    if games_per_set < 2:
        raise ValueError("gamesPerSet must be at least 2")
    return TennisRules(
        best_of=best_of,
        games_per_set=games_per_set,
        tiebreak_to=_positive_int(config, "tiebreakTo", 7),
        final_set_tiebreak_to=_positive_int(config, "finalSetTiebreakTo", 10),
    )


def _is_tiebreak_set(p1: int, p2: int, rules: TennisRules) -> bool:
    return p1 == rules.games_per_set and p2 == rules.games_per_set


def resolve_set(score: SetScore, index: int, rules: TennisRules) -> SetOutcome:
    """Live winner of a set. Lenient: never fails, never checks legality."""
    p1 = parse_lenient(score.player1_games)
    p2 = parse_lenient(score.player2_games)
    if p1 is None or p2 is None:
        return SetOutcome.UNDECIDED

    if _is_tiebreak_set(p1, p2, rules):
        target = rules.tiebreak_target(index)
        tb1 = parse_lenient(score.player1_tiebreak) or 0
        tb2 = parse_lenient(score.player2_tiebreak) or 0
        if tb1 >= target and tb1 - tb2 >= 2:
            return SetOutcome.PLAYER1
        if tb2 >= target and tb2 - tb1 >= 2:
            return SetOutcome.PLAYER2
        return SetOutcome.UNDECIDED

    if p1 > p2:
        return SetOutcome.PLAYER1
    if p2 > p1:
        return SetOutcome.PLAYER2
    return SetOutcome.UNDECIDED


def check_set(
    score: SetScore, index: int, rules: TennisRules
) -> Optional[Tuple[ScoreFailure, str]]:
    """Strict legality check for a set whose game fields are both filled in.

    Returns ``None`` for a legal, completed set, otherwise the failure kind
    and a message.
    """
    label = f"Set #{index + 1}"
    try:
        p1 = parse_game_count(score.player1_games)
        p2 = parse_game_count(score.player2_games)
    except ScoreParseError:
        return ScoreFailure.NON_NUMERIC_SCORE, f"{label} games must be integers."
    if p1 is None or p2 is None:
        return ScoreFailure.INCOMPLETE_SET, f"{label} needs both game counts."

    if not (0 <= p1 <= rules.max_games and 0 <= p2 <= rules.max_games):
        return (
            ScoreFailure.OUT_OF_RANGE_SCORE,
            f"{label} games must be between 0 and {rules.max_games}.",
        )

    g = rules.games_per_set
    if _is_tiebreak_set(p1, p2, rules):
        target = rules.tiebreak_target(index)
        try:
            tb1 = parse_tiebreak_count(score.player1_tiebreak)
            tb2 = parse_tiebreak_count(score.player2_tiebreak)
        except ScoreParseError:
            tb1 = tb2 = None
        if tb1 is None or tb2 is None:
            return (
                ScoreFailure.MISSING_TIEBREAK,
                f"{label} is {g}-{g} and needs both tiebreak scores.",
            )
        if tb1 < 0 or tb2 < 0:
            return ScoreFailure.OUT_OF_RANGE_SCORE, f"{label} tiebreak scores must be >= 0."
        if max(tb1, tb2) < target or abs(tb1 - tb2) < 2:
            return (
                ScoreFailure.INVALID_TIEBREAK,
                f"{label} tiebreak needs {target}+ points with a 2 point margin"
                f" (got {tb1}-{tb2}).",
            )
        return None

    if p1 == p2:
        return ScoreFailure.ILLEGAL_GAME_COMBINATION, f"{label} cannot be a tie."

    hi, lo = max(p1, p2), min(p1, p2)
    if hi == g and lo <= g - 2:
        return None
    if hi == g + 1 and lo == g - 1:
        return None
    if hi == g + 1 and lo == g:
        return (
            ScoreFailure.ILLEGAL_GAME_COMBINATION,
            f"{label} {hi}-{lo} must be entered as {g}-{g} with a tiebreak.",
        )
    if hi < g:
        return (
            ScoreFailure.INCOMPLETE_SET,
            f"{label} ended before either side reached {g} games.",
        )
    return ScoreFailure.ILLEGAL_GAME_COMBINATION, f"{label} {hi}-{lo} is not a valid score."


def format_set(score: SetScore, index: int, rules: TennisRules) -> Optional[str]:
    p1 = parse_lenient(score.player1_games)
    p2 = parse_lenient(score.player2_games)
    if p1 is None or p2 is None:
        return None

    text = f"{p1}-{p2}"
    g = rules.games_per_set
    # 7-6 is the usual rendering of a set won in a tiebreak
    if _is_tiebreak_set(p1, p2, rules) or sorted((p1, p2)) == [g, g + 1]:
        tb1 = parse_lenient(score.player1_tiebreak) or 0
        tb2 = parse_lenient(score.player2_tiebreak) or 0
        if tb1 > 0 or tb2 > 0:
            text += f"({tb1}-{tb2})"
    return text
