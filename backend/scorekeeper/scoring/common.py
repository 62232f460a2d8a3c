"""Shared value types for the set-based scoring engines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

RawEntry = Union[str, int, None]


class Side(str, Enum):
    PLAYER1 = "player1"
    PLAYER2 = "player2"

    @property
    def other(self) -> "Side":
        return Side.PLAYER2 if self is Side.PLAYER1 else Side.PLAYER1


class SetOutcome(str, Enum):
    PLAYER1 = "player1"
    PLAYER2 = "player2"
    UNDECIDED = "undecided"

    @property
    def side(self) -> Optional[Side]:
        if self is SetOutcome.UNDECIDED:
            return None
        return Side(self.value)


class TerminationMode(str, Enum):
    NORMAL = "normal"
    RETIRED = "retired"
    WALKOVER = "walkover"


class ScoreFailure(str, Enum):
    """Reasons a submission is blocked. Values double as problem codes."""

    NON_NUMERIC_SCORE = "non_numeric_score"
    OUT_OF_RANGE_SCORE = "out_of_range_score"
    MISSING_TIEBREAK = "missing_tiebreak"
    INVALID_TIEBREAK = "invalid_tiebreak"
    ILLEGAL_GAME_COMBINATION = "illegal_game_combination"
    INCOMPLETE_SET = "incomplete_set"
    INSUFFICIENT_MARGIN = "insufficient_margin"
    NO_SETS_ENTERED = "no_sets_entered"
    INSUFFICIENT_COMPLETED_SETS = "insufficient_completed_sets"
    MATCH_NOT_COMPLETE = "match_not_complete"
    MISSING_OVERRIDE_WINNER = "missing_override_winner"
    INVALID_MATCH_ID = "invalid_match_id"


SCORE_FIELDS = (
    "player1_games",
    "player2_games",
    "player1_tiebreak",
    "player2_tiebreak",
)


@dataclass
class SetScore:
    """One set (or pickleball game) as typed into the score sheet.

    Entries are kept raw so that "not yet entered" and "not a number" stay
    distinguishable until the strict validator runs.
    """

    index: int
    player1_games: RawEntry = ""
    player2_games: RawEntry = ""
    player1_tiebreak: RawEntry = ""
    player2_tiebreak: RawEntry = ""


@dataclass(frozen=True)
class SetGames:
    player1_games: int
    player2_games: int


def empty_sets(count: int) -> list[SetScore]:
    return [SetScore(index=i) for i in range(count)]
