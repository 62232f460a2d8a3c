"""Live (per-keystroke) derivation of set winners, visible sets and match winner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional, Sequence

from ..scoring import engine_for
from ..scoring.common import SetOutcome, SetScore, Side

# Live set winners are a preview only. A live winner may still be rejected by
# validate_score (e.g. 7-6 typed without the 6-6 tiebreak).
LIVE_RESOLUTION_IS_ADVISORY = True


class MatchWinner(NamedTuple):
    winner: Optional[Side]
    loser: Optional[Side]


NO_WINNER = MatchWinner(None, None)


@dataclass(frozen=True)
class LiveState:
    set_outcomes: tuple[SetOutcome, ...]
    sets_to_show: int
    winner: Optional[Side]
    loser: Optional[Side]
    advisory: bool = LIVE_RESOLUTION_IS_ADVISORY


def resolve_set_outcomes(sets: Sequence[SetScore], rules) -> list[SetOutcome]:
    engine = engine_for(rules)
    outcomes = []
    for index in range(rules.max_sets):
        if index < len(sets):
            outcomes.append(engine.resolve_set(sets[index], index, rules))
        else:
            outcomes.append(SetOutcome.UNDECIDED)
    return outcomes


def estimate_sets_to_show(outcomes: Sequence[SetOutcome], rules) -> int:
    """How many set slots should be visible and considered.

    A slot is revealed once every earlier set is decided, and the match stops
    growing once one side has enough sets.
    """
    completed = 0
    wins = {Side.PLAYER1: 0, Side.PLAYER2: 0}
    for outcome in list(outcomes)[: rules.max_sets]:
        if outcome is SetOutcome.UNDECIDED:
            break
        completed += 1
        wins[outcome.side] += 1

    if max(wins.values()) >= rules.sets_to_win:
        return completed
    return min(completed + 1, rules.max_sets)


def resolve_match_winner(outcomes: Sequence[SetOutcome], rules) -> MatchWinner:
    """First side to reach ``rules.sets_to_win`` set wins takes the match."""
    wins = {Side.PLAYER1: 0, Side.PLAYER2: 0}
    for outcome in outcomes:
        side = outcome.side
        if side is None:
            continue
        wins[side] += 1
        if wins[side] >= rules.sets_to_win:
            return MatchWinner(side, side.other)
    return NO_WINNER


def derive_live_state(sets: Sequence[SetScore], rules) -> LiveState:
    outcomes = resolve_set_outcomes(sets, rules)
    winner = resolve_match_winner(outcomes, rules)
    return LiveState(
        set_outcomes=tuple(outcomes),
        sets_to_show=estimate_sets_to_show(outcomes, rules),
        winner=winner.winner,
        loser=winner.loser,
    )
