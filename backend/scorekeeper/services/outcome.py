"""Submit orchestration: validation, winner resolution, rendering and emission."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from ..scoring.common import (
    ScoreFailure,
    SetGames,
    SetScore,
    Side,
    TerminationMode,
)
from .formatting import collect_set_games, format_score
from .live import estimate_sets_to_show, resolve_match_winner, resolve_set_outcomes
from .termination import TerminationOverride
from .validation import validate_score

logger = logging.getLogger(__name__)


@dataclass
class ExistingScore:
    """A previously recorded result, loaded for administrative correction."""

    sets: List[SetScore] = field(default_factory=list)
    retired_player_id: Optional[str] = None
    walkover_winner_id: Optional[str] = None


@dataclass
class MatchDescriptor:
    id: str
    player1_id: str
    player2_id: str
    player1_name: str = ""
    player2_name: str = ""
    existing_score: Optional[ExistingScore] = None

    def __post_init__(self) -> None:
        if not (self.player1_id or "").strip() or not (self.player2_id or "").strip():
            raise ValueError("both participant ids are required")
        if self.player1_id == self.player2_id:
            raise ValueError("participants must be two different players")

    def participant_id(self, side: Side) -> str:
        return self.player1_id if side is Side.PLAYER1 else self.player2_id

    def participant_name(self, side: Side) -> str:
        return self.player1_name if side is Side.PLAYER1 else self.player2_name

    def side_of(self, player_id: str) -> Optional[Side]:
        if player_id == self.player1_id:
            return Side.PLAYER1
        if player_id == self.player2_id:
            return Side.PLAYER2
        return None


@dataclass(frozen=True)
class MatchOutcome:
    match_id: str
    winner_id: str
    loser_id: str
    score_text: str
    sets: tuple[SetGames, ...]
    termination_mode: TerminationMode
    winner_name: str = ""
    loser_name: str = ""


@dataclass(frozen=True)
class OutcomeResult:
    ok: bool
    outcome: Optional[MatchOutcome] = None
    failure: Optional[ScoreFailure] = None
    set_index: Optional[int] = None
    detail: Optional[str] = None

    @classmethod
    def blocked(
        cls, failure: ScoreFailure, detail: str, set_index: Optional[int] = None
    ) -> "OutcomeResult":
        return cls(ok=False, failure=failure, set_index=set_index, detail=detail)


OutcomeSink = Callable[[MatchOutcome], None]


def log_outcome_sink(outcome: MatchOutcome) -> None:
    """Default sink; deployments replace it with real persistence."""
    logger.info(
        "Match %s recorded: winner=%s loser=%s score=%r mode=%s",
        outcome.match_id,
        outcome.winner_id,
        outcome.loser_id,
        outcome.score_text,
        outcome.termination_mode.value,
    )


def _make_outcome(
    match: MatchDescriptor,
    winner: Side,
    score_text: str,
    sets: Sequence[SetGames],
    mode: TerminationMode,
) -> MatchOutcome:
    loser = winner.other
    return MatchOutcome(
        match_id=match.id,
        winner_id=match.participant_id(winner),
        loser_id=match.participant_id(loser),
        winner_name=match.participant_name(winner),
        loser_name=match.participant_name(loser),
        score_text=score_text,
        sets=tuple(sets),
        termination_mode=mode,
    )


def build_match_outcome(
    match: MatchDescriptor,
    sets: Sequence[SetScore],
    rules,
    termination: Optional[TerminationOverride] = None,
) -> OutcomeResult:
    """Turn a score sheet into a ``MatchOutcome`` or a blocking failure.

    Retirement and walkover skip score validation entirely and take the
    manually chosen winner. Otherwise the sheet must validate and produce a
    match winner. A blank match id always blocks.
    """
    termination = termination or TerminationOverride()

    if termination.active:
        if termination.manual_winner is None:
            return OutcomeResult.blocked(
                ScoreFailure.MISSING_OVERRIDE_WINNER,
                "Select the winner of the retired or walkover match.",
            )
        outcome = _make_outcome(
            match,
            termination.manual_winner,
            termination.score_text or "",
            (),
            termination.mode,
        )
    else:
        outcomes = resolve_set_outcomes(sets, rules)
        sets_to_show = estimate_sets_to_show(outcomes, rules)
        validation = validate_score(sets, rules, sets_to_show=sets_to_show)
        if not validation.ok:
            return OutcomeResult.blocked(
                validation.failure, validation.detail or "", validation.set_index
            )
        winner = resolve_match_winner(outcomes, rules)
        if winner.winner is None:
            return OutcomeResult.blocked(
                ScoreFailure.MATCH_NOT_COMPLETE,
                f"A player must win {rules.sets_to_win} sets.",
            )
        outcome = _make_outcome(
            match,
            winner.winner,
            format_score(sets, rules, sets_to_show=sets_to_show),
            collect_set_games(sets, rules, sets_to_show=sets_to_show),
            TerminationMode.NORMAL,
        )

    if not (match.id or "").strip():
        return OutcomeResult.blocked(ScoreFailure.INVALID_MATCH_ID, "Match id is missing.")
    return OutcomeResult(ok=True, outcome=outcome)


def submit_match_outcome(
    match: MatchDescriptor,
    sets: Sequence[SetScore],
    rules,
    termination: Optional[TerminationOverride] = None,
    *,
    sink: OutcomeSink = log_outcome_sink,
) -> OutcomeResult:
    """Build the outcome and hand it to ``sink`` in a single call."""
    result = build_match_outcome(match, sets, rules, termination)
    if not result.ok:
        logger.debug(
            "Submission for match %r blocked: %s (%s)",
            match.id,
            result.failure.value,
            result.detail,
        )
        return result
    sink(result.outcome)
    return result
