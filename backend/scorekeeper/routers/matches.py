# backend/scorekeeper/routers/matches.py
import logging

from fastapi import APIRouter, Depends

from ..config import DEFAULT_SPORT
from ..exceptions import InvalidRules, ScoreRejected, UnsupportedSport
from ..schemas import (
    LivePreviewOut,
    MatchIn,
    MatchOutcomeOut,
    ScorePreviewIn,
    ScoreSubmitIn,
    SetGamesOut,
)
from ..scoring import SUPPORTED_SPORTS, init_rules
from ..scoring.common import SetScore
from ..services import (
    ExistingScore,
    MatchDescriptor,
    MatchOutcome,
    ScoreSheet,
    log_outcome_sink,
)
from ..services.outcome import OutcomeSink

logger = logging.getLogger(__name__)

# Resource-only prefix; versioning is added in main.py
router = APIRouter(prefix="/matches", tags=["matches"])


def get_outcome_sink() -> OutcomeSink:
    """Where accepted results go. Override to persist them."""
    return log_outcome_sink


def _descriptor(mid: str, match: MatchIn) -> MatchDescriptor:
    existing = None
    if match.existing_score is not None:
        existing = ExistingScore(
            sets=[
                SetScore(
                    index=i,
                    player1_games=s.player1_games,
                    player2_games=s.player2_games,
                    player1_tiebreak=s.player1_tiebreak,
                    player2_tiebreak=s.player2_tiebreak,
                )
                for i, s in enumerate(match.existing_score.sets)
            ],
            retired_player_id=match.existing_score.retired_player_id,
            walkover_winner_id=match.existing_score.walkover_winner_id,
        )
    return MatchDescriptor(
        id=mid,
        player1_id=match.player1_id,
        player1_name=match.player1_name,
        player2_id=match.player2_id,
        player2_name=match.player2_name,
        existing_score=existing,
    )


def _load_sheet(mid: str, payload: ScorePreviewIn) -> ScoreSheet:
    sport = (payload.sport or DEFAULT_SPORT).strip().lower()
    if sport not in SUPPORTED_SPORTS:
        raise UnsupportedSport(sport)
    try:
        rules = init_rules(sport, payload.rules)
    except ValueError as exc:
        raise InvalidRules(str(exc)) from exc

    sheet = ScoreSheet(_descriptor(mid, payload.match), rules)
    if payload.sets:
        sheet.load_sets(payload.sets)
    return sheet


def _outcome_out(outcome: MatchOutcome) -> MatchOutcomeOut:
    return MatchOutcomeOut(
        match_id=outcome.match_id,
        winner_id=outcome.winner_id,
        loser_id=outcome.loser_id,
        winner_name=outcome.winner_name,
        loser_name=outcome.loser_name,
        score_text=outcome.score_text,
        sets=[
            SetGamesOut(player1_games=s.player1_games, player2_games=s.player2_games)
            for s in outcome.sets
        ],
        termination_mode=outcome.termination_mode,
    )


# POST /api/v0/matches/{mid}/preview
@router.post("/{mid}/preview", response_model=LivePreviewOut)
async def preview_score(mid: str, payload: ScorePreviewIn) -> LivePreviewOut:
    sheet = _load_sheet(mid, payload)
    state = sheet.live_state()
    match = sheet.match
    return LivePreviewOut(
        set_outcomes=list(state.set_outcomes),
        sets_to_show=state.sets_to_show,
        winner_id=match.participant_id(state.winner) if state.winner else None,
        loser_id=match.participant_id(state.loser) if state.loser else None,
        score_text=sheet.score_text(),
        advisory=state.advisory,
    )


# POST /api/v0/matches/{mid}/result
@router.post("/{mid}/result", response_model=MatchOutcomeOut)
async def submit_result(
    mid: str,
    payload: ScoreSubmitIn,
    sink: OutcomeSink = Depends(get_outcome_sink),
) -> MatchOutcomeOut:
    sheet = _load_sheet(mid, payload)
    if (
        payload.termination_mode is not None
        and payload.termination_mode is not sheet.termination.mode
    ):
        sheet.set_termination_mode(payload.termination_mode)
    if sheet.termination.active and payload.manual_winner is not None:
        sheet.choose_winner(payload.manual_winner)

    result = sheet.submit(sink=sink)
    if not result.ok:
        raise ScoreRejected(result.failure, result.detail, set_index=result.set_index)
    logger.debug(
        "match %s result accepted (%s)",
        mid,
        result.outcome.termination_mode.value,
    )
    return _outcome_out(result.outcome)
