"""Internal application services (pure helpers, no I/O)."""

from .validation import ValidationResult, validate_score
from .formatting import collect_set_games, format_score
from .live import (
    LiveState,
    derive_live_state,
    estimate_sets_to_show,
    resolve_match_winner,
)
from .termination import TerminationOverride
from .outcome import (
    ExistingScore,
    MatchDescriptor,
    MatchOutcome,
    OutcomeResult,
    build_match_outcome,
    log_outcome_sink,
    submit_match_outcome,
)
from .score_sheet import ScoreSheet

__all__ = [
    "validate_score",
    "ValidationResult",
    "format_score",
    "collect_set_games",
    "LiveState",
    "derive_live_state",
    "estimate_sets_to_show",
    "resolve_match_winner",
    "TerminationOverride",
    "ExistingScore",
    "MatchDescriptor",
    "MatchOutcome",
    "OutcomeResult",
    "build_match_outcome",
    "log_outcome_sink",
    "submit_match_outcome",
    "ScoreSheet",
]
