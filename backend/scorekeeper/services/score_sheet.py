"""Mutable score sheet for one match being edited.

All derived values are recomputed from scratch after every edit through the
pure functions in ``live``, ``validation`` and ``outcome``.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..scoring import init_rules
from ..scoring.common import (
    SCORE_FIELDS,
    RawEntry,
    SetScore,
    Side,
    TerminationMode,
    empty_sets,
)
from .formatting import format_score
from .live import LiveState, derive_live_state
from .outcome import (
    ExistingScore,
    MatchDescriptor,
    OutcomeResult,
    OutcomeSink,
    log_outcome_sink,
    submit_match_outcome,
)
from .termination import TerminationOverride
from .validation import ValidationResult, validate_score

logger = logging.getLogger(__name__)

FIELD_ALIASES = {
    "player1Games": "player1_games",
    "player2Games": "player2_games",
    "player1Tiebreak": "player1_tiebreak",
    "player2Tiebreak": "player2_tiebreak",
}


def _as_text(value: RawEntry) -> str:
    if value is None:
        return ""
    return str(value)


class ScoreSheet:
    def __init__(self, match: MatchDescriptor, rules=None) -> None:
        self.match = match
        self.rules = rules if rules is not None else init_rules("tennis")
        self.sets: list[SetScore] = empty_sets(self.rules.max_sets)
        self.termination = TerminationOverride()
        self.submitted = False
        if match.existing_score is not None:
            self._prefill(match.existing_score)

    def _prefill(self, existing: ExistingScore) -> None:
        for index, recorded in enumerate(existing.sets[: self.rules.max_sets]):
            self.sets[index] = SetScore(
                index=index,
                player1_games=_as_text(recorded.player1_games),
                player2_games=_as_text(recorded.player2_games),
                player1_tiebreak=_as_text(recorded.player1_tiebreak),
                player2_tiebreak=_as_text(recorded.player2_tiebreak),
            )

        if existing.retired_player_id:
            retired = self.match.side_of(existing.retired_player_id)
            if retired is None:
                logger.warning(
                    "Ignoring retired player %r: not a participant of match %s",
                    existing.retired_player_id,
                    self.match.id,
                )
            else:
                self.termination.set_mode(TerminationMode.RETIRED)
                self.termination.choose_winner(retired.other)
        elif existing.walkover_winner_id:
            winner = self.match.side_of(existing.walkover_winner_id)
            if winner is None:
                logger.warning(
                    "Ignoring walkover winner %r: not a participant of match %s",
                    existing.walkover_winner_id,
                    self.match.id,
                )
            else:
                self.termination.set_mode(TerminationMode.WALKOVER)
                self.termination.choose_winner(winner)

    def load_sets(self, entries) -> None:
        """Replace the whole sheet, e.g. from a client that keeps its own copy.

        ``entries`` are objects with the four score attributes. Extra entries
        beyond the match length are ignored.
        """
        self._ensure_open()
        sets = empty_sets(self.rules.max_sets)
        for index, entry in enumerate(list(entries)[: self.rules.max_sets]):
            for attr in SCORE_FIELDS:
                setattr(sets[index], attr, getattr(entry, attr, ""))
        self.sets = sets

    def _ensure_open(self) -> None:
        if self.submitted:
            raise ValueError("score sheet has already been submitted")

    def apply_edit(self, set_index: int, field: str, value: RawEntry) -> LiveState:
        """Store a raw entry and return the recomputed live state."""
        self._ensure_open()
        if self.termination.active:
            raise ValueError(
                f"score entry is disabled while the match is marked {self.termination.mode.value}"
            )
        if not 0 <= set_index < len(self.sets):
            raise ValueError(f"set index must be between 0 and {len(self.sets) - 1}")
        attr = FIELD_ALIASES.get(field, field)
        if attr not in SCORE_FIELDS:
            raise ValueError(f"unknown score field '{field}'")

        setattr(self.sets[set_index], attr, value)
        logger.debug("match %s set %d %s=%r", self.match.id, set_index, attr, value)
        return self.live_state()

    def live_state(self) -> LiveState:
        return derive_live_state(self.sets, self.rules)

    def set_termination_mode(self, mode: TerminationMode) -> None:
        self._ensure_open()
        self.termination.set_mode(mode)

    def toggle_retired(self) -> None:
        self._ensure_open()
        self.termination.toggle(TerminationMode.RETIRED)

    def toggle_walkover(self) -> None:
        self._ensure_open()
        self.termination.toggle(TerminationMode.WALKOVER)

    def choose_winner(self, side: Optional[Side]) -> None:
        self._ensure_open()
        self.termination.choose_winner(side)

    def validate(self) -> ValidationResult:
        if self.termination.active:
            return ValidationResult.bypassed()
        return validate_score(self.sets, self.rules)

    def score_text(self) -> str:
        if self.termination.active:
            return self.termination.score_text or ""
        return format_score(self.sets, self.rules)

    def submit(self, sink: OutcomeSink = log_outcome_sink) -> OutcomeResult:
        """Emit the outcome to ``sink``. The sheet is cleared once emitted."""
        self._ensure_open()
        result = submit_match_outcome(
            self.match, self.sets, self.rules, self.termination, sink=sink
        )
        if result.ok:
            self.sets = empty_sets(self.rules.max_sets)
            self.termination = TerminationOverride()
            self.submitted = True
        return result
