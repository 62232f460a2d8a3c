from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..scoring import engine_for
from ..scoring.common import ScoreFailure, SetScore
from ..scoring.parsing import is_blank
from .live import estimate_sets_to_show, resolve_set_outcomes


@dataclass(frozen=True)
class ValidationResult:
    ok: bool
    failure: Optional[ScoreFailure] = None
    set_index: Optional[int] = None
    detail: Optional[str] = None
    completed_sets: int = 0
    skipped: bool = False

    @classmethod
    def bypassed(cls) -> "ValidationResult":
        """Retired and walkover results are not checked against the score."""
        return cls(ok=True, skipped=True)

    @classmethod
    def success(cls, completed_sets: int) -> "ValidationResult":
        return cls(ok=True, completed_sets=completed_sets)

    @classmethod
    def rejected(
        cls,
        failure: ScoreFailure,
        detail: str,
        *,
        set_index: Optional[int] = None,
        completed_sets: int = 0,
    ) -> "ValidationResult":
        return cls(
            ok=False,
            failure=failure,
            set_index=set_index,
            detail=detail,
            completed_sets=completed_sets,
        )


def validate_score(
    sets: Sequence[SetScore], rules, *, sets_to_show: Optional[int] = None
) -> ValidationResult:
    """Submit-time legality check over the visible sets.

    Rules:
    - Only the first ``sets_to_show`` sets are considered (derived from the
      live set outcomes when not given)
    - A set with a blank game field has not been entered yet and is skipped
    - Every entered set must be a legal, finished set for the sport
    - At least ``rules.sets_to_win`` sets must be finished

    Never mutates ``sets``. The first failure found is returned.
    """
    engine = engine_for(rules)
    if sets_to_show is None:
        sets_to_show = estimate_sets_to_show(resolve_set_outcomes(sets, rules), rules)

    completed = 0
    for index in range(min(sets_to_show, len(sets))):
        score = sets[index]
        if is_blank(score.player1_games) or is_blank(score.player2_games):
            continue
        problem = engine.check_set(score, index, rules)
        if problem is not None:
            failure, detail = problem
            return ValidationResult.rejected(
                failure, detail, set_index=index, completed_sets=completed
            )
        completed += 1

    if completed == 0:
        return ValidationResult.rejected(
            ScoreFailure.NO_SETS_ENTERED, "At least one set is required."
        )
    if completed < rules.sets_to_win:
        return ValidationResult.rejected(
            ScoreFailure.INSUFFICIENT_COMPLETED_SETS,
            f"At least {rules.sets_to_win} completed sets are required.",
            completed_sets=completed,
        )
    return ValidationResult.success(completed)
