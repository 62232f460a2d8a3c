"""Retirement / walkover overrides.

A single ``TerminationMode`` replaces separate retired/walkover flags, so both
can never be active at once. Any mode change clears the manually chosen
winner.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..scoring.common import Side, TerminationMode

logger = logging.getLogger(__name__)

SCORE_TEXT = {
    TerminationMode.RETIRED: "Retired",
    TerminationMode.WALKOVER: "Walkover",
}


@dataclass
class TerminationOverride:
    mode: TerminationMode = TerminationMode.NORMAL
    manual_winner: Optional[Side] = None

    @property
    def active(self) -> bool:
        return self.mode is not TerminationMode.NORMAL

    @property
    def score_text(self) -> Optional[str]:
        return SCORE_TEXT.get(self.mode)

    def set_mode(self, mode: TerminationMode) -> None:
        mode = TerminationMode(mode)
        logger.debug("termination mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode
        self.manual_winner = None

    def toggle(self, mode: TerminationMode) -> None:
        """Checkbox behaviour: ticking one mode unticks the other."""
        mode = TerminationMode(mode)
        if mode is TerminationMode.NORMAL:
            raise ValueError("only retired or walkover can be toggled")
        self.set_mode(TerminationMode.NORMAL if self.mode is mode else mode)

    def choose_winner(self, side: Optional[Side]) -> None:
        if not self.active:
            raise ValueError("a winner can only be chosen for a retirement or walkover")
        self.manual_winner = Side(side) if side is not None else None
