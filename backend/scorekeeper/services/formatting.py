from __future__ import annotations

from typing import Optional, Sequence

from ..scoring import engine_for
from ..scoring.common import SetGames, SetScore
from ..scoring.parsing import parse_lenient
from .live import estimate_sets_to_show, resolve_set_outcomes


def _visible(sets: Sequence[SetScore], rules, sets_to_show: Optional[int]):
    if sets_to_show is None:
        sets_to_show = estimate_sets_to_show(resolve_set_outcomes(sets, rules), rules)
    return list(sets)[:sets_to_show]


def format_score(
    sets: Sequence[SetScore], rules, *, sets_to_show: Optional[int] = None
) -> str:
    """Render the visible sets, e.g. ``"6-4, 6-6(7-5)"``.

    Sets without both game counts are left out. No legality checks."""
    engine = engine_for(rules)
    parts = []
    for index, score in enumerate(_visible(sets, rules, sets_to_show)):
        text = engine.format_set(score, index, rules)
        if text is not None:
            parts.append(text)
    return ", ".join(parts)


def collect_set_games(
    sets: Sequence[SetScore], rules, *, sets_to_show: Optional[int] = None
) -> list[SetGames]:
    """Numeric game counts of the visible sets; tiebreak points are dropped."""
    games = []
    for score in _visible(sets, rules, sets_to_show):
        p1 = parse_lenient(score.player1_games)
        p2 = parse_lenient(score.player2_games)
        if p1 is None or p2 is None:
            continue
        games.append(SetGames(player1_games=p1, player2_games=p2))
    return games
