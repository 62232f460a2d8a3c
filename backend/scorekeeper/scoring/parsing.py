"""Parsing of raw game and tiebreak entries.

Every engine reads score fields through these helpers so that blank and
non-numeric input is treated the same way everywhere.
"""

from typing import Optional

from .common import RawEntry


class ScoreParseError(ValueError):
    """Raised when a present score entry is not an integer."""

    def __init__(self, raw: RawEntry) -> None:
        super().__init__(f"score entry {raw!r} is not an integer")
        self.raw = raw


def is_blank(raw: RawEntry) -> bool:
    if raw is None:
        return True
    if isinstance(raw, str):
        return not raw.strip()
    return False


def _parse(raw: RawEntry) -> Optional[int]:
    if is_blank(raw):
        return None
    # bool is a subclass of int
    if isinstance(raw, bool):
        raise ScoreParseError(raw)
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    sign = text[:1] if text[:1] in "+-" else ""
    digits = text[len(sign):]
    if not digits.isdigit() or not digits.isascii():
        raise ScoreParseError(raw)
    try:
        return int(text)
    except ValueError as exc:
        # digit strings past the interpreter's int conversion limit
        raise ScoreParseError(raw) from exc


def parse_game_count(raw: RawEntry) -> Optional[int]:
    """Return the game count, ``None`` when blank.

    Raises ``ScoreParseError`` for non-numeric text. Range is not checked
    here; that belongs to the validator.
    """
    return _parse(raw)


def parse_tiebreak_count(raw: RawEntry) -> Optional[int]:
    """Return the tiebreak points, ``None`` when blank."""
    return _parse(raw)


def parse_lenient(raw: RawEntry) -> Optional[int]:
    """Live-feedback variant: anything unparseable counts as not entered."""
    try:
        return _parse(raw)
    except ScoreParseError:
        return None
