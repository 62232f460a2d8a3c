"""Scoring rules for the supported racket sports."""

import importlib
from types import ModuleType
from typing import Any, Dict, Optional

from . import pickleball, tennis

SUPPORTED_SPORTS = (tennis.SPORT_ID, pickleball.SPORT_ID)


def get_engine(sport_id: str) -> ModuleType:
    """Return the rules module for ``sport_id``."""
    if sport_id not in SUPPORTED_SPORTS:
        raise ValueError(f"unsupported sport '{sport_id}'")
    return importlib.import_module(f"{__name__}.{sport_id}")


def engine_for(rules: Any) -> ModuleType:
    return get_engine(rules.sport)


def init_rules(sport_id: str, config: Optional[Dict] = None):
    return get_engine(sport_id).init_rules(config)


__all__ = [
    "SUPPORTED_SPORTS",
    "engine_for",
    "get_engine",
    "init_rules",
    "pickleball",
    "tennis",
]
