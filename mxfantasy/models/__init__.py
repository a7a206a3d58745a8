"""Data models for the motocross fantasy league."""

from mxfantasy.models.player import (
    WILDCARD_MAX_POSITION,
    WILDCARD_MIN_POSITION,
    Player,
)
from mxfantasy.models.result import RaceResult
from mxfantasy.models.standings import Leaderboard, ScoreBreakdown

__all__ = [  # noqa: RUF022
    # Result models
    "RaceResult",
    # Player models
    "Player",
    "WILDCARD_MIN_POSITION",
    "WILDCARD_MAX_POSITION",
    # Standings models
    "Leaderboard",
    "ScoreBreakdown",
]
