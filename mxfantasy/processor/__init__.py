"""Prediction collection, scoring and ranking."""

from mxfantasy.processor.leaderboard import rank_players
from mxfantasy.processor.output import (
    format_leaderboard,
    format_podium,
    format_race_results,
)
from mxfantasy.processor.predictions import (
    collect_player,
    collect_predictions,
    parse_wildcard_position,
    prompt_wildcard_position,
)
from mxfantasy.processor.scoring import apply_scores, score_breakdown, score_player

__all__ = [
    "apply_scores",
    "collect_player",
    "collect_predictions",
    "format_leaderboard",
    "format_podium",
    "format_race_results",
    "parse_wildcard_position",
    "prompt_wildcard_position",
    "rank_players",
    "score_breakdown",
    "score_player",
]
