"""Score player predictions against race results."""

import logging

from mxfantasy.models.player import (
    WILDCARD_MAX_POSITION,
    WILDCARD_MIN_POSITION,
    Player,
)
from mxfantasy.models.result import RaceResult
from mxfantasy.models.standings import ScoreBreakdown

logger = logging.getLogger(__name__)

FIRST_PLACE_POINTS = 25
SECOND_PLACE_POINTS = 23
THIRD_PLACE_POINTS = 21
WILDCARD_POINTS = 50


def score_breakdown(player: Player, result: RaceResult) -> ScoreBreakdown:
    """
    Work out the points a player earns from each prediction.

    Only exact name matches score. The wildcard also needs a position in
    the 5-20 range that exists in the results.

    Args:
        player: Player with predictions
        result: Actual race result

    Returns:
        ScoreBreakdown with points per rule
    """
    first_place = FIRST_PLACE_POINTS if player.first_place == result.rider_at(1) else 0
    second_place = (
        SECOND_PLACE_POINTS if player.second_place == result.rider_at(2) else 0
    )
    third_place = THIRD_PLACE_POINTS if player.third_place == result.rider_at(3) else 0

    wildcard = 0
    if WILDCARD_MIN_POSITION <= player.wildcard_position <= WILDCARD_MAX_POSITION:
        wildcard_rider = result.rider_at(player.wildcard_position)
        if wildcard_rider is not None and wildcard_rider == player.wildcard_rider:
            wildcard = WILDCARD_POINTS

    return ScoreBreakdown(
        first_place=first_place,
        second_place=second_place,
        third_place=third_place,
        wildcard=wildcard,
    )


def score_player(player: Player, result: RaceResult) -> int:
    """Total points for a player's predictions."""
    return score_breakdown(player, result).total


def apply_scores(players: list[Player], result: RaceResult) -> list[Player]:
    """
    Set each player's score from the race result.

    Args:
        players: Players to score (updated in place)
        result: Actual race result

    Returns:
        The same players, now scored
    """
    for player in players:
        breakdown = score_breakdown(player, result)
        logger.debug(f"{player.name} scored {breakdown.model_dump()}")
        player.score = breakdown.total

    return players
