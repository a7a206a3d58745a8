"""Leaderboard ranking."""

from mxfantasy.models.player import Player
from mxfantasy.models.standings import Leaderboard


def rank_players(players: list[Player], podium_size: int = 3) -> Leaderboard:
    """
    Rank scored players.

    Higher score ranks first. On equal score the lower wildcard position
    ranks first; players equal on both keep their original order.

    Args:
        players: Scored players
        podium_size: Maximum number of players on the podium

    Returns:
        Leaderboard with players in rank order
    """
    ranked = sorted(players, key=lambda p: (-p.score, p.wildcard_position))
    return Leaderboard(players=ranked, podium_size=podium_size)
