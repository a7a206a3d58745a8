"""Console report formatting."""

from mxfantasy.models.result import RaceResult
from mxfantasy.models.standings import Leaderboard


def format_race_results(result: RaceResult) -> list[str]:
    """Format the loaded results as 'position: rider' lines."""
    lines = ["Race Results:"]
    for position in sorted(result.positions):
        lines.append(f"{position}: {result.positions[position]}")
    return lines


def format_leaderboard(leaderboard: Leaderboard) -> list[str]:
    """Format every player's score, best first."""
    lines = ["\nLeaderboard:"]
    for player in leaderboard.players:
        lines.append(f"{player.name}: {player.score} points")
    return lines


def format_podium(leaderboard: Leaderboard) -> list[str]:
    """Format the podium with 1-based ranks."""
    lines = ["\nPodium:"]
    for rank, player in enumerate(leaderboard.podium, start=1):
        lines.append(f"{rank}. {player.name} with {player.score} points")
    return lines
