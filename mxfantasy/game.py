"""Run one fantasy league session in the console."""

import logging
import sys

from mxfantasy.config import Settings, get_settings, load_race_results
from mxfantasy.exceptions import LoadError
from mxfantasy.processor import (
    apply_scores,
    collect_predictions,
    format_leaderboard,
    format_podium,
    format_race_results,
    rank_players,
)
from mxfantasy.processor.predictions import InputFunc, OutputFunc

logger = logging.getLogger(__name__)


def run(
    settings: Settings | None = None,
    input_func: InputFunc = input,
    output_func: OutputFunc = print,
) -> int:
    """
    Play a session: load results, collect predictions, score and report.

    Args:
        settings: League settings (defaults to cached environment settings)
        input_func: Callable that shows a prompt and returns the typed line
        output_func: Callable used for all console output

    Returns:
        Exit status, 0 on success and 1 if the results could not be loaded
    """
    settings = settings or get_settings()

    try:
        race_result = load_race_results(settings.results_file)
    except LoadError as e:
        output_func(f"Error reading {settings.results_file.name} file: {e}")
        return 1

    for line in format_race_results(race_result):
        output_func(line)

    players = collect_predictions(settings.player_count, input_func, output_func)
    apply_scores(players, race_result)
    leaderboard = rank_players(players, podium_size=settings.podium_size)

    if leaderboard.leader is not None:
        logger.info(f"{leaderboard.leader.name} leads with {leaderboard.leader.score}")

    for line in format_leaderboard(leaderboard) + format_podium(leaderboard):
        output_func(line)

    return 0


def main():
    """Main entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run(settings))
