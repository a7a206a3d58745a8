"""Collect player predictions from the console."""

import logging
import re
from collections.abc import Callable

from mxfantasy.exceptions import InputFormatError
from mxfantasy.models.player import (
    WILDCARD_MAX_POSITION,
    WILDCARD_MIN_POSITION,
    Player,
)

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")

EMPTY_WILDCARD_MESSAGE = (
    f"Wildcard position cannot be empty. Please enter a number between "
    f"{WILDCARD_MIN_POSITION} and {WILDCARD_MAX_POSITION}."
)
NOT_A_NUMBER_MESSAGE = "Invalid input. Please enter a valid number."
OUT_OF_RANGE_MESSAGE = (
    f"Invalid range. Please enter a number between "
    f"{WILDCARD_MIN_POSITION} and {WILDCARD_MAX_POSITION}."
)


def parse_wildcard_position(raw: str) -> int:
    """
    Parse a wildcard position entry.

    Args:
        raw: Text typed by the player

    Returns:
        Wildcard position between 5 and 20

    Raises:
        InputFormatError: If the entry is empty, not an integer, or out of range
    """
    if not raw:
        raise InputFormatError(EMPTY_WILDCARD_MESSAGE)

    if not _INTEGER_PATTERN.fullmatch(raw):
        raise InputFormatError(NOT_A_NUMBER_MESSAGE)

    position = int(raw)
    if not WILDCARD_MIN_POSITION <= position <= WILDCARD_MAX_POSITION:
        raise InputFormatError(OUT_OF_RANGE_MESSAGE)

    return position


def prompt_wildcard_position(
    input_func: InputFunc = input,
    output_func: OutputFunc = print,
) -> int:
    """Prompt until the player enters a valid wildcard position."""
    while True:
        raw = input_func(
            f"Enter your wildcard position "
            f"({WILDCARD_MIN_POSITION}-{WILDCARD_MAX_POSITION}): "
        )
        try:
            return parse_wildcard_position(raw)
        except InputFormatError as e:
            logger.debug(f"Rejected wildcard position {raw!r}")
            output_func(str(e))


def collect_player(
    player_number: int,
    input_func: InputFunc = input,
    output_func: OutputFunc = print,
) -> Player:
    """
    Prompt one player for their predictions.

    Args:
        player_number: 1-based player number, used for the player name
        input_func: Callable that shows a prompt and returns the typed line
        output_func: Callable used for messages

    Returns:
        Player with predictions and a zero score
    """
    output_func(f"\nPlayer {player_number}: Enter your predictions.")

    first_place = input_func("Enter your 1st place rider: ")
    second_place = input_func("Enter your 2nd place rider: ")
    third_place = input_func("Enter your 3rd place rider: ")
    wildcard_position = prompt_wildcard_position(input_func, output_func)
    wildcard_rider = input_func("Enter your wildcard rider: ")

    return Player(
        name=f"Player {player_number}",
        first_place=first_place,
        second_place=second_place,
        third_place=third_place,
        wildcard_position=wildcard_position,
        wildcard_rider=wildcard_rider,
    )


def collect_predictions(
    player_count: int = 3,
    input_func: InputFunc = input,
    output_func: OutputFunc = print,
) -> list[Player]:
    """Collect predictions from each player in turn."""
    return [
        collect_player(number, input_func, output_func)
        for number in range(1, player_count + 1)
    ]
