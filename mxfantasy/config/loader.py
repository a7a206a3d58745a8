"""Load race results from a text file."""

import logging
from pathlib import Path

from mxfantasy.exceptions import LoadError
from mxfantasy.models.result import RaceResult

logger = logging.getLogger(__name__)


def load_race_results(results_path: str | Path) -> RaceResult:
    """
    Load race results from a text file.

    The file holds one rider name per line in finishing order, so line 1 is
    the winner. Names are trimmed; blank lines still occupy a position.

    Args:
        results_path: Path to the results file

    Returns:
        RaceResult mapping finishing position to rider name

    Raises:
        LoadError: If the file is missing or cannot be read
    """
    results_path = Path(results_path)

    try:
        with results_path.open(encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read race results from {results_path}: {e}")
        raise LoadError(results_path, e) from e

    # One rider per line; form feeds and other separators stay in the name
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    result = RaceResult.from_lines(lines)
    logger.info(f"Loaded {result.rider_count} positions from {results_path}")
    return result
