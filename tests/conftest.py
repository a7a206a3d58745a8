"""Pytest fixtures for motocross fantasy league tests."""

from collections.abc import Callable

import pytest

from mxfantasy.models import RaceResult


class ScriptedInput:
    """Stand-in for input() that replays canned answers and records prompts."""

    def __init__(self, answers: list[str]):
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answers.pop(0)


@pytest.fixture
def scripted_input() -> Callable[[list[str]], ScriptedInput]:
    """Factory for scripted console input."""
    return ScriptedInput


@pytest.fixture
def race_result() -> RaceResult:
    """Race result with a gap between 3rd and 7th."""
    return RaceResult(positions={1: "Alice", 2: "Bob", 3: "Cara", 7: "Dex"})


@pytest.fixture
def full_race_result() -> RaceResult:
    """Twenty rider race result."""
    riders = [
        "Eli Tomac",
        "Chase Sexton",
        "Jett Lawrence",
        "Cooper Webb",
        "Hunter Lawrence",
        "Aaron Plessinger",
        "Justin Barcia",
        "Jason Anderson",
        "Ken Roczen",
        "Dylan Ferrandis",
        "Malcolm Stewart",
        "Justin Cooper",
        "Christian Craig",
        "Dean Wilson",
        "Shane McElrath",
        "Joey Savatgy",
        "Vince Friese",
        "Benny Bloss",
        "Colt Nichols",
        "Justin Hill",
    ]
    return RaceResult.from_lines(riders)
