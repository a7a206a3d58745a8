"""Score breakdown and leaderboard data models."""

from pydantic import BaseModel, Field, computed_field

from mxfantasy.models.player import Player


class ScoreBreakdown(BaseModel):
    """Points earned from each prediction rule."""

    first_place: int = Field(default=0, ge=0)
    second_place: int = Field(default=0, ge=0)
    third_place: int = Field(default=0, ge=0)
    wildcard: int = Field(default=0, ge=0)

    @computed_field
    @property
    def total(self) -> int:
        """Sum of all rule points."""
        return self.first_place + self.second_place + self.third_place + self.wildcard


class Leaderboard(BaseModel):
    """Players ordered by score, best first."""

    players: list[Player] = Field(default_factory=list)
    podium_size: int = Field(default=3, ge=1)

    @property
    def leader(self) -> Player | None:
        """Get the current leader."""
        if self.players:
            return self.players[0]
        return None

    @property
    def podium(self) -> list[Player]:
        """Top ranked players, at most podium_size of them."""
        return self.players[: min(self.podium_size, len(self.players))]
