"""Race result data model."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, Field, computed_field


class RaceResult(BaseModel):
    """Finishing order of a single race."""

    model_config = ConfigDict(frozen=True)

    positions: dict[int, str] = Field(
        default_factory=dict,
        description="Finishing position (1-based) -> rider name",
    )

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "RaceResult":
        """Build a result where line N holds the rider in position N."""
        return cls(
            positions={
                position: rider.strip()
                for position, rider in enumerate(lines, start=1)
            }
        )

    @computed_field
    @property
    def rider_count(self) -> int:
        """Number of classified positions."""
        return len(self.positions)

    def rider_at(self, position: int) -> str | None:
        """Get the rider who finished in a position, if any."""
        return self.positions.get(position)
