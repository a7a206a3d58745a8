"""Player prediction data model."""

from pydantic import BaseModel, ConfigDict, Field

WILDCARD_MIN_POSITION = 5
WILDCARD_MAX_POSITION = 20


class Player(BaseModel):
    """A player and their predictions for one race."""

    model_config = ConfigDict(validate_assignment=True)

    name: str = Field(..., description="Player display name")
    first_place: str = Field(..., description="Predicted race winner")
    second_place: str = Field(..., description="Predicted 2nd place rider")
    third_place: str = Field(..., description="Predicted 3rd place rider")
    wildcard_position: int = Field(
        ...,
        ge=WILDCARD_MIN_POSITION,
        le=WILDCARD_MAX_POSITION,
        description="Finishing position picked for the wildcard (5-20)",
    )
    wildcard_rider: str = Field(..., description="Predicted wildcard rider")
    score: int = Field(default=0, ge=0)  # Set after scoring
