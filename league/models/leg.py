"""Season, leg and leg result data models."""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

LegStatus = Literal["scheduled", "in_progress", "completed"]
SeasonStatus = Literal["active", "completed"]

# Points awarded per match result
POINTS_PER_WIN = 3
POINTS_PER_DRAW = 1


def calculate_points(wins: int, draws: int) -> int:
    """Points for a leg: 3 per win, 1 per draw, 0 per loss."""
    return wins * POINTS_PER_WIN + draws * POINTS_PER_DRAW


class Leg(BaseModel):
    """A single round of a league season."""

    leg_id: str = Field(..., description="Leg ID from the data store")
    name: str = Field(default="")
    round_number: int = Field(..., ge=1, description="Position within the season")
    status: LegStatus = Field(default="scheduled")

    @property
    def is_completed(self) -> bool:
        """Only completed legs count towards standings."""
        return self.status == "completed"


class LegResult(BaseModel):
    """One player's outcome in one leg."""

    player_id: str
    leg_id: str
    wins: int = Field(default=0, ge=0)
    draws: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    points: int | None = Field(
        default=None,
        ge=0,
        description="Stored points; derived from wins and draws when omitted",
    )
    participated: bool = Field(
        default=True,
        description="False when entered into the leg but did not play",
    )

    @model_validator(mode="after")
    def _derive_points(self) -> "LegResult":
        if self.points is None:
            self.points = calculate_points(self.wins, self.draws)
        return self


class Season(BaseModel):
    """A league season: an ordered set of legs sharing a best-N policy."""

    season_id: str
    name: str = Field(default="")
    total_legs: int = Field(default=1, ge=1, description="Planned season length")
    best_legs_count: int = Field(
        ..., ge=1, description="Number of top-scoring legs that count"
    )
    status: SeasonStatus = Field(default="active")
