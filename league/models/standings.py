"""Season standings data models."""

from typing import Literal

from pydantic import BaseModel, Field, computed_field, model_validator

from league.models.leg import Leg, Season
from league.models.player import ANONYMOUS_NAME, Visibility


class LegScore(BaseModel):
    """A player's recorded result for a single leg."""

    wins: int = Field(default=0, ge=0)
    draws: int = Field(default=0, ge=0)
    losses: int = Field(default=0, ge=0)
    points: int = Field(default=0, ge=0)
    participated: bool = Field(default=False)

    @property
    def counted_points(self) -> int:
        """Points that count towards standings (0 if the player did not play)."""
        return self.points if self.participated else 0

    @property
    def display(self) -> str:
        """Table cell text for this leg."""
        if not self.participated:
            return "DNP"
        return str(self.points)


class TiebreakerStep(BaseModel):
    """One step in the audit trail of a tie resolution."""

    step: int = Field(..., ge=1)
    description: str
    result: str


class TiebreakerInfo(BaseModel):
    """Outcome of resolving a tie group."""

    tie_group_size: int = Field(..., ge=2)
    steps: list[TiebreakerStep] = Field(default_factory=list)
    final_ranking: list[str] = Field(
        default_factory=list,
        description="Player IDs in resolved order",
    )
    adjusted_points: dict[str, int] = Field(
        default_factory=dict,
        description="Player ID -> total at the deciding step",
    )
    tie_broken: bool = Field(default=False)
    legs_removed: int = Field(default=0, ge=0)

    @computed_field
    @property
    def summary(self) -> str:
        """Operator-facing description of how the tie was resolved."""
        if not self.tie_broken:
            return "Tie requires playoff or player agreement"
        noun = "leg" if self.legs_removed == 1 else "legs"
        return f"Tie broken by removing {self.legs_removed} lowest scoring {noun}"


class PlayerStanding(BaseModel):
    """Season standing for a player."""

    player_id: str
    player_name: str
    visibility: Visibility = Field(default="public")
    total_wins: int = Field(default=0, ge=0)
    total_draws: int = Field(default=0, ge=0)
    total_losses: int = Field(default=0, ge=0)
    total_points: int = Field(default=0, ge=0)
    legs_played: int = Field(
        default=0,
        ge=0,
        description="Completed legs the player took part in (not only counted ones)",
    )
    best_leg_ids: list[str] = Field(
        default_factory=list,
        description="Legs counted towards the total, best first",
    )
    leg_scores: dict[str, LegScore] = Field(
        default_factory=dict,
        description="Leg ID -> recorded score",
    )
    rank: int = Field(default=0, ge=0)  # Set by tie resolution
    tiebreaker: TiebreakerInfo | None = Field(default=None)

    @computed_field
    @property
    def display_name(self) -> str:
        """Name shown on public standings."""
        if self.visibility == "private":
            return ANONYMOUS_NAME
        return self.player_name

    def is_best_leg(self, leg_id: str) -> bool:
        """Check whether a leg counts towards the player's total."""
        return leg_id in self.best_leg_ids

    def get_leg_display(self, leg_id: str) -> str:
        """Get table cell text for a specific leg."""
        if leg_id in self.leg_scores:
            return self.leg_scores[leg_id].display
        return "-"


class SeasonStandings(BaseModel):
    """Ranked standings for a season."""

    season: Season
    completed_legs: list[Leg] = Field(
        default_factory=list,
        description="Completed legs in round order",
    )
    standings: list[PlayerStanding] = Field(default_factory=list)
    last_updated: str | None = Field(default=None)

    @computed_field
    @property
    def is_provisional(self) -> bool:
        """Standings are provisional until the season is complete."""
        return (
            self.season.status != "completed"
            or len(self.completed_legs) < self.season.total_legs
        )

    @property
    def leader(self) -> PlayerStanding | None:
        """Get the current leader."""
        if self.standings:
            return self.standings[0]
        return None

    def get_by_player_id(self, player_id: str) -> PlayerStanding | None:
        """Find standing by player ID."""
        for standing in self.standings:
            if standing.player_id == player_id:
                return standing
        return None

    def top(self, count: int) -> list[PlayerStanding]:
        """First `count` standings in rank order."""
        return self.standings[:count]


MatchRound = Literal["qf", "sf", "final"]
MatchResult = Literal["2-0", "2-1", "1-2", "0-2"]

# Matches per Top 8 round
ROUND_SIZES: dict[str, int] = {"qf": 4, "sf": 2, "final": 1}


class Top8Match(BaseModel):
    """A best-of-three match in the season's Top 8 playoff."""

    round: MatchRound
    ordinal: int = Field(..., ge=1)
    player1_id: str | None = None
    player2_id: str | None = None
    player1_seed: int | None = Field(default=None, ge=1, le=8)
    player2_seed: int | None = Field(default=None, ge=1, le=8)
    result: MatchResult | None = None

    @model_validator(mode="after")
    def _check_match(self) -> "Top8Match":
        if self.ordinal > ROUND_SIZES[self.round]:
            raise ValueError(
                f"{self.round} has {ROUND_SIZES[self.round]} matches, "
                f"got ordinal {self.ordinal}"
            )
        if self.result is not None and not self.is_ready:
            raise ValueError("A result needs both players")
        return self

    @property
    def is_ready(self) -> bool:
        """Check both players are known."""
        return self.player1_id is not None and self.player2_id is not None

    @computed_field
    @property
    def winner_id(self) -> str | None:
        """Player 1 wins on 2-0 or 2-1, player 2 on 1-2 or 0-2."""
        if self.result in ("2-0", "2-1"):
            return self.player1_id
        if self.result in ("1-2", "0-2"):
            return self.player2_id
        return None

    @property
    def winner_seed(self) -> int | None:
        """Seed of the winner, if decided."""
        if self.winner_id is None:
            return None
        if self.winner_id == self.player1_id:
            return self.player1_seed
        return self.player2_seed
