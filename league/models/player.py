"""Player data model."""

from typing import Literal

from pydantic import BaseModel, Field, computed_field

Visibility = Literal["public", "private"]

ANONYMOUS_NAME = "Anonymous"


class Player(BaseModel):
    """A player registered at a store."""

    player_id: str = Field(..., description="Player ID from the data store")
    name: str = Field(..., description="Player's display name")
    visibility: Visibility = Field(
        default="public",
        description="Private players are shown as Anonymous on public pages",
    )

    @computed_field
    @property
    def display_name(self) -> str:
        """Name shown on public standings."""
        if self.visibility == "private":
            return ANONYMOUS_NAME
        return self.name


class PlayerRegistry(BaseModel):
    """Collection of all players in a store."""

    players: list[Player] = Field(default_factory=list)

    def get_by_id(self, player_id: str) -> Player | None:
        """Find a player by ID."""
        for player in self.players:
            if player.player_id == player_id:
                return player
        return None

    def get_by_name(self, name: str) -> Player | None:
        """Find a player by name (case-insensitive partial match)."""
        name_lower = name.lower()
        for player in self.players:
            if name_lower in player.name.lower():
                return player
        return None

    @property
    def public_players(self) -> list[Player]:
        """All players with public visibility."""
        return [p for p in self.players if p.visibility == "public"]
