"""Data models for league standings."""

from league.models.leg import (
    POINTS_PER_DRAW,
    POINTS_PER_WIN,
    Leg,
    LegResult,
    Season,
    calculate_points,
)
from league.models.player import ANONYMOUS_NAME, Player, PlayerRegistry
from league.models.standings import (
    ROUND_SIZES,
    LegScore,
    MatchResult,
    MatchRound,
    PlayerStanding,
    SeasonStandings,
    TiebreakerInfo,
    TiebreakerStep,
    Top8Match,
)

__all__ = [  # noqa: RUF022
    # Player models
    "Player",
    "PlayerRegistry",
    "ANONYMOUS_NAME",
    # Season and leg models
    "Leg",
    "LegResult",
    "Season",
    "POINTS_PER_WIN",
    "POINTS_PER_DRAW",
    "calculate_points",
    # Standings models
    "LegScore",
    "PlayerStanding",
    "SeasonStandings",
    "TiebreakerInfo",
    "TiebreakerStep",
    "Top8Match",
    "MatchRound",
    "MatchResult",
    "ROUND_SIZES",
]
