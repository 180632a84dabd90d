"""Pytest fixtures for league standings tests."""

import pytest

from league.models import Leg, LegResult, Player, PlayerRegistry, Season


@pytest.fixture
def sample_players() -> list[Player]:
    """Create sample players for testing."""
    return [
        Player(player_id="p1", name="Alice Archer"),
        Player(player_id="p2", name="Ben Blake"),
        Player(player_id="p3", name="Cara Cole", visibility="private"),
        Player(player_id="p4", name="Dan Drake"),
    ]


@pytest.fixture
def player_registry(sample_players) -> PlayerRegistry:
    """Create a player registry with sample players."""
    return PlayerRegistry(players=sample_players)


@pytest.fixture
def sample_legs() -> list[Leg]:
    """Three completed legs and one scheduled leg, in round order."""
    return [
        Leg(leg_id="L1", name="Round 1", round_number=1, status="completed"),
        Leg(leg_id="L2", name="Round 2", round_number=2, status="completed"),
        Leg(leg_id="L3", name="Round 3", round_number=3, status="completed"),
        Leg(leg_id="L4", name="Round 4", round_number=4, status="scheduled"),
    ]


@pytest.fixture
def sample_season() -> Season:
    """A four-leg season counting the best two legs."""
    return Season(
        season_id="s1",
        name="Spring League",
        total_legs=4,
        best_legs_count=2,
    )


@pytest.fixture
def sample_leg_results() -> list[LegResult]:
    """Results for the completed legs of the sample season."""
    return [
        # Alice: 9, 6, 3 -> best two = 15
        LegResult(player_id="p1", leg_id="L1", wins=3, losses=1),
        LegResult(player_id="p1", leg_id="L2", wins=2, losses=2),
        LegResult(player_id="p1", leg_id="L3", wins=1, losses=3),
        # Ben: 7, DNP, 4 -> best two = 11
        LegResult(player_id="p2", leg_id="L1", wins=2, draws=1, losses=1),
        LegResult(player_id="p2", leg_id="L2", participated=False),
        LegResult(player_id="p2", leg_id="L3", wins=1, draws=1, losses=2),
        # Cara: 12 in one leg only
        LegResult(player_id="p3", leg_id="L2", wins=4),
        # Dan never entered
    ]
