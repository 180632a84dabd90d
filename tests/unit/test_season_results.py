"""Tests for the season results manager."""

import json
from datetime import UTC, datetime, timedelta

import pytest

from league.models.leg import Leg, LegResult
from league.processor.exceptions import SeasonDataError
from league.processor.season_results import SeasonResultsManager


@pytest.fixture
def manager(tmp_path) -> SeasonResultsManager:
    """Create a results manager in a temporary directory."""
    return SeasonResultsManager(tmp_path / "season")


@pytest.fixture
def populated_manager(
    manager, sample_season, sample_legs, sample_players, sample_leg_results
) -> SeasonResultsManager:
    """Results manager with the sample season stored."""
    manager.save_season(sample_season)
    manager.save_legs(sample_legs)
    manager.save_players(sample_players)
    for leg in sample_legs:
        manager.save_leg_results(
            leg.leg_id, [r for r in sample_leg_results if r.leg_id == leg.leg_id]
        )
    return manager


class TestSeasonResultsManager:
    """Tests for SeasonResultsManager."""

    def test_creates_data_dir(self, tmp_path):
        """Test data directory is created."""
        SeasonResultsManager(tmp_path / "new" / "dir")
        assert (tmp_path / "new" / "dir").is_dir()

    def test_missing_files_load_empty(self, manager):
        """Test missing files give empty lists."""
        assert manager.load_legs() == []
        assert manager.load_players() == []
        assert manager.load_leg_results("L1") == []
        assert manager.load_all_results() == []

    def test_missing_season_raises(self, manager):
        """Test loading a missing season raises SeasonDataError."""
        with pytest.raises(SeasonDataError):
            manager.load_season()

    def test_invalid_season_raises(self, manager):
        """Test an invalid season file raises SeasonDataError."""
        manager.season_file.write_text(json.dumps({"season_id": "s1"}))

        with pytest.raises(SeasonDataError):
            manager.load_season()

    def test_save_and_load(self, populated_manager, sample_season, sample_players):
        """Test stored data loads back."""
        assert populated_manager.load_season() == sample_season
        assert populated_manager.load_players() == sample_players
        assert [leg.leg_id for leg in populated_manager.load_legs()] == [
            "L1",
            "L2",
            "L3",
            "L4",
        ]

        results = populated_manager.load_leg_results("L2")
        assert len(results) == 3
        ben = next(r for r in results if r.player_id == "p2")
        assert ben.participated is False

    def test_save_leg_results_replaces(self, manager):
        """Test saving results for a leg replaces earlier results."""
        manager.save_leg_results("L1", [LegResult(player_id="p1", leg_id="L1", wins=1)])
        manager.save_leg_results("L1", [LegResult(player_id="p2", leg_id="L1", wins=2)])

        results = manager.load_leg_results("L1")
        assert [r.player_id for r in results] == ["p2"]

    def test_get_previous_leg(self, manager):
        """Test previous leg is found by round number."""
        manager.save_legs(
            [
                Leg(leg_id="c", round_number=3),
                Leg(leg_id="a", round_number=1),
                Leg(leg_id="b", round_number=2),
            ]
        )

        assert manager.get_previous_leg("b").leg_id == "a"
        assert manager.get_previous_leg("c").leg_id == "b"
        assert manager.get_previous_leg("a") is None

    def test_build_current_standings(self, populated_manager):
        """Test standings are built from stored data."""
        season_standings = populated_manager.build_current_standings()

        assert season_standings.season.season_id == "s1"
        assert [s.player_id for s in season_standings.standings] == [
            "p1",
            "p3",
            "p2",
            "p4",
        ]
        assert season_standings.last_updated is not None

    def test_last_updated_is_utc(self, populated_manager):
        """Test the snapshot time is the current UTC time."""
        season_standings = populated_manager.build_current_standings()

        stamped = datetime.strptime(
            season_standings.last_updated, "%Y-%m-%d %H:%M UTC"
        ).replace(tzinfo=UTC)
        assert abs(datetime.now(UTC) - stamped) < timedelta(minutes=2)
