"""Tests for leg result entry."""

import pytest

from league.models.leg import Leg, LegResult
from league.models.player import Player
from league.processor.exceptions import InvalidLegResultsError, LeagueError
from league.processor.leg_entry import (
    build_result_sheet,
    default_participation,
    record_leg_result,
    validate_leg_results,
)


class TestRecordLegResult:
    """Tests for record_leg_result function."""

    def test_points_calculated(self):
        """Test points are 3 per win and 1 per draw."""
        result = record_leg_result("p1", "L1", wins=2, draws=1, losses=1)

        assert result.points == 7
        assert result.participated is True

    def test_did_not_play_zeroed(self):
        """Test did-not-play clears all counts."""
        result = record_leg_result(
            "p1", "L1", wins=3, draws=1, losses=0, participated=False
        )

        assert result.wins == 0
        assert result.draws == 0
        assert result.losses == 0
        assert result.points == 0
        assert result.participated is False


class TestDefaultParticipation:
    """Tests for default_participation function."""

    def test_played_last_leg(self):
        """Test players who played last leg default to playing."""
        previous = [LegResult(player_id="p1", leg_id="L1", wins=1)]
        assert default_participation("p1", previous) is True

    def test_sat_out_last_leg(self):
        """Test players who sat out last leg default to did-not-play."""
        previous = [LegResult(player_id="p1", leg_id="L1", participated=False)]
        assert default_participation("p1", previous) is False

    def test_no_previous_result(self):
        """Test new players default to playing."""
        assert default_participation("p1", []) is True
        previous = [LegResult(player_id="p2", leg_id="L1", participated=False)]
        assert default_participation("p1", previous) is True


class TestBuildResultSheet:
    """Tests for build_result_sheet function."""

    def test_existing_results_kept(self, sample_players):
        """Test stored results are used as they are."""
        existing = [LegResult(player_id="p1", leg_id="L2", wins=4)]

        sheet = build_result_sheet(sample_players, "L2", existing)

        alice = next(r for r in sheet if r.player_id == "p1")
        assert alice.points == 12
        assert len(sheet) == len(sample_players)

    def test_missing_players_defaulted(self, sample_players):
        """Test players without results get blank rows with default participation."""
        previous = [
            LegResult(player_id="p2", leg_id="L1", participated=False),
            LegResult(player_id="p3", leg_id="L1", wins=2),
        ]

        sheet = build_result_sheet(sample_players, "L2", [], previous)

        by_player = {r.player_id: r for r in sheet}
        assert by_player["p2"].participated is False
        assert by_player["p3"].participated is True
        assert by_player["p3"].points == 0
        assert all(r.leg_id == "L2" for r in sheet)

    def test_results_for_other_legs_ignored(self):
        """Test existing results from another leg are not reused."""
        players = [Player(player_id="p1", name="Alice")]
        existing = [LegResult(player_id="p1", leg_id="L1", wins=4)]

        sheet = build_result_sheet(players, "L2", existing)

        assert sheet[0].leg_id == "L2"
        assert sheet[0].points == 0


class TestValidateLegResults:
    """Tests for validate_leg_results function."""

    @pytest.fixture
    def open_leg(self):
        return Leg(leg_id="L4", round_number=4, status="in_progress")

    def test_valid_results(self, open_leg):
        """Test a normal submission passes."""
        results = [
            record_leg_result("p1", "L4", wins=2, losses=1),
            record_leg_result("p2", "L4", participated=False),
        ]

        validate_leg_results(open_leg, results)

    def test_no_results(self, open_leg):
        """Test an empty submission is rejected."""
        with pytest.raises(InvalidLegResultsError, match="No player results"):
            validate_leg_results(open_leg, [])

    def test_nobody_played(self, open_leg):
        """Test a submission where everyone sat out is rejected."""
        results = [
            record_leg_result("p1", "L4", participated=False),
            record_leg_result("p2", "L4", participated=False),
        ]

        with pytest.raises(InvalidLegResultsError, match="At least one player"):
            validate_leg_results(open_leg, results)

    def test_player_with_no_games(self, open_leg, sample_players):
        """Test players marked as playing with no games are named."""
        results = [
            record_leg_result("p1", "L4", wins=1),
            record_leg_result("p2", "L4"),
            record_leg_result("p4", "L4"),
        ]

        with pytest.raises(InvalidLegResultsError) as exc_info:
            validate_leg_results(open_leg, results, sample_players)

        assert exc_info.value.player_ids == ["p2", "p4"]
        assert "Ben Blake, Dan Drake" in str(exc_info.value)

    def test_player_with_no_games_named_by_id(self, open_leg):
        """Test offenders fall back to their IDs without a player list."""
        results = [record_leg_result("p9", "L4")]

        with pytest.raises(InvalidLegResultsError, match="p9"):
            validate_leg_results(open_leg, results)

    def test_completed_leg(self, sample_legs):
        """Test results for a completed leg are rejected."""
        results = [record_leg_result("p1", "L1", wins=3)]

        with pytest.raises(InvalidLegResultsError, match="already completed"):
            validate_leg_results(sample_legs[0], results)

    def test_error_is_league_error(self, open_leg):
        """Test the validation error shares the project base class."""
        with pytest.raises(LeagueError):
            validate_leg_results(open_leg, [])
