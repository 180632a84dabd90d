"""Season data storage and retrieval."""

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from league.models.leg import Leg, LegResult, Season
from league.models.player import Player
from league.models.standings import SeasonStandings
from league.processor.exceptions import SeasonDataError
from league.processor.standings import build_season_standings

logger = logging.getLogger(__name__)


class SeasonResultsManager:
    """Manages season data stored as JSON files in a directory."""

    def __init__(self, data_dir: str | Path):
        """
        Initialize the results manager.

        Args:
            data_dir: Directory for storing season data
        """
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def season_file(self) -> Path:
        return self.data_dir / "season.json"

    @property
    def legs_file(self) -> Path:
        return self.data_dir / "legs.json"

    @property
    def players_file(self) -> Path:
        return self.data_dir / "players.json"

    def _leg_results_file(self, leg_id: str) -> Path:
        """Get path to results file for a leg."""
        return self.data_dir / f"leg_{leg_id}_results.json"

    def _write_json(self, path: Path, data: dict | list) -> None:
        with path.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, default=str)

    def _read_json(self, path: Path) -> dict | list | None:
        if not path.exists():
            return None
        with path.open(encoding="utf-8") as f:
            return json.load(f)

    def save_season(self, season: Season) -> None:
        """Save season details."""
        self._write_json(self.season_file, season.model_dump(mode="json"))

    def load_season(self) -> Season:
        """
        Load season details.

        Raises:
            SeasonDataError: season.json is missing or invalid
        """
        data = self._read_json(self.season_file)
        if data is None:
            raise SeasonDataError(f"Season file not found: {self.season_file}")
        try:
            return Season.model_validate(data)
        except ValidationError as e:
            raise SeasonDataError(f"Invalid season file {self.season_file}: {e}") from e

    def save_legs(self, legs: list[Leg]) -> None:
        """Save all legs of the season."""
        self._write_json(self.legs_file, [leg.model_dump(mode="json") for leg in legs])

    def load_legs(self) -> list[Leg]:
        """Load all legs, or empty list if not found."""
        data = self._read_json(self.legs_file) or []
        return [Leg.model_validate(leg) for leg in data]

    def save_players(self, players: list[Player]) -> None:
        """Save the store's players."""
        self._write_json(
            self.players_file,
            [p.model_dump(exclude={"display_name"}) for p in players],
        )

    def load_players(self) -> list[Player]:
        """Load players, or empty list if not found."""
        data = self._read_json(self.players_file) or []
        return [Player.model_validate(p) for p in data]

    def save_leg_results(self, leg_id: str, results: list[LegResult]) -> None:
        """
        Save results for a leg, replacing any stored results.

        Args:
            leg_id: Leg ID
            results: Results for the leg
        """
        self._write_json(
            self._leg_results_file(leg_id),
            [r.model_dump(mode="json") for r in results],
        )
        logger.info(f"Saved {len(results)} results for leg {leg_id}")

    def load_leg_results(self, leg_id: str) -> list[LegResult]:
        """Load results for a leg, or empty list if not found."""
        data = self._read_json(self._leg_results_file(leg_id)) or []
        return [LegResult.model_validate(r) for r in data]

    def load_all_results(self, legs: list[Leg] | None = None) -> list[LegResult]:
        """
        Load results for every leg.

        Args:
            legs: Legs to load (defaults to all stored legs)

        Returns:
            Combined list of leg results
        """
        if legs is None:
            legs = self.load_legs()

        results: list[LegResult] = []
        for leg in legs:
            leg_results = self.load_leg_results(leg.leg_id)
            if leg_results:
                logger.debug(f"Loaded {len(leg_results)} results for leg {leg.leg_id}")
            results.extend(leg_results)
        return results

    def get_previous_leg(self, leg_id: str) -> Leg | None:
        """Get the leg played in the round before the given leg."""
        legs = sorted(self.load_legs(), key=lambda leg: leg.round_number)
        for previous, leg in zip(legs, legs[1:], strict=False):
            if leg.leg_id == leg_id:
                return previous
        return None

    def build_current_standings(self) -> SeasonStandings:
        """
        Build current season standings from all stored data.

        Returns:
            Current season standings
        """
        season = self.load_season()
        legs = self.load_legs()
        completed_legs = [leg for leg in legs if leg.is_completed]

        last_updated = datetime.now(UTC).strftime("%Y-%m-%d %H:%M UTC")

        return build_season_standings(
            season,
            legs,
            self.load_players(),
            self.load_all_results(completed_legs),
            last_updated,
        )
