"""Output generation for season standings."""

import json
import logging
from pathlib import Path

from league.models.standings import PlayerStanding, SeasonStandings
from league.processor.tiebreakers import format_tiebreaker_info

logger = logging.getLogger(__name__)


def generate_standings_output(
    season_standings: SeasonStandings,
    output_dir: str | Path,
) -> Path:
    """
    Generate JSON output file for season standings.

    Args:
        season_standings: Ranked season standings
        output_dir: Output directory

    Returns:
        Path to generated JSON file
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    season = season_standings.season
    output_data = {
        "season_id": season.season_id,
        "season_name": season.name,
        "status": season.status,
        "best_legs_count": season.best_legs_count,
        "total_legs": season.total_legs,
        "is_provisional": season_standings.is_provisional,
        "last_updated": season_standings.last_updated,
        "legs": [
            {
                "leg_id": leg.leg_id,
                "name": leg.name,
                "round_number": leg.round_number,
            }
            for leg in season_standings.completed_legs
        ],
        "standings": [
            _standing_to_dict(s, season_standings)
            for s in season_standings.standings
        ],
    }

    output_file = output_dir / f"season_{season.season_id}_standings.json"
    with output_file.open("w", encoding="utf-8") as f:
        json.dump(output_data, f, indent=2, default=str)

    logger.info(f"Wrote standings for season {season.season_id} to {output_file}")
    return output_file


def _standing_to_dict(
    standing: PlayerStanding,
    season_standings: SeasonStandings,
) -> dict:
    """Convert a player standing to a dictionary for JSON output."""
    return {
        "rank": standing.rank,
        "player_id": standing.player_id,
        "player_name": standing.display_name,
        "total_points": standing.total_points,
        "total_wins": standing.total_wins,
        "total_draws": standing.total_draws,
        "total_losses": standing.total_losses,
        "legs_played": standing.legs_played,
        "leg_scores": {
            leg.leg_id: {
                "display": standing.get_leg_display(leg.leg_id),
                "is_best": standing.is_best_leg(leg.leg_id),
            }
            for leg in season_standings.completed_legs
        },
        "tiebreaker": format_tiebreaker_info(standing.tiebreaker),
    }
