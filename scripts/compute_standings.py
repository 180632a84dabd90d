#!/usr/bin/env python3
"""Compute season standings from a local data directory and write JSON output."""

import argparse
import logging
from pathlib import Path

from dotenv import load_dotenv

from league.config import get_settings
from league.models import Season
from league.processor import (
    NotEnoughPlayersError,
    SeasonResultsManager,
    build_season_standings,
    format_tiebreaker_info,
    generate_standings_output,
    seed_quarter_finals,
)

load_dotenv()

logger = logging.getLogger(__name__)


def print_standings(season_standings) -> None:
    """Print the standings table to stdout."""
    legs = season_standings.completed_legs
    header = f"{'#':>3}  {'Player':<24}" + "".join(
        f"{'R' + str(leg.round_number):>6}" for leg in legs
    )
    print(header + f"{'Total':>8}{'Legs':>6}")

    for standing in season_standings.standings:
        cells = ""
        for leg in legs:
            cell = standing.get_leg_display(leg.leg_id)
            if standing.is_best_leg(leg.leg_id):
                cell = f"*{cell}"
            cells += f"{cell:>6}"
        line = (
            f"{standing.rank:>3}  {standing.display_name:<24}{cells}"
            f"{standing.total_points:>8}{standing.legs_played:>6}"
        )
        note = format_tiebreaker_info(standing.tiebreaker)
        if note:
            line += f"  ({note})"
        print(line)


def main():
    """Build standings for the season in the data directory."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Compute league season standings")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.data_dir,
        help="Directory holding season.json, legs.json, players.json and leg results",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=settings.output_dir,
        help="Directory for the standings JSON file",
    )
    parser.add_argument(
        "--best-legs",
        type=int,
        default=None,
        help="Override the season's best legs count",
    )
    parser.add_argument(
        "--top8",
        action="store_true",
        help="Also print the Top 8 quarter-final seeding",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    manager = SeasonResultsManager(args.data_dir)

    if manager.season_file.exists():
        season = manager.load_season()
    else:
        logger.warning(
            f"No season file in {args.data_dir}, using default best legs count"
        )
        season = Season(
            season_id=args.data_dir.name,
            name=args.data_dir.name,
            best_legs_count=settings.default_best_legs_count,
        )

    if args.best_legs is not None:
        season = season.model_copy(update={"best_legs_count": args.best_legs})

    legs = manager.load_legs()
    season_standings = build_season_standings(
        season,
        legs,
        manager.load_players(),
        manager.load_all_results([leg for leg in legs if leg.is_completed]),
    )

    print(f"{season.name} - best {season.best_legs_count} legs", flush=True)
    print_standings(season_standings)

    if args.top8:
        try:
            for match in seed_quarter_finals(season_standings.standings):
                player1 = season_standings.get_by_player_id(match.player1_id)
                player2 = season_standings.get_by_player_id(match.player2_id)
                print(
                    f"QF{match.ordinal}: ({match.player1_seed}) {player1.display_name}"
                    f" vs ({match.player2_seed}) {player2.display_name}"
                )
        except NotEnoughPlayersError as e:
            print(f"Top 8 not seeded: {e}")

    output_file = generate_standings_output(season_standings, args.output_dir)
    print(f"Standings written to {output_file}")


if __name__ == "__main__":
    main()
