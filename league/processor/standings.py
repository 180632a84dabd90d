"""Season standings calculation."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from league.models.leg import Leg, LegResult, Season
from league.models.player import Player
from league.models.standings import LegScore, PlayerStanding, SeasonStandings
from league.processor.tiebreakers import resolve_ties, sort_standings

logger = logging.getLogger(__name__)


@dataclass
class BestNResult:
    """Totals over a player's counted legs."""

    best_leg_ids: list[str] = field(default_factory=list)
    total_points: int = 0
    total_wins: int = 0
    total_draws: int = 0
    total_losses: int = 0


def calculate_best_n_results(
    leg_scores: dict[str, LegScore],
    best_legs_count: int,
    leg_order: list[str] | None = None,
) -> BestNResult:
    """
    Select a player's best N legs and total them.

    Only legs the player took part in are candidates. Legs are ranked by
    points descending; equal points fall back to leg order (round order)
    ascending.

    Args:
        leg_scores: Leg ID -> recorded score for one player
        best_legs_count: Number of legs that count towards the total
        leg_order: Leg IDs in round order (defaults to leg_scores order)

    Returns:
        BestNResult with the selected legs and their totals
    """
    if leg_order is None:
        leg_order = list(leg_scores)
    position = {leg_id: i for i, leg_id in enumerate(leg_order)}

    candidates = [
        leg_id for leg_id, score in leg_scores.items() if score.participated
    ]
    candidates.sort(
        key=lambda leg_id: (
            -leg_scores[leg_id].counted_points,
            position.get(leg_id, len(position)),
        )
    )

    best_leg_ids = candidates[: max(best_legs_count, 0)]
    best_scores = [leg_scores[leg_id] for leg_id in best_leg_ids]

    return BestNResult(
        best_leg_ids=best_leg_ids,
        total_points=sum(s.counted_points for s in best_scores),
        total_wins=sum(s.wins for s in best_scores),
        total_draws=sum(s.draws for s in best_scores),
        total_losses=sum(s.losses for s in best_scores),
    )


def compute_standings(
    players: Iterable[Player],
    completed_legs: list[Leg],
    leg_results: Iterable[LegResult],
    best_legs_count: int,
) -> list[PlayerStanding]:
    """
    Calculate standings from completed leg results.

    Every player is included, even with no results. Results for legs outside
    completed_legs or for unknown players are ignored.

    Args:
        players: Players in scope (store or season)
        completed_legs: Completed legs in round order
        leg_results: Leg results for the completed legs
        best_legs_count: Number of top-scoring legs that count

    Returns:
        Standings sorted by total points, then legs played
    """
    standings_map: dict[str, PlayerStanding] = {
        player.player_id: PlayerStanding(
            player_id=player.player_id,
            player_name=player.name,
            visibility=player.visibility,
        )
        for player in players
    }

    # Group results by leg
    results_by_leg: dict[str, list[LegResult]] = {}
    leg_ids = {leg.leg_id for leg in completed_legs}
    for result in leg_results:
        if result.leg_id not in leg_ids:
            logger.debug(
                f"Ignoring result for player {result.player_id}: "
                f"leg {result.leg_id} is not completed"
            )
            continue
        results_by_leg.setdefault(result.leg_id, []).append(result)

    for leg in completed_legs:
        for result in results_by_leg.get(leg.leg_id, []):
            standing = standings_map.get(result.player_id)
            if standing is None:
                logger.debug(
                    f"Ignoring result in leg {leg.leg_id}: "
                    f"unknown player {result.player_id}"
                )
                continue

            # Recorded even when the player did not play, so the table can show DNP
            standing.leg_scores[leg.leg_id] = LegScore(
                wins=result.wins,
                draws=result.draws,
                losses=result.losses,
                points=result.points or 0,
                participated=result.participated,
            )

    leg_order = [leg.leg_id for leg in completed_legs]
    standings: list[PlayerStanding] = []

    for standing in standings_map.values():
        best = calculate_best_n_results(
            standing.leg_scores, best_legs_count, leg_order
        )
        standing.best_leg_ids = best.best_leg_ids
        standing.total_points = best.total_points
        standing.total_wins = best.total_wins
        standing.total_draws = best.total_draws
        standing.total_losses = best.total_losses
        # Counted over all completed legs, not just the best N
        standing.legs_played = sum(
            1 for score in standing.leg_scores.values() if score.participated
        )
        standings.append(standing)

    return sort_standings(standings)


def build_season_standings(
    season: Season,
    legs: list[Leg],
    players: Iterable[Player],
    leg_results: Iterable[LegResult],
    last_updated: str | None = None,
) -> SeasonStandings:
    """
    Build ranked standings for a season.

    Args:
        season: Season with the best-N policy
        legs: All legs of the season, any status
        players: Players in the season's store
        leg_results: Leg results for any of the season's legs
        last_updated: Timestamp of last update

    Returns:
        SeasonStandings with ranks and tie resolution applied
    """
    completed_legs = sorted(
        (leg for leg in legs if leg.is_completed),
        key=lambda leg: leg.round_number,
    )

    standings = compute_standings(
        players,
        completed_legs,
        leg_results,
        season.best_legs_count,
    )
    ranked = resolve_ties(standings, season.best_legs_count)

    logger.info(
        f"Built standings for season {season.season_id}: "
        f"{len(ranked)} players over {len(completed_legs)} completed legs"
    )

    return SeasonStandings(
        season=season,
        completed_legs=completed_legs,
        standings=ranked,
        last_updated=last_updated,
    )
