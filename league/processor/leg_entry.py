"""Leg result entry for tournament organisers."""

from collections.abc import Iterable

from league.models.leg import Leg, LegResult, calculate_points
from league.models.player import Player
from league.processor.exceptions import InvalidLegResultsError


def record_leg_result(
    player_id: str,
    leg_id: str,
    wins: int = 0,
    draws: int = 0,
    losses: int = 0,
    participated: bool = True,
) -> LegResult:
    """
    Build a leg result with points calculated from wins and draws.

    A player who did not play gets zero for everything.

    Args:
        player_id: Player ID
        leg_id: Leg ID
        wins: Matches won
        draws: Matches drawn
        losses: Matches lost
        participated: Whether the player played the leg

    Returns:
        LegResult ready to be stored
    """
    if not participated:
        wins = draws = losses = 0

    return LegResult(
        player_id=player_id,
        leg_id=leg_id,
        wins=wins,
        draws=draws,
        losses=losses,
        points=calculate_points(wins, draws),
        participated=participated,
    )


def default_participation(
    player_id: str,
    previous_leg_results: Iterable[LegResult],
) -> bool:
    """
    Default "played" flag for a player in a new leg.

    Players who sat out the previous leg default to did-not-play.
    """
    for result in previous_leg_results:
        if result.player_id == player_id:
            return result.participated
    return True


def build_result_sheet(
    players: Iterable[Player],
    leg_id: str,
    existing_results: Iterable[LegResult] = (),
    previous_leg_results: Iterable[LegResult] = (),
) -> list[LegResult]:
    """
    Build the per-player rows an organiser edits for a leg.

    Args:
        players: Players to show on the sheet
        leg_id: Leg being entered
        existing_results: Results already stored for this leg
        previous_leg_results: Results from the previous leg of the season

    Returns:
        One LegResult per player, existing results kept as they are
    """
    existing = {r.player_id: r for r in existing_results if r.leg_id == leg_id}
    previous = list(previous_leg_results)

    sheet: list[LegResult] = []
    for player in players:
        if player.player_id in existing:
            sheet.append(existing[player.player_id])
            continue

        sheet.append(
            record_leg_result(
                player.player_id,
                leg_id,
                participated=default_participation(player.player_id, previous),
            )
        )

    return sheet


def validate_leg_results(
    leg: Leg,
    results: list[LegResult],
    players: Iterable[Player] = (),
) -> None:
    """
    Check a leg's results can be saved.

    Args:
        leg: Leg the results belong to
        results: Results being submitted
        players: Players used to name offenders (IDs are used otherwise)

    Raises:
        InvalidLegResultsError: No results, nobody played, a player marked
            as playing has no games, or the leg is already completed
    """
    if not results:
        raise InvalidLegResultsError("No player results to save")

    participating = [r for r in results if r.participated]
    if not participating:
        raise InvalidLegResultsError("At least one player must participate in the leg")

    no_games = [
        r.player_id for r in participating if r.wins + r.draws + r.losses == 0
    ]
    if no_games:
        names = {p.player_id: p.name for p in players}
        listed = ", ".join(names.get(player_id, player_id) for player_id in no_games)
        raise InvalidLegResultsError(
            f"Players marked as participating have no games played: {listed}",
            player_ids=no_games,
        )

    if leg.is_completed:
        raise InvalidLegResultsError(f"Leg {leg.leg_id} is already completed")
