"""
Tiebreaker resolution for season standings.

League tiebreaker rules, applied in order:
1. Total points
2. Total legs played
3. Progressive leg removal: drop the lowest counted legs one at a time
   until every tied player has a different total
4. Playoff or player agreement if still tied
"""

import logging

from league.models.standings import PlayerStanding, TiebreakerInfo, TiebreakerStep

logger = logging.getLogger(__name__)

PLAYOFF_RESULT = "Tie requires playoff or player agreement"


def sort_standings(standings: list[PlayerStanding]) -> list[PlayerStanding]:
    """Sort standings by total points, then legs played (both descending)."""
    return sorted(
        standings,
        key=lambda s: (-s.total_points, -s.legs_played),
    )


def resolve_ties(
    standings: list[PlayerStanding],
    best_legs_count: int,
) -> list[PlayerStanding]:
    """
    Rank standings and resolve exact ties.

    Players tied on both total points and legs played form a tie group.
    A broken tie gives the group sequential ranks in resolved order; an
    unbroken tie gives every member the group's first rank.

    Args:
        standings: Standings from compute_standings (not modified)
        best_legs_count: Number of top-scoring legs that count

    Returns:
        Ranked copies of the standings
    """
    ordered = sort_standings(standings)
    ranked: list[PlayerStanding] = []
    rank = 1
    i = 0

    while i < len(ordered):
        group = _find_tie_group(ordered, i)

        if len(group) == 1:
            ranked.append(
                group[0].model_copy(update={"rank": rank, "tiebreaker": None})
            )
        else:
            info = _apply_tiebreakers(group, best_legs_count)
            if info.tie_broken:
                by_id = {s.player_id: s for s in group}
                for offset, player_id in enumerate(info.final_ranking):
                    ranked.append(
                        by_id[player_id].model_copy(
                            update={"rank": rank + offset, "tiebreaker": info}
                        )
                    )
            else:
                ranked.extend(
                    s.model_copy(update={"rank": rank, "tiebreaker": info})
                    for s in group
                )

        rank += len(group)
        i += len(group)

    return ranked


def _find_tie_group(
    standings: list[PlayerStanding],
    start: int,
) -> list[PlayerStanding]:
    """Get the run of players tied with standings[start]."""
    first = standings[start]
    group = [first]

    for standing in standings[start + 1 :]:
        if (
            standing.total_points != first.total_points
            or standing.legs_played != first.legs_played
        ):
            break
        group.append(standing)

    return group


def _adjusted_points(standing: PlayerStanding, legs_to_keep: int) -> int:
    """Total of a player's top `legs_to_keep` played legs."""
    points = sorted(
        (s.points for s in standing.leg_scores.values() if s.participated),
        reverse=True,
    )
    return sum(points[: max(legs_to_keep, 0)])


def _apply_tiebreakers(
    group: list[PlayerStanding],
    best_legs_count: int,
) -> TiebreakerInfo:
    """Apply progressive leg removal to a tie group."""
    first = group[0]
    steps = [
        TiebreakerStep(
            step=1,
            description="Total points and legs played",
            result=(
                f"Tied on {first.total_points} points "
                f"with {first.legs_played} legs played"
            ),
        )
    ]

    adjusted = {s.player_id: s.total_points for s in group}
    max_legs_played = max(s.legs_played for s in group)
    legs_removed = 0
    tie_broken = False

    while not tie_broken and legs_removed < max_legs_played - 1:
        legs_removed += 1
        adjusted = {
            s.player_id: _adjusted_points(
                s, min(best_legs_count, s.legs_played) - legs_removed
            )
            for s in group
        }
        tie_broken = len(set(adjusted.values())) == len(group)

        noun = "leg" if legs_removed == 1 else "legs"
        steps.append(
            TiebreakerStep(
                step=len(steps) + 1,
                description=f"Remove {legs_removed} lowest scoring {noun}",
                result="Tie broken" if tie_broken else "Tie not broken",
            )
        )

    if not tie_broken:
        steps.append(
            TiebreakerStep(
                step=len(steps) + 1,
                description="Playoff or agreement",
                result=PLAYOFF_RESULT,
            )
        )

    final_ranking = [
        s.player_id for s in sorted(group, key=lambda s: -adjusted[s.player_id])
    ]

    logger.info(
        f"Tie between {len(group)} players on {first.total_points} points: "
        + (f"broken after removing {legs_removed} legs" if tie_broken else "unbroken")
    )

    return TiebreakerInfo(
        tie_group_size=len(group),
        steps=steps,
        final_ranking=final_ranking,
        adjusted_points=adjusted,
        tie_broken=tie_broken,
        legs_removed=legs_removed,
    )


def format_tiebreaker_info(info: TiebreakerInfo | None) -> str:
    """Format tiebreaker information for display ("" when there was no tie)."""
    if info is None:
        return ""
    return info.summary
