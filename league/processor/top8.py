"""Top 8 playoff seeding and bracket progression."""

import logging

from league.models.standings import PlayerStanding, Top8Match
from league.processor.exceptions import NotEnoughPlayersError

logger = logging.getLogger(__name__)

TOP8_SIZE = 8

# Quarter-final ordinal -> (higher seed, lower seed)
QUARTER_FINAL_SEEDINGS = {
    1: (1, 8),
    2: (2, 7),
    3: (3, 6),
    4: (4, 5),
}

# Semi-final ordinal -> quarter-final ordinals whose winners meet
SEMI_FINAL_FEEDS = {
    1: (1, 4),
    2: (2, 3),
}

FINAL_FEED = (1, 2)


def seed_quarter_finals(standings: list[PlayerStanding]) -> list[Top8Match]:
    """
    Seed the Top 8 quarter finals: 1v8, 2v7, 3v6, 4v5.

    Seeds follow list order, so unbroken ties are seeded as listed.

    Args:
        standings: Ranked standings, best first

    Returns:
        Four quarter-final matches ordered by ordinal

    Raises:
        NotEnoughPlayersError: Fewer than eight standings given
    """
    if len(standings) < TOP8_SIZE:
        raise NotEnoughPlayersError(
            f"Top 8 needs {TOP8_SIZE} players, only {len(standings)} ranked"
        )

    top8 = standings[:TOP8_SIZE]
    matches = []
    for ordinal, (seed1, seed2) in QUARTER_FINAL_SEEDINGS.items():
        matches.append(
            Top8Match(
                round="qf",
                ordinal=ordinal,
                player1_id=top8[seed1 - 1].player_id,
                player2_id=top8[seed2 - 1].player_id,
                player1_seed=seed1,
                player2_seed=seed2,
            )
        )

    logger.info(f"Seeded {len(matches)} quarter finals")
    return matches


def advance_bracket(matches: list[Top8Match]) -> list[Top8Match]:
    """
    Fill the semi finals and final from the winners of earlier rounds.

    QF1 and QF4 winners meet in SF1, QF2 and QF3 winners in SF2, and the
    semi-final winners meet in the final. A later-round result is kept
    only while its players are unchanged.

    Args:
        matches: Bracket so far; must hold the quarter finals

    Returns:
        Full bracket: quarter finals, semi finals, then the final
    """
    by_round: dict[str, dict[int, Top8Match]] = {"qf": {}, "sf": {}, "final": {}}
    for match in matches:
        by_round[match.round][match.ordinal] = match

    quarter_finals = [by_round["qf"][o] for o in sorted(by_round["qf"])]

    semi_finals = [
        _feed_match("sf", ordinal, by_round["qf"], feeds, by_round["sf"])
        for ordinal, feeds in SEMI_FINAL_FEEDS.items()
    ]
    final = _feed_match(
        "final",
        1,
        {m.ordinal: m for m in semi_finals},
        FINAL_FEED,
        by_round["final"],
    )

    return [*quarter_finals, *semi_finals, final]


def get_champion(matches: list[Top8Match]) -> str | None:
    """Get the winner of the final, if it has been played."""
    for match in matches:
        if match.round == "final":
            return match.winner_id
    return None


def _feed_match(
    round_name: str,
    ordinal: int,
    previous: dict[int, Top8Match],
    feeds: tuple[int, int],
    existing: dict[int, Top8Match],
) -> Top8Match:
    """Build one match from the winners of two earlier matches."""
    source1 = previous.get(feeds[0])
    source2 = previous.get(feeds[1])

    match = Top8Match(
        round=round_name,
        ordinal=ordinal,
        player1_id=source1.winner_id if source1 else None,
        player2_id=source2.winner_id if source2 else None,
        player1_seed=source1.winner_seed if source1 else None,
        player2_seed=source2.winner_seed if source2 else None,
    )

    current = existing.get(ordinal)
    if (
        current is not None
        and current.result is not None
        and match.is_ready
        and (current.player1_id, current.player2_id)
        == (match.player1_id, match.player2_id)
    ):
        match = match.model_copy(update={"result": current.result})
    elif current is not None and current.result is not None:
        logger.info(f"Cleared {round_name}{ordinal} result: players changed")

    return match
