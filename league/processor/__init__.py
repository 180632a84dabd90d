"""Standings calculation and supporting processing."""

from league.processor.exceptions import (
    InvalidLegResultsError,
    LeagueError,
    NotEnoughPlayersError,
    SeasonDataError,
)
from league.processor.leg_entry import (
    build_result_sheet,
    default_participation,
    record_leg_result,
    validate_leg_results,
)
from league.processor.output import generate_standings_output
from league.processor.season_results import SeasonResultsManager
from league.processor.standings import (
    build_season_standings,
    calculate_best_n_results,
    compute_standings,
)
from league.processor.tiebreakers import (
    format_tiebreaker_info,
    resolve_ties,
    sort_standings,
)
from league.processor.top8 import (
    advance_bracket,
    get_champion,
    seed_quarter_finals,
)

__all__ = [
    "InvalidLegResultsError",
    "LeagueError",
    "NotEnoughPlayersError",
    "SeasonDataError",
    "SeasonResultsManager",
    "advance_bracket",
    "build_result_sheet",
    "build_season_standings",
    "calculate_best_n_results",
    "compute_standings",
    "default_participation",
    "format_tiebreaker_info",
    "generate_standings_output",
    "get_champion",
    "record_leg_result",
    "resolve_ties",
    "seed_quarter_finals",
    "sort_standings",
    "validate_leg_results",
]
