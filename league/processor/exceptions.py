"""Custom exceptions for standings processing."""


class LeagueError(Exception):
    """Base exception for league errors."""


class NotEnoughPlayersError(LeagueError):
    """Not enough ranked players to seed a playoff."""


class SeasonDataError(LeagueError):
    """Season data is missing or could not be read."""


class InvalidLegResultsError(LeagueError):
    """Leg results were rejected before saving."""

    def __init__(self, message: str, player_ids: list[str] | None = None):
        super().__init__(message)
        self.player_ids = player_ids or []
