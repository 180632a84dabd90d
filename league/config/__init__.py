"""Configuration loading and settings."""

from league.config.loader import (
    load_players_from_csv,
    load_players_from_json,
    save_players_to_json,
)
from league.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "load_players_from_csv",
    "load_players_from_json",
    "save_players_to_json",
]
