"""Load player lists from CSV or JSON files."""

import csv
import json
from pathlib import Path

from league.models.player import Player, PlayerRegistry


def load_players_from_csv(csv_path: str | Path) -> PlayerRegistry:
    """
    Load players from a CSV file.

    Expected CSV columns:
    - ID
    - Name
    - Visibility (optional, "public" or "private"; defaults to public)

    Args:
        csv_path: Path to the CSV file

    Returns:
        PlayerRegistry containing all valid players
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    players: list[Player] = []

    with csv_path.open(encoding="utf-8") as f:
        reader = csv.DictReader(f)

        for row in reader:
            player_id = (row.get("ID") or "").strip()
            name = (row.get("Name") or "").strip()

            # Skip if missing required fields
            if not player_id or not name:
                continue

            visibility = (row.get("Visibility") or "").strip().lower()
            if visibility not in ("public", "private"):
                visibility = "public"

            players.append(
                Player(player_id=player_id, name=name, visibility=visibility)
            )

    return PlayerRegistry(players=players)


def load_players_from_json(json_path: str | Path) -> PlayerRegistry:
    """
    Load players from a JSON file.

    Args:
        json_path: Path to the JSON file

    Returns:
        PlayerRegistry containing all players
    """
    json_path = Path(json_path)
    if not json_path.exists():
        raise FileNotFoundError(f"JSON file not found: {json_path}")

    with json_path.open(encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, list):
        players = [Player.model_validate(p) for p in data]
        return PlayerRegistry(players=players)

    if isinstance(data, dict) and "players" in data:
        return PlayerRegistry.model_validate(data)

    raise ValueError("Invalid JSON format: expected list or dict with 'players' key")


def save_players_to_json(registry: PlayerRegistry, json_path: str | Path) -> None:
    """
    Save players to a JSON file.

    Args:
        registry: PlayerRegistry to save
        json_path: Path to output JSON file
    """
    json_path = Path(json_path)
    json_path.parent.mkdir(parents=True, exist_ok=True)

    with json_path.open("w", encoding="utf-8") as f:
        json.dump(
            {
                "players": [
                    p.model_dump(exclude={"display_name"}) for p in registry.players
                ]
            },
            f,
            indent=2,
        )
