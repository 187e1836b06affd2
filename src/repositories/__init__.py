"""Database repository helpers."""

from repositories.league_repository import (
    ensure_league_schema,
    fetch_players,
    fetch_season,
    fetch_season_fixtures,
    fetch_teams,
    find_player_by_name,
)

__all__ = [
    "ensure_league_schema",
    "fetch_players",
    "fetch_season",
    "fetch_season_fixtures",
    "fetch_teams",
    "find_player_by_name",
]
