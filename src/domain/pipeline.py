"""Season rating report pipeline."""

from __future__ import annotations

from collections.abc import Callable, Collection
from dataclasses import dataclass

from sqlalchemy.orm import Session, sessionmaker

from domain.common import SeasonInfo
from domain.ratings.calculator import RatingParameters
from domain.ratings.summary import SeasonRatings, calculate_season_ratings
from repositories.league_repository import (
    fetch_players,
    fetch_season,
    fetch_season_fixtures,
    fetch_teams,
)


@dataclass(frozen=True)
class SeasonRatingReport:
    """Outcome of rating one season."""

    season: SeasonInfo
    ratings: SeasonRatings
    processed_fixtures: int
    processed_frames: int
    rated_players: int


def compute_season_report(
    *,
    session_factory: sessionmaker[Session],
    season_id: int,
    params: RatingParameters,
    division_ids: Collection[int] | None = None,
    echo: Callable[[str], None] | None = None,
) -> SeasonRatingReport:
    """Load one season's results and rate every player in it."""
    with session_factory() as session:
        season = fetch_season(session, season_id)
        fixtures = fetch_season_fixtures(session, season_id)
        players = fetch_players(session, season_id)
        teams = fetch_teams(session, season_id)

    processed_frames = sum(len(fixture.frames) for fixture in fixtures)
    if echo is not None:
        echo(
            f"season={season.name} "
            f"season_id={season.season_id} "
            f"start_date={season.start_date.isoformat()} "
            f"fixtures={len(fixtures)} "
            f"frames={processed_frames} "
            f"players={len(players)}"
        )

    ratings = calculate_season_ratings(
        fixtures,
        season.start_date,
        params,
        players=players,
        teams=teams,
        division_ids=division_ids,
    )

    if echo is not None:
        echo(
            "completed "
            f"season_id={season.season_id} "
            f"rated_players={len(ratings.summaries)} "
            f"tracked_players={ratings.table.tracked_player_count()} "
            f"max_frames_played={ratings.max_frames_played()}"
        )

    return SeasonRatingReport(
        season=season,
        ratings=ratings,
        processed_fixtures=len(fixtures),
        processed_frames=processed_frames,
        rated_players=len(ratings.summaries),
    )


__all__ = ["SeasonRatingReport", "compute_season_report"]
