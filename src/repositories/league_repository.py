"""Read helpers for league results using SQLAlchemy."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, selectinload

from domain.common import (
    FixtureResult,
    FrameResult,
    FrameWinner,
    PlayerInfo,
    SeasonInfo,
    TeamInfo,
)
from models import Base, Fixture, Player, Season, Team


def ensure_league_schema(engine: Engine) -> None:
    """Create the league tables and their indexes if they do not exist."""
    Base.metadata.create_all(bind=engine)


def fetch_season(session: Session, season_id: int) -> SeasonInfo:
    season = session.get(Season, season_id)
    if season is None:
        raise ValueError(f"season_id={season_id} not found")
    return SeasonInfo(
        season_id=season.id,
        name=season.name,
        start_date=season.start_date,
        end_date=season.end_date,
    )


def fetch_season_fixtures(session: Session, season_id: int) -> list[FixtureResult]:
    """Fetch played fixtures for a season in deterministic chronological order."""
    statement = (
        select(Fixture)
        .where(Fixture.season_id == season_id)
        .options(selectinload(Fixture.frames))
        .order_by(Fixture.match_date, Fixture.id)
    )

    fixtures: list[FixtureResult] = []
    for fixture in session.scalars(statement):
        if not isinstance(fixture.match_date, datetime):
            raise ValueError(
                f"fixture_id={fixture.id} has invalid match_date={fixture.match_date!r}"
            )
        if not fixture.frames:
            continue

        fixtures.append(
            FixtureResult(
                fixture_id=fixture.id,
                match_date=fixture.match_date,
                home_team_id=fixture.home_team_id,
                away_team_id=fixture.away_team_id,
                season_id=fixture.season_id,
                division_id=fixture.division_id,
                frames=tuple(
                    FrameResult(
                        number=frame.number,
                        home_player_id=frame.home_player_id,
                        away_player_id=frame.away_player_id,
                        winner=FrameWinner(frame.winner),
                        eight_ball=frame.eight_ball,
                    )
                    for frame in fixture.frames
                ),
            )
        )

    return fixtures


def fetch_players(session: Session, season_id: int | None = None) -> list[PlayerInfo]:
    statement = select(Player).order_by(Player.id)
    if season_id is not None:
        statement = statement.where(Player.season_id == season_id)
    return [
        PlayerInfo(player_id=player.id, name=player.full_name, team_id=player.team_id)
        for player in session.scalars(statement)
    ]


def fetch_teams(session: Session, season_id: int | None = None) -> list[TeamInfo]:
    statement = select(Team).order_by(Team.id)
    if season_id is not None:
        statement = statement.where(Team.season_id == season_id)
    return [
        TeamInfo(team_id=team.id, name=team.name, division_id=team.division_id)
        for team in session.scalars(statement)
    ]


def find_player_by_name(session: Session, name: str, season_id: int | None = None) -> PlayerInfo | None:
    """Look up a player by case-insensitive full name."""
    full_name = func.trim(Player.first_name + " " + Player.last_name)
    statement = select(Player).where(func.lower(full_name) == name.strip().lower()).order_by(Player.id)
    if season_id is not None:
        statement = statement.where(Player.season_id == season_id)
    player = session.scalars(statement).first()
    if player is None:
        return None
    return PlayerInfo(player_id=player.id, name=player.full_name, team_id=player.team_id)


__all__ = [
    "ensure_league_schema",
    "fetch_players",
    "fetch_season",
    "fetch_season_fixtures",
    "fetch_teams",
    "find_player_by_name",
]
