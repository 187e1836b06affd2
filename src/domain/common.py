"""Shared types for league results and player ratings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class FrameWinner(str, Enum):
    """Which side took a frame."""

    NONE = "none"
    HOME = "home"
    AWAY = "away"


@dataclass(frozen=True)
class FrameResult:
    """One frame inside a fixture, as recorded on the score card."""

    number: int
    home_player_id: int | None
    away_player_id: int | None
    winner: FrameWinner = FrameWinner.NONE
    eight_ball: bool = False


@dataclass(frozen=True)
class FixtureResult:
    """Canonical fixture payload used by rating calculators."""

    fixture_id: int
    match_date: datetime
    home_team_id: int
    away_team_id: int
    frames: tuple[FrameResult, ...] = ()
    season_id: int | None = None
    division_id: int | None = None


@dataclass(frozen=True)
class PlayerFrame:
    """One frame seen from a single player's side."""

    player_id: int
    opponent_id: int | None
    fixture_id: int
    frame_number: int
    match_date: datetime
    week_number: int
    won: bool
    eight_ball: bool = False

    @property
    def sort_key(self) -> tuple[datetime, int, int]:
        return (self.match_date, self.fixture_id, self.frame_number)


@dataclass(frozen=True)
class PlayerInfo:
    player_id: int
    name: str
    team_id: int | None = None


@dataclass(frozen=True)
class TeamInfo:
    team_id: int
    name: str
    division_id: int | None = None


@dataclass(frozen=True)
class SeasonInfo:
    season_id: int
    name: str
    start_date: date
    end_date: date | None = None


__all__ = [
    "FixtureResult",
    "FrameResult",
    "FrameWinner",
    "PlayerFrame",
    "PlayerInfo",
    "SeasonInfo",
    "TeamInfo",
]
