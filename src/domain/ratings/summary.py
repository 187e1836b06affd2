"""Season-level player rating summaries."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from math import ceil

from domain.common import FixtureResult, PlayerFrame, PlayerInfo, TeamInfo
from domain.ratings.calculator import RatingBreakdown, RatingParameters, WeightedRatingCalculator
from domain.ratings.weekly import (
    WeeklyRatingSnapshot,
    WeeklyRatingTable,
    build_weekly_ratings,
    player_frames,
)


@dataclass(frozen=True)
class PlayerRatingSummary:
    player_id: int
    player_name: str
    team_id: int | None
    team_name: str
    division_id: int | None
    played: int
    wins: int
    losses: int
    eight_balls: int
    rating: int

    @property
    def win_percentage(self) -> float:
        if self.played <= 0:
            return 0.0
        return self.wins * 100.0 / self.played


def minimum_frames(max_frames_in_season: int, min_frames_percentage: int) -> int:
    """Frames a player needs to appear in the ratings table."""
    if max_frames_in_season <= 0:
        return 0
    return ceil(max_frames_in_season * min_frames_percentage / 100)


@dataclass
class SeasonRatings:
    """Ratings for one season, plus what is needed to explain them."""

    params: RatingParameters
    table: WeeklyRatingTable
    frames_by_player: dict[int, list[PlayerFrame]]
    summaries: list[PlayerRatingSummary] = field(default_factory=list)

    def summary_for(self, player_id: int) -> PlayerRatingSummary | None:
        for summary in self.summaries:
            if summary.player_id == player_id:
                return summary
        return None

    def player_breakdown(self, player_id: int) -> RatingBreakdown:
        """Frame-by-frame breakdown with opponents valued at the week played."""
        calculator = WeightedRatingCalculator(self.params)
        return calculator.calculate(
            self.frames_by_player.get(player_id, []),
            self.table.get_rating,
            player_id=player_id,
        )

    def weekly_history(self, player_id: int) -> list[WeeklyRatingSnapshot]:
        return self.table.history(player_id)

    def max_frames_played(self) -> int:
        return max((len(frames) for frames in self.frames_by_player.values()), default=0)

    def qualified(self, min_frames_percentage: int | None = None) -> list[PlayerRatingSummary]:
        percentage = (
            self.params.min_frames_percentage
            if min_frames_percentage is None
            else min_frames_percentage
        )
        required = minimum_frames(self.max_frames_played(), percentage)
        return [summary for summary in self.summaries if summary.played >= required]


def calculate_season_ratings(
    fixtures: Iterable[FixtureResult],
    season_start: date | datetime,
    params: RatingParameters,
    *,
    players: Iterable[PlayerInfo] | None = None,
    teams: Iterable[TeamInfo] = (),
    division_ids: Collection[int] | None = None,
) -> SeasonRatings:
    """Rate every player appearing in ``fixtures``.

    When ``players`` is given, players missing from it are left out of the
    summaries (they still count as opponents). ``division_ids`` drops players
    whose team plays outside those divisions. Players without a team belong to
    no division and are kept.
    """
    frames_by_player = player_frames(fixtures, season_start)
    table = build_weekly_ratings(frames_by_player, params)
    season = SeasonRatings(params=params, table=table, frames_by_player=frames_by_player)

    player_by_id: Mapping[int, PlayerInfo] | None = None
    if players is not None:
        player_by_id = {player.player_id: player for player in players}
    team_by_id = {team.team_id: team for team in teams}

    summaries: list[PlayerRatingSummary] = []
    for player_id, frames in frames_by_player.items():
        if player_by_id is not None and player_id not in player_by_id:
            continue
        player = player_by_id.get(player_id) if player_by_id is not None else None
        team = team_by_id.get(player.team_id) if player is not None and player.team_id is not None else None

        has_team = player is not None and player.team_id is not None
        if division_ids is not None and has_team and (team is None or team.division_id not in division_ids):
            continue

        wins = sum(1 for frame in frames if frame.won)
        summaries.append(
            PlayerRatingSummary(
                player_id=player_id,
                player_name=player.name if player is not None else str(player_id),
                team_id=player.team_id if player is not None else None,
                team_name=team.name if team is not None else "",
                division_id=team.division_id if team is not None else None,
                played=len(frames),
                wins=wins,
                losses=len(frames) - wins,
                eight_balls=sum(1 for frame in frames if frame.eight_ball),
                rating=season.player_breakdown(player_id).rating,
            )
        )

    summaries.sort(key=lambda summary: (-summary.rating, summary.player_name.lower(), summary.player_id))
    season.summaries = summaries
    return season


__all__ = [
    "PlayerRatingSummary",
    "SeasonRatings",
    "calculate_season_ratings",
    "minimum_frames",
]
