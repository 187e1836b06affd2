"""Week-by-week rating table used to value opponents at the time they were played."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date, datetime

from domain.common import FixtureResult, FrameWinner, PlayerFrame
from domain.ratings.calculator import RatingParameters, WeightedRatingCalculator


@dataclass(frozen=True)
class WeeklyRatingSnapshot:
    week_number: int
    rating: int


def season_week_number(match_date: date | datetime, season_start: date | datetime) -> int:
    """Return the season week a match falls in, counting from 1.

    Whole weeks are truncated toward zero, so a match up to six days before
    the season start still lands in week 1 and earlier ones fall below 1.
    """
    days_since_start = (_as_date(match_date) - _as_date(season_start)).days
    return int(days_since_start / 7) + 1


def player_frames(
    fixtures: Iterable[FixtureResult],
    season_start: date | datetime,
) -> dict[int, list[PlayerFrame]]:
    """Split fixtures into per-player frame histories, oldest first."""
    frames_by_player: dict[int, list[PlayerFrame]] = {}
    ordered_fixtures = sorted(
        (fixture for fixture in fixtures if fixture.frames),
        key=lambda fixture: (fixture.match_date, fixture.fixture_id),
    )
    for fixture in ordered_fixtures:
        week_number = season_week_number(fixture.match_date, season_start)

        for frame in sorted(fixture.frames, key=lambda item: item.number):
            if frame.winner == FrameWinner.NONE:
                continue
            sides = (
                (frame.home_player_id, frame.away_player_id, FrameWinner.HOME),
                (frame.away_player_id, frame.home_player_id, FrameWinner.AWAY),
            )
            for player_id, opponent_id, winning_side in sides:
                if player_id is None:
                    continue
                won = frame.winner == winning_side
                frames_by_player.setdefault(player_id, []).append(
                    PlayerFrame(
                        player_id=player_id,
                        opponent_id=opponent_id,
                        fixture_id=fixture.fixture_id,
                        frame_number=frame.number,
                        match_date=fixture.match_date,
                        week_number=week_number,
                        won=won,
                        eight_ball=frame.eight_ball and won,
                    )
                )
    return frames_by_player


class WeeklyRatingTable:
    """Ratings keyed by (player, week), defaulting to the starting rating."""

    def __init__(self, starting_rating: int) -> None:
        self.starting_rating = starting_rating
        self._ratings: dict[tuple[int, int], int] = {}

    def get_rating(self, player_id: int | None, week_number: int) -> int:
        if player_id is None:
            return self.starting_rating
        return self._ratings.get((player_id, week_number), self.starting_rating)

    def set_rating(self, player_id: int, week_number: int, rating: int) -> None:
        self._ratings[(player_id, week_number)] = rating

    def ratings(self) -> dict[tuple[int, int], int]:
        """Return a snapshot of every stored (player, week) rating."""
        return dict(self._ratings)

    def tracked_player_count(self) -> int:
        return len({player_id for player_id, _ in self._ratings})

    @property
    def max_week(self) -> int:
        return max((week for _, week in self._ratings), default=0)

    def history(self, player_id: int) -> list[WeeklyRatingSnapshot]:
        return [
            WeeklyRatingSnapshot(week_number=week, rating=rating)
            for (stored_player_id, week), rating in sorted(self._ratings.items(), key=lambda item: item[0][1])
            if stored_player_id == player_id
        ]


def build_weekly_ratings(
    frames_by_player: Mapping[int, Sequence[PlayerFrame]],
    params: RatingParameters,
) -> WeeklyRatingTable:
    """Build the weekly rating table from week 1 up to the last week played.

    Each pass recomputes every player active so far from their frames up to
    that week, reading opponent ratings from the table as left by earlier
    passes. The result is written for the week itself and as the seed for the
    following week.
    """
    table = WeeklyRatingTable(params.starting_rating)
    calculator = WeightedRatingCalculator(params)

    known_players: set[int] = set(frames_by_player)
    for frames in frames_by_player.values():
        known_players.update(frame.opponent_id for frame in frames if frame.opponent_id is not None)
    for player_id in known_players:
        table.set_rating(player_id, 1, params.starting_rating)

    max_week = max(
        (frame.week_number for frames in frames_by_player.values() for frame in frames),
        default=0,
    )

    for week_number in range(1, max_week + 1):
        previous = table.ratings()

        def opponent_rating_at(opponent_id: int | None, frame_week: int) -> int:
            if opponent_id is None:
                return params.starting_rating
            return previous.get((opponent_id, frame_week), params.starting_rating)

        updates: dict[int, int] = {}
        for player_id, frames in frames_by_player.items():
            frames_to_date = [frame for frame in frames if frame.week_number <= week_number]
            if not frames_to_date:
                continue
            updates[player_id] = calculator.rating(frames_to_date, opponent_rating_at)

        for player_id, rating in updates.items():
            table.set_rating(player_id, week_number, rating)
            table.set_rating(player_id, week_number + 1, rating)

    return table


def _as_date(value: date | datetime) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


__all__ = [
    "WeeklyRatingSnapshot",
    "WeeklyRatingTable",
    "build_weekly_ratings",
    "player_frames",
    "season_week_number",
]
