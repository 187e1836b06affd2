"""Recency-weighted player rating logic."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from domain.common import PlayerFrame

OpponentRatingLookup = Callable[[int | None, int], int]


@dataclass(frozen=True)
class RatingParameters:
    starting_rating: int = 1000
    win_factor: float = 1.25
    loss_factor: float = 0.75
    eight_ball_factor: float = 1.35
    use_eight_ball_factor: bool = True
    base_weight: int = 240
    weight_decrement: int = 4
    min_frames_percentage: int = 60


@dataclass(frozen=True)
class FrameContribution:
    """How much one frame moved a player's rating."""

    frame: PlayerFrame
    opponent_rating: int
    points_earned: int
    weight: int

    @property
    def weighted_value(self) -> int:
        return self.points_earned * self.weight


@dataclass(frozen=True)
class RatingBreakdown:
    player_id: int | None
    contributions: tuple[FrameContribution, ...]
    value_total: int
    weight_total: int
    rating: int

    @property
    def frames_played(self) -> int:
        return len(self.contributions)


def frame_weights(frame_count: int, params: RatingParameters) -> list[int]:
    """Return per-frame weights, oldest first.

    The oldest frame starts at ``base_weight`` less ``weight_decrement`` per
    newer frame, floored at 1, and each newer frame adds ``weight_decrement``.
    Until the floor is hit the newest frame carries exactly ``base_weight``.
    """
    if frame_count <= 0:
        return []
    first_weight = max(1, params.base_weight - params.weight_decrement * (frame_count - 1))
    return [first_weight + params.weight_decrement * index for index in range(frame_count)]


def points_earned(
    opponent_rating: int,
    *,
    won: bool,
    eight_ball: bool,
    params: RatingParameters,
) -> int:
    """Rating points a single frame is worth, truncated toward zero."""
    if won:
        if eight_ball and params.use_eight_ball_factor:
            factor = params.eight_ball_factor
        else:
            factor = params.win_factor
    else:
        factor = params.loss_factor
    return int(opponent_rating * factor)


def chronological(frames: Sequence[PlayerFrame]) -> list[PlayerFrame]:
    """Order frames oldest first by match date, fixture and frame number."""
    return sorted(frames, key=lambda frame: frame.sort_key)


class WeightedRatingCalculator:
    """Stateless weighted-average rating calculator."""

    def __init__(self, params: RatingParameters) -> None:
        self.params = params

    def calculate(
        self,
        frames: Sequence[PlayerFrame],
        opponent_rating_at: OpponentRatingLookup,
        *,
        player_id: int | None = None,
    ) -> RatingBreakdown:
        ordered = chronological(frames)
        if player_id is None and ordered:
            player_id = ordered[0].player_id

        contributions: list[FrameContribution] = []
        value_total = 0
        weight_total = 0
        for frame, weight in zip(ordered, frame_weights(len(ordered), self.params)):
            opponent_rating = opponent_rating_at(frame.opponent_id, frame.week_number)
            earned = points_earned(
                opponent_rating,
                won=frame.won,
                eight_ball=frame.eight_ball,
                params=self.params,
            )
            contributions.append(
                FrameContribution(
                    frame=frame,
                    opponent_rating=opponent_rating,
                    points_earned=earned,
                    weight=weight,
                )
            )
            value_total += earned * weight
            weight_total += weight

        if weight_total > 0:
            rating = value_total // weight_total
        else:
            rating = self.params.starting_rating

        return RatingBreakdown(
            player_id=player_id,
            contributions=tuple(contributions),
            value_total=value_total,
            weight_total=weight_total,
            rating=rating,
        )

    def rating(self, frames: Sequence[PlayerFrame], opponent_rating_at: OpponentRatingLookup) -> int:
        return self.calculate(frames, opponent_rating_at).rating


__all__ = [
    "FrameContribution",
    "OpponentRatingLookup",
    "RatingBreakdown",
    "RatingParameters",
    "WeightedRatingCalculator",
    "chronological",
    "frame_weights",
    "points_earned",
]
