"""Player rating modules."""

from domain.ratings.calculator import (
    FrameContribution,
    RatingBreakdown,
    RatingParameters,
    WeightedRatingCalculator,
    frame_weights,
    points_earned,
)
from domain.ratings.config import RatingConfig, load_rating_configs
from domain.ratings.summary import (
    PlayerRatingSummary,
    SeasonRatings,
    calculate_season_ratings,
    minimum_frames,
)
from domain.ratings.weekly import (
    WeeklyRatingSnapshot,
    WeeklyRatingTable,
    build_weekly_ratings,
    player_frames,
    season_week_number,
)

__all__ = [
    "FrameContribution",
    "PlayerRatingSummary",
    "RatingBreakdown",
    "RatingConfig",
    "RatingParameters",
    "SeasonRatings",
    "WeeklyRatingSnapshot",
    "WeeklyRatingTable",
    "WeightedRatingCalculator",
    "build_weekly_ratings",
    "calculate_season_ratings",
    "frame_weights",
    "load_rating_configs",
    "minimum_frames",
    "player_frames",
    "points_earned",
    "season_week_number",
]
