"""League rating domain modules."""

from domain.common import (
    FixtureResult,
    FrameResult,
    FrameWinner,
    PlayerFrame,
    PlayerInfo,
    SeasonInfo,
    TeamInfo,
)

__all__ = [
    "FixtureResult",
    "FrameResult",
    "FrameWinner",
    "PlayerFrame",
    "PlayerInfo",
    "SeasonInfo",
    "TeamInfo",
]
