"""ORM models."""

from models.base import Base
from models.league import Division, Fixture, Frame, Player, Season, Team

__all__ = [
    "Base",
    "Division",
    "Fixture",
    "Frame",
    "Player",
    "Season",
    "Team",
]
