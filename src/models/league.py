"""League table models: seasons, divisions, teams, players, fixtures and frames."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models.base import Base


class Season(Base):
    """A league season; week numbers count from ``start_date``."""

    __tablename__ = "seasons"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
    )


class Division(Base):
    __tablename__ = "divisions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    season_id: Mapped[int | None] = mapped_column(ForeignKey("seasons.id"), nullable=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)


class Team(Base):
    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    season_id: Mapped[int | None] = mapped_column(ForeignKey("seasons.id"), nullable=True)
    division_id: Mapped[int | None] = mapped_column(ForeignKey("divisions.id"), nullable=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)


class Player(Base):
    __tablename__ = "players"
    __table_args__ = (Index("idx_players_team", "team_id"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    season_id: Mapped[int | None] = mapped_column(ForeignKey("seasons.id"), nullable=True)
    team_id: Mapped[int | None] = mapped_column(ForeignKey("teams.id"), nullable=True)
    first_name: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    last_name: Mapped[str] = mapped_column(String(64), nullable=False, default="")

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part.strip())


class Fixture(Base):
    """One scheduled match between two teams."""

    __tablename__ = "fixtures"
    __table_args__ = (
        CheckConstraint("home_team_id <> away_team_id", name="ck_fixtures_distinct_teams"),
        Index("idx_fixtures_season_date", "season_id", "match_date"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    season_id: Mapped[int | None] = mapped_column(ForeignKey("seasons.id"), nullable=True)
    division_id: Mapped[int | None] = mapped_column(ForeignKey("divisions.id"), nullable=True)
    home_team_id: Mapped[int] = mapped_column(ForeignKey("teams.id"), nullable=False)
    away_team_id: Mapped[int] = mapped_column(ForeignKey("teams.id"), nullable=False)
    match_date: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)

    frames: Mapped[list[Frame]] = relationship(
        back_populates="fixture",
        order_by="Frame.number",
        cascade="all, delete-orphan",
    )


class Frame(Base):
    """Frame-by-frame result inside a fixture."""

    __tablename__ = "frames"
    __table_args__ = (
        UniqueConstraint("fixture_id", "number", name="uq_frames_fixture_number"),
        CheckConstraint("number >= 1", name="ck_frames_number"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    fixture_id: Mapped[int] = mapped_column(ForeignKey("fixtures.id"), nullable=False)
    number: Mapped[int] = mapped_column(Integer, nullable=False)
    home_player_id: Mapped[int | None] = mapped_column(ForeignKey("players.id"), nullable=True)
    away_player_id: Mapped[int | None] = mapped_column(ForeignKey("players.id"), nullable=True)
    winner: Mapped[str] = mapped_column(
        Enum("none", "home", "away", name="frame_winner", native_enum=False),
        nullable=False,
        default="none",
    )
    eight_ball: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    fixture: Mapped[Fixture] = relationship(back_populates="frames")
