"""Tests for season rating summaries and qualification."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from domain.common import FixtureResult, FrameResult, FrameWinner, PlayerInfo, TeamInfo
from domain.ratings.calculator import RatingParameters
from domain.ratings.summary import calculate_season_ratings, minimum_frames

SEASON_START = date(2026, 1, 6)

PLAYERS = [
    PlayerInfo(player_id=1, name="Alice Archer", team_id=100),
    PlayerInfo(player_id=2, name="Bob Baker", team_id=200),
    PlayerInfo(player_id=3, name="Cara Cole", team_id=300),
]
TEAMS = [
    TeamInfo(team_id=100, name="Red Lion", division_id=1),
    TeamInfo(team_id=200, name="Crown", division_id=1),
    TeamInfo(team_id=300, name="Anchor", division_id=2),
]


def _fixtures() -> list[FixtureResult]:
    return [
        FixtureResult(
            fixture_id=10,
            match_date=datetime(2026, 1, 6, 20, 0, 0),
            home_team_id=100,
            away_team_id=200,
            frames=(FrameResult(1, 1, 2, FrameWinner.HOME),),
        ),
        FixtureResult(
            fixture_id=11,
            match_date=datetime(2026, 1, 13, 20, 0, 0),
            home_team_id=200,
            away_team_id=100,
            frames=(FrameResult(1, 2, 1, FrameWinner.HOME),),
        ),
    ]


def test_minimum_frames_rounds_up() -> None:
    assert minimum_frames(30, 60) == 18
    assert minimum_frames(7, 60) == 5
    assert minimum_frames(0, 60) == 0
    assert minimum_frames(10, 0) == 0


def test_season_summaries_report_display_mode_ratings() -> None:
    season = calculate_season_ratings(
        _fixtures(),
        SEASON_START,
        RatingParameters(),
        players=PLAYERS,
        teams=TEAMS,
    )

    assert [summary.player_id for summary in season.summaries] == [1, 2]
    alice, bob = season.summaries
    assert alice.rating == 938
    assert bob.rating == 934
    assert alice.team_name == "Red Lion"
    assert alice.division_id == 1
    assert (alice.played, alice.wins, alice.losses) == (2, 1, 1)
    assert alice.win_percentage == pytest.approx(50.0)
    assert season.player_breakdown(1).rating == alice.rating


def test_summary_rating_matches_breakdown_for_every_player() -> None:
    season = calculate_season_ratings(_fixtures(), SEASON_START, RatingParameters())
    for summary in season.summaries:
        assert season.player_breakdown(summary.player_id).rating == summary.rating


def test_players_missing_from_lookup_are_skipped() -> None:
    season = calculate_season_ratings(
        _fixtures(),
        SEASON_START,
        RatingParameters(),
        players=PLAYERS[:1],
        teams=TEAMS,
    )
    assert [summary.player_id for summary in season.summaries] == [1]
    assert season.summary_for(2) is None


def test_without_player_lookup_every_player_is_reported() -> None:
    season = calculate_season_ratings(_fixtures(), SEASON_START, RatingParameters())
    assert {summary.player_id for summary in season.summaries} == {1, 2}
    assert season.summary_for(2).player_name == "2"


def test_division_filter_keeps_only_matching_teams() -> None:
    fixtures = _fixtures() + [
        FixtureResult(
            fixture_id=12,
            match_date=datetime(2026, 1, 13, 20, 0, 0),
            home_team_id=300,
            away_team_id=100,
            frames=(FrameResult(1, 3, 1, FrameWinner.HOME, eight_ball=True),),
        )
    ]
    season = calculate_season_ratings(
        fixtures,
        SEASON_START,
        RatingParameters(),
        players=PLAYERS,
        teams=TEAMS,
        division_ids={2},
    )

    assert [summary.player_id for summary in season.summaries] == [3]
    assert season.summaries[0].eight_balls == 1


def test_division_filter_keeps_players_without_a_team() -> None:
    fixtures = _fixtures() + [
        FixtureResult(
            fixture_id=12,
            match_date=datetime(2026, 1, 13, 20, 0, 0),
            home_team_id=300,
            away_team_id=100,
            frames=(FrameResult(1, 3, 4, FrameWinner.HOME),),
        )
    ]
    players = PLAYERS + [PlayerInfo(player_id=4, name="Dan Drew")]
    season = calculate_season_ratings(
        fixtures,
        SEASON_START,
        RatingParameters(),
        players=players,
        teams=TEAMS,
        division_ids={2},
    )

    assert {summary.player_id for summary in season.summaries} == {3, 4}
    free_agent = season.summary_for(4)
    assert free_agent.team_name == ""
    assert free_agent.division_id is None


def test_qualified_uses_most_frames_played() -> None:
    fixtures = [
        FixtureResult(
            fixture_id=20,
            match_date=datetime(2026, 1, 6, 20, 0, 0),
            home_team_id=100,
            away_team_id=300,
            frames=tuple(
                FrameResult(number, 1, 3 if number == 1 else 2, FrameWinner.HOME)
                for number in range(1, 6)
            ),
        )
    ]
    season = calculate_season_ratings(fixtures, SEASON_START, RatingParameters(), players=PLAYERS)

    assert season.max_frames_played() == 5
    assert {summary.player_id for summary in season.qualified()} == {1, 2}
    assert {summary.player_id for summary in season.qualified(10)} == {1, 2, 3}


def test_empty_season_has_no_summaries() -> None:
    season = calculate_season_ratings([], SEASON_START, RatingParameters(), players=PLAYERS)
    assert season.summaries == []
    assert season.qualified() == []
    assert season.player_breakdown(1).rating == 1000
    assert season.weekly_history(1) == []
