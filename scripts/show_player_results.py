#!/usr/bin/env python3
"""Show one player's frame-by-frame rating breakdown for a season."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from db import DEFAULT_DB_URL, create_db_engine, create_session_factory
from domain.config_base import select_config
from domain.pipeline import compute_season_report
from domain.ratings.config import load_rating_configs
from repositories.league_repository import find_player_by_name

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "ratings"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Explain how a player's rating was reached.",
)


@app.command()
def show_player_results(
    season_id: Annotated[int, typer.Option("--season-id", help="Season to rate.")],
    player_id: Annotated[
        Optional[int],
        typer.Option("--player-id", help="Player id."),
    ] = None,
    player_name: Annotated[
        Optional[str],
        typer.Option("--player-name", help="Player full name (case-insensitive)."),
    ] = None,
    config_name: Annotated[str, typer.Option("--config-name")] = "default",
    config_dir: Annotated[Path, typer.Option("--config-dir")] = DEFAULT_CONFIG_DIR,
    db_url: Annotated[
        str,
        typer.Option(
            "--db-url",
            help="Database URL. Defaults to the local poolleague postgres instance.",
        ),
    ] = DEFAULT_DB_URL,
) -> None:
    """Print each frame's opponent rating, points earned and weight, oldest first."""
    if (player_id is None) == (player_name is None):
        raise typer.BadParameter("Pass exactly one of --player-id or --player-name")

    try:
        config = select_config(load_rating_configs(config_dir), config_name)
    except (OSError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    engine = create_db_engine(db_url)
    session_factory = create_session_factory(engine)

    if player_id is None:
        with session_factory() as session:
            player = find_player_by_name(session, player_name or "", season_id)
        if player is None:
            raise typer.BadParameter(f"No player named {player_name!r} in season_id={season_id}")
        player_id = player.player_id

    report = compute_season_report(
        session_factory=session_factory,
        season_id=season_id,
        params=config.parameters,
    )
    ratings = report.ratings
    breakdown = ratings.player_breakdown(player_id)
    if not breakdown.contributions:
        typer.echo(f"No frames found for player_id={player_id} in season_id={season_id}.")
        return

    names = {summary.player_id: summary.player_name for summary in ratings.summaries}
    typer.echo(f"player={names.get(player_id, player_id)} season={report.season.name}")
    for contribution in breakdown.contributions:
        frame = contribution.frame
        opponent = names.get(frame.opponent_id, "-") if frame.opponent_id is not None else "-"
        typer.echo(
            f"{frame.match_date:%d/%m/%Y} week={frame.week_number:2d} "
            f"{'WON ' if frame.won else 'LOST'} eight_ball={int(frame.eight_ball)} "
            f"opponent={opponent:<24} opp_rating={contribution.opponent_rating:5d} "
            f"points={contribution.points_earned:5d} weight={contribution.weight:4d} "
            f"value={contribution.weighted_value:8d}"
        )
    typer.echo(
        f"value_total={breakdown.value_total} "
        f"weight_total={breakdown.weight_total} "
        f"rating={breakdown.rating}"
    )
    for snapshot in ratings.weekly_history(player_id):
        typer.echo(f"week={snapshot.week_number:2d} rating={snapshot.rating}")


if __name__ == "__main__":
    app()
