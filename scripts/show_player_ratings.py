#!/usr/bin/env python3
"""Show the player ratings table for one season."""

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
from domain.ratings.summary import minimum_frames

DEFAULT_CONFIG_DIR = ROOT_DIR / "configs" / "ratings"

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Compute and print player ratings for a season.",
)


@app.command()
def show_player_ratings(
    season_id: Annotated[int, typer.Option("--season-id", help="Season to rate.")],
    config_name: Annotated[
        str,
        typer.Option("--config-name", help="Rating config name from [league].name."),
    ] = "default",
    config_dir: Annotated[
        Path,
        typer.Option("--config-dir", help="Directory of rating TOML configs."),
    ] = DEFAULT_CONFIG_DIR,
    division_ids: Annotated[
        Optional[list[int]],
        typer.Option("--division-id", help="Only show players from this division (repeatable)."),
    ] = None,
    qualified_only: Annotated[
        bool,
        typer.Option(
            "--qualified-only",
            help="Hide players below the minimum-frames percentage.",
        ),
    ] = False,
    top_n: Annotated[
        int,
        typer.Option("--top-n", help="Number of players to print. Use 0 for all."),
    ] = 0,
    db_url: Annotated[
        str,
        typer.Option(
            "--db-url",
            help="Database URL. Defaults to the local poolleague postgres instance.",
        ),
    ] = DEFAULT_DB_URL,
) -> None:
    """Print players ordered by rating."""
    if top_n < 0:
        raise typer.BadParameter("--top-n must be >= 0")

    try:
        config = select_config(load_rating_configs(config_dir), config_name)
    except (OSError, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc

    engine = create_db_engine(db_url)
    session_factory = create_session_factory(engine)
    report = compute_season_report(
        session_factory=session_factory,
        season_id=season_id,
        params=config.parameters,
        division_ids=set(division_ids) if division_ids else None,
        echo=typer.echo,
    )

    ratings = report.ratings
    summaries = ratings.qualified() if qualified_only else ratings.summaries
    if top_n:
        summaries = summaries[:top_n]

    if not summaries:
        typer.echo(f"No rated players found for season_id={season_id}.")
        return

    required = minimum_frames(ratings.max_frames_played(), config.parameters.min_frames_percentage)
    typer.echo(
        f"config={config.name} qualified_only={qualified_only} "
        f"min_frames={required} players={len(summaries)}"
    )
    for index, summary in enumerate(summaries, start=1):
        typer.echo(
            f"{index:3d}. {summary.player_name:<24} {summary.team_name:<20} "
            f"rating={summary.rating:5d} played={summary.played:3d} "
            f"won={summary.wins:3d} lost={summary.losses:3d} "
            f"eight_balls={summary.eight_balls:2d} win_pct={summary.win_percentage:5.1f}"
        )


if __name__ == "__main__":
    app()
