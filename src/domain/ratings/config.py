"""Load player rating settings from TOML files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from domain.config_base import BaseLeagueConfig, load_league_configs
from domain.ratings.calculator import RatingParameters


@dataclass(frozen=True)
class RatingConfig(BaseLeagueConfig):
    """Rating settings for one league."""

    parameters: RatingParameters

    def as_config_json(self) -> dict[str, Any]:
        return {
            "starting_rating": self.parameters.starting_rating,
            "win_factor": self.parameters.win_factor,
            "loss_factor": self.parameters.loss_factor,
            "eight_ball_factor": self.parameters.eight_ball_factor,
            "use_eight_ball_factor": self.parameters.use_eight_ball_factor,
            "base_weight": self.parameters.base_weight,
            "weight_decrement": self.parameters.weight_decrement,
            "min_frames_percentage": self.parameters.min_frames_percentage,
        }


def load_rating_configs(config_dir: Path) -> list[RatingConfig]:
    """Load and validate all rating TOML config files in a directory."""
    return load_league_configs(config_dir, _parse_rating_config)


def _parse_rating_config(raw: dict[str, Any], file_path: Path) -> RatingConfig:
    league_raw = raw.get("league", {})
    ratings_raw = raw.get("ratings", {})

    name = str(league_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [league].name is required")

    description_value = league_raw.get("description")
    description = None if description_value is None else str(description_value)

    defaults = RatingParameters()
    parameters = RatingParameters(
        starting_rating=int(ratings_raw.get("starting_rating", defaults.starting_rating)),
        win_factor=float(ratings_raw.get("win_factor", defaults.win_factor)),
        loss_factor=float(ratings_raw.get("loss_factor", defaults.loss_factor)),
        eight_ball_factor=float(ratings_raw.get("eight_ball_factor", defaults.eight_ball_factor)),
        use_eight_ball_factor=bool(
            ratings_raw.get("use_eight_ball_factor", defaults.use_eight_ball_factor)
        ),
        base_weight=int(ratings_raw.get("base_weight", defaults.base_weight)),
        weight_decrement=int(ratings_raw.get("weight_decrement", defaults.weight_decrement)),
        min_frames_percentage=int(
            ratings_raw.get("min_frames_percentage", defaults.min_frames_percentage)
        ),
    )
    _validate_parameters(file_path=file_path, parameters=parameters)

    return RatingConfig(
        name=name,
        description=description,
        file_path=file_path,
        parameters=parameters,
    )


def _validate_parameters(*, file_path: Path, parameters: RatingParameters) -> None:
    if parameters.starting_rating < 0:
        raise ValueError(f"{file_path}: [ratings].starting_rating must be >= 0")
    if parameters.win_factor < 0.0:
        raise ValueError(f"{file_path}: [ratings].win_factor must be >= 0")
    if parameters.loss_factor < 0.0:
        raise ValueError(f"{file_path}: [ratings].loss_factor must be >= 0")
    if parameters.eight_ball_factor < 0.0:
        raise ValueError(f"{file_path}: [ratings].eight_ball_factor must be >= 0")
    if parameters.base_weight < 1:
        raise ValueError(f"{file_path}: [ratings].base_weight must be >= 1")
    if parameters.weight_decrement < 0:
        raise ValueError(f"{file_path}: [ratings].weight_decrement must be >= 0")
    if parameters.min_frames_percentage < 0 or parameters.min_frames_percentage > 100:
        raise ValueError(f"{file_path}: [ratings].min_frames_percentage must be between 0 and 100")
