"""Tests for TOML-based rating config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from domain.config_base import select_config
from domain.ratings.config import load_rating_configs

ROOT_DIR = Path(__file__).resolve().parents[1]


def test_load_rating_configs_from_directory(tmp_path: Path) -> None:
    config_path = tmp_path / "league.toml"
    config_path.write_text(
        """
[league]
name = "winter"
description = "Winter league"

[ratings]
starting_rating = 1200
win_factor = 1.3
loss_factor = 0.7
eight_ball_factor = 1.5
use_eight_ball_factor = false
base_weight = 220
weight_decrement = 5
min_frames_percentage = 50
""".strip()
    )

    configs = load_rating_configs(tmp_path)
    assert len(configs) == 1

    config = configs[0]
    assert config.name == "winter"
    assert config.description == "Winter league"
    assert config.file_path == config_path
    assert config.parameters.starting_rating == 1200
    assert config.parameters.win_factor == pytest.approx(1.3)
    assert config.parameters.loss_factor == pytest.approx(0.7)
    assert config.parameters.eight_ball_factor == pytest.approx(1.5)
    assert config.parameters.use_eight_ball_factor is False
    assert config.parameters.base_weight == 220
    assert config.parameters.weight_decrement == 5
    assert config.parameters.min_frames_percentage == 50
    assert config.as_config_json()["base_weight"] == 220


def test_missing_ratings_table_uses_defaults(tmp_path: Path) -> None:
    (tmp_path / "minimal.toml").write_text('[league]\nname = "minimal"\n')

    config = load_rating_configs(tmp_path)[0]
    assert config.description is None
    assert config.parameters.starting_rating == 1000
    assert config.parameters.base_weight == 240
    assert config.parameters.weight_decrement == 4


def test_shipped_default_config_loads() -> None:
    configs = load_rating_configs(ROOT_DIR / "configs" / "ratings")
    config = select_config(configs, "default")
    assert config.parameters.win_factor == pytest.approx(1.25)
    assert config.parameters.eight_ball_factor == pytest.approx(1.35)


def test_missing_name_raises_error(tmp_path: Path) -> None:
    (tmp_path / "nameless.toml").write_text("[ratings]\nbase_weight = 240\n")

    with pytest.raises(ValueError, match=r"\[league\]\.name is required"):
        load_rating_configs(tmp_path)


@pytest.mark.parametrize(
    ("key", "value", "message"),
    [
        ("starting_rating", "-1", "starting_rating must be >= 0"),
        ("win_factor", "-0.5", "win_factor must be >= 0"),
        ("base_weight", "0", "base_weight must be >= 1"),
        ("weight_decrement", "-4", "weight_decrement must be >= 0"),
        ("min_frames_percentage", "101", "min_frames_percentage must be between 0 and 100"),
    ],
)
def test_invalid_parameters_raise_error(tmp_path: Path, key: str, value: str, message: str) -> None:
    (tmp_path / "bad.toml").write_text(f'[league]\nname = "bad"\n\n[ratings]\n{key} = {value}\n')

    with pytest.raises(ValueError, match=message):
        load_rating_configs(tmp_path)


def test_duplicate_names_raise_error(tmp_path: Path) -> None:
    template = '[league]\nname = "dup"\n'
    (tmp_path / "a.toml").write_text(template)
    (tmp_path / "b.toml").write_text(template)

    with pytest.raises(ValueError, match="League name 'dup' is used by both a.toml and b.toml"):
        load_rating_configs(tmp_path)


def test_configs_load_in_file_name_order_ignoring_other_files(tmp_path: Path) -> None:
    (tmp_path / "b.toml").write_text('[league]\nname = "beta"\n')
    (tmp_path / "a.toml").write_text('[league]\nname = "alpha"\n')
    (tmp_path / "notes.txt").write_text("not a config")

    assert [config.name for config in load_rating_configs(tmp_path)] == ["alpha", "beta"]


def test_invalid_toml_names_the_file(tmp_path: Path) -> None:
    (tmp_path / "broken.toml").write_text("[league\nname = \n")

    with pytest.raises(ValueError, match=r"broken\.toml: invalid TOML"):
        load_rating_configs(tmp_path)


def test_empty_directory_raises_error(tmp_path: Path) -> None:
    (tmp_path / "readme.txt").write_text("settings live here")

    with pytest.raises(ValueError, match="No .toml config files"):
        load_rating_configs(tmp_path)


def test_missing_directory_raises_error(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="does not exist"):
        load_rating_configs(tmp_path / "missing")


def test_file_instead_of_directory_raises_error(tmp_path: Path) -> None:
    config_path = tmp_path / "league.toml"
    config_path.write_text('[league]\nname = "solo"\n')

    with pytest.raises(NotADirectoryError):
        load_rating_configs(config_path)


def test_select_config_rejects_unknown_name(tmp_path: Path) -> None:
    (tmp_path / "a.toml").write_text('[league]\nname = "alpha"\n')

    with pytest.raises(ValueError, match="Unknown config name 'beta'"):
        select_config(load_rating_configs(tmp_path), "beta")
