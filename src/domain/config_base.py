"""Shared config-loading utilities for league settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, TypeVar
import tomllib


@dataclass(frozen=True)
class BaseLeagueConfig:
    """Metadata shared by every league settings file."""

    name: str
    description: str | None
    file_path: Path

    def as_config_json(self) -> dict[str, Any]:
        raise NotImplementedError


T = TypeVar("T", bound=BaseLeagueConfig)


def league_config_files(config_dir: Path) -> list[Path]:
    """Return the ``*.toml`` files of a settings directory in name order."""
    if not config_dir.is_dir():
        if config_dir.exists():
            raise NotADirectoryError(f"{config_dir} is not a settings directory")
        raise FileNotFoundError(f"Settings directory {config_dir} does not exist")

    files = sorted(path for path in config_dir.iterdir() if path.suffix == ".toml" and path.is_file())
    if not files:
        raise ValueError(f"No .toml config files in settings directory {config_dir}")
    return files


def load_league_configs(
    config_dir: Path,
    parser: Callable[[dict[str, Any], Path], T],
) -> list[T]:
    """Parse every settings file in ``config_dir``.

    Each league name may appear in one file only; a clash names both files.
    """
    loaded: dict[str, T] = {}
    for file_path in league_config_files(config_dir):
        try:
            raw = tomllib.loads(file_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"{file_path}: invalid TOML ({exc})") from exc

        config = parser(raw, file_path)
        earlier = loaded.get(config.name)
        if earlier is not None:
            raise ValueError(
                f"League name {config.name!r} is used by both "
                f"{earlier.file_path.name} and {file_path.name}"
            )
        loaded[config.name] = config

    return list(loaded.values())


def select_config(configs: list[T], name: str) -> T:
    """Pick one loaded config by name."""
    for config in configs:
        if config.name == name:
            return config
    available = ", ".join(config.name for config in configs)
    raise ValueError(f"Unknown config name {name!r}. Available: {available}")


__all__ = ["BaseLeagueConfig", "league_config_files", "load_league_configs", "select_config"]
