"""Configuration constants for the meteor dodge game."""

from __future__ import annotations

import argparse
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence

import yaml

from .constants import DEFAULTS

_PATH_FIELDS = {"LOG_DIRECTORY", "BEST_SCORE_FILE", "SOUND_DIRECTORY"}
_STRING_FIELDS = {"DEBUG_LOG_FILE", "DEBUG_LOG_LEVEL"}
_BOOL_FIELDS = {"AUDIO_ENABLED"}
_FLOAT_FIELDS = {
    "WINDOW_SCALE",
    "PLAYER_SPEED",
    "METEOR_MIN_SIZE",
    "METEOR_MAX_SIZE",
    "METEOR_MIN_SPEED",
    "METEOR_MAX_SPEED",
    "METEOR_ACCELERATION",
    "METEOR_MAX_ROTATION_SPEED",
    "METEOR_SPAWN_RATE",
    "METEOR_SPAWN_RATE_GROWTH",
    "MIN_METEOR_SPAWN_INTERVAL",
    "METEOR_HITBOX_SCALE",
    "STAR_SIZE",
    "STAR_SPEED",
    "STAR_ROTATION_SPEED",
    "STAR_SPAWN_RATE",
    "STAR_SPAWN_CHANCE",
    "MAX_FRAME_DELTA",
}

CANVAS_WIDTH = DEFAULTS["CANVAS_WIDTH"]
CANVAS_HEIGHT = DEFAULTS["CANVAS_HEIGHT"]
PLAYER_WIDTH = DEFAULTS["PLAYER_WIDTH"]
PLAYER_HEIGHT = DEFAULTS["PLAYER_HEIGHT"]

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
SPACE = (8, 10, 28)
SHIP_GREEN = (0, 255, 136)
ENGINE_BLUE = (0, 170, 255)
STAR_YELLOW = (255, 235, 59)
METEOR_OUTLINE = (51, 51, 51)
BACKGROUND = SPACE

WINDOW_SCALE = 1.0
FPS = 60

PLAYER_SPEED = 200.0
PLAYER_BOTTOM_MARGIN = 20

METEOR_MIN_SIZE = 15.0
METEOR_MAX_SIZE = 35.0
METEOR_MIN_SPEED = 100.0
METEOR_MAX_SPEED = 300.0
METEOR_ACCELERATION = 20.0
METEOR_MAX_ROTATION_SPEED = 3.0
METEOR_SPAWN_RATE = 1.0
METEOR_SPAWN_RATE_GROWTH = 0.1
MIN_METEOR_SPAWN_INTERVAL = 0.05
METEOR_HITBOX_SCALE = 0.8
METEOR_HUE_RANGE = (10.0, 70.0)

STAR_SIZE = 12.0
STAR_SPEED = 150.0
STAR_ROTATION_SPEED = 3.0
STAR_SPAWN_RATE = 0.3
STAR_SPAWN_CHANCE = 0.7
STAR_BONUS = 10
SCORE_PER_SECOND = 1

MAX_FRAME_DELTA = 0.1
STARFIELD_COUNT = 100

CONFIG_ENV_VAR = "METEORDODGE_CONFIG_FILE"
DEFAULT_CONFIG_FILE = Path("configs/default.yaml")
LOG_DIRECTORY = Path(os.getenv("METEORDODGE_LOG_DIR", "logs"))
DEBUG_LOG_FILE = os.getenv("METEORDODGE_DEBUG_LOG", "meteordodge.log")
DEBUG_LOG_LEVEL = os.getenv("METEORDODGE_DEBUG_LOG_LEVEL", "INFO")
BEST_SCORE_FILE = Path(os.getenv("METEORDODGE_BEST_SCORE_FILE", "~/.meteordodge/best_score.json"))
SOUND_DIRECTORY = Path(os.getenv("METEORDODGE_SOUND_DIR", "sounds"))
AUDIO_ENABLED = os.getenv("METEORDODGE_AUDIO", "1") in {"1", "true", "True"}


@dataclass(frozen=True)
class GameSettings:
    CANVAS_WIDTH: int = CANVAS_WIDTH
    CANVAS_HEIGHT: int = CANVAS_HEIGHT
    WINDOW_SCALE: float = WINDOW_SCALE
    FPS: int = FPS
    PLAYER_WIDTH: int = PLAYER_WIDTH
    PLAYER_HEIGHT: int = PLAYER_HEIGHT
    PLAYER_SPEED: float = PLAYER_SPEED
    PLAYER_BOTTOM_MARGIN: int = PLAYER_BOTTOM_MARGIN
    METEOR_MIN_SIZE: float = METEOR_MIN_SIZE
    METEOR_MAX_SIZE: float = METEOR_MAX_SIZE
    METEOR_MIN_SPEED: float = METEOR_MIN_SPEED
    METEOR_MAX_SPEED: float = METEOR_MAX_SPEED
    METEOR_ACCELERATION: float = METEOR_ACCELERATION
    METEOR_MAX_ROTATION_SPEED: float = METEOR_MAX_ROTATION_SPEED
    METEOR_SPAWN_RATE: float = METEOR_SPAWN_RATE
    METEOR_SPAWN_RATE_GROWTH: float = METEOR_SPAWN_RATE_GROWTH
    MIN_METEOR_SPAWN_INTERVAL: float = MIN_METEOR_SPAWN_INTERVAL
    METEOR_HITBOX_SCALE: float = METEOR_HITBOX_SCALE
    STAR_SIZE: float = STAR_SIZE
    STAR_SPEED: float = STAR_SPEED
    STAR_ROTATION_SPEED: float = STAR_ROTATION_SPEED
    STAR_SPAWN_RATE: float = STAR_SPAWN_RATE
    STAR_SPAWN_CHANCE: float = STAR_SPAWN_CHANCE
    STAR_BONUS: int = STAR_BONUS
    SCORE_PER_SECOND: int = SCORE_PER_SECOND
    MAX_FRAME_DELTA: float = MAX_FRAME_DELTA
    STARFIELD_COUNT: int = STARFIELD_COUNT
    LOG_DIRECTORY: Path = LOG_DIRECTORY
    DEBUG_LOG_FILE: str = DEBUG_LOG_FILE
    DEBUG_LOG_LEVEL: str = DEBUG_LOG_LEVEL
    BEST_SCORE_FILE: Path = BEST_SCORE_FILE
    SOUND_DIRECTORY: Path = SOUND_DIRECTORY
    AUDIO_ENABLED: bool = AUDIO_ENABLED

    @property
    def window_size(self) -> tuple[int, int]:
        return (
            int(round(self.CANVAS_WIDTH * self.WINDOW_SCALE)),
            int(round(self.CANVAS_HEIGHT * self.WINDOW_SCALE)),
        )

    def with_updates(self, overrides: Dict[str, Any]) -> "GameSettings":
        merged = asdict(self)
        merged.update(overrides)
        _validate_settings_dict(merged)
        return GameSettings(**merged)


_ACTIVE_SETTINGS = GameSettings()
_ENV_VARS: Dict[str, str] = {
    field: f"METEORDODGE_{field}"
    for field in GameSettings.__dataclass_fields__
    if field not in {"LOG_DIRECTORY", "DEBUG_LOG_FILE", "DEBUG_LOG_LEVEL", "BEST_SCORE_FILE", "SOUND_DIRECTORY", "AUDIO_ENABLED"}
}
_ENV_VARS.update(
    {
        "LOG_DIRECTORY": "METEORDODGE_LOG_DIR",
        "DEBUG_LOG_FILE": "METEORDODGE_DEBUG_LOG",
        "DEBUG_LOG_LEVEL": "METEORDODGE_DEBUG_LOG_LEVEL",
        "BEST_SCORE_FILE": "METEORDODGE_BEST_SCORE_FILE",
        "SOUND_DIRECTORY": "METEORDODGE_SOUND_DIR",
        "AUDIO_ENABLED": "METEORDODGE_AUDIO",
    }
)


def _coerce(value: str, field: str) -> Any:
    if field in _PATH_FIELDS:
        return Path(value)
    if field in _STRING_FIELDS:
        return value
    if field in _BOOL_FIELDS:
        return value in {"1", "true", "True"}
    if field in _FLOAT_FIELDS:
        return float(value)
    return int(value)


def _collect_env_overrides(env: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field, env_name in _ENV_VARS.items():
        raw = env.get(env_name)
        if raw is not None:
            overrides[field] = _coerce(raw, field)
    return overrides


def _normalize_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value in {"1", "true", "True", "TRUE"}
    if isinstance(value, (int, float)):
        return bool(value)
    raise ValueError("Invalid boolean value in config")


def _normalize_numeric(value: Any, caster: type[float | int]) -> float | int:
    if isinstance(value, bool):
        raise ValueError("Invalid numeric value in config")
    if isinstance(value, (int, float)):
        return caster(value)
    if isinstance(value, str):
        return caster(float(value) if caster is float else int(float(value)))
    raise ValueError("Invalid numeric value in config")


def _normalize_config_value(field: str, value: Any) -> Any:
    if field in _PATH_FIELDS:
        if isinstance(value, Path):
            return value
        if isinstance(value, str):
            return Path(value)
        raise ValueError(f"Field {field} must be a path or string")
    if field in _STRING_FIELDS:
        if isinstance(value, str):
            return value
        raise ValueError(f"Field {field} must be a string")
    if field in _BOOL_FIELDS:
        return _normalize_bool(value)
    if field in _FLOAT_FIELDS:
        return float(_normalize_numeric(value, float))
    return int(_normalize_numeric(value, int))


_NUMERIC_BOUNDS: Dict[str, tuple[float, float]] = {
    "CANVAS_WIDTH": (100, 4000),
    "CANVAS_HEIGHT": (100, 4000),
    "WINDOW_SCALE": (0.25, 4.0),
    "FPS": (1, 360),
    "PLAYER_WIDTH": (1, 400),
    "PLAYER_HEIGHT": (1, 400),
    "PLAYER_SPEED": (1.0, 5000.0),
    "PLAYER_BOTTOM_MARGIN": (0, 1000),
    "METEOR_MIN_SIZE": (1.0, 500.0),
    "METEOR_MAX_SIZE": (1.0, 500.0),
    "METEOR_MIN_SPEED": (1.0, 5000.0),
    "METEOR_MAX_SPEED": (1.0, 5000.0),
    "METEOR_ACCELERATION": (0.0, 1000.0),
    "METEOR_MAX_ROTATION_SPEED": (0.0, 50.0),
    "METEOR_SPAWN_RATE": (0.01, 100.0),
    "METEOR_SPAWN_RATE_GROWTH": (0.0, 10.0),
    "MIN_METEOR_SPAWN_INTERVAL": (0.001, 10.0),
    "METEOR_HITBOX_SCALE": (0.1, 2.0),
    "STAR_SIZE": (1.0, 500.0),
    "STAR_SPEED": (1.0, 5000.0),
    "STAR_ROTATION_SPEED": (-50.0, 50.0),
    "STAR_SPAWN_RATE": (0.01, 100.0),
    "STAR_SPAWN_CHANCE": (0.0, 1.0),
    "STAR_BONUS": (0, 10000),
    "SCORE_PER_SECOND": (0, 10000),
    "MAX_FRAME_DELTA": (0.001, 10.0),
    "STARFIELD_COUNT": (0, 5000),
}

_CHOICE_FIELDS: Dict[str, set[str]] = {
    "DEBUG_LOG_LEVEL": {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
}


def _validate_settings_dict(values: Dict[str, Any]) -> None:
    for field, (lower, upper) in _NUMERIC_BOUNDS.items():
        current = values.get(field)
        if current is None:
            continue
        if not (lower <= current <= upper):
            raise ValueError(f"{field} must be between {lower} and {upper}, got {current}")
    for field, choices in _CHOICE_FIELDS.items():
        current = values.get(field)
        if current is None:
            continue
        if isinstance(current, str) and current.upper() in choices:
            values[field] = current.upper()
            continue
        raise ValueError(f"{field} must be one of {sorted(choices)} (got {current})")
    _validate_relationships(values)


def _validate_relationships(values: Mapping[str, Any]) -> None:
    min_size = values.get("METEOR_MIN_SIZE")
    max_size = values.get("METEOR_MAX_SIZE")
    if min_size and max_size and min_size > max_size:
        raise ValueError("METEOR_MIN_SIZE cannot exceed METEOR_MAX_SIZE")
    min_speed = values.get("METEOR_MIN_SPEED")
    max_speed = values.get("METEOR_MAX_SPEED")
    if min_speed and max_speed and min_speed > max_speed:
        raise ValueError("METEOR_MIN_SPEED cannot exceed METEOR_MAX_SPEED")
    canvas_width = values.get("CANVAS_WIDTH")
    player_width = values.get("PLAYER_WIDTH")
    if canvas_width and player_width and player_width >= canvas_width:
        raise ValueError("PLAYER_WIDTH must be smaller than CANVAS_WIDTH")
    if canvas_width and max_size and max_size >= canvas_width:
        raise ValueError("METEOR_MAX_SIZE must be smaller than CANVAS_WIDTH")
    star_size = values.get("STAR_SIZE")
    if canvas_width and star_size and star_size >= canvas_width:
        raise ValueError("STAR_SIZE must be smaller than CANVAS_WIDTH")
    canvas_height = values.get("CANVAS_HEIGHT")
    player_height = values.get("PLAYER_HEIGHT")
    margin = values.get("PLAYER_BOTTOM_MARGIN") or 0
    if canvas_height and player_height and player_height + margin > canvas_height:
        raise ValueError("PLAYER_HEIGHT plus PLAYER_BOTTOM_MARGIN cannot exceed CANVAS_HEIGHT")


def _load_config_overrides(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as error:
            raise ValueError(f"Invalid YAML in config file {path}") from error
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must define a mapping")
    valid_fields = set(GameSettings.__dataclass_fields__.keys())
    overrides: Dict[str, Any] = {}
    for raw_key, value in data.items():
        key = str(raw_key).upper()
        if key not in valid_fields:
            raise ValueError(f"Unknown config field: {raw_key}")
        overrides[key] = _normalize_config_value(key, value)
    return overrides


def _resolve_config_path(cli_value: str | None, env: Mapping[str, str]) -> Path | None:
    candidate_strings = [cli_value, env.get(CONFIG_ENV_VAR)]
    for candidate in candidate_strings:
        if not candidate:
            continue
        path = Path(candidate).expanduser()
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        return path
    if DEFAULT_CONFIG_FILE.exists():
        return DEFAULT_CONFIG_FILE
    return None


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Meteor Dodge with runtime overrides")
    parser.add_argument("--config", type=str, help="Path to a YAML config file with runtime settings")
    parser.add_argument("--canvas-width", type=int, help="Logical width of the play field")
    parser.add_argument("--canvas-height", type=int, help="Logical height of the play field")
    parser.add_argument("--window-scale", type=float, help="Window pixels per logical unit")
    parser.add_argument("--fps", type=int, help="Target frames per second")
    parser.add_argument("--player-speed", type=float, help="Ship speed in units per second")
    parser.add_argument("--meteor-spawn-rate", type=float, help="Initial meteors per second")
    parser.add_argument("--meteor-acceleration", type=float, help="Meteor speed gain per second")
    parser.add_argument("--min-meteor-spawn-interval", type=float, help="Shortest allowed gap between meteors")
    parser.add_argument("--star-spawn-rate", type=float, help="Star spawn attempts per second")
    parser.add_argument("--max-frame-delta", type=float, help="Largest simulated step per frame")
    parser.add_argument("--best-score-file", type=str, help="Where the best score is stored")
    parser.add_argument("--sound-dir", type=str, help="Directory holding background/hit/success sounds")
    parser.add_argument("--log-level", type=str, help="Debug log level")
    parser.add_argument(
        "--mute",
        dest="audio_enabled",
        action="store_false",
        help="Start with audio disabled",
    )
    parser.set_defaults(audio_enabled=None)
    return parser


def load_runtime_settings(args: Sequence[str] | None = None, env: Mapping[str, str] | None = None) -> GameSettings:
    env_mapping = env or os.environ
    parser = _build_arg_parser()
    parsed = parser.parse_args(args=args)
    overrides: Dict[str, Any] = {}
    config_path = _resolve_config_path(parsed.config, env_mapping)
    if config_path is not None:
        overrides.update(_load_config_overrides(config_path))
    overrides.update(_collect_env_overrides(env_mapping))
    cli_mapping = {
        "CANVAS_WIDTH": parsed.canvas_width,
        "CANVAS_HEIGHT": parsed.canvas_height,
        "WINDOW_SCALE": parsed.window_scale,
        "FPS": parsed.fps,
        "PLAYER_SPEED": parsed.player_speed,
        "METEOR_SPAWN_RATE": parsed.meteor_spawn_rate,
        "METEOR_ACCELERATION": parsed.meteor_acceleration,
        "MIN_METEOR_SPAWN_INTERVAL": parsed.min_meteor_spawn_interval,
        "STAR_SPAWN_RATE": parsed.star_spawn_rate,
        "MAX_FRAME_DELTA": parsed.max_frame_delta,
        "BEST_SCORE_FILE": None if parsed.best_score_file is None else Path(parsed.best_score_file),
        "SOUND_DIRECTORY": None if parsed.sound_dir is None else Path(parsed.sound_dir),
        "DEBUG_LOG_LEVEL": parsed.log_level,
        "AUDIO_ENABLED": parsed.audio_enabled,
    }
    overrides.update({k: v for k, v in cli_mapping.items() if v is not None})
    return _ACTIVE_SETTINGS.with_updates(overrides)


def apply_runtime_settings(new_settings: GameSettings) -> GameSettings:
    # Only the paths read as fallbacks by the storage and audio layers are mirrored.
    global _ACTIVE_SETTINGS
    global BEST_SCORE_FILE, SOUND_DIRECTORY

    _ACTIVE_SETTINGS = new_settings
    BEST_SCORE_FILE = new_settings.BEST_SCORE_FILE
    SOUND_DIRECTORY = new_settings.SOUND_DIRECTORY
    return _ACTIVE_SETTINGS


def current_settings() -> GameSettings:
    return _ACTIVE_SETTINGS
