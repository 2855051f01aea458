# core/config.py
import json
import math
import os
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List, Optional

from .logger import CONFIG_HOME, get_logger
from .models import WatchedGame

logger = get_logger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "debug": False,
    "schedule": {"run_at": ["7:00 pm"]},
    "watched_games": [
        {"title": "Game 1 title here"},
        {"title": "Game 2 title here", "acceptable_price": 9.99},
    ],
}


class ConfigError(Exception):
    """Config file missing or malformed."""


@dataclass
class Config:
    watched_games: List[WatchedGame]
    run_at: List[str] = field(default_factory=list)
    timezone: Optional[str] = None
    debug: bool = False


def config_dir() -> str:
    return os.path.join(CONFIG_HOME, "sweetch-bot")


def config_path() -> str:
    return os.getenv("CONFIG_PATH", os.path.join(config_dir(), "config.json"))


def _parse_watched_game(entry: Any, index: int) -> WatchedGame:
    if not isinstance(entry, dict):
        raise ConfigError(f"watched_games[{index}] must be an object.")

    title = entry.get("title")
    if not isinstance(title, str) or not title.strip():
        raise ConfigError(f"watched_games[{index}] is missing a non-empty 'title'.")

    price = entry.get("acceptable_price")
    # bool is a Real subclass; reject it explicitly
    if price is not None and (isinstance(price, bool) or not isinstance(price, Real)):
        raise ConfigError(
            f"watched_games[{index}] ('{title}') acceptable_price must be a number."
        )
    if price is not None and not math.isfinite(price):
        raise ConfigError(
            f"watched_games[{index}] ('{title}') acceptable_price must be a finite number."
        )
    if price is not None and price < 0:
        raise ConfigError(
            f"watched_games[{index}] ('{title}') acceptable_price must not be negative."
        )

    return WatchedGame.from_dict(entry)


def _parse_schedule(raw: Any) -> tuple[List[str], Optional[str]]:
    if raw is None:
        return [], None
    if not isinstance(raw, dict):
        raise ConfigError("'schedule' must be an object.")

    run_at = raw.get("run_at", [])
    if not isinstance(run_at, list) or not all(isinstance(t, str) for t in run_at):
        raise ConfigError("'schedule.run_at' must be a list of strings.")

    tz = raw.get("timezone")
    if tz is not None and not isinstance(tz, str):
        raise ConfigError("'schedule.timezone' must be a string.")
    return run_at, tz


def load_config(path: Optional[str] = None) -> Config:
    path = path or config_path()
    if not os.path.exists(path):
        raise ConfigError(f"Config file not found at {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        raise ConfigError(f"Failed to load config at {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError("Config must be a JSON object.")

    entries = raw.get("watched_games")
    if not isinstance(entries, list) or not entries:
        raise ConfigError("'watched_games' must be a non-empty list.")

    games = [_parse_watched_game(entry, i) for i, entry in enumerate(entries)]
    run_at, tz = _parse_schedule(raw.get("schedule"))

    debug = raw.get("debug", False)
    if not isinstance(debug, bool):
        raise ConfigError("'debug' must be true or false.")

    cfg = Config(
        watched_games=games,
        run_at=run_at,
        timezone=tz,
        debug=debug,
    )
    logger.debug("Loaded config from %s: %s", path, cfg)
    return cfg


def write_default_config(path: Optional[str] = None) -> bool:
    """Write a starter config. Existing files are left untouched."""
    path = path or config_path()
    if os.path.exists(path):
        logger.warning("Config already exists at %s; not overwriting.", path)
        return False

    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(DEFAULT_CONFIG, f, indent=2)
        f.write("\n")
    logger.info("Wrote default config to %s", path)
    return True
