"""
Environment-driven settings for the game hosts.

Entry points call load_dotenv() first, so values may come from a .env file.
Command-line flags override anything read here.
"""

import logging
import os
from typing import Optional

from domain.constants import DEFAULT_GRID_SIZE

logger = logging.getLogger(__name__)

DEFAULT_TICK_DELAY = 0.1  # seconds between ticks
DEFAULT_MAX_TICKS = 500
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_REPLAY_DIR = "replays"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _sanitize_env_value(value: Optional[str]) -> Optional[str]:
    """
    Clean up env-provided strings that may include surrounding quotes or whitespace.
    """
    if value is None:
        return None
    cleaned = value.strip()
    if len(cleaned) >= 2 and (
        (cleaned[0] == '"' and cleaned[-1] == '"') or (cleaned[0] == "'" and cleaned[-1] == "'")
    ):
        cleaned = cleaned[1:-1].strip()
    return cleaned


def _get_int_env(name: str, default: int) -> int:
    raw = _sanitize_env_value(os.getenv(name))
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default


def _get_float_env(name: str, default: float) -> float:
    raw = _sanitize_env_value(os.getenv(name))
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number, using %s", name, raw, default)
        return default


def get_grid_size() -> int:
    return _get_int_env("SNAKE_GRID_SIZE", DEFAULT_GRID_SIZE)


def get_tick_delay() -> float:
    return _get_float_env("SNAKE_TICK_DELAY", DEFAULT_TICK_DELAY)


def get_max_ticks() -> int:
    return _get_int_env("SNAKE_MAX_TICKS", DEFAULT_MAX_TICKS)


def _validate_log_level(level: str, source: str) -> str:
    level = level.upper()
    # getLevelName() maps known names to ints and anything else to "Level X"
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Ignoring %s=%r: not a logging level, using %s", source, level, DEFAULT_LOG_LEVEL)
        return DEFAULT_LOG_LEVEL
    return level


def get_log_level() -> str:
    raw = _sanitize_env_value(os.getenv("SNAKE_LOG_LEVEL"))
    if not raw:
        return DEFAULT_LOG_LEVEL
    return _validate_log_level(raw, "SNAKE_LOG_LEVEL")


def get_replay_dir() -> str:
    return _sanitize_env_value(os.getenv("SNAKE_REPLAY_DIR")) or DEFAULT_REPLAY_DIR


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=_validate_log_level(level, "--log-level") if level else get_log_level(),
        format=LOG_FORMAT
    )
