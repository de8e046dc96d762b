"""Runtime configuration read from the environment and an optional .env file."""
import logging
import os
from pathlib import Path
from threading import Lock
from typing import Callable, Dict

logger = logging.getLogger(__name__)

LOG_LEVEL_KEY = "EVENT_CALENDAR_LOG_LEVEL"
MAX_NAME_LENGTH_KEY = "EVENT_CALENDAR_MAX_NAME_LENGTH"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_MAX_NAME_LENGTH = 50

_ENV_LOADED = False
_ENV_LOCK = Lock()


def _is_valid_log_level(value: str) -> bool:
    return isinstance(logging.getLevelName(value.strip().upper()), int)


def _is_valid_name_length(value: str) -> bool:
    return value.strip().isdigit() and int(value) > 0


# key -> check applied to values read from .env
_VALIDATORS: Dict[str, Callable[[str], bool]] = {
    LOG_LEVEL_KEY: _is_valid_log_level,
    MAX_NAME_LENGTH_KEY: _is_valid_name_length,
}


def parse_env_file(env_path: Path) -> Dict[str, str]:
    """
    Read calendar settings from a .env file.

    Args:
        env_path: File with KEY=value lines; "#" comments, blank lines and
            an optional "export " prefix are allowed

    Returns:
        Dict of recognised keys with valid values. Unknown keys are ignored;
        known keys with invalid values are logged and skipped.
    """
    settings: Dict[str, str] = {}
    if not env_path.exists():
        return settings

    text = env_path.read_text(encoding="utf-8")
    for line_number, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.strip()
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip()
        validator = _VALIDATORS.get(key)
        if validator is None:
            continue

        value = value.strip().strip('"\'')
        if not validator(value):
            logger.warning(f"{env_path}:{line_number}: ignoring invalid {key}={value!r}")
            continue
        settings[key] = value

    return settings


def _load_env(env_path: Path = Path(".env")) -> None:
    """Copy valid .env settings into os.environ once; set variables win."""
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if not _ENV_LOADED:
            for key, value in parse_env_file(env_path).items():
                os.environ.setdefault(key, value)
            _ENV_LOADED = True


def _reset_env_cache() -> None:
    """Forget that the .env file was loaded."""
    global _ENV_LOADED
    _ENV_LOADED = False


def get_log_level() -> str:
    """
    Get the configured log level name.

    Returns:
        Upper-case level name understood by logging (e.g. "INFO").
        Falls back to DEFAULT_LOG_LEVEL for unknown names.
    """
    _load_env()

    level = os.getenv(LOG_LEVEL_KEY, DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"Unknown log level {level!r}, using {DEFAULT_LOG_LEVEL}")
        return DEFAULT_LOG_LEVEL
    return level


def get_max_name_length() -> int:
    """
    Get the maximum allowed length of a person's name.

    Returns:
        Positive integer, DEFAULT_MAX_NAME_LENGTH if unset or invalid.
    """
    _load_env()

    raw = os.getenv(MAX_NAME_LENGTH_KEY)
    if raw is None:
        return DEFAULT_MAX_NAME_LENGTH

    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid {MAX_NAME_LENGTH_KEY}={raw!r}, using {DEFAULT_MAX_NAME_LENGTH}")
        return DEFAULT_MAX_NAME_LENGTH

    if value <= 0:
        logger.warning(f"Invalid {MAX_NAME_LENGTH_KEY}={raw!r}, using {DEFAULT_MAX_NAME_LENGTH}")
        return DEFAULT_MAX_NAME_LENGTH
    return value
