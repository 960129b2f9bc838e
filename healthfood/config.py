"""Configuration utilities.

Every setting is read from the environment at call time so tests can
patch ``os.environ`` without reloading modules.
"""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

LOG_FORMATS = ("console", "json")
DEFAULT_LOG_PREVIEW_CHARS = 200


def load_env_file(path: Optional[Union[str, Path]] = None, override: bool = False) -> bool:
    """
    Load a ``.env`` file into the process environment.

    Args:
        path: File to load. Defaults to ``.env`` in the working directory.
        override: Whether values from the file replace existing variables.

    Returns:
        True if a file was found and loaded, False otherwise
    """
    env_path = Path(path) if path is not None else Path.cwd() / ".env"
    if not env_path.exists():
        return False
    return load_dotenv(env_path, override=override)


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def get_log_level() -> str:
    """
    Get log level name.

    Returns:
        Upper-cased LOG_LEVEL env var, defaults to "INFO"
    """
    return os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO"


def get_log_format() -> str:
    """
    Get log renderer.

    Returns:
        "console" or "json" from LOG_FORMAT, defaults to "console"
    """
    fmt = os.getenv("LOG_FORMAT", "console").strip().lower()
    if fmt not in LOG_FORMATS:
        return "console"
    return fmt


def metrics_enabled() -> bool:
    """Whether parse metrics are recorded (PARSER_METRICS_ENABLED, default on)."""
    return _get_bool("PARSER_METRICS_ENABLED", True)


def get_log_preview_chars() -> int:
    """
    Get how many characters of a raw response go into failure logs.

    Returns:
        PARSER_LOG_PREVIEW_CHARS as non-negative int, defaults to 200
    """
    raw = os.getenv("PARSER_LOG_PREVIEW_CHARS")
    if raw is None:
        return DEFAULT_LOG_PREVIEW_CHARS
    try:
        return max(0, int(raw))
    except ValueError:
        return DEFAULT_LOG_PREVIEW_CHARS
