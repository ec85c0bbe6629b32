from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV_VAR = "SUDOKU_LOG_LEVEL"
DEBUG_ENV_VAR = "SUDOKU_DEBUG"

# Chatty third-party loggers kept at WARNING unless DEBUG is active.
_NOISY_LOGGERS = ("urllib3", "requests")
_TRUTHY = {"1", "true", "yes", "on"}


def parse_level(value: Union[str, int, None], fallback: int = logging.INFO) -> int:
    """Turn ``"debug"``, ``"10"`` or ``10`` into a numeric level."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = (value or "").strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else fallback


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """Level forced by the environment, or ``None`` when nothing is set."""
    env = os.environ if environ is None else environ
    explicit = env.get(LEVEL_ENV_VAR)
    if explicit and explicit.strip():
        return parse_level(explicit)
    if (env.get(DEBUG_ENV_VAR) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def _set_level(level: int) -> None:
    logging.getLogger().setLevel(level)
    noisy = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy)


def configure_root(
    default_level: Union[int, str] = logging.INFO,
    environ: Optional[Mapping[str, str]] = None,
) -> int:
    """
    Install the compact root handler once and set the effective level.

    Environment overrides:
      - SUDOKU_LOG_LEVEL: explicit log level (name or number)
      - SUDOKU_DEBUG: truthy -> DEBUG
    """
    forced = env_level(environ)
    effective = forced if forced is not None else parse_level(default_level)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    _set_level(effective)
    return effective


def apply_debug_preference(
    debug_enabled: bool, environ: Optional[Mapping[str, str]] = None
) -> int:
    """Switch between DEBUG and INFO from settings; env overrides still win."""
    forced = env_level(environ)
    if forced is not None:
        level = forced
    else:
        level = logging.DEBUG if debug_enabled else logging.INFO
    _set_level(level)
    return level


def env_requests_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    """True if the environment asks for DEBUG (or more verbose) output."""
    forced = env_level(environ)
    return forced is not None and forced <= logging.DEBUG
