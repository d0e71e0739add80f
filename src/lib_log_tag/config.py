"""Environment overrides and optional ``.env`` loading.

Purpose
-------
Keep the rules for reading configuration from the process environment in one
place so :func:`lib_log_tag.initialize` and the CLI agree on them.

Contents
--------
* ``*_ENV_VAR`` names recognised by the package.
* :func:`env_bool`, :func:`apply_env_overrides` – environment parsing.
* :func:`should_use_dotenv`, :func:`enable_dotenv` – python-dotenv integration.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_TAG_ENV_VAR = "LOG_TAG_DEFAULT_TAG"
DEBUG_ENV_VAR = "LOG_TAG_DEBUG"
DOTENV_ENV_VAR = "LOG_TAG_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_PATH: Path | None = None


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _ = os.environ.pop('LOG_TAG_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_TAG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_TAG_EXAMPLE_BOOL'] = '0'
    >>> env_bool('LOG_TAG_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('LOG_TAG_EXAMPLE_BOOL')
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def apply_env_overrides(default_tag: str, debug_mode: bool) -> tuple[str, bool]:
    """Return ``(default_tag, debug_mode)`` after applying environment overrides.

    ``LOG_TAG_DEFAULT_TAG`` and ``LOG_TAG_DEBUG`` take precedence over the
    values passed by the host, mirroring how deployments flip debug output
    without touching code.
    """
    tag = os.getenv(DEFAULT_TAG_ENV_VAR)
    resolved_tag = tag.strip() if tag and tag.strip() else default_tag
    return resolved_tag, env_bool(DEBUG_ENV_VAR, debug_mode)


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether to load ``.env``; an explicit CLI flag beats the environment.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` (searching upwards from the cwd) once.

    Existing environment variables keep precedence over ``.env`` entries.
    Returns the resolved path of the loaded file, or ``None`` when no file
    was found.
    """
    global _DOTENV_PATH
    if _DOTENV_PATH is not None:
        return _DOTENV_PATH
    found = find_dotenv(usecwd=True)
    if not found:
        logger.debug("no .env file found from %s", Path.cwd())
        return None
    path = Path(found).resolve()
    load_dotenv(path, override=False)
    _DOTENV_PATH = path
    return path


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_PATH
    _DOTENV_PATH = None


__all__ = [
    "DEBUG_ENV_VAR",
    "DEFAULT_TAG_ENV_VAR",
    "DOTENV_ENV_VAR",
    "apply_env_overrides",
    "enable_dotenv",
    "env_bool",
    "should_use_dotenv",
]
