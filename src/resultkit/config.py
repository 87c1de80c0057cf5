"""Library configuration: Settings, configure() and environment detection."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from resultkit._logging import configure_logging

__all__ = [
    'DEFAULT_CLONE_MAX_DEPTH',
    'Settings',
    'configure',
    'get_settings',
    'reset_settings',
]

DEFAULT_CLONE_MAX_DEPTH = 10

_TRUE_VALUES = frozenset({'1', 'true', 'yes', 'on'})
_FALSE_VALUES = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class Settings:
    """Configuration for resultkit.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Emit JSON logs when logging is configured, console output otherwise.
        clone_max_depth: Default depth limit for ``objects.clone``.
    """

    log_level: str | None = None
    json_logs: bool = True
    clone_max_depth: int = DEFAULT_CLONE_MAX_DEPTH


# Active settings (set by configure(), or built lazily from the environment)
_settings: Settings | None = None


def _env_log_level() -> str | None:
    value = os.environ.get('RESULTKIT_LOG_LEVEL', '').strip()
    if not value:
        return None
    if value.upper() not in logging.getLevelNamesMapping():
        logging.warning("Unknown RESULTKIT_LOG_LEVEL value '%s', leaving logging unconfigured", value)
        return None
    return value.upper()


def _env_json_logs() -> bool:
    value = os.environ.get('RESULTKIT_JSON_LOGS', '').strip().lower()
    if not value or value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logging.warning("Unknown RESULTKIT_JSON_LOGS value '%s', defaulting to JSON output", value)
    return True


def _env_clone_max_depth() -> int:
    value = os.environ.get('RESULTKIT_CLONE_MAX_DEPTH', '').strip()
    if not value:
        return DEFAULT_CLONE_MAX_DEPTH
    try:
        depth = int(value)
    except ValueError:
        depth = -1
    if depth < 0:
        logging.warning(
            "Invalid RESULTKIT_CLONE_MAX_DEPTH value '%s', defaulting to %d", value, DEFAULT_CLONE_MAX_DEPTH
        )
        return DEFAULT_CLONE_MAX_DEPTH
    return depth


def configure(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    clone_max_depth: int | None = None,
) -> Settings:
    """Configure resultkit.

    Explicit arguments win over the ``RESULTKIT_LOG_LEVEL``,
    ``RESULTKIT_JSON_LOGS`` and ``RESULTKIT_CLONE_MAX_DEPTH`` environment
    variables, which win over the defaults.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = leave logging alone.
        json_logs: JSON (True) or console (False) log rendering.
        clone_max_depth: Default depth limit for ``objects.clone``.

    Returns:
        The Settings that were set.

    Raises:
        ValueError: If clone_max_depth is negative.

    Example:
        ```python
        from resultkit.config import configure

        configure(log_level='DEBUG', json_logs=False)
        ```
    """
    global _settings  # noqa: PLW0603

    if clone_max_depth is not None and clone_max_depth < 0:
        msg = f'clone_max_depth must be >= 0, got {clone_max_depth}'
        raise ValueError(msg)

    _settings = Settings(
        log_level=log_level if log_level is not None else _env_log_level(),
        json_logs=json_logs if json_logs is not None else _env_json_logs(),
        clone_max_depth=clone_max_depth if clone_max_depth is not None else _env_clone_max_depth(),
    )

    if _settings.log_level is not None:
        configure_logging(_settings.log_level, json_output=_settings.json_logs)

    return _settings


def get_settings() -> Settings:
    """Get the active settings.

    If ``configure()`` has not been called, settings are read from the
    environment without touching logging.
    """
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = Settings(
            log_level=_env_log_level(),
            json_logs=_env_json_logs(),
            clone_max_depth=_env_clone_max_depth(),
        )
    return _settings


def reset_settings() -> None:
    """Forget the active settings so the next read starts from the environment."""
    global _settings  # noqa: PLW0603
    _settings = None
