"""Library configuration: ResultConfig, init() and get_config()."""

from __future__ import annotations

import os
from dataclasses import dataclass

from async_result._logging import LEVELS, configure_logging, get_logger

__all__ = [
    'ResultConfig',
    'get_config',
    'init',
    'reset',
]

LOG_LEVEL_ENV = 'ASYNC_RESULT_LOG_LEVEL'

logger = get_logger(__name__)


@dataclass(frozen=True)
class ResultConfig:
    """Process-wide settings for async_result.

    Attributes:
        catch: Exception types converted to Err by ``catching`` and ``safe``
            when no explicit ``exceptions`` tuple is given.
        log_level: Logging level (e.g. "DEBUG"). None = leave logging alone.
        json_logs: Render logs as JSON (True) or for the console (False).
    """

    catch: tuple[type[BaseException], ...] = (Exception,)
    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init(), or lazily by get_config())
_config: ResultConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from ASYNC_RESULT_LOG_LEVEL, if set and valid."""
    env_level = os.environ.get(LOG_LEVEL_ENV, '').upper()
    if not env_level:
        return None
    if env_level not in LEVELS:
        logger.warning('unknown log level in environment, ignoring', variable=LOG_LEVEL_ENV, value=env_level)
        return None
    return env_level


def init(
    catch: tuple[type[BaseException], ...] | None = None,
    log_level: str | None = None,
    *,
    json_logs: bool = True,
) -> ResultConfig:
    """Initialize async_result with the given configuration.

    Args:
        catch: Default exception types for the catching layer.
            Defaults to (Exception,).
        log_level: Logging level. Read from ASYNC_RESULT_LOG_LEVEL if None.
        json_logs: Emit JSON logs when logging is configured.

    Returns:
        The ResultConfig that was set.

    Raises:
        ValueError: If catch is empty or log_level is unknown.

    Example:
        ```python
        from async_result import init

        init(catch=(ValueError, OSError), log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    if catch is not None and not catch:
        msg = 'catch must name at least one exception type'
        raise ValueError(msg)

    resolved_level = log_level.upper() if log_level is not None else _detect_log_level()
    if resolved_level is not None and resolved_level not in LEVELS:
        msg = f'Unknown log level {log_level!r}'
        raise ValueError(msg)

    _config = ResultConfig(
        catch=catch if catch is not None else (Exception,),
        log_level=resolved_level,
        json_logs=json_logs,
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=json_logs)

    return _config


def get_config() -> ResultConfig:
    """Get the current configuration.

    If init() has not been called, installs defaults (log level taken from
    the environment, read once) without configuring logging.
    """
    global _config  # noqa: PLW0603
    if _config is None:
        _config = ResultConfig(log_level=_detect_log_level())
    return _config


def reset() -> None:
    """Drop the installed configuration; the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
