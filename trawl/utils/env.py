"""Environment variable configuration helpers.

Usage:
    from trawl.utils.env import get_env

    level = get_env("TRAWL_LOG_LEVEL", default="WARNING")
    layout = get_env("TRAWL_PLATFORM", default="auto")
"""

from __future__ import annotations

import os


def _log_access(name: str, value: str | None) -> None:
    from trawl.utils.logger import Logger

    Logger.debug("env", f"ENV GET {name}={value}")


def get_env(name: str, *, default: str | None = None, log: bool = False) -> str | None:
    """Get an environment variable.

    Args:
        name: Environment variable name.
        default: Returned when the variable is not set.
        log: If True, log the access at debug level.

    Returns:
        The variable's value, or default if not set.

    Examples:
        >>> get_env("TRAWL_PLATFORM", default="auto")
        'auto'
    """
    value = os.environ.get(name)

    if log:
        _log_access(name, value)

    if value is None:
        return default

    return value
