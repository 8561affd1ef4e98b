"""Configuration: numeric tolerance and log level from environment."""

from __future__ import annotations

import logging
import os

from geoclip.constants import EPSILON

logger = logging.getLogger(__name__)

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def get_epsilon() -> float:
    """Return clip tolerance in radians (GEOCLIP_EPSILON env var or default).

    Non-numeric or non-positive overrides are ignored with a warning.

    Returns:
        Positive tolerance in radians.
    """
    raw = os.environ.get('GEOCLIP_EPSILON', '').strip()
    if not raw:
        return EPSILON
    try:
        value = float(raw)
    except ValueError:
        logger.warning('Ignoring non-numeric GEOCLIP_EPSILON %r; using %g', raw, EPSILON)
        return EPSILON
    if not value > 0:
        logger.warning('Ignoring non-positive GEOCLIP_EPSILON %r; using %g', raw, EPSILON)
        return EPSILON
    return value


def get_log_level(verbose: bool = False) -> int:
    """Return CLI log level (GEOCLIP_LOG env var, else DEBUG if verbose, else WARNING)."""
    level = logging.DEBUG if verbose else logging.WARNING
    env_level = os.environ.get('GEOCLIP_LOG', '').strip().upper()
    if env_level in _LOG_LEVELS:
        level = getattr(logging, env_level)
    return level
