"""
Application configuration.

Loads settings from environment variables with sensible defaults.
"""

import os
from typing import List


def _get_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    return value.lower() in ('true', '1', 'yes')


def _get_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


def _get_list(key: str, default: str) -> List[str]:
    """Get comma separated list from environment variable."""
    raw = os.environ.get(key, default)
    return [item.strip() for item in raw.split(',') if item.strip()]


# =============================================================================
# SERVER SETTINGS
# =============================================================================
PORT = _get_int('PORT', 8000)
HOST = _get_str('HOST', '0.0.0.0')
CORS_ALLOW_ORIGINS = _get_list('CORS_ALLOW_ORIGINS', '*')

# =============================================================================
# DELEGATE SETTINGS
# =============================================================================
# Backing implementation for match queries and mutations
DELEGATE_TYPE = _get_str('DELEGATE_TYPE', 'memory')

# Optional JSON file with tournaments and bracket slots for the memory delegate
SEED_FILE = _get_str('SEED_FILE', '')

# =============================================================================
# MESSAGE BUS
# =============================================================================
# Reject negative scores arriving over the bus, same as the HTTP path
BUS_ENFORCE_SCORE_RANGE = _get_bool('BUS_ENFORCE_SCORE_RANGE', True)

# =============================================================================
# LOGGING
# =============================================================================
LOG_LEVEL = _get_str('LOG_LEVEL', 'INFO')
