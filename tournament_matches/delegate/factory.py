"""
Factory function to create the configured match delegate.

Reads configuration from environment variables to determine which
delegate implementation to use.
"""

import logging
import os
from typing import Optional

from ..exceptions import ConfigurationError
from .base import MatchDelegate

logger = logging.getLogger(__name__)

# Singleton instance
_delegate_instance: Optional[MatchDelegate] = None


def get_delegate() -> MatchDelegate:
    """
    Get or create the match delegate instance.

    Uses the DELEGATE_TYPE environment variable to determine which implementation:
    - "memory" (default): In-process store, optionally seeded from SEED_FILE

    Returns:
        MatchDelegate implementation

    Raises:
        ConfigurationError: If DELEGATE_TYPE is unknown
    """
    global _delegate_instance

    if _delegate_instance is not None:
        return _delegate_instance

    delegate_type = os.environ.get('DELEGATE_TYPE', 'memory').lower()
    logger.info(f"Match delegate type: {delegate_type}")

    if delegate_type == 'memory':
        from .memory import InMemoryMatchDelegate

        delegate = InMemoryMatchDelegate()
        seed_file = os.environ.get('SEED_FILE')
        if seed_file:
            delegate.load_seed(seed_file)

    else:
        raise ConfigurationError(
            f"Unknown DELEGATE_TYPE: {delegate_type}. "
            f"Valid options: memory"
        )

    _delegate_instance = delegate
    return _delegate_instance


def reset_delegate() -> None:
    """
    Reset the delegate singleton.

    Used for testing or when switching configurations.
    """
    global _delegate_instance
    _delegate_instance = None
