"""
Match delegate module.

Provides the interface through which the entry points query and mutate
matches, plus the in-memory implementation:
- MatchDelegate: abstract interface
- InMemoryMatchDelegate: thread-safe in-process store

Usage:
    from tournament_matches.delegate import get_delegate

    delegate = get_delegate()  # Uses DELEGATE_TYPE env var
    matches = delegate.get_matches("tournament-1")
"""

from .base import MatchDelegate
from .factory import get_delegate, reset_delegate
from .memory import InMemoryMatchDelegate

__all__ = [
    'MatchDelegate',
    'InMemoryMatchDelegate',
    'get_delegate',
    'reset_delegate',
]
