"""Message bus consumer for score update events."""

from .listener import MatchScoreUpdateListener

__all__ = ['MatchScoreUpdateListener']
