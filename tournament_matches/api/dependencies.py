"""FastAPI dependencies for dependency injection."""

from tournament_matches.delegate import MatchDelegate, get_delegate


def get_match_delegate() -> MatchDelegate:
    """Get match delegate dependency."""
    return get_delegate()
