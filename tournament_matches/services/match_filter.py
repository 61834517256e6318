"""Filtering of a tournament's bracket slots for the match listing."""

from typing import Iterable, List, Optional

from tournament_matches.models import Match

PLAYED = "played"
PENDING = "pending"


def _include(match: Match, show_matches: str) -> bool:
    if show_matches == PLAYED:
        return match.score.is_played()
    if show_matches == PENDING:
        return not match.score.is_played()
    # unknown filter values keep every match
    return True


def filter_matches(
    matches: Iterable[Optional[Match]],
    show_matches: Optional[str] = None,
) -> List[Optional[Match]]:
    """
    Filter matches by play state, preserving order.

    Args:
        matches: Bracket slots, None for a slot without a match yet
        show_matches: "played" (any non-zero score), "pending" (0-0),
                      anything else keeps all matches

    Returns:
        Filtered list. Empty slots are kept only when no filter value was
        given at all; any filter value drops them.
    """
    if not show_matches:
        return list(matches)

    return [
        match for match in matches
        if match is not None and _include(match, show_matches)
    ]
