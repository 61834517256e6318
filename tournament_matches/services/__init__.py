"""Services for the tournament match application."""

from tournament_matches.services.match_filter import filter_matches
from tournament_matches.services.score_validation import validate_score_update

__all__ = ["filter_matches", "validate_score_update"]
