"""Data models for the tournament match service."""

from tournament_matches.models.event import ScoreUpdateEvent
from tournament_matches.models.match import Match, Score, Winner
from tournament_matches.models.team import Team
from tournament_matches.models.tournament import (
    Group,
    Tournament,
    TournamentFormat,
    TournamentType,
)

__all__ = [
    "Match",
    "Score",
    "Winner",
    "Team",
    "Tournament",
    "TournamentFormat",
    "TournamentType",
    "Group",
    "ScoreUpdateEvent",
]
