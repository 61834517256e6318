"""
Type definitions for the tournament match service.

Provides TypedDict classes describing the JSON shapes produced by the codec.
"""

from typing import TypedDict, List


class TeamDict(TypedDict, total=False):
    """Team information."""
    id: str
    name: str


class MatchTeamDict(TypedDict, total=False):
    """Team reference nested inside a match."""
    id: str
    name: str


class ScoreDict(TypedDict):
    """Match score."""
    home: int
    visitor: int


class MatchDict(TypedDict, total=False):
    """
    Match in a tournament bracket.

    `round` carries the bracket slot name when no round label is set.
    """
    id: str
    home: MatchTeamDict
    visitor: MatchTeamDict
    round: str
    score: ScoreDict


class TournamentFormatDict(TypedDict):
    """Tournament format."""
    maxTeamsPerGroup: int
    numberOfGroups: int
    type: str  # DOUBLE_ELIMINATION


class TournamentDict(TypedDict, total=False):
    """Tournament."""
    id: str
    name: str
    format: TournamentFormatDict


class GroupDict(TypedDict, total=False):
    """Tournament group."""
    id: str
    tournamentId: str
    name: str
    teams: List[TeamDict]


class ScoreUpdateEventDict(TypedDict):
    """Score update message carried over the message bus."""
    tournamentId: str
    matchId: str
    homeTeamScore: int
    visitorTeamScore: int
