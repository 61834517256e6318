"""Tournament and group data models."""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator

from tournament_matches.models.team import Team

logger = logging.getLogger(__name__)


def _lenient_team(entry: Any) -> Any:
    if isinstance(entry, Team):
        return entry
    if isinstance(entry, dict):
        return {"name": "", **entry}
    return {"name": ""}


class TournamentType(str, Enum):
    """Bracket type. Double elimination is the only supported format."""

    DOUBLE_ELIMINATION = "DOUBLE_ELIMINATION"


class TournamentFormat(BaseModel):
    """Shape of a tournament: how many groups and teams per group."""

    max_teams_per_group: StrictInt = Field(default=0, alias="maxTeamsPerGroup")
    number_of_groups: StrictInt = Field(default=0, alias="numberOfGroups")
    type: TournamentType = TournamentType.DOUBLE_ELIMINATION

    class Config:
        """Pydantic configuration."""

        populate_by_name = True

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> TournamentType:
        """Fall back to DOUBLE_ELIMINATION for unrecognized type names."""
        if isinstance(value, TournamentType):
            return value
        if not isinstance(value, str):
            raise ValueError("type must be a string")
        try:
            return TournamentType(value)
        except ValueError:
            logger.warning(
                f"Unknown tournament type '{value}', using {TournamentType.DOUBLE_ELIMINATION.value}"
            )
            return TournamentType.DOUBLE_ELIMINATION


class Tournament(BaseModel):
    """Represents a tournament."""

    id: StrictStr = ""
    name: StrictStr
    format: TournamentFormat = Field(default_factory=TournamentFormat)


class Group(BaseModel):
    """Represents a group of teams within a tournament."""

    id: StrictStr = ""
    tournament_id: StrictStr = Field(default="", alias="tournamentId")
    name: StrictStr
    teams: list[Team] = []

    class Config:
        """Pydantic configuration."""

        populate_by_name = True

    @field_validator("teams", mode="before")
    @classmethod
    def _lenient_teams(cls, value: Any) -> Any:
        """Read group members leniently.

        Anything but an array leaves the group without teams. Inside the array
        a member may omit `name` (or `id`) and a non-object entry becomes an
        empty team.
        """
        if not isinstance(value, list):
            return []
        return [_lenient_team(entry) for entry in value]
