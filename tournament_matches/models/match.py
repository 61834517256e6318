"""Match data model."""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, StrictInt, StrictStr, model_validator


class Winner(str, Enum):
    """Side that won a match."""

    HOME = "HOME"
    VISITOR = "VISITOR"


class Score(BaseModel):
    """Match score.

    Each side is read from `home`/`visitor` first and falls back to the older
    `homeTeamScore`/`visitorTeamScore` keys, independently per side.
    """

    home: StrictInt = Field(
        default=0, validation_alias=AliasChoices("home", "homeTeamScore")
    )
    visitor: StrictInt = Field(
        default=0, validation_alias=AliasChoices("visitor", "visitorTeamScore")
    )

    def get_winner(self) -> Winner:
        """Get the winning side. A tie goes to the visitor."""
        if self.visitor < self.home:
            return Winner.HOME
        return Winner.VISITOR

    def is_played(self) -> bool:
        """Check if any points have been recorded."""
        return self.home != 0 or self.visitor != 0


class Match(BaseModel):
    """Represents a match in a tournament bracket."""

    id: StrictStr = ""
    name: StrictStr = ""  # bracket slot, e.g. W0, L1, F0
    round: StrictStr = ""  # e.g. regular, quarterfinals, final
    tournament_id: StrictStr = Field(default="", alias="tournamentId")
    home_team_id: StrictStr = Field(default="", alias="homeTeamId")
    home_team_name: StrictStr = Field(default="", alias="homeTeamName")
    visitor_team_id: StrictStr = Field(default="", alias="visitorTeamId")
    visitor_team_name: StrictStr = Field(default="", alias="visitorTeamName")
    score: Score = Field(
        default_factory=Score, validation_alias=AliasChoices("score", "matchScore")
    )

    class Config:
        """Pydantic configuration."""

        populate_by_name = True

    @model_validator(mode="before")
    @classmethod
    def _flatten_teams(cls, data: Any) -> Any:
        """Accept teams as nested `home`/`visitor` objects or flat ids.

        A nested object replaces the flat keys entirely, even when it lacks an id.
        """
        if not isinstance(data, dict):
            return data

        data = dict(data)
        for side in ("home", "visitor"):
            team = data.pop(side, None)
            if not isinstance(team, dict):
                continue
            data.pop(f"{side}TeamId", None)
            data.pop(f"{side}TeamName", None)
            if "id" in team:
                data[f"{side}TeamId"] = team["id"]
            if "name" in team:
                data[f"{side}TeamName"] = team["name"]
        return data

    def get_winner(self) -> Winner:
        """Get the winning side of this match."""
        return self.score.get_winner()

    def get_winner_team_id(self) -> str:
        """Get the id of the winning team (empty for placeholder teams)."""
        if self.get_winner() == Winner.HOME:
            return self.home_team_id
        return self.visitor_team_id

    def get_title(self) -> str:
        """Get a short human readable label."""
        home = self.home_team_name or self.home_team_id or "TBD"
        visitor = self.visitor_team_name or self.visitor_team_id or "TBD"
        label = self.round or self.name
        title = f"{home} {self.score.home} - {self.score.visitor} {visitor}"
        return f"[{label}] {title}" if label else title
