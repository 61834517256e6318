"""Score update event carried over the message bus."""

from typing import Any, Dict

from pydantic import BaseModel, Field, StrictInt, StrictStr


class ScoreUpdateEvent(BaseModel):
    """Score reported for a match by an external producer.

    Every field is required. Negative scores are accepted here; range checks
    belong to the score validation pipeline.
    """

    tournament_id: StrictStr = Field(..., alias="tournamentId")
    match_id: StrictStr = Field(..., alias="matchId")
    home_team_score: StrictInt = Field(..., alias="homeTeamScore")
    visitor_team_score: StrictInt = Field(..., alias="visitorTeamScore")

    class Config:
        """Pydantic configuration."""

        populate_by_name = True

    def to_score_payload(self) -> Dict[str, Any]:
        """Express the event as a score update request body."""
        return {
            "tournamentId": self.tournament_id,
            "id": self.match_id,
            "score": {
                "home": self.home_team_score,
                "visitor": self.visitor_team_score,
            },
        }
