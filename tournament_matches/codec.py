"""
JSON codec for the tournament domain.

Decoding goes through the pydantic models, which declare the accepted key
variants in one place:
- Score: `home`/`visitor`, falling back to `homeTeamScore`/`visitorTeamScore`
- Match: nested `home`/`visitor` team objects or flat `homeTeamId`/`visitorTeamId`,
  `score` falling back to `matchScore`

Encoding is explicit because the output omits empty identifiers rather than
emitting empty strings.
"""

import json
from typing import Any, Iterable, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from tournament_matches.exceptions import ParseError
from tournament_matches.models import (
    Group,
    Match,
    Score,
    ScoreUpdateEvent,
    Team,
    Tournament,
    TournamentFormat,
)
from tournament_matches.types import (
    GroupDict,
    MatchDict,
    MatchTeamDict,
    ScoreDict,
    TeamDict,
    TournamentDict,
    TournamentFormatDict,
)

ModelT = TypeVar("ModelT", bound=BaseModel)
Payload = Union[str, bytes, bytearray, dict, list]


# =============================================================================
# DECODING
# =============================================================================

def load_json(payload: Payload) -> Any:
    """
    Parse a raw payload into JSON values.

    Already parsed values (dict/list) are returned unchanged.

    Raises:
        ParseError: If the payload is not valid UTF-8 JSON
    """
    if isinstance(payload, (bytes, bytearray)):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError(f"Payload is not valid UTF-8: {e}") from e

    if isinstance(payload, str):
        try:
            return json.loads(payload)
        except (ValueError, RecursionError) as e:
            raise ParseError(f"Invalid JSON: {e}") from e

    return payload


def _describe(error: ValidationError) -> str:
    """Summarize the first pydantic error as `field: message`."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if location:
        return f"{location}: {first.get('msg', 'invalid value')}"
    return first.get("msg", "invalid value")


def from_json(model: Type[ModelT], payload: Payload) -> ModelT:
    """
    Decode a JSON object into a domain model.

    Args:
        model: Target model class
        payload: Raw JSON text/bytes or an already parsed dict

    Returns:
        Fully populated model instance

    Raises:
        ParseError: If the payload is not a JSON object, a required field is
                    missing, or a field has the wrong type
    """
    data = load_json(payload)
    if not isinstance(data, dict):
        raise ParseError(f"{model.__name__} must be a JSON object")

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ParseError(f"Invalid {model.__name__}: {_describe(e)}") from e


def decode_team(payload: Payload) -> Team:
    return from_json(Team, payload)


def decode_score(payload: Payload) -> Score:
    return from_json(Score, payload)


def decode_match(payload: Payload) -> Match:
    return from_json(Match, payload)


def decode_tournament(payload: Payload) -> Tournament:
    return from_json(Tournament, payload)


def decode_group(payload: Payload) -> Group:
    return from_json(Group, payload)


def decode_score_update_event(payload: Payload) -> ScoreUpdateEvent:
    """Decode a message bus payload. Every field is required."""
    return from_json(ScoreUpdateEvent, payload)


def decode_matches(payload: Payload) -> List[Optional[Match]]:
    """
    Decode an array of matches, keeping `null` entries as empty bracket slots.

    Raises:
        ParseError: If the payload is not an array or an entry is invalid
    """
    data = load_json(payload)
    if not isinstance(data, list):
        raise ParseError("Matches must be a JSON array")
    return [None if item is None else decode_match(item) for item in data]


# =============================================================================
# ENCODING
# =============================================================================

def team_to_json(team: Team) -> TeamDict:
    data: TeamDict = {"name": team.name}
    if team.id:
        data["id"] = team.id
    return data


def score_to_json(score: Score) -> ScoreDict:
    return {"home": score.home, "visitor": score.visitor}


def _match_team(team_id: str, team_name: str) -> Optional[MatchTeamDict]:
    # a team without an id is not emitted at all
    if not team_id:
        return None
    team: MatchTeamDict = {"id": team_id}
    if team_name:
        team["name"] = team_name
    return team


def match_to_json(match: Match) -> MatchDict:
    """
    Encode a match.

    - `home`/`visitor` only when the team id is set
    - `round`, or the bracket slot name under `round` when no round label is set
    - `score` always
    """
    data: MatchDict = {}

    if match.id:
        data["id"] = match.id

    home = _match_team(match.home_team_id, match.home_team_name)
    if home is not None:
        data["home"] = home

    visitor = _match_team(match.visitor_team_id, match.visitor_team_name)
    if visitor is not None:
        data["visitor"] = visitor

    if match.round:
        data["round"] = match.round
    elif match.name:
        data["round"] = match.name

    data["score"] = score_to_json(match.score)
    return data


def matches_to_json(matches: Iterable[Optional[Match]]) -> List[Optional[MatchDict]]:
    """Encode a sequence of matches. Empty slots become `null` in place."""
    return [None if match is None else match_to_json(match) for match in matches]


def tournament_format_to_json(fmt: TournamentFormat) -> TournamentFormatDict:
    return {
        "maxTeamsPerGroup": fmt.max_teams_per_group,
        "numberOfGroups": fmt.number_of_groups,
        "type": fmt.type.value,
    }


def tournament_to_json(tournament: Tournament) -> TournamentDict:
    data: TournamentDict = {"name": tournament.name}
    if tournament.id:
        data["id"] = tournament.id
    data["format"] = tournament_format_to_json(tournament.format)
    return data


def group_to_json(group: Group) -> GroupDict:
    data: GroupDict = {"name": group.name, "tournamentId": group.tournament_id}
    if group.id:
        data["id"] = group.id
    data["teams"] = [team_to_json(team) for team in group.teams]
    return data


def groups_to_json(groups: Iterable[Group]) -> List[GroupDict]:
    return [group_to_json(group) for group in groups]
