"""
Score update validation shared by the HTTP and message bus entry points.

Turns a raw score update request into the canonical mutation handed to the
match delegate: a Match carrying only the tournament id, the match id and the
new score. Checks run in a fixed order and the first failure wins:

1. body is valid JSON
2. a score object with integer home/visitor values is present
3. both values are non-negative
4. identifiers in the body agree with the addressed match (strict mode only)
"""

from typing import Any, Dict, Tuple, Type

from pydantic import BaseModel

from tournament_matches.codec import Payload, decode_match, decode_score, load_json
from tournament_matches.exceptions import (
    IdentityMismatchError,
    InvalidJsonError,
    InvalidRangeError,
    InvalidShapeError,
    ParseError,
)
from tournament_matches.models import Match, Score

INVALID_JSON = "Invalid JSON format"
MISSING_SCORE = "Missing or invalid score object"
NON_INTEGER_SCORE = "score must contain integer home and visitor"
NEGATIVE_SCORE = "Scores must be non-negative"
TOURNAMENT_MISMATCH = "Tournament ID in body does not match path"
MATCH_MISMATCH = "Match ID in body does not match path"


def _accepted_keys(model: Type[BaseModel], field: str) -> Tuple[str, ...]:
    """Keys the model reads for a field, in priority order."""
    alias = model.model_fields[field].validation_alias
    return tuple(alias.choices) if alias is not None else (field,)


def _first_present(data: Dict[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def extract_score(body: Any) -> Score:
    """
    Pull the score out of a request body.

    Accepts the same key variants as the Match/Score codec, but unlike the
    codec both sides are mandatory.

    Raises:
        InvalidShapeError: If the score object is missing or not integer valued
    """
    if not isinstance(body, dict):
        raise InvalidShapeError(MISSING_SCORE)

    score_data = _first_present(body, _accepted_keys(Match, "score"))
    if not isinstance(score_data, dict):
        raise InvalidShapeError(MISSING_SCORE)

    for side in ("home", "visitor"):
        if not _is_int(_first_present(score_data, _accepted_keys(Score, side))):
            raise InvalidShapeError(NON_INTEGER_SCORE)

    return decode_score(score_data)


def check_score_range(score: Score) -> None:
    """Raises InvalidRangeError for negative scores."""
    if score.home < 0 or score.visitor < 0:
        raise InvalidRangeError(NEGATIVE_SCORE)


def check_identity(body: Dict[str, Any], tournament_id: str, match_id: str) -> None:
    """
    Reject bodies whose identifiers disagree with the addressed match.

    Identifiers missing from the body are fine.

    Raises:
        InvalidShapeError: If the body identifiers are not strings
        IdentityMismatchError: If a body identifier differs
    """
    try:
        candidate = decode_match(body)
    except ParseError as e:
        raise InvalidShapeError(e.message) from e

    if candidate.tournament_id and candidate.tournament_id != tournament_id:
        raise IdentityMismatchError(TOURNAMENT_MISMATCH)
    if candidate.id and candidate.id != match_id:
        raise IdentityMismatchError(MATCH_MISMATCH)


def validate_score_update(
    payload: Payload,
    tournament_id: str,
    match_id: str,
    strict_identity: bool = True,
    enforce_range: bool = True,
) -> Match:
    """
    Validate a score update request and build the canonical mutation.

    Args:
        payload: Raw request body (text/bytes) or an already parsed dict
        tournament_id: Addressed tournament, authoritative over the body
        match_id: Addressed match, authoritative over the body
        strict_identity: Compare body identifiers against the addressed ones
        enforce_range: Reject negative scores

    Returns:
        Match with only tournament_id, id and score set

    Raises:
        ScoreValidationError: Subclass naming the first failed check
    """
    try:
        body = load_json(payload)
    except ParseError as e:
        raise InvalidJsonError(INVALID_JSON) from e

    score = extract_score(body)

    if enforce_range:
        check_score_range(score)

    if strict_identity:
        check_identity(body, tournament_id, match_id)

    return Match(id=match_id, tournament_id=tournament_id, score=score)

