"""Match API route definitions."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import JSONResponse

from tournament_matches.api.dependencies import get_match_delegate
from tournament_matches.codec import match_to_json, matches_to_json
from tournament_matches.delegate import MatchDelegate
from tournament_matches.exceptions import (
    DelegateError,
    DuplicateError,
    InvalidFormatError,
    NotFoundError,
    ScoreValidationError,
)
from tournament_matches.services.match_filter import filter_matches
from tournament_matches.services.score_validation import validate_score_update

logger = logging.getLogger(__name__)
router = APIRouter()


def map_error_to_status(error: DelegateError) -> int:
    """Map a delegate failure to an HTTP status code."""
    if isinstance(error, NotFoundError):
        return 404
    if isinstance(error, InvalidFormatError):
        return 400
    if isinstance(error, DuplicateError):
        return 409
    return 500


def _delegate_failure(error: DelegateError, context: str) -> HTTPException:
    status_code = map_error_to_status(error)
    if status_code >= 500:
        logger.error(f"Error {context}: {error}")
    else:
        logger.warning(f"Error {context}: {error}")
    return HTTPException(status_code=status_code, detail=error.message or "Error")


@router.get("/tournaments/{tournament_id}/matches")
async def list_matches(
    tournament_id: str,
    show_matches: Optional[str] = Query(
        default=None,
        alias="showMatches",
        description="Filter: played, pending (anything else returns all)",
    ),
    delegate: MatchDelegate = Depends(get_match_delegate),
) -> JSONResponse:
    """List the matches of a tournament.

    Args:
        tournament_id: The tournament ID
        show_matches: Optional play state filter

    Returns:
        Array of matches in bracket order. Empty bracket slots are `null`
        when no filter is given.
    """
    try:
        matches = delegate.get_matches(tournament_id)
    except DelegateError as e:
        raise _delegate_failure(e, f"fetching matches for tournament {tournament_id}")
    except Exception as e:
        logger.error(f"Error fetching matches for tournament {tournament_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch matches")

    return JSONResponse(content=matches_to_json(filter_matches(matches, show_matches)))


@router.get("/tournaments/{tournament_id}/matches/{match_id}")
async def get_match(
    tournament_id: str,
    match_id: str,
    delegate: MatchDelegate = Depends(get_match_delegate),
) -> JSONResponse:
    """Get a single match.

    Args:
        tournament_id: The tournament ID
        match_id: The match ID

    Returns:
        The match
    """
    try:
        match = delegate.get_match(tournament_id, match_id)
    except DelegateError as e:
        raise _delegate_failure(e, f"fetching match {match_id}")
    except Exception as e:
        logger.error(f"Error fetching match {match_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch match")

    return JSONResponse(content=match_to_json(match))


@router.patch("/tournaments/{tournament_id}/matches/{match_id}", status_code=204)
async def update_match_score(
    tournament_id: str,
    match_id: str,
    request: Request,
    delegate: MatchDelegate = Depends(get_match_delegate),
) -> Response:
    """Record a new score for a match.

    The body is `{"score": {"home": int, "visitor": int}}`. It may repeat
    `tournamentId` and `id`, which must then equal the path values.

    Returns:
        204 No Content on success, 400 with the failed check as detail
    """
    body = await request.body()

    try:
        mutation = validate_score_update(body, tournament_id, match_id)
    except ScoreValidationError as e:
        logger.info(f"Rejected score update for match {match_id}: {e.message}")
        raise HTTPException(status_code=400, detail=e.message)

    try:
        delegate.update_match_score(mutation)
    except DelegateError as e:
        raise _delegate_failure(e, f"updating score of match {match_id}")
    except Exception as e:
        logger.error(f"Error updating score of match {match_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to update match score")

    return Response(status_code=204)
