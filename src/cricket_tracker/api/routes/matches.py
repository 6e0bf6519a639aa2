"""Matches API endpoints.

POST   /api/matches            - Record a match
GET    /api/matches            - List matches, newest first
GET    /api/matches/{match_id} - Get one match
PUT    /api/matches/{match_id} - Replace a match
DELETE /api/matches/{match_id} - Delete a match
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from cricket_tracker.api.app import get_db_session
from cricket_tracker.core.errors import DuplicateRecordError, NotFoundError, StoreError
from cricket_tracker.db.repo import DbSession
from cricket_tracker.models.domain import MatchEntity
from cricket_tracker.models.types import MatchCreatedResponse, MatchDetail, MatchInput
from cricket_tracker.service import matches as match_service

router = APIRouter()


def _build_match_detail(match: MatchEntity) -> MatchDetail:
    return MatchDetail(
        match_id=match.match_id,
        match_date=match.match_date,
        opponent=match.opponent,
        runs_scored=match.runs_scored,
        balls_faced=match.balls_faced,
        wickets_taken=match.wickets_taken,
        overs_bowled=match.overs_bowled,
        runs_conceded=match.runs_conceded,
        catches=match.catches,
        created_at=match.created_at,
        updated_at=match.updated_at,
    )


@router.post("/matches", response_model=MatchCreatedResponse, status_code=201)
def create_match(
    match: MatchInput,
    session: DbSession = Depends(get_db_session),
) -> MatchCreatedResponse:
    """Record a new match.

    Raises:
        HTTPException: 409 on duplicate, 503 on store failure.
    """
    try:
        match_id = match_service.add_match(session, match.to_fields())
    except DuplicateRecordError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e

    return MatchCreatedResponse(match_id=match_id)


@router.get("/matches", response_model=list[MatchDetail])
def list_matches(
    limit: int | None = Query(default=None, ge=1),
    session: DbSession = Depends(get_db_session),
) -> list[MatchDetail]:
    """List matches newest first; `limit` keeps only the most recent ones."""
    try:
        if limit is None:
            matches = match_service.get_all_matches(session)
        else:
            matches = match_service.get_recent_matches(session, limit=limit)
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e

    return [_build_match_detail(m) for m in matches]


@router.get("/matches/{match_id}", response_model=MatchDetail)
def get_match(
    match_id: str,
    session: DbSession = Depends(get_db_session),
) -> MatchDetail:
    """Get match detail.

    Raises:
        HTTPException: 404 if match not found.
    """
    try:
        match = match_service.get_match(session, match_id)
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e

    if match is None:
        raise HTTPException(status_code=404, detail="Match not found")

    return _build_match_detail(match)


@router.put("/matches/{match_id}", status_code=204)
def update_match(
    match_id: str,
    match: MatchInput,
    session: DbSession = Depends(get_db_session),
) -> Response:
    """Replace a match's content.

    Raises:
        HTTPException: 404 if not found, 409 on duplicate, 503 on store failure.
    """
    try:
        match_service.update_match(session, match_id, match.to_fields())
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail="Match not found") from e
    except DuplicateRecordError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e

    return Response(status_code=204)


@router.delete("/matches/{match_id}", status_code=204)
def delete_match(
    match_id: str,
    session: DbSession = Depends(get_db_session),
) -> Response:
    """Delete a match.

    Raises:
        HTTPException: 404 if not found, 503 on store failure.
    """
    try:
        match_service.delete_match(session, match_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail="Match not found") from e
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e

    return Response(status_code=204)
