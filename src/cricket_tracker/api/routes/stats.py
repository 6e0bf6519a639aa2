"""Stats API endpoints.

GET /api/stats       - Career stats snapshot
GET /api/stats/trend - Chart data for recent matches and contribution split
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from cricket_tracker import config
from cricket_tracker.aggregation.trends import contribution_breakdown, performance_trend
from cricket_tracker.api.app import get_db_session
from cricket_tracker.core.errors import StoreError
from cricket_tracker.db.repo import DbSession
from cricket_tracker.models.domain import PlayerStatsEntity
from cricket_tracker.models.types import PlayerStatsDetail, TrendOverview, TrendPointDetail
from cricket_tracker.service import matches as match_service

router = APIRouter()


def _build_stats_detail(stats: PlayerStatsEntity) -> PlayerStatsDetail:
    return PlayerStatsDetail(
        subject_id=stats.subject_id,
        total_matches=stats.total_matches,
        total_runs=stats.total_runs,
        total_balls_faced=stats.total_balls_faced,
        total_wickets=stats.total_wickets,
        total_overs_bowled=stats.total_overs_bowled,
        total_runs_conceded=stats.total_runs_conceded,
        total_catches=stats.total_catches,
        batting_average=stats.batting_average,
        strike_rate=stats.strike_rate,
        bowling_average=stats.bowling_average,
        economy_rate=stats.economy_rate,
        updated_at=stats.updated_at,
    )


@router.get("/stats", response_model=PlayerStatsDetail)
def get_stats(
    session: DbSession = Depends(get_db_session),
) -> PlayerStatsDetail:
    """Get the stored career stats snapshot, computing it on first read."""
    try:
        stats = match_service.get_player_stats(session)
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e

    return _build_stats_detail(stats)


@router.get("/stats/trend", response_model=TrendOverview)
def get_trend(
    limit: int = Query(default=config.TREND_MATCHES_LIMIT, ge=1),
    session: DbSession = Depends(get_db_session),
) -> TrendOverview:
    """Get runs/wickets for the last `limit` matches (oldest first) and career split."""
    try:
        matches = match_service.get_all_matches(session)
        stats = match_service.get_player_stats(session)
    except StoreError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e

    points = [
        TrendPointDetail(
            match_date=p.match_date,
            opponent=p.opponent,
            runs_scored=p.runs_scored,
            wickets_taken=p.wickets_taken,
        )
        for p in performance_trend(matches, limit=limit)
    ]
    return TrendOverview(points=points, contribution=contribution_breakdown(stats))
