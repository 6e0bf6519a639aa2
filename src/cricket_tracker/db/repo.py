"""Repository pattern for database operations.

Encapsulates all SQLAlchemy queries, keeping domain logic pure.
Returns domain models (not SQLAlchemy entities) to external callers.
"""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import func
from sqlalchemy.orm import Session

from cricket_tracker.db.schema import Match, PlayerStats
from cricket_tracker.models.domain import MatchEntity, MatchFields, PlayerStatsEntity

if TYPE_CHECKING:
    from sqlalchemy.orm import Session as DbSession
else:
    DbSession = Session

# Re-export for external use
__all__ = ["DbSession"]


# ============================================================================
# Converters: SQLAlchemy -> Domain
# ============================================================================


def _match_to_entity(match: Match) -> MatchEntity:
    """Convert SQLAlchemy Match to domain entity."""
    return MatchEntity(
        match_id=match.match_id,
        subject_id=match.subject_id,
        match_date=match.match_date,
        opponent=match.opponent,
        runs_scored=match.runs_scored or 0,
        balls_faced=match.balls_faced or 0,
        wickets_taken=match.wickets_taken or 0,
        overs_bowled=match.overs_bowled or 0.0,
        runs_conceded=match.runs_conceded or 0,
        catches=match.catches or 0,
        created_at=match.created_at,
        updated_at=match.updated_at,
    )


def _stats_to_entity(stats: PlayerStats) -> PlayerStatsEntity:
    """Convert SQLAlchemy PlayerStats to domain entity."""
    return PlayerStatsEntity(
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


def _apply_fields(match: Match, fields: MatchFields) -> None:
    match.match_date = fields.match_date
    match.opponent = fields.opponent
    match.runs_scored = fields.runs_scored or 0
    match.balls_faced = fields.balls_faced or 0
    match.wickets_taken = fields.wickets_taken or 0
    match.overs_bowled = fields.overs_bowled or 0.0
    match.runs_conceded = fields.runs_conceded or 0
    match.catches = fields.catches or 0


# ============================================================================
# Match Repository
# ============================================================================


def get_match(session: DbSession, match_id: str) -> MatchEntity | None:
    """Get match by ID."""
    match = session.get(Match, match_id)
    return _match_to_entity(match) if match else None


def list_matches(session: DbSession, subject_id: str) -> list[MatchEntity]:
    """Get all matches for a subject, in no particular order."""
    matches = session.query(Match).filter(Match.subject_id == subject_id).all()
    return [_match_to_entity(m) for m in matches]


def create_match(session: DbSession, subject_id: str, fields: MatchFields) -> MatchEntity:
    """Insert a new match with a generated ID.

    Flushes so the database-assigned timestamps are available.
    """
    match = Match(match_id=str(uuid.uuid4()), subject_id=subject_id)
    _apply_fields(match, fields)
    session.add(match)
    session.flush()
    return _match_to_entity(match)


def replace_match(session: DbSession, match_id: str, fields: MatchFields) -> MatchEntity | None:
    """Replace all user fields of a match.

    match_id, subject_id and created_at are kept; updated_at is refreshed
    even if no field value changed.

    Returns:
        Updated entity, or None if the match does not exist.
    """
    match = session.get(Match, match_id)
    if match is None:
        return None
    _apply_fields(match, fields)
    match.updated_at = func.current_timestamp()
    session.flush()
    return _match_to_entity(match)


def delete_match(session: DbSession, match_id: str) -> bool:
    """Delete a match. Returns False if it did not exist."""
    match = session.get(Match, match_id)
    if match is None:
        return False
    session.delete(match)
    session.flush()
    return True


# ============================================================================
# Player Stats Repository
# ============================================================================


def get_player_stats(session: DbSession, subject_id: str) -> PlayerStatsEntity | None:
    """Get the stored stats snapshot for a subject."""
    stats = session.get(PlayerStats, subject_id)
    return _stats_to_entity(stats) if stats else None


def save_player_stats(session: DbSession, entity: PlayerStatsEntity) -> PlayerStatsEntity:
    """Create or fully replace the stats snapshot for entity.subject_id."""
    stats = session.get(PlayerStats, entity.subject_id)
    if stats is None:
        stats = PlayerStats(subject_id=entity.subject_id)
        session.add(stats)

    stats.total_matches = entity.total_matches
    stats.total_runs = entity.total_runs
    stats.total_balls_faced = entity.total_balls_faced
    stats.total_wickets = entity.total_wickets
    stats.total_overs_bowled = entity.total_overs_bowled
    stats.total_runs_conceded = entity.total_runs_conceded
    stats.total_catches = entity.total_catches
    stats.batting_average = entity.batting_average
    stats.strike_rate = entity.strike_rate
    stats.bowling_average = entity.bowling_average
    stats.economy_rate = entity.economy_rate
    stats.updated_at = func.current_timestamp()

    session.flush()
    return _stats_to_entity(stats)


# ============================================================================
# Batch Operations
# ============================================================================


def commit(session: DbSession) -> None:
    """Commit current transaction."""
    session.commit()


def rollback(session: DbSession) -> None:
    """Roll back current transaction."""
    session.rollback()
