"""Match log operations.

Every write runs duplicate check -> persist -> full stats recompute
before returning, so a caller reading stats right after a successful
write sees the new snapshot.

If the recompute fails after the match was committed, the match write
stays and StatsRefreshError is raised. Nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import replace

from sqlalchemy.exc import SQLAlchemyError

from cricket_tracker import config
from cricket_tracker.aggregation.career import refresh_player_stats
from cricket_tracker.core.duplicates import ensure_unique, needs_duplicate_check, to_day
from cricket_tracker.core.errors import (
    DuplicateRecordError,
    NotFoundError,
    StatsRefreshError,
    StoreError,
)
from cricket_tracker.db import repo
from cricket_tracker.db.repo import DbSession
from cricket_tracker.models.domain import MatchEntity, MatchFields, PlayerStatsEntity

logger = logging.getLogger(__name__)


@contextmanager
def _store_errors(session: DbSession, action: str) -> Iterator[None]:
    """Roll back and re-raise SQLAlchemy failures as StoreError."""
    try:
        yield
    except SQLAlchemyError as e:
        repo.rollback(session)
        logger.error(f"Store failure while {action}: {e}")
        raise StoreError(f"Store failure while {action}") from e


def _check_duplicate(
    records: Sequence[MatchEntity],
    fields: MatchFields,
    exclude_id: str | None = None,
) -> None:
    try:
        ensure_unique(records, fields.match_date, fields.opponent, exclude_id=exclude_id)
    except DuplicateRecordError:
        logger.warning(f"Rejected duplicate match against {fields.opponent} on {fields.match_date}")
        raise


def _refresh_after_write(session: DbSession, subject_id: str, match_id: str) -> None:
    try:
        refresh_player_stats(session, subject_id)
    except Exception as e:
        repo.rollback(session)
        logger.error(f"Match {match_id} saved but stats refresh failed: {e}")
        raise StatsRefreshError(
            f"Match {match_id} was saved but player stats could not be refreshed",
            match_id=match_id,
        ) from e


def _normalized(fields: MatchFields) -> MatchFields:
    return replace(fields, match_date=to_day(fields.match_date), opponent=fields.opponent.strip())


# ============================================================================
# Writes
# ============================================================================


def add_match(session: DbSession, fields: MatchFields, subject_id: str | None = None) -> str:
    """Record a new match and refresh career stats.

    Args:
        session: Database session.
        fields: Match content.
        subject_id: Subject to record for. Defaults to config.SUBJECT_ID.

    Returns:
        The new match ID.

    Raises:
        DuplicateRecordError: Same opponent already played on that day.
        StoreError: Persistence failed.
        StatsRefreshError: Match saved but stats recompute failed.
    """
    subject_id = subject_id or config.SUBJECT_ID
    fields = _normalized(fields)

    with _store_errors(session, "adding match"):
        _check_duplicate(repo.list_matches(session, subject_id), fields)
        created = repo.create_match(session, subject_id, fields)
        repo.commit(session)

    logger.info(f"Match added: {created.match_id} vs {created.opponent} on {created.match_date}")

    _refresh_after_write(session, subject_id, created.match_id)
    return created.match_id


def update_match(session: DbSession, match_id: str, fields: MatchFields) -> None:
    """Replace a match's content and refresh career stats.

    The duplicate check only runs when the date or opponent changed; it
    excludes the match itself.

    Raises:
        NotFoundError: No match with match_id.
        DuplicateRecordError: New date/opponent collides with another match.
        StoreError: Persistence failed.
        StatsRefreshError: Match saved but stats recompute failed.
    """
    fields = _normalized(fields)

    with _store_errors(session, "updating match"):
        existing = repo.get_match(session, match_id)
        if existing is None:
            raise NotFoundError(match_id)

        if needs_duplicate_check(existing, fields.match_date, fields.opponent):
            _check_duplicate(
                repo.list_matches(session, existing.subject_id), fields, exclude_id=match_id
            )

        repo.replace_match(session, match_id, fields)
        repo.commit(session)

    logger.info(f"Match updated: {match_id}")

    _refresh_after_write(session, existing.subject_id, match_id)


def delete_match(session: DbSession, match_id: str) -> None:
    """Delete a match and refresh career stats.

    Raises:
        NotFoundError: No match with match_id.
        StoreError: Persistence failed.
        StatsRefreshError: Match deleted but stats recompute failed.
    """
    with _store_errors(session, "deleting match"):
        existing = repo.get_match(session, match_id)
        if existing is None:
            raise NotFoundError(match_id)

        repo.delete_match(session, match_id)
        repo.commit(session)

    logger.info(f"Match deleted: {match_id}")

    _refresh_after_write(session, existing.subject_id, match_id)


# ============================================================================
# Reads
# ============================================================================


def get_match(session: DbSession, match_id: str) -> MatchEntity | None:
    """Get one match, or None if it does not exist."""
    with _store_errors(session, "reading match"):
        return repo.get_match(session, match_id)


def get_all_matches(session: DbSession, subject_id: str | None = None) -> list[MatchEntity]:
    """All matches of a subject, newest match date first."""
    subject_id = subject_id or config.SUBJECT_ID
    with _store_errors(session, "listing matches"):
        matches = repo.list_matches(session, subject_id)
    return sorted(matches, key=lambda m: m.match_date, reverse=True)


def get_recent_matches(
    session: DbSession,
    subject_id: str | None = None,
    limit: int | None = None,
) -> list[MatchEntity]:
    """The `limit` most recent matches, newest first."""
    limit = config.RECENT_MATCHES_LIMIT if limit is None else limit
    return get_all_matches(session, subject_id)[: max(limit, 0)]


def get_player_stats(session: DbSession, subject_id: str | None = None) -> PlayerStatsEntity:
    """Stored career stats snapshot.

    The snapshot is computed and persisted on first read if it does not
    exist yet; otherwise it is returned as stored.
    """
    subject_id = subject_id or config.SUBJECT_ID
    with _store_errors(session, "reading player stats"):
        stats = repo.get_player_stats(session, subject_id)
        if stats is None:
            logger.info(f"No stats snapshot for {subject_id}, computing one")
            stats = refresh_player_stats(session, subject_id)
    return stats
