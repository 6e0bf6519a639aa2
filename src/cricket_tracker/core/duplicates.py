"""Duplicate match detection.

Two matches collide when they are against the same opponent (compared
case-insensitively) on the same calendar day. Time-of-day, if present,
is dropped on both sides before comparing.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from cricket_tracker.core.errors import DuplicateRecordError
from cricket_tracker.models.domain import MatchEntity


def to_day(value: date | datetime) -> date:
    """Truncate a date or datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def _opponent_key(opponent: str) -> str:
    return opponent.lower()


def find_duplicate(
    records: Iterable[MatchEntity],
    match_date: date | datetime,
    opponent: str,
    exclude_id: str | None = None,
) -> MatchEntity | None:
    """Find an existing match that collides with (match_date, opponent).

    Args:
        records: All current matches for the subject, in any order.
        match_date: Candidate match date.
        opponent: Candidate opponent name.
        exclude_id: Match to skip, so a record never collides with itself.

    Returns:
        The first colliding match, or None.
    """
    day = to_day(match_date)
    key = _opponent_key(opponent)

    for record in records:
        if exclude_id is not None and record.match_id == exclude_id:
            continue
        if _opponent_key(record.opponent) != key:
            continue
        if to_day(record.match_date) == day:
            return record

    return None


def ensure_unique(
    records: Iterable[MatchEntity],
    match_date: date | datetime,
    opponent: str,
    exclude_id: str | None = None,
) -> None:
    """Raise DuplicateRecordError if (match_date, opponent) collides.

    Raises:
        DuplicateRecordError: Carrying the candidate opponent name.
    """
    if find_duplicate(records, match_date, opponent, exclude_id) is not None:
        raise DuplicateRecordError(opponent)


def needs_duplicate_check(
    existing: MatchEntity,
    match_date: date | datetime,
    opponent: str,
) -> bool:
    """Whether an update changes the fields the collision rule looks at.

    Only an optimization: checking anyway with exclude_id set gives the
    same outcome as skipping.
    """
    date_changed = to_day(match_date) != to_day(existing.match_date)
    opponent_changed = opponent != existing.opponent
    return date_changed or opponent_changed
