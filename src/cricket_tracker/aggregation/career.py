"""Career statistics aggregation.

Rebuilds the whole stats snapshot from the full match list on every
call. There are no incremental counters, so edits and deletes need no
delta handling and repeated recomputation is idempotent.

Domain logic is pure - database operations go through repo.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from cricket_tracker.db import repo
from cricket_tracker.db.repo import DbSession
from cricket_tracker.models.domain import MatchEntity, PlayerStatsEntity

logger = logging.getLogger(__name__)

_TWO_PLACES = Decimal("0.01")


def round_half_away(value: float, places: Decimal = _TWO_PLACES) -> float:
    """Round to a fixed number of decimals, halves away from zero.

    Goes through the shortest decimal repr of value, so 2.675 rounds
    to 2.68 rather than the 2.67 that round() gives.
    """
    return float(Decimal(repr(value)).quantize(places, rounding=ROUND_HALF_UP))


def _ratio(numerator: float, denominator: float, scale: float = 1.0) -> float:
    """numerator / denominator * scale, or 0 when denominator is 0."""
    if denominator <= 0:
        return 0.0
    return round_half_away(numerator / denominator * scale)


def compute_player_stats(subject_id: str, matches: Sequence[MatchEntity]) -> PlayerStatsEntity:
    """Compute the career stats snapshot from a subject's matches.

    Pure function - no database access. The result depends only on the
    set of matches, not their order.

    Overs are summed as stored. Their fraction digit counts balls, so the
    total is an approximation once the fractions add past .5 (two spells
    of 3.4 sum to 6.8, which is really 7.2 overs); economy rate is
    defined against this same total.

    Args:
        subject_id: Subject the snapshot belongs to.
        matches: All matches of the subject.

    Returns:
        PlayerStatsEntity with totals and rounded derived metrics.
    """
    if not matches:
        return PlayerStatsEntity(subject_id=subject_id)

    total_runs = sum(m.runs_scored or 0 for m in matches)
    total_balls_faced = sum(m.balls_faced or 0 for m in matches)
    total_wickets = sum(m.wickets_taken or 0 for m in matches)
    total_runs_conceded = sum(m.runs_conceded or 0 for m in matches)
    total_catches = sum(m.catches or 0 for m in matches)

    # fsum keeps the float total independent of summation order
    total_overs_bowled = math.fsum(m.overs_bowled or 0.0 for m in matches)

    innings_with_runs = sum(1 for m in matches if (m.runs_scored or 0) > 0)

    return PlayerStatsEntity(
        subject_id=subject_id,
        total_matches=len(matches),
        total_runs=total_runs,
        total_balls_faced=total_balls_faced,
        total_wickets=total_wickets,
        total_overs_bowled=total_overs_bowled,
        total_runs_conceded=total_runs_conceded,
        total_catches=total_catches,
        batting_average=_ratio(total_runs, innings_with_runs),
        strike_rate=_ratio(total_runs, total_balls_faced, scale=100.0),
        bowling_average=_ratio(total_runs_conceded, total_wickets),
        economy_rate=_ratio(total_runs_conceded, total_overs_bowled),
    )


def refresh_player_stats(session: DbSession, subject_id: str) -> PlayerStatsEntity:
    """Recompute and persist the stats snapshot for a subject.

    Re-reads every match, replaces the stored snapshot and commits.

    Args:
        session: Database session.
        subject_id: Subject to recompute.

    Returns:
        The persisted snapshot.
    """
    matches = repo.list_matches(session, subject_id)
    snapshot = compute_player_stats(subject_id, matches)

    saved = repo.save_player_stats(session, snapshot)
    repo.commit(session)

    logger.info(
        f"Player stats refreshed for {subject_id}: "
        f"{snapshot.total_matches} matches, {snapshot.total_runs} runs, "
        f"{snapshot.total_wickets} wickets"
    )
    return saved
