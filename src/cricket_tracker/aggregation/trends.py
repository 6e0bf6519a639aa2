"""Chart series derived from matches and the stats snapshot.

Plain projections of stored values; no smoothing or modelling.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from cricket_tracker.models.domain import MatchEntity, PlayerStatsEntity


@dataclass
class TrendPoint:
    """One match on the performance trend chart."""

    match_date: date
    opponent: str
    runs_scored: int
    wickets_taken: int


def performance_trend(matches: Sequence[MatchEntity], limit: int = 10) -> list[TrendPoint]:
    """Runs and wickets for the most recent matches, oldest first.

    Args:
        matches: Matches in any order.
        limit: How many of the most recent matches to include.
    """
    if limit <= 0:
        return []

    newest_first = sorted(matches, key=lambda m: m.match_date, reverse=True)
    recent = newest_first[:limit]
    recent.reverse()

    return [
        TrendPoint(
            match_date=m.match_date,
            opponent=m.opponent,
            runs_scored=m.runs_scored or 0,
            wickets_taken=m.wickets_taken or 0,
        )
        for m in recent
    ]


def contribution_breakdown(stats: PlayerStatsEntity) -> dict[str, int]:
    """Career runs, wickets and catches for the contribution chart."""
    return {
        "runs": stats.total_runs,
        "wickets": stats.total_wickets,
        "catches": stats.total_catches,
    }
