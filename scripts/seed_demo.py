#!/usr/bin/env python3
"""Seed a demo database with sample matches.

Usage:
    python scripts/seed_demo.py [--reset]

This script:
1. Initializes the demo database
2. Records a handful of matches through the match service
3. Prints the resulting career stats snapshot
"""

from __future__ import annotations

import argparse
import sys
from datetime import date
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from cricket_tracker.core.errors import DuplicateRecordError  # noqa: E402
from cricket_tracker.db.session import get_db_session, init_db  # noqa: E402
from cricket_tracker.models.domain import MatchFields  # noqa: E402
from cricket_tracker.service.matches import add_match, get_player_stats  # noqa: E402

DEMO_DB_PATH = PROJECT_ROOT / "demo.db"

DEMO_MATCHES = [
    MatchFields(date(2025, 1, 10), "India", runs_scored=50, balls_faced=40, catches=1),
    MatchFields(
        date(2025, 1, 17), "Australia", wickets_taken=3, overs_bowled=4.0, runs_conceded=20
    ),
    MatchFields(
        date(2025, 1, 24),
        "England",
        runs_scored=30,
        balls_faced=20,
        wickets_taken=1,
        overs_bowled=2.3,
        runs_conceded=15,
        catches=2,
    ),
    MatchFields(
        date(2025, 2, 2),
        "New Zealand",
        runs_scored=12,
        balls_faced=15,
        wickets_taken=2,
        overs_bowled=3.4,
        runs_conceded=28,
    ),
]


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--reset", action="store_true", help="Delete the demo database first")
    args = parser.parse_args()

    if args.reset and DEMO_DB_PATH.exists():
        DEMO_DB_PATH.unlink()
        print(f"Removed {DEMO_DB_PATH}")

    init_db(DEMO_DB_PATH)

    with get_db_session(DEMO_DB_PATH) as session:
        for fields in DEMO_MATCHES:
            try:
                match_id = add_match(session, fields)
                print(f"  Added {fields.opponent} ({fields.match_date}): {match_id}")
            except DuplicateRecordError as e:
                print(f"  Skipped: {e}")

        stats = get_player_stats(session)

    print("\nCareer stats:")
    print(f"  Matches:         {stats.total_matches}")
    print(f"  Runs:            {stats.total_runs}")
    print(f"  Batting average: {stats.batting_average:.2f}")
    print(f"  Strike rate:     {stats.strike_rate:.2f}")
    print(f"  Wickets:         {stats.total_wickets}")
    print(f"  Bowling average: {stats.bowling_average:.2f}")
    print(f"  Economy rate:    {stats.economy_rate:.2f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
