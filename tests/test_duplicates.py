"""Tests for duplicate match detection."""

from datetime import date, datetime

import pytest

from cricket_tracker.core.duplicates import (
    ensure_unique,
    find_duplicate,
    needs_duplicate_check,
    to_day,
)
from cricket_tracker.core.errors import DuplicateRecordError
from cricket_tracker.models.domain import MatchEntity


def _match(match_id: str, match_date, opponent: str) -> MatchEntity:
    return MatchEntity(
        match_id=match_id,
        subject_id="local-player",
        match_date=match_date,
        opponent=opponent,
    )


@pytest.fixture
def records() -> list[MatchEntity]:
    return [
        _match("m1", date(2025, 1, 10), "india"),
        _match("m2", date(2025, 1, 17), "Australia"),
        _match("m3", datetime(2025, 1, 24, 14, 30), "England"),
    ]


class TestFindDuplicate:
    """Collision = same opponent (any case) on the same calendar day."""

    def test_opponent_compared_case_insensitively(self, records):
        found = find_duplicate(records, date(2025, 1, 10), "India")
        assert found is not None
        assert found.match_id == "m1"

    def test_different_day_is_not_duplicate(self, records):
        assert find_duplicate(records, date(2025, 1, 11), "India") is None

    def test_different_opponent_is_not_duplicate(self, records):
        assert find_duplicate(records, date(2025, 1, 10), "Pakistan") is None

    def test_time_of_day_ignored(self, records):
        """Same day, different clock times still collide."""
        found = find_duplicate(records, datetime(2025, 1, 24, 9, 0), "ENGLAND")
        assert found is not None
        assert found.match_id == "m3"

    def test_exclude_id_skips_own_record(self, records):
        assert find_duplicate(records, date(2025, 1, 10), "India", exclude_id="m1") is None

    def test_exclude_id_does_not_hide_others(self, records):
        records.append(_match("m4", date(2025, 1, 10), "INDIA"))
        found = find_duplicate(records, date(2025, 1, 10), "India", exclude_id="m1")
        assert found is not None
        assert found.match_id == "m4"

    def test_scan_order_does_not_matter(self, records):
        forward = find_duplicate(records, date(2025, 1, 17), "australia")
        backward = find_duplicate(list(reversed(records)), date(2025, 1, 17), "australia")
        assert forward == backward

    def test_empty_record_set(self):
        assert find_duplicate([], date(2025, 1, 10), "India") is None


class TestEnsureUnique:
    """ensure_unique raises with the opponent name."""

    def test_raises_with_opponent(self, records):
        with pytest.raises(DuplicateRecordError) as exc_info:
            ensure_unique(records, date(2025, 1, 10), "India")

        assert exc_info.value.opponent == "India"
        assert "India" in str(exc_info.value)

    def test_passes_for_new_pair(self, records):
        ensure_unique(records, date(2025, 2, 1), "India")


class TestNeedsDuplicateCheck:
    """Update-path shortcut agrees with the full check."""

    def test_unchanged_skips_check(self, records):
        assert needs_duplicate_check(records[0], date(2025, 1, 10), "india") is False

    def test_time_only_change_skips_check(self, records):
        assert needs_duplicate_check(records[2], date(2025, 1, 24), "England") is False

    def test_date_change_needs_check(self, records):
        assert needs_duplicate_check(records[0], date(2025, 1, 11), "india") is True

    def test_opponent_case_change_needs_check(self, records):
        assert needs_duplicate_check(records[0], date(2025, 1, 10), "India") is True

    @pytest.mark.parametrize("opponent", ["india", "INDIA"])
    def test_full_check_on_self_matches_skipping(self, records, opponent):
        """Running the check with exclude_id gives the same answer as skipping it."""
        ensure_unique(records, date(2025, 1, 10), opponent, exclude_id="m1")


class TestToDay:
    def test_datetime_truncated(self):
        assert to_day(datetime(2025, 1, 10, 23, 59)) == date(2025, 1, 10)

    def test_date_unchanged(self):
        assert to_day(date(2025, 1, 10)) == date(2025, 1, 10)
