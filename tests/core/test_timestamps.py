"""Tests for jobscope.core.timestamps: optional timestamp combinators."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

from jobscope.core.timestamps import earliest, latest

EARLY = datetime(2026, 10, 17, 8, 0, tzinfo=UTC)
LATE = datetime(2026, 10, 17, 9, 0, tzinfo=UTC)


class TestLatest:
    def test_both_absent(self):
        assert latest(None, None) is None

    def test_seeds_from_candidate(self):
        assert latest(None, EARLY) == EARLY

    def test_absent_candidate_keeps_current(self):
        assert latest(LATE, None) == LATE

    def test_later_candidate_wins(self):
        assert latest(EARLY, LATE) == LATE

    def test_earlier_candidate_loses(self):
        assert latest(LATE, EARLY) == LATE

    def test_tie_keeps_current(self):
        # Same instant, different offset: the first recorded value is kept
        same_instant = EARLY.astimezone(timezone(timedelta(hours=2)))
        result = latest(EARLY, same_instant)
        assert result is EARLY

    def test_fold_ignores_absent(self):
        values = [None, EARLY, None, LATE, None]
        result = None
        for v in values:
            result = latest(result, v)
        assert result == LATE


class TestEarliest:
    def test_both_absent(self):
        assert earliest(None, None) is None

    def test_seeds_from_candidate(self):
        assert earliest(None, LATE) == LATE

    def test_absent_candidate_keeps_current(self):
        assert earliest(EARLY, None) == EARLY

    def test_earlier_candidate_wins(self):
        assert earliest(LATE, EARLY) == EARLY

    def test_later_candidate_loses(self):
        assert earliest(EARLY, LATE) == EARLY

    def test_tie_keeps_current(self):
        same_instant = EARLY.astimezone(timezone(timedelta(hours=-5)))
        assert earliest(EARLY, same_instant) is EARLY

    def test_fold_ignores_absent(self):
        result = None
        for v in [LATE, None, EARLY, None]:
            result = earliest(result, v)
        assert result == EARLY
