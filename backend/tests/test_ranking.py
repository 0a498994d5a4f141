"""Tests for boosts, the relevance gate and ranking."""

from datetime import datetime, timedelta

import pytest

from services.ranking import RankedMatch, final_score, is_recent, passes_gate, rank
from services.similarity import MatchScore


class TestRecency:
    def test_recent_activity(self, now):
        assert is_recent(now - timedelta(days=2), now)

    def test_stale_activity(self, now):
        assert not is_recent(now - timedelta(days=30), now)

    def test_window_boundary_is_exclusive(self, now):
        assert not is_recent(now - timedelta(days=7), now)

    def test_missing_activity(self, now):
        assert not is_recent(None, now)

    def test_naive_timestamp_treated_as_utc(self, now):
        naive = datetime(2026, 1, 14, 12, 0)
        assert is_recent(naive, now)

    def test_custom_window(self, now):
        assert is_recent(now - timedelta(days=20), now, window_days=30)


class TestFinalScore:
    def test_recency_multiplies_whole_score(self, now):
        match = MatchScore(score=2.0)
        assert final_score(match, now - timedelta(days=2), now=now) == pytest.approx(2.4)
        assert final_score(match, now - timedelta(days=30), now=now) == pytest.approx(2.0)

    def test_applications_added_before_recency(self, now):
        match = MatchScore(score=2.0)
        assert final_score(match, None, applications=50, now=now) == pytest.approx(4.5)
        assert final_score(
            match, now - timedelta(days=1), applications=50, now=now
        ) == pytest.approx(5.4)


class TestGate:
    def test_technical_match_above_threshold_passes(self):
        match = MatchScore(score=1.5, technical_score=1.0, technical_matches=1, matched=["python"])
        assert passes_gate(match, 1.5)

    def test_score_must_exceed_one(self):
        match = MatchScore(score=1.0, technical_score=1.0, technical_matches=1, matched=["python"])
        assert not passes_gate(match, 1.0)

    def test_soft_only_matches_dropped(self):
        match = MatchScore(score=2.0, matched=["teamwork", "communication"])
        assert not passes_gate(match, 2.0)

    def test_soft_requirement_tokens_dropped(self):
        match = MatchScore(score=2.0, technical_score=1.0, technical_matches=1, matched=["teamwork"])
        assert not passes_gate(match, 2.0)


class TestRank:
    def test_sorted_descending_and_truncated(self):
        items = [RankedMatch(name, [], score) for name, score in
                 [("a", 1.5), ("b", 3.0), ("c", 2.0), ("d", 2.5)]]
        ranked = rank(items, 2)
        assert [m.subject for m in ranked] == ["b", "d"]

    def test_ties_keep_input_order(self):
        items = [RankedMatch(name, [], 2.0) for name in ["x", "y", "z"]]
        assert [m.subject for m in rank(items, 10)] == ["x", "y", "z"]

    def test_empty(self):
        assert rank([], 5) == []
