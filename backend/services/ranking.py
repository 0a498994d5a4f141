"""Ranking aggregator: boosts, relevance gate, sort and truncation."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Generic, Iterable, TypeVar

from config import settings
from services.similarity import MatchScore
from services.skill_taxonomy import is_soft_skill

logger = logging.getLogger(__name__)

RECENCY_MULTIPLIER = 1.2
APPLICATION_WEIGHT = 0.05
MIN_SCORE = 1.0

S = TypeVar("S")


@dataclass
class RankedMatch(Generic[S]):
    subject: S
    matched_skills: list[str]
    score: float


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_recent(
    last_activity_at: datetime | None,
    now: datetime | None = None,
    window_days: int | None = None,
) -> bool:
    """True when last_activity_at falls inside the recency window."""
    if last_activity_at is None:
        return False
    now = _as_utc(now or datetime.now(timezone.utc))
    days = settings.recency_window_days if window_days is None else window_days
    return _as_utc(last_activity_at) > now - timedelta(days=days)


def final_score(
    match: MatchScore,
    last_activity_at: datetime | None,
    applications: int = 0,
    now: datetime | None = None,
) -> float:
    """Add the application-count term, then apply the recency multiplier.

    The multiplier applies to the whole accumulated score.
    """
    score = match.score + applications * APPLICATION_WEIGHT
    if is_recent(last_activity_at, now):
        score *= RECENCY_MULTIPLIER
    return score


def passes_gate(match: MatchScore, score: float) -> bool:
    """Drop subjects whose only signal is soft-skill noise."""
    if score <= MIN_SCORE:
        return False
    if match.technical_matches == 0:
        return False
    return any(not is_soft_skill(token) for token in match.matched)


def rank(matches: Iterable[RankedMatch[S]], top_n: int) -> list[RankedMatch[S]]:
    """Sort descending by score and keep the first top_n.

    The sort is stable, so equal scores keep their input order.
    """
    ordered = sorted(matches, key=lambda m: m.score, reverse=True)
    return ordered[:max(0, top_n)]
