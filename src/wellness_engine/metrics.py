"""
Wellness Metrics Aggregation.

Computes the composite 0-100 wellness score and the supporting metrics
shown on the insights screen from raw mood, session, journal and
assessment records.

Score composition (total = 100):
- Mood (40): average valence of the 30 most recent moods
- Activity (30): sessions + journals + assessments, linear up to 50
- Consistency (30): moods logged in the last 7 days, linear up to 7

Every value is recomputed from the supplied records on each call; the
module keeps no state.
"""

import logging
from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum
from itertools import chain
from typing import Any, Iterable, List, Optional, Sequence, Set

from .mood_values import NEUTRAL_MOOD_VALUE, mood_value
from .timestamps import (
    ACTIVITY_FIELDS,
    MOOD_FIELDS,
    count_within,
    get_field,
    resolved_instants,
    within,
)
from .utils import round_int

logger = logging.getLogger(__name__)

# Score weights
MOOD_WEIGHT = 40
ACTIVITY_WEIGHT = 30
CONSISTENCY_WEIGHT = 30

RECENT_MOOD_COUNT = 30
ACTIVITY_SATURATION = 50  # activities for a full activity sub-score
CONSISTENCY_DAYS = 7

MONTHLY_ACTIVITY_GOAL = 20
MONTHLY_WINDOW_DAYS = 30
WEEK_DAYS = 7
STREAK_LOOKBACK_DAYS = 30

# Union probe order for mixed activity records
UNION_ACTIVITY_FIELDS = ACTIVITY_FIELDS + ("startTime", "created_at")


class ColorTag(str, Enum):
    """Colour tags used by insights and chart slices."""

    PINK = "pink"
    YELLOW = "yellow"
    ORANGE = "orange"
    BLUE = "blue"
    GRAY = "gray"


class HealthStatus(str, Enum):
    """Band of the wellness score shown on the health status card."""

    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def health_status(score: float) -> HealthStatus:
    """Map a 0-100 score to its status band."""
    if score >= 80:
        return HealthStatus.EXCELLENT
    if score >= 60:
        return HealthStatus.GOOD
    if score >= 40:
        return HealthStatus.FAIR
    return HealthStatus.POOR


@dataclass(frozen=True)
class MoodFrequency:
    """Most frequently logged mood label."""

    mood: str
    count: int
    total: int

    def to_dict(self) -> dict:
        return {"mood": self.mood, "count": self.count, "total": self.total}


@dataclass(frozen=True)
class PeriodComparison:
    """Week-over-week change in activity volume."""

    change: float  # percent
    current: int
    previous: int

    def to_dict(self) -> dict:
        return {"change": self.change, "current": self.current, "previous": self.previous}


@dataclass(frozen=True)
class WellnessMetrics:
    """Derived wellness metrics for one point in time."""

    score: int = 0
    weekly_progress: int = 0
    monthly_progress: int = 0
    streak_days: int = 0
    most_common_mood: Optional[MoodFrequency] = None
    period_comparison: Optional[PeriodComparison] = None

    @property
    def status(self) -> HealthStatus:
        return health_status(self.score)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "score": self.score,
            "status": self.status.value,
            "weekly_progress": self.weekly_progress,
            "monthly_progress": self.monthly_progress,
            "streak_days": self.streak_days,
            "most_common_mood": self.most_common_mood.to_dict() if self.most_common_mood else None,
            "period_comparison": self.period_comparison.to_dict() if self.period_comparison else None,
        }


@dataclass(frozen=True)
class ActivitySlice:
    """One slice of the activity breakdown chart."""

    label: str
    value: int
    color: ColorTag = ColorTag.GRAY

    def to_dict(self) -> dict:
        return {"label": self.label, "value": self.value, "color": self.color.value}


def wellness_score(
    moods: Sequence[Any],
    sessions: Sequence[Any],
    journals: Sequence[Any],
    assessments: Sequence[Any],
    now: datetime,
) -> int:
    """
    Composite 0-100 wellness score.

    Returns 0 when every collection is empty; a user with no data gets
    no score rather than a low one.
    """
    if not moods and not sessions and not journals and not assessments:
        return 0

    recent_moods = list(moods[:RECENT_MOOD_COUNT])
    if recent_moods:
        average_mood = sum(mood_value(get_field(m, "mood")) for m in recent_moods) / len(recent_moods)
    else:
        average_mood = NEUTRAL_MOOD_VALUE
    mood_score = (average_mood / 10) * MOOD_WEIGHT

    total_activities = len(sessions) + len(journals) + len(assessments)
    activity_score = min((total_activities / ACTIVITY_SATURATION) * ACTIVITY_WEIGHT, ACTIVITY_WEIGHT)

    week_moods = count_within(moods, MOOD_FIELDS, now, CONSISTENCY_DAYS)
    consistency_score = min((week_moods / CONSISTENCY_DAYS) * CONSISTENCY_WEIGHT, CONSISTENCY_WEIGHT)

    score = round_int(mood_score + activity_score + consistency_score)
    logger.debug(
        f"[METRICS] Score components: mood={mood_score:.1f}, "
        f"activity={activity_score:.1f}, consistency={consistency_score:.1f} -> {score}"
    )
    return max(0, min(score, 100))


def active_dates(records: Iterable[Any], now: datetime, days: Optional[int] = None) -> Set[date]:
    """
    Distinct calendar dates with at least one record.

    Args:
        records: Any mix of activity records
        now: Reference instant (its timezone defines the calendar)
        days: If given, only count records in ``[now - days, now]``
    """
    instants = resolved_instants(records, UNION_ACTIVITY_FIELDS, now.tzinfo)
    if days is not None:
        start = now - timedelta(days=days)
        instants = [i for i in instants if within(i, start, now)]
    return {instant.date() for instant in instants}


def weekly_progress(activities: Sequence[Any], now: datetime) -> int:
    """Percent of the last 7 days with at least one activity."""
    days = len(active_dates(activities, now, WEEK_DAYS))
    return min(round_int((days / WEEK_DAYS) * 100), 100)


def monthly_progress(activities: Sequence[Any], now: datetime) -> int:
    """Percent of the monthly activity goal reached in the last 30 days."""
    count = count_within(activities, UNION_ACTIVITY_FIELDS, now, MONTHLY_WINDOW_DAYS)
    return min(round_int((count / MONTHLY_ACTIVITY_GOAL) * 100), 100)


def activity_streak(records: Iterable[Any], now: datetime) -> int:
    """
    Consecutive active days walking back from today.

    Today without activity does not break the streak; the walk then
    counts from yesterday. Lookback is capped at 30 days.
    """
    days = active_dates(records, now)
    today = now.date()

    streak = 0
    for offset in range(STREAK_LOOKBACK_DAYS):
        if today - timedelta(days=offset) in days:
            streak += 1
        elif offset > 0:
            break
    return streak


def most_common_mood(moods: Sequence[Any]) -> Optional[MoodFrequency]:
    """Most frequent raw mood label; ties go to the label seen first."""
    labels = [get_field(m, "mood") for m in moods]
    counts = Counter(label for label in labels if isinstance(label, str) and label)
    if not counts:
        return None
    mood, count = counts.most_common(1)[0]
    return MoodFrequency(mood=mood, count=count, total=len(moods))


def period_comparison(activities: Sequence[Any], now: datetime) -> Optional[PeriodComparison]:
    """
    Compare activity in ``[now - 7d, now)`` with ``[now - 14d, now - 7d)``.

    Returns None when the previous week had no activity.
    """
    current_start = now - timedelta(days=WEEK_DAYS)
    previous_start = current_start - timedelta(days=WEEK_DAYS)

    current = previous = 0
    for instant in resolved_instants(activities, UNION_ACTIVITY_FIELDS, now.tzinfo):
        if within(instant, current_start, now, include_end=False):
            current += 1
        elif within(instant, previous_start, current_start, include_end=False):
            previous += 1

    if previous == 0:
        return None

    change = ((current - previous) / previous) * 100
    return PeriodComparison(change=change, current=current, previous=previous)


def compute_metrics(
    moods: Sequence[Any],
    sessions: Sequence[Any],
    journals: Sequence[Any],
    assessments: Sequence[Any],
    now: datetime,
) -> WellnessMetrics:
    """
    Compute every wellness metric for the supplied records.

    Args:
        moods: Mood records, newest first
        sessions: Session/call records
        journals: Journal entries
        assessments: Assessment results
        now: Reference instant

    Returns:
        WellnessMetrics
    """
    moods, sessions = list(moods), list(sessions)
    journals, assessments = list(journals), list(assessments)
    activities = list(chain(sessions, journals, assessments))

    metrics = WellnessMetrics(
        score=wellness_score(moods, sessions, journals, assessments, now),
        weekly_progress=weekly_progress(activities, now),
        monthly_progress=monthly_progress(activities, now),
        streak_days=activity_streak(chain(activities, moods), now),
        most_common_mood=most_common_mood(moods),
        period_comparison=period_comparison(activities, now),
    )

    logger.debug(
        f"[METRICS] moods={len(moods)} sessions={len(sessions)} journals={len(journals)} "
        f"assessments={len(assessments)} -> score={metrics.score}, "
        f"streak={metrics.streak_days}, monthly={metrics.monthly_progress}%"
    )
    return metrics


def activity_breakdown(
    sessions: Sequence[Any],
    journals: Sequence[Any],
    assessments: Sequence[Any],
) -> List[ActivitySlice]:
    """
    Activity counts per type for the breakdown chart.

    Empty slices are dropped, except Breathing which is always shown.
    Breathing sessions are not recorded anywhere yet, so that slice is 0.
    """
    slices = [
        ActivitySlice("Chat Sessions", len(sessions), ColorTag.PINK),
        ActivitySlice("Journal", len(journals), ColorTag.YELLOW),
        ActivitySlice("Assessments", len(assessments), ColorTag.BLUE),
        ActivitySlice("Breathing", 0, ColorTag.ORANGE),
    ]
    return [s for s in slices if s.value > 0 or s.label == "Breathing"]
