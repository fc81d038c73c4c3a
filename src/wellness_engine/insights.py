"""
Insight Rule Engine.

Turns aggregated wellness metrics into short, human-readable insights.

Rules are independent predicate/formatter pairs evaluated in a fixed
order. Each rule either returns an Insight or None; several may fire
for the same input. When none fires, a single "start tracking"
insight is returned. The result is capped at ``MAX_INSIGHTS`` entries.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, List, Optional, Sequence

from .bucketing import DayBucket
from .metrics import ColorTag, WellnessMetrics
from .mood_values import mood_emoji
from .timestamps import resolve_instant, within
from .utils import round_int

logger = logging.getLogger(__name__)

MAX_INSIGHTS = 6
RECENT_DAYS = 7

MOOD_TREND_THRESHOLD = 5.0  # percent
DOMINANT_MOOD_MIN_COUNT = 3
STREAK_MIN_DAYS = 3
PERIOD_CHANGE_THRESHOLD = 10.0  # percent
MONTHLY_ON_TRACK = 80
MONTHLY_KEEP_GOING = 50
JOURNAL_MIN_COUNT = 3
SCORE_ABOVE_AVERAGE = 70
SCORE_SELF_CARE = 50
SESSION_MIN_COUNT = 5


@dataclass(frozen=True)
class Insight:
    """A single rule-triggered observation."""

    icon: str
    text: str
    color: ColorTag

    def to_dict(self) -> dict:
        return {"icon": self.icon, "text": self.text, "color": self.color.value}


@dataclass(frozen=True)
class InsightContext:
    """Inputs every rule can look at."""

    metrics: WellnessMetrics
    mood_series: Sequence[DayBucket]
    recent_journal_count: int = 0
    recent_session_count: int = 0


@dataclass(frozen=True)
class InsightRule:
    """Named rule: returns an Insight when it fires, None otherwise."""

    name: str
    evaluate: Callable[[InsightContext], Optional[Insight]]


DEFAULT_INSIGHT = Insight(
    icon="📊",
    text="Start tracking your mood and activities to see personalized insights",
    color=ColorTag.GRAY,
)


def _mood_trend(ctx: InsightContext) -> Optional[Insight]:
    values = [bucket.value for bucket in ctx.mood_series]
    if len(values) < 2:
        return None

    head, tail = values[:3], values[-3:]
    first = sum(head) / len(head)
    last = sum(tail) / len(tail)
    if first <= 0:
        return None

    change = ((last - first) / first) * 100
    if change > MOOD_TREND_THRESHOLD:
        return Insight("📈", f"Your mood has improved by {round_int(change)}% this week", ColorTag.PINK)
    if change < -MOOD_TREND_THRESHOLD:
        return Insight("📉", f"Your mood has decreased by {round_int(abs(change))}% this week", ColorTag.ORANGE)
    return None


def _dominant_mood(ctx: InsightContext) -> Optional[Insight]:
    frequent = ctx.metrics.most_common_mood
    if frequent is None or frequent.count < DOMINANT_MOOD_MIN_COUNT:
        return None
    return Insight(
        mood_emoji(frequent.mood),
        f"Your most common mood is {frequent.mood} ({frequent.count} times)",
        ColorTag.YELLOW,
    )


def _streak(ctx: InsightContext) -> Optional[Insight]:
    streak = ctx.metrics.streak_days
    if streak < STREAK_MIN_DAYS:
        return None
    return Insight("🔥", f"You're on a {streak}-day activity streak! Keep it up!", ColorTag.ORANGE)


def _period_comparison(ctx: InsightContext) -> Optional[Insight]:
    comparison = ctx.metrics.period_comparison
    if comparison is None or abs(comparison.change) <= PERIOD_CHANGE_THRESHOLD:
        return None
    if comparison.change > 0:
        return Insight(
            "📊", f"You're {round_int(comparison.change)}% more active than last week", ColorTag.BLUE
        )
    return Insight(
        "📊", f"You're {round_int(abs(comparison.change))}% less active than last week", ColorTag.GRAY
    )


def _monthly_goal(ctx: InsightContext) -> Optional[Insight]:
    progress = ctx.metrics.monthly_progress
    if progress >= MONTHLY_ON_TRACK:
        return Insight("🎯", "You're on track to reach your monthly goal", ColorTag.YELLOW)
    if 0 < progress < MONTHLY_KEEP_GOING:
        return Insight("💪", "Keep going! You're making progress toward your goal", ColorTag.ORANGE)
    return None


def _journaling(ctx: InsightContext) -> Optional[Insight]:
    count = ctx.recent_journal_count
    if count < JOURNAL_MIN_COUNT:
        return None
    return Insight(
        "📝", f"You've journaled {count} times this week - great consistency!", ColorTag.BLUE
    )


def _wellness_score(ctx: InsightContext) -> Optional[Insight]:
    score = ctx.metrics.score
    if score >= SCORE_ABOVE_AVERAGE:
        return Insight("🌟", f"Your wellness score is {score} - above average!", ColorTag.BLUE)
    if 0 < score < SCORE_SELF_CARE:
        return Insight(
            "💙", f"Your wellness score is {score} - focus on self-care to improve", ColorTag.BLUE
        )
    return None


def _session_engagement(ctx: InsightContext) -> Optional[Insight]:
    count = ctx.recent_session_count
    if count < SESSION_MIN_COUNT:
        return None
    return Insight(
        "💬", f"You've had {count} chat sessions this week - excellent engagement!", ColorTag.PINK
    )


DEFAULT_RULES = (
    InsightRule("mood_trend", _mood_trend),
    InsightRule("dominant_mood", _dominant_mood),
    InsightRule("streak", _streak),
    InsightRule("period_comparison", _period_comparison),
    InsightRule("monthly_goal", _monthly_goal),
    InsightRule("journaling", _journaling),
    InsightRule("wellness_score", _wellness_score),
    InsightRule("session_engagement", _session_engagement),
)


def recent_records(
    records: Sequence[Any],
    fields: Sequence[str],
    now: datetime,
    days: int = RECENT_DAYS,
) -> List[Any]:
    """Records whose instant lies in ``[now - days, now]``, input order kept."""
    start = now - timedelta(days=days)
    selected = []
    for record in records:
        instant = resolve_instant(record, fields, now.tzinfo)
        if instant is not None and within(instant, start, now):
            selected.append(record)
    return selected


def generate_insights(
    metrics: WellnessMetrics,
    mood_series: Sequence[DayBucket],
    recent_journals: Sequence[Any] = (),
    recent_sessions: Sequence[Any] = (),
    rules: Sequence[InsightRule] = DEFAULT_RULES,
    limit: int = MAX_INSIGHTS,
) -> List[Insight]:
    """
    Evaluate the insight rules in order.

    Args:
        metrics: Output of ``compute_metrics``
        mood_series: Weekly mood series (7 DayBuckets)
        recent_journals: Journal entries from the last 7 days
        recent_sessions: Sessions from the last 7 days
        rules: Ordered rules to evaluate
        limit: Maximum number of insights returned

    Returns:
        Fired insights in rule order (at most ``limit``), or the single
        default insight when nothing fired
    """
    ctx = InsightContext(
        metrics=metrics,
        mood_series=list(mood_series),
        recent_journal_count=len(recent_journals),
        recent_session_count=len(recent_sessions),
    )

    fired: List[Insight] = []
    for rule in rules:
        insight = rule.evaluate(ctx)
        if insight is not None:
            logger.debug(f"[INSIGHTS] Rule '{rule.name}' fired: {insight.text}")
            fired.append(insight)

    if not fired:
        return [DEFAULT_INSIGHT]
    return fired[:limit]
