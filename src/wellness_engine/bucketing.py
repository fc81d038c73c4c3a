"""
Calendar bucketing of mood and session records.

Produces the two chart series shown on the insights screen:

- a 7-point weekly mood trend (one bucket per day ending today)
- a 6-point monthly session frequency (one bucket per month ending
  with the current month)

Both series always have a fixed length; empty buckets are filled with
the neutral mood (5.0) or zero sessions.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Dict, Iterable, List, Sequence

from .mood_values import NEUTRAL_MOOD_VALUE, mood_value
from .timestamps import MOOD_FIELDS, SESSION_FIELDS, get_field, resolve_instant, within
from .utils import round_half_up

logger = logging.getLogger(__name__)

DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

WEEK_DAYS = 7
SERIES_MONTHS = 6


@dataclass(frozen=True)
class DayBucket:
    """Average mood for one day of the weekly trend."""

    day: str
    value: float

    def to_dict(self) -> dict:
        return {"day": self.day, "value": self.value}


@dataclass(frozen=True)
class MonthBucket:
    """Session count for one month of the frequency chart."""

    month: str
    sessions: int

    def to_dict(self) -> dict:
        return {"month": self.month, "sessions": self.sessions}


def day_name(moment: datetime) -> str:
    """Short weekday label (``Sun``..``Sat``)."""
    return DAY_NAMES[(moment.weekday() + 1) % 7]


def month_name(month: int) -> str:
    """Short month label for a 1-based month number."""
    return MONTH_NAMES[month - 1]


def shift_month(year: int, month: int, offset: int) -> tuple:
    """Move ``offset`` calendar months from (year, month)."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def weekly_mood_series(moods: Iterable[Any], now: datetime) -> List[DayBucket]:
    """
    Bucket mood records into the 7 days ending today.

    Records within ``[now - 7d, now]`` are grouped by weekday label and
    averaged. A record from the same weekday a week ago shares the
    bucket of today.

    Args:
        moods: Mood records (``mood`` label, ``date_time`` instant)
        now: Reference instant

    Returns:
        Exactly 7 DayBuckets, oldest first, ending with today
    """
    window_start = now - timedelta(days=WEEK_DAYS)
    values_by_day: Dict[str, List[int]] = defaultdict(list)
    skipped = 0

    for record in moods:
        instant = resolve_instant(record, MOOD_FIELDS, now.tzinfo)
        if instant is None:
            skipped += 1
            continue
        if within(instant, window_start, now):
            values_by_day[day_name(instant)].append(mood_value(get_field(record, "mood")))

    series = []
    for offset in range(WEEK_DAYS - 1, -1, -1):
        label = day_name(now - timedelta(days=offset))
        day_values = values_by_day.get(label)
        if day_values:
            average = round_half_up(sum(day_values) / len(day_values), 1)
        else:
            average = float(NEUTRAL_MOOD_VALUE)
        series.append(DayBucket(day=label, value=average))

    logger.debug(
        f"[BUCKETS] Weekly mood series: {[b.value for b in series]} "
        f"(skipped {skipped} without timestamp)"
    )
    return series


def monthly_session_series(
    sessions: Iterable[Any],
    now: datetime,
    fields: Sequence[str] = SESSION_FIELDS,
) -> List[MonthBucket]:
    """
    Count sessions per calendar month over the 6 months ending now.

    The window starts on the first day of the month five months before
    the current one.

    Args:
        sessions: Session/call records
        now: Reference instant
        fields: Timestamp fields in priority order

    Returns:
        Exactly 6 MonthBuckets, oldest first, ending with the current month
    """
    start_year, start_month = shift_month(now.year, now.month, -(SERIES_MONTHS - 1))
    window_start = datetime(start_year, start_month, 1, tzinfo=now.tzinfo)

    counts: Dict[str, int] = defaultdict(int)
    for record in sessions:
        instant = resolve_instant(record, fields, now.tzinfo)
        if instant is None:
            continue
        if within(instant, window_start, now):
            counts[month_name(instant.month)] += 1

    series = []
    for offset in range(SERIES_MONTHS - 1, -1, -1):
        _, month = shift_month(now.year, now.month, -offset)
        label = month_name(month)
        series.append(MonthBucket(month=label, sessions=counts.get(label, 0)))

    logger.debug(f"[BUCKETS] Monthly session series: {[b.sessions for b in series]}")
    return series
