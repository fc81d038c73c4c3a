"""
Unit tests for weekly mood and monthly session bucketing.

Usage:
    pytest tests/test_bucketing.py -v
"""
from datetime import datetime, timezone

from wellness_engine.bucketing import (
    DayBucket,
    MonthBucket,
    day_name,
    monthly_session_series,
    shift_month,
    weekly_mood_series,
)


class TestWeeklyMoodSeries:
    """Test the 7-day mood trend series."""

    def test_empty_input_is_neutral(self, now):
        """No moods gives 7 neutral days ending today."""
        series = weekly_mood_series([], now)

        assert len(series) == 7
        assert all(bucket.value == 5.0 for bucket in series)
        assert [b.day for b in series] == ["Thu", "Fri", "Sat", "Sun", "Mon", "Tue", "Wed"]
        assert series[-1].day == day_name(now)

    def test_three_distinct_days(self, now, days_ago, mood):
        """Three logged days are averaged; the other four stay neutral."""
        moods = [
            mood("Happy", now),
            mood("Sad", days_ago(1)),
            mood("Happy", days_ago(2)),
        ]

        series = weekly_mood_series(moods, now)

        assert [b.value for b in series] == [5.0, 5.0, 5.0, 5.0, 8.0, 4.0, 8.0]
        assert sum(1 for b in series if b.value != 5.0) == 3

    def test_same_day_values_are_averaged(self, now, mood):
        """Values on one day are averaged and rounded to one decimal."""
        moods = [mood("Happy", now), mood("Sad", now), mood("sad", now)]

        series = weekly_mood_series(moods, now)

        assert series[-1] == DayBucket(day="Wed", value=5.3)

    def test_outside_window_excluded(self, now, days_ago, mood):
        """Moods older than 7 days or in the future are ignored."""
        moods = [
            mood("Stressed", days_ago(8)),
            mood("Stressed", days_ago(-1)),
        ]

        series = weekly_mood_series(moods, now)

        assert all(bucket.value == 5.0 for bucket in series)

    def test_malformed_timestamps_skipped(self, now, mood):
        """Records with unusable timestamps are left out, not fatal."""
        moods = [mood("Stressed", "yesterday-ish"), mood("Stressed", None), mood("Happy", now)]

        series = weekly_mood_series(moods, now)

        assert series[-1].value == 8.0
        assert all(b.value == 5.0 for b in series[:-1])

    def test_values_rounded_to_one_decimal(self, now, days_ago, mood):
        """Every value is rounded to a single decimal place."""
        moods = [mood(label, days_ago(d)) for d, label in enumerate(
            ["happy", "calm", "sad", "okay", "angry", "tired", "love"]
        )] + [mood("calm", now), mood("okay", now)]

        series = weekly_mood_series(moods, now)

        assert len(series) == 7
        for bucket in series:
            assert 0 <= bucket.value <= 10
            assert round(bucket.value, 1) == bucket.value

    def test_iso_string_timestamps(self, now, mood):
        moods = [mood("Calm", "2024-06-11T08:00:00Z")]

        series = weekly_mood_series(moods, now)

        assert series[-2] == DayBucket(day="Tue", value=7.0)


class TestMonthlySessionSeries:
    """Test the 6-month session frequency series."""

    def test_empty_input_is_zero_filled(self, now):
        series = monthly_session_series([], now)

        assert series == [
            MonthBucket("Jan", 0), MonthBucket("Feb", 0), MonthBucket("Mar", 0),
            MonthBucket("Apr", 0), MonthBucket("May", 0), MonthBucket("Jun", 0),
        ]

    def test_counts_per_month(self, now, session):
        sessions = [
            session(datetime(2024, 6, 1, tzinfo=timezone.utc)),
            session(datetime(2024, 6, 10, tzinfo=timezone.utc)),
            session(datetime(2024, 4, 15, tzinfo=timezone.utc)),
            session(datetime(2024, 1, 1, tzinfo=timezone.utc)),  # window start
        ]

        series = monthly_session_series(sessions, now)

        assert [b.sessions for b in series] == [1, 0, 0, 1, 0, 2]

    def test_before_window_excluded(self, now, session):
        sessions = [session(datetime(2023, 12, 31, 23, 59, tzinfo=timezone.utc))]

        series = monthly_session_series(sessions, now)

        assert all(b.sessions == 0 for b in series)

    def test_start_time_fallback(self, now, session):
        """Sessions without ``timestamp`` are resolved from ``startTime``."""
        sessions = [
            session(datetime(2024, 5, 3, tzinfo=timezone.utc), field="startTime"),
            session("not-a-date"),
        ]

        series = monthly_session_series(sessions, now)

        assert series[4] == MonthBucket("May", 1)
        assert sum(b.sessions for b in series) == 1

    def test_year_wraparound(self, session):
        now = datetime(2024, 2, 10, tzinfo=timezone.utc)
        sessions = [session(datetime(2023, 9, 5, tzinfo=timezone.utc))]

        series = monthly_session_series(sessions, now)

        assert [b.month for b in series] == ["Sep", "Oct", "Nov", "Dec", "Jan", "Feb"]
        assert series[0].sessions == 1

    def test_shift_month(self):
        assert shift_month(2024, 1, -1) == (2023, 12)
        assert shift_month(2024, 6, -5) == (2024, 1)
        assert shift_month(2023, 12, 1) == (2024, 1)
