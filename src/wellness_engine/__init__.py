"""
Wellness Insights Engine.

Derives the wellness score, trend series, streak metrics and insights
from raw mood, session, journal and assessment records.
"""

from .bucketing import DayBucket, MonthBucket, monthly_session_series, weekly_mood_series
from .chart_geometry import BarRect, ChartFrame, bar_rects, dynamic_max, line_path, line_points
from .insights import Insight, InsightRule, generate_insights, recent_records
from .metrics import (
    ColorTag,
    HealthStatus,
    WellnessMetrics,
    activity_breakdown,
    compute_metrics,
    health_status,
)
from .mood_values import mood_emoji, mood_value
from .timestamps import resolve_instant

__all__ = [
    "DayBucket",
    "MonthBucket",
    "weekly_mood_series",
    "monthly_session_series",
    "BarRect",
    "ChartFrame",
    "bar_rects",
    "dynamic_max",
    "line_path",
    "line_points",
    "Insight",
    "InsightRule",
    "generate_insights",
    "recent_records",
    "ColorTag",
    "HealthStatus",
    "WellnessMetrics",
    "activity_breakdown",
    "compute_metrics",
    "health_status",
    "mood_emoji",
    "mood_value",
    "resolve_instant",
]
