"""Pydantic models for wellness report API requests and responses."""
from .records import (
    MoodEntry,
    SessionLog,
    JournalEntry,
    AssessmentResult,
    WellnessReportRequest,
)
from .report import (
    MetricsModel,
    DayPoint,
    MonthPoint,
    InsightModel,
    ActivitySliceModel,
    ChartGeometry,
    WellnessReport,
    MoodDefinition,
)

__all__ = [
    "MoodEntry",
    "SessionLog",
    "JournalEntry",
    "AssessmentResult",
    "WellnessReportRequest",
    "MetricsModel",
    "DayPoint",
    "MonthPoint",
    "InsightModel",
    "ActivitySliceModel",
    "ChartGeometry",
    "WellnessReport",
    "MoodDefinition",
]
