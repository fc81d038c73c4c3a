"""Wellness report response models."""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

StatusBand = Literal["excellent", "good", "fair", "poor"]
ColorTag = Literal["pink", "yellow", "orange", "blue", "gray"]
SourceStatus = Literal["ok", "failed"]


class MoodFrequencyModel(BaseModel):
    """Most frequently logged mood."""

    mood: str
    count: int
    total: int


class PeriodComparisonModel(BaseModel):
    """Week-over-week activity change."""

    change: float
    current: int
    previous: int


class MetricsModel(BaseModel):
    """Derived wellness metrics."""

    model_config = ConfigDict(populate_by_name=True)

    score: int = Field(ge=0, le=100)
    status: StatusBand
    weekly_progress: int = Field(ge=0, le=100, serialization_alias="weeklyProgress")
    monthly_progress: int = Field(ge=0, le=100, serialization_alias="monthlyProgress")
    streak_days: int = Field(ge=0, serialization_alias="streakDays")
    most_common_mood: Optional[MoodFrequencyModel] = Field(
        default=None, serialization_alias="mostCommonMood"
    )
    period_comparison: Optional[PeriodComparisonModel] = Field(
        default=None, serialization_alias="periodComparison"
    )


class DayPoint(BaseModel):
    """One day of the weekly mood trend."""

    day: str
    value: float


class MonthPoint(BaseModel):
    """One month of the session frequency chart."""

    month: str
    sessions: int


class InsightModel(BaseModel):
    """Rule-triggered insight."""

    icon: str
    text: str
    color: ColorTag


class ActivitySliceModel(BaseModel):
    """Activity breakdown slice."""

    label: str
    value: int
    color: ColorTag


class BarModel(BaseModel):
    """Bar chart rectangle."""

    x: float
    y: float
    width: float
    height: float
    value: float
    label: str = ""


class ChartGeometry(BaseModel):
    """Pre-computed plot geometry for both charts."""

    model_config = ConfigDict(populate_by_name=True)

    mood_points: list[tuple[float, float]] = Field(serialization_alias="moodPoints")
    mood_path: str = Field(serialization_alias="moodPath")
    session_bars: list[BarModel] = Field(serialization_alias="sessionBars")
    session_max: int = Field(serialization_alias="sessionMax")


class WellnessReport(BaseModel):
    """Everything the insights screen renders."""

    model_config = ConfigDict(populate_by_name=True)

    metrics: MetricsModel
    mood_trend: list[DayPoint] = Field(serialization_alias="moodTrend")
    session_frequency: list[MonthPoint] = Field(serialization_alias="sessionFrequency")
    insights: list[InsightModel]
    activity_breakdown: list[ActivitySliceModel] = Field(serialization_alias="activityBreakdown")
    charts: ChartGeometry
    data_status: dict[str, SourceStatus] = Field(serialization_alias="dataStatus")
    generated_at: str = Field(serialization_alias="generatedAt")


class MoodDefinition(BaseModel):
    """Known mood label with its valence and emoji."""

    mood: str
    value: int = Field(ge=1, le=10)
    emoji: str
