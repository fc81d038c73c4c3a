"""Raw activity record models posted by the app.

Timestamp fields are typed ``Any`` on purpose: clients send ISO strings,
epoch milliseconds or serialized Firestore timestamps, and records whose
timestamp cannot be resolved are skipped by the engine instead of
failing validation. The same goes for labels and metadata the engine
only reads loosely: a null mood counts as neutral, and numeric metadata
is accepted in whatever shape the client stored it.
"""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class MoodEntry(BaseModel):
    """Mood tracker entry."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True, extra="allow")

    mood: Optional[str] = None
    emoji: Optional[str] = None
    date_time: Any = None


class SessionLog(BaseModel):
    """Voice/chat session log."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True, extra="allow")

    callId: Optional[str] = None
    duration: Any = None
    messageCount: Any = None
    timestamp: Any = None
    startTime: Any = None
    endTime: Any = None


class JournalEntry(BaseModel):
    """Journal entry."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True, extra="allow")

    journal_entry: Optional[str] = None
    description: Optional[str] = None
    date_time: Any = None


class AssessmentResult(BaseModel):
    """Submitted self-assessment."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True, extra="allow")

    assessment_name: Optional[str] = None
    score: Any = None
    submit_time: Any = None
    created_at: Any = None


class WellnessReportRequest(BaseModel):
    """Already-fetched record collections for one user.

    A source that failed to load upstream is sent as an empty list and
    flagged in ``failed_sources``.
    """

    model_config = ConfigDict(populate_by_name=True)

    moods: list[MoodEntry] = Field(default_factory=list)
    sessions: list[SessionLog] = Field(default_factory=list)
    journals: list[JournalEntry] = Field(default_factory=list)
    assessments: list[AssessmentResult] = Field(default_factory=list)
    now: Optional[datetime] = None
    failed_sources: list[str] = Field(default_factory=list, alias="failedSources")
