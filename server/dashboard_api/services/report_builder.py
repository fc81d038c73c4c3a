"""Assembles the wellness report from a bundle of records.

Runs the engine end to end: bucketing, metrics, insights, activity
breakdown and chart geometry. Nothing is cached; each call recomputes
from the supplied records.
"""
import logging
from datetime import datetime, timezone
from typing import Mapping, Optional

from wellness_engine.bucketing import monthly_session_series, weekly_mood_series
from wellness_engine.chart_geometry import ChartFrame, bar_rects, dynamic_max, line_path, line_points
from wellness_engine.insights import generate_insights, recent_records
from wellness_engine.metrics import activity_breakdown, compute_metrics
from wellness_engine.timestamps import JOURNAL_FIELDS, SESSION_FIELDS

from ..config import Settings, get_settings
from .source_loader import Fetcher, SourceBundle, load_sources

log = logging.getLogger(__name__)


def build_report(
    bundle: SourceBundle,
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> dict:
    """
    Compute the full wellness report.

    Args:
        bundle: Record collections (already fetched)
        now: Reference instant (defaults to current UTC time)
        settings: Chart/insight configuration

    Returns:
        Report dictionary matching ``WellnessReport``
    """
    settings = settings or get_settings()
    now = now or datetime.now(timezone.utc)
    frame = ChartFrame(
        width=settings.chart_width,
        height=settings.chart_height,
        padding=settings.chart_padding,
    )

    mood_trend = weekly_mood_series(bundle.moods, now)
    session_frequency = monthly_session_series(bundle.sessions, now)
    metrics = compute_metrics(bundle.moods, bundle.sessions, bundle.journals, bundle.assessments, now)

    insights = generate_insights(
        metrics,
        mood_trend,
        recent_records(bundle.journals, JOURNAL_FIELDS, now),
        recent_records(bundle.sessions, SESSION_FIELDS, now),
        limit=settings.max_insights,
    )

    mood_points = line_points([b.value for b in mood_trend], frame=frame)
    session_values = [b.sessions for b in session_frequency]
    session_max = dynamic_max(session_values)
    session_bars = bar_rects(
        session_values,
        labels=[b.month for b in session_frequency],
        max_value=session_max,
        frame=frame,
    )

    log.info(
        f"[API] Report computed: score={metrics.score} ({metrics.status.value}), "
        f"insights={len(insights)}, sources={bundle.counts()}"
    )

    return {
        "metrics": metrics.to_dict(),
        "mood_trend": [b.to_dict() for b in mood_trend],
        "session_frequency": [b.to_dict() for b in session_frequency],
        "insights": [i.to_dict() for i in insights],
        "activity_breakdown": [
            s.to_dict() for s in activity_breakdown(bundle.sessions, bundle.journals, bundle.assessments)
        ],
        "charts": {
            "mood_points": mood_points,
            "mood_path": line_path(mood_points),
            "session_bars": [b.to_dict() for b in session_bars],
            "session_max": session_max,
        },
        "data_status": dict(bundle.data_status),
        "generated_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
    }


async def build_report_from_sources(
    fetchers: Mapping[str, Fetcher],
    now: Optional[datetime] = None,
    settings: Optional[Settings] = None,
) -> dict:
    """Fetch all sources concurrently, then build the report."""
    bundle = await load_sources(fetchers)
    return build_report(bundle, now=now, settings=settings)
