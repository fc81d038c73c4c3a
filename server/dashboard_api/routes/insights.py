"""Wellness insights API routes.

The app posts the user's already-fetched records; these endpoints run
the analytics engine and return the derived report. Nothing is stored.
"""
import logging

from fastapi import APIRouter

from wellness_engine.mood_values import mood_table

from ..models.records import WellnessReportRequest
from ..models.report import InsightModel, MoodDefinition, WellnessReport
from ..services.report_builder import build_report
from ..services.source_loader import SourceBundle

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api/wellness", tags=["Wellness Insights"])


def _bundle_from_request(request: WellnessReportRequest) -> SourceBundle:
    return SourceBundle.from_collections(
        moods=request.moods,
        sessions=request.sessions,
        journals=request.journals,
        assessments=request.assessments,
        failed_sources=request.failed_sources,
    )


@router.post("/report", response_model=WellnessReport, response_model_by_alias=True)
async def get_wellness_report(request: WellnessReportRequest):
    """
    Compute the wellness report for the posted records.

    Returns the score and status band, weekly/monthly progress, streak,
    trend series, insights, activity breakdown and chart geometry.
    """
    bundle = _bundle_from_request(request)
    log.debug(f"[API] Report requested: {bundle.counts()}")
    return build_report(bundle, now=request.now)


@router.post("/insights", response_model=list[InsightModel])
async def get_wellness_insights(request: WellnessReportRequest):
    """Compute only the insight list for the posted records."""
    report = build_report(_bundle_from_request(request), now=request.now)
    return report["insights"]


@router.get("/moods", response_model=list[MoodDefinition])
async def get_mood_definitions():
    """List every known mood label with its 1-10 value and emoji."""
    return mood_table()
