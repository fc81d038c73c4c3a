"""
Pytest fixtures for Wellness Insights tests.
"""
import sys
import pytest
from pathlib import Path
from datetime import datetime, timedelta, timezone
from dotenv import load_dotenv

# Ensure src/ and the repo root are on sys.path so tests can import
# wellness_engine and server.dashboard_api.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

# Load environment variables
load_dotenv()


# ============================================================================
# Record Fixtures
# ============================================================================

# Wednesday afternoon, UTC
REFERENCE_NOW = datetime(2024, 6, 12, 15, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed reference instant for every windowed computation."""
    return REFERENCE_NOW


@pytest.fixture
def days_ago(now):
    """Factory: instant ``days`` (and optionally ``hours``) before now."""

    def _days_ago(days: float, hours: float = 0) -> datetime:
        return now - timedelta(days=days, hours=hours)

    return _days_ago


@pytest.fixture
def mood():
    """Factory for mood tracker records."""

    def _mood(label: str, when) -> dict:
        return {"mood": label, "emoji": "", "date_time": when}

    return _mood


@pytest.fixture
def session():
    """Factory for call/session log records (``timestamp`` field)."""

    def _session(when, field: str = "timestamp") -> dict:
        return {"callId": "call-1", "duration": 300, field: when}

    return _session


@pytest.fixture
def journal():
    """Factory for journal entries."""

    def _journal(when) -> dict:
        return {"journal_entry": "Felt better today", "description": "", "date_time": when}

    return _journal


@pytest.fixture
def assessment():
    """Factory for assessment results."""

    def _assessment(when) -> dict:
        return {"assessment_name": "GAD-7", "score": "6", "submit_time": when}

    return _assessment
