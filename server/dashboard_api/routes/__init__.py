"""API route modules."""
from .insights import router as insights_router

__all__ = [
    "insights_router",
]
