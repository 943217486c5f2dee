"""API Routers package."""

from studyrecord.routers import analytics as analytics_router

__all__ = ["analytics_router"]
