"""
Centralized enum definitions for the application.

Usage:
    from studyrecord.enums import Weekday, RecommendationType
"""

from studyrecord.enums.analytics import RecommendationType, Weekday

__all__ = [
    "RecommendationType",
    "Weekday",
]
