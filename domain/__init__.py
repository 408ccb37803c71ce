"""
Domain layer for the Locked API.

This package contains pure domain models that are independent of
infrastructure concerns (document store, API, external services).
"""

from domain.models import (
    Comment,
    DailyPostStatus,
    Exercise,
    NotificationPrefs,
    Post,
    User,
    Workout,
)

__all__ = [
    "Comment",
    "DailyPostStatus",
    "Exercise",
    "NotificationPrefs",
    "Post",
    "User",
    "Workout",
]
