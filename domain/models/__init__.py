"""
Domain models for the Locked app.

These models are independent of infrastructure concerns (document store,
API, external services) and represent the core concepts:
- Post / Comment: photo posts and their comments
- User: profile with the denormalized daily-post status
- Workout / Exercise: logged workouts and their exercise entries

Usage:
    >>> from domain.models import Post, User, Workout, Exercise
"""

from domain.models.exercise import Exercise
from domain.models.post import Comment, Post
from domain.models.user import DailyPostStatus, NotificationPrefs, User
from domain.models.workout import Workout

__all__ = [
    "Comment",
    "DailyPostStatus",
    "Exercise",
    "NotificationPrefs",
    "Post",
    "User",
    "Workout",
]
