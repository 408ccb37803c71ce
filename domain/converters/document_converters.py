"""
Converters: stored document fields <-> domain models.

Documents are read leniently: a missing field, or one holding a value of the
wrong type, falls back to a default instead of failing the read. Timestamps
without a zone are read as UTC, so every datetime handed out is tz-aware.

Stored field names (camelCase, shared with the mobile clients):
- posts/{id}: caption, ownerUserId, photoUrl, createdAt
- posts/{id}/comments/{id}: authorUserId, text, createdAt
- users/{id}: email, fullName, displayName, createdAt,
  dailyPostStatus {hasPostedToday, postId}, notificationPrefs {enabled}
- users/{id}/workouts/{id}: workoutDate, createdAt
- users/{id}/workouts/{id}/exercises/{id}: exerciseName, numberOfSets,
  repsPerSet, weightAmount, createdAt
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from domain.models import (
    Comment,
    DailyPostStatus,
    Exercise,
    NotificationPrefs,
    Post,
    User,
    Workout,
)


def as_utc(value: datetime) -> datetime:
    """Read a naive datetime as UTC; aware values are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _parse_datetime(value: Any) -> Optional[datetime]:
    """Parse datetime from various formats. The result is always tz-aware."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return as_utc(value)
    if isinstance(value, str):
        try:
            if value.endswith("Z"):
                value = value[:-1] + "+00:00"
            return as_utc(datetime.fromisoformat(value))
        except ValueError:
            return None
    return None


def _timestamp_or_now(value: Any) -> datetime:
    # A document written without a timestamp reads as "just now".
    return _parse_datetime(value) or datetime.now(timezone.utc)


def _str(data: Dict[str, Any], field: str, default: str = "") -> str:
    value = data.get(field)
    return value if isinstance(value, str) else default


def _bool(data: Dict[str, Any], field: str, default: bool) -> bool:
    value = data.get(field)
    return value if isinstance(value, bool) else default


def _number(data: Dict[str, Any], field: str) -> Optional[float]:
    value = data.get(field)
    # bool is an int subclass; a stored flag is not a number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _map(data: Dict[str, Any], field: str) -> Dict[str, Any]:
    value = data.get(field)
    return value if isinstance(value, dict) else {}


def document_to_post(doc_id: str, data: Dict[str, Any]) -> Post:
    """Convert a posts/{id} document to a Post."""
    return Post(
        id=doc_id,
        caption=_str(data, "caption"),
        owner_user_id=_str(data, "ownerUserId"),
        photo_url=_str(data, "photoUrl"),
        created_at=_timestamp_or_now(data.get("createdAt")),
    )


def document_to_comment(doc_id: str, post_id: str, data: Dict[str, Any]) -> Comment:
    """Convert a posts/{postId}/comments/{id} document to a Comment."""
    return Comment(
        id=doc_id,
        post_id=post_id,
        author_user_id=_str(data, "authorUserId"),
        text=_str(data, "text"),
        created_at=_timestamp_or_now(data.get("createdAt")),
    )


def document_to_user(user_id: str, data: Dict[str, Any]) -> User:
    """
    Convert a users/{id} document to a User.

    Nested fields default individually: a missing `hasPostedToday` reads as
    False while a missing `enabled` notification flag reads as True.
    """
    status = _map(data, "dailyPostStatus")
    prefs = _map(data, "notificationPrefs")
    post_id = status.get("postId")

    return User(
        user_id=user_id,
        full_name=_str(data, "fullName"),
        display_name=_str(data, "displayName"),
        email=_str(data, "email"),
        daily_post_status=DailyPostStatus(
            has_posted_today=_bool(status, "hasPostedToday", False),
            post_id=post_id if isinstance(post_id, str) else None,
        ),
        notification_prefs=NotificationPrefs(
            enabled=_bool(prefs, "enabled", True),
        ),
        created_at=_parse_datetime(data.get("createdAt")),
    )


def document_to_workout(doc_id: str, user_id: str, data: Dict[str, Any]) -> Workout:
    """Convert a users/{userId}/workouts/{id} document to a Workout."""
    return Workout(
        id=doc_id,
        user_id=user_id,
        workout_date=_timestamp_or_now(data.get("workoutDate")),
        created_at=_timestamp_or_now(data.get("createdAt")),
    )


def document_to_exercise(doc_id: str, data: Dict[str, Any]) -> Exercise:
    """Convert an exercises/{id} document to an Exercise."""
    sets = _number(data, "numberOfSets")
    reps = _number(data, "repsPerSet")
    weight = _number(data, "weightAmount")

    return Exercise(
        id=doc_id,
        name=_str(data, "exerciseName", default="Unknown"),
        number_of_sets=int(sets) if sets is not None else 0,
        reps_per_set=int(reps) if reps is not None else 0,
        weight_amount=float(weight) if weight is not None else 0.0,
    )


def exercise_to_document(exercise: Exercise, created_at: Any) -> Dict[str, Any]:
    """
    Convert an Exercise to its stored fields.

    Args:
        exercise: Exercise to store (its `id` is ignored)
        created_at: Timestamp value or store sentinel for `createdAt`
    """
    return {
        "exerciseName": exercise.name,
        "numberOfSets": exercise.number_of_sets,
        "repsPerSet": exercise.reps_per_set,
        "weightAmount": exercise.weight_amount,
        "createdAt": created_at,
    }
