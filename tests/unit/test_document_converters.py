"""
Unit tests for domain.converters.document_converters.

Lenient reads: missing or mistyped fields fall back to defaults.
"""

from datetime import datetime, timezone

import pytest

from domain.converters import (
    document_to_comment,
    document_to_exercise,
    document_to_post,
    document_to_user,
    document_to_workout,
    exercise_to_document,
)
from domain.models import Exercise

pytestmark = pytest.mark.unit

TS = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


class TestDocumentToPost:

    def test_full_document(self):
        post = document_to_post("p1", {
            "caption": "hi",
            "ownerUserId": "u1",
            "photoUrl": "https://cdn/p1.jpg",
            "createdAt": TS,
        })

        assert post.id == "p1"
        assert post.caption == "hi"
        assert post.owner_user_id == "u1"
        assert post.photo_url == "https://cdn/p1.jpg"
        assert post.created_at == TS

    def test_missing_timestamp_reads_as_now(self):
        before = datetime.now(timezone.utc)

        post = document_to_post("p1", {})

        assert post.created_at >= before
        assert post.caption == ""

    def test_iso_string_timestamp(self):
        post = document_to_post("p1", {"createdAt": "2024-06-01T12:00:00Z"})

        assert post.created_at == TS

    def test_zoneless_string_timestamp_reads_as_utc(self):
        post = document_to_post("p1", {"createdAt": "2024-06-01T12:00:00"})

        assert post.created_at == TS
        assert post.created_at.tzinfo is not None

    def test_naive_datetime_reads_as_utc(self):
        post = document_to_post("p1", {"createdAt": datetime(2024, 6, 1, 12, 0)})

        assert post.created_at == TS

    def test_zoneless_and_aware_timestamps_compare(self):
        old = document_to_post("old", {"createdAt": "2024-01-01T00:00:00"})
        new = document_to_post("new", {"createdAt": TS})

        assert sorted([new, old], key=lambda p: p.created_at) == [old, new]

    def test_mistyped_fields_use_defaults(self):
        post = document_to_post("p1", {"caption": 5, "ownerUserId": None, "createdAt": TS})

        assert post.caption == ""
        assert post.owner_user_id == ""


class TestDocumentToComment:

    def test_comment_fields(self):
        comment = document_to_comment("c1", "p1", {"authorUserId": "u2", "text": "nice", "createdAt": TS})

        assert comment.id == "c1"
        assert comment.post_id == "p1"
        assert comment.author_user_id == "u2"
        assert comment.text == "nice"


class TestDocumentToUser:

    def test_defaults(self):
        user = document_to_user("u1", {})

        assert user.daily_post_status.has_posted_today is False
        assert user.daily_post_status.post_id is None
        assert user.notification_prefs.enabled is True
        assert user.created_at is None

    def test_nested_values(self):
        user = document_to_user("u1", {
            "fullName": "Una",
            "displayName": "una",
            "email": "u@e.com",
            "dailyPostStatus": {"hasPostedToday": True, "postId": "p1"},
            "notificationPrefs": {"enabled": False},
            "createdAt": TS,
        })

        assert user.full_name == "Una"
        assert user.display_name == "una"
        assert user.daily_post_status.has_posted_today is True
        assert user.daily_post_status.post_id == "p1"
        assert user.notification_prefs.enabled is False
        assert user.created_at == TS

    def test_nested_map_of_wrong_type_ignored(self):
        user = document_to_user("u1", {"dailyPostStatus": "yes", "notificationPrefs": [1]})

        assert user.daily_post_status.has_posted_today is False
        assert user.notification_prefs.enabled is True


class TestWorkoutConverters:

    def test_workout(self):
        workout = document_to_workout("w1", "u1", {"workoutDate": TS, "createdAt": TS})

        assert workout.id == "w1"
        assert workout.user_id == "u1"
        assert workout.workout_date == TS

    def test_exercise_defaults(self):
        exercise = document_to_exercise("e1", {})

        assert exercise.id == "e1"
        assert exercise.name == "Unknown"
        assert exercise.number_of_sets == 0
        assert exercise.reps_per_set == 0
        assert exercise.weight_amount == 0.0

    def test_exercise_numbers_coerced(self):
        exercise = document_to_exercise("e1", {
            "exerciseName": "Squat",
            "numberOfSets": 5.0,
            "repsPerSet": 5,
            "weightAmount": 100,
        })

        assert exercise.number_of_sets == 5
        assert exercise.weight_amount == 100.0
        assert isinstance(exercise.weight_amount, float)

    def test_boolean_is_not_a_number(self):
        exercise = document_to_exercise("e1", {"numberOfSets": True})

        assert exercise.number_of_sets == 0

    def test_exercise_to_document(self):
        data = exercise_to_document(
            Exercise(id="ignored", name="Row", number_of_sets=3, reps_per_set=12, weight_amount=40.5),
            TS,
        )

        assert data == {
            "exerciseName": "Row",
            "numberOfSets": 3,
            "repsPerSet": 12,
            "weightAmount": 40.5,
            "createdAt": TS,
        }
