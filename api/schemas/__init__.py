"""
API Schemas.

Request and response models for the Locked API routers.
"""

from api.schemas.posts import (
    AddCommentRequest,
    CommentListResponse,
    CreatePostRequest,
    LikeStatusResponse,
    PostListResponse,
)
from api.schemas.users import (
    CreateProfileRequest,
    DailyPostStatusRequest,
    DisplayNameRequest,
    FullNameRequest,
    NotificationPrefsRequest,
)
from api.schemas.workouts import (
    AddExercisesRequest,
    CreateWorkoutRequest,
    ExerciseIn,
)

__all__ = [
    # Posts
    "AddCommentRequest",
    "CommentListResponse",
    "CreatePostRequest",
    "LikeStatusResponse",
    "PostListResponse",
    # Users
    "CreateProfileRequest",
    "DailyPostStatusRequest",
    "DisplayNameRequest",
    "FullNameRequest",
    "NotificationPrefsRequest",
    # Workouts
    "AddExercisesRequest",
    "CreateWorkoutRequest",
    "ExerciseIn",
]
