"""
Workout model.

A workout belongs to a user and owns nested exercise entries
(see domain.models.exercise).
"""

from datetime import datetime

from pydantic import BaseModel, Field


class Workout(BaseModel):
    """A logged workout session."""

    id: str = Field(..., description="Store-assigned workout ID")
    user_id: str = Field(..., description="Owning user ID")
    workout_date: datetime = Field(..., description="Day the workout took place")
    created_at: datetime = Field(..., description="Creation time")

    model_config = {"frozen": True}
