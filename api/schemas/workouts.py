"""
Workout Schemas.

Request bodies for the /workouts endpoints. Workouts and exercises are
returned as domain models.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, field_validator

from domain.converters import as_utc
from domain.models import Exercise


class ExerciseIn(BaseModel):
    """One exercise entry in a request body."""
    name: str = Field(..., min_length=1)
    number_of_sets: int = Field(default=0, ge=0)
    reps_per_set: int = Field(default=0, ge=0)
    weight_amount: float = Field(default=0.0, ge=0)

    def to_domain(self) -> Exercise:
        return Exercise(
            name=self.name,
            number_of_sets=self.number_of_sets,
            reps_per_set=self.reps_per_set,
            weight_amount=self.weight_amount,
        )


class CreateWorkoutRequest(BaseModel):
    """Request body for POST /workouts. A date without a zone is taken as UTC."""
    workout_date: datetime
    exercises: List[ExerciseIn] = Field(default_factory=list)

    @field_validator("workout_date")
    @classmethod
    def workout_date_as_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class AddExercisesRequest(BaseModel):
    """Request body for POST /workouts/{workout_id}/exercises."""
    exercises: List[ExerciseIn]
