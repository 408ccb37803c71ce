"""
Workout Repository Interface (Port).

This module defines the abstract interface for workout persistence. Workouts
live under their user and own nested exercise documents.
"""
from datetime import datetime
from typing import List, Protocol, Sequence

from application.result import Result
from domain.models import Exercise, Workout


class WorkoutRepository(Protocol):
    """Abstract interface for workout persistence operations."""

    async def create_workout(
        self,
        user_id: str,
        workout_date: datetime,
        exercises: Sequence[Exercise] = (),
    ) -> Result[str]:
        """
        Create a workout and its exercises in one atomic batch.

        Args:
            user_id: Owning user ID
            workout_date: Day the workout took place
            exercises: Exercise entries; may be empty

        Returns:
            Result with the new workout ID
        """
        ...

    async def add_exercises_to_workout(
        self,
        user_id: str,
        workout_id: str,
        exercises: Sequence[Exercise],
    ) -> Result[None]:
        """
        Add exercises to an existing workout in one atomic batch.

        Fails with InvalidArgumentError, without writing, if `exercises` is
        empty.
        """
        ...

    async def get_workouts(self, user_id: str) -> Result[List[Workout]]:
        """Get a user's workouts, most recent workout date first."""
        ...

    async def get_exercises_for_workout(
        self,
        user_id: str,
        workout_id: str,
    ) -> Result[List[Exercise]]:
        """Get a workout's exercises in the order they were added."""
        ...
