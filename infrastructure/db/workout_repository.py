"""
Document store implementation of WorkoutRepository.

Workouts live at users/{userId}/workouts/{workoutId}, each owning an
`exercises` sub-collection. A workout and its initial exercises are written
in one batch, as is every later group of added exercises.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import List, Sequence

from application.exceptions import InvalidArgumentError
from application.ports.document_store import DocumentStore, WriteBatch
from application.result import Result
from domain.converters import (
    as_utc,
    document_to_exercise,
    document_to_workout,
    exercise_to_document,
)
from domain.models import Exercise, Workout
from infrastructure.db.collections import (
    exercises_collection,
    workout_doc,
    workouts_collection,
)

logger = logging.getLogger(__name__)


class DocumentWorkoutRepository:
    """
    DocumentStore implementation of WorkoutRepository protocol.

    The store is injected via constructor for testability.
    """

    def __init__(self, store: DocumentStore):
        self._store = store

    def _stage_exercises(
        self,
        batch: WriteBatch,
        user_id: str,
        workout_id: str,
        exercises: Sequence[Exercise],
    ) -> None:
        collection = exercises_collection(user_id, workout_id)
        # Client-side times one microsecond apart keep list order under
        # the createdAt ordering used when reading exercises back.
        base = datetime.now(timezone.utc)
        for index, exercise in enumerate(exercises):
            path = f"{collection}/{self._store.new_id(collection)}"
            batch.set(path, exercise_to_document(exercise, base + timedelta(microseconds=index)))

    async def create_workout(
        self,
        user_id: str,
        workout_date: datetime,
        exercises: Sequence[Exercise] = (),
    ) -> Result[str]:
        """
        Create a workout with its exercises in one batch.

        A naive `workout_date` is stored as UTC so it orders against
        tz-aware dates.
        """
        collection = workouts_collection(user_id)
        workout_id = self._store.new_id(collection)

        batch = self._store.batch()
        batch.set(workout_doc(user_id, workout_id), {
            "workoutDate": as_utc(workout_date),
            "createdAt": datetime.now(timezone.utc),
        })
        self._stage_exercises(batch, user_id, workout_id, exercises)

        try:
            await batch.commit()
        except Exception as e:
            logger.error(f"Failed to create workout for user {user_id}: {e}")
            return Result.fail(e)

        logger.info(
            f"Workout {workout_id} created for user {user_id} with {len(exercises)} exercise(s)"
        )
        return Result.ok(workout_id)

    async def add_exercises_to_workout(
        self,
        user_id: str,
        workout_id: str,
        exercises: Sequence[Exercise],
    ) -> Result[None]:
        """Add exercises to an existing workout in one batch."""
        if not exercises:
            return Result.fail(InvalidArgumentError("No exercises to add"))

        batch = self._store.batch()
        self._stage_exercises(batch, user_id, workout_id, exercises)

        try:
            await batch.commit()
        except Exception as e:
            logger.error(f"Failed to add exercises to workout {workout_id}: {e}")
            return Result.fail(e)

        return Result.ok()

    async def get_workouts(self, user_id: str) -> Result[List[Workout]]:
        """Get a user's workouts, most recent workout date first."""
        try:
            snaps = await self._store.query(
                workouts_collection(user_id),
                order_by="workoutDate",
                descending=True,
            )
        except Exception as e:
            logger.error(f"Failed to get workouts for user {user_id}: {e}")
            return Result.fail(e)

        return Result.ok([document_to_workout(s.id, user_id, s.data) for s in snaps])

    async def get_exercises_for_workout(
        self,
        user_id: str,
        workout_id: str,
    ) -> Result[List[Exercise]]:
        """Get a workout's exercises, oldest first."""
        try:
            snaps = await self._store.query(
                exercises_collection(user_id, workout_id),
                order_by="createdAt",
            )
        except Exception as e:
            logger.error(f"Failed to get exercises for workout {workout_id}: {e}")
            return Result.fail(e)

        return Result.ok([document_to_exercise(s.id, s.data) for s in snaps])
