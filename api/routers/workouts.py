"""
Workouts router.

This router contains endpoints for:
- POST /workouts - Create a workout with its exercises
- GET /workouts - List the current user's workouts, latest workout date first
- POST /workouts/{workout_id}/exercises - Add exercises to a workout
- GET /workouts/{workout_id}/exercises - List a workout's exercises in entry order
"""

from typing import List

from fastapi import APIRouter, Depends

from api.deps import get_current_user, get_workout_repo
from api.errors import unwrap_or_raise
from api.schemas.workouts import AddExercisesRequest, CreateWorkoutRequest
from application.ports import WorkoutRepository
from domain.models import Exercise, Workout

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


@router.post("", status_code=201)
async def create_workout_endpoint(
    request: CreateWorkoutRequest,
    user_id: str = Depends(get_current_user),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    workout_id = unwrap_or_raise(await workout_repo.create_workout(
        user_id,
        request.workout_date,
        [e.to_domain() for e in request.exercises],
    ))
    return {"success": True, "workout_id": workout_id}


@router.get("", response_model=List[Workout])
async def list_workouts_endpoint(
    user_id: str = Depends(get_current_user),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    return unwrap_or_raise(await workout_repo.get_workouts(user_id))


@router.post("/{workout_id}/exercises", status_code=204)
async def add_exercises_endpoint(
    workout_id: str,
    request: AddExercisesRequest,
    user_id: str = Depends(get_current_user),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    """Add exercises to a workout. An empty list is rejected with 400."""
    unwrap_or_raise(await workout_repo.add_exercises_to_workout(
        user_id,
        workout_id,
        [e.to_domain() for e in request.exercises],
    ))


@router.get("/{workout_id}/exercises", response_model=List[Exercise])
async def list_exercises_endpoint(
    workout_id: str,
    user_id: str = Depends(get_current_user),
    workout_repo: WorkoutRepository = Depends(get_workout_repo),
):
    return unwrap_or_raise(await workout_repo.get_exercises_for_workout(user_id, workout_id))
