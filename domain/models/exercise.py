"""
Exercise value object for workout exercises.

Each entry records the exercise name, set count, reps per set and weight.
"""

from pydantic import BaseModel, Field


class Exercise(BaseModel):
    """
    A single exercise entry in a workout.

    `id` is empty for exercises that have not been stored yet.

    Examples:
        >>> exercise = Exercise(name="Bench Press", number_of_sets=4, reps_per_set=8,
        ...                     weight_amount=135.0)
        >>> exercise.total_reps
        32
    """

    id: str = Field(default="", description="Store-assigned exercise ID")
    name: str = Field(..., description="Exercise name")
    number_of_sets: int = Field(default=0, description="Number of sets")
    reps_per_set: int = Field(default=0, description="Reps in each set")
    weight_amount: float = Field(default=0.0, description="Weight used")

    @property
    def total_reps(self) -> int:
        return self.number_of_sets * self.reps_per_set

    model_config = {"frozen": True}
