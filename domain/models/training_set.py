"""
TrainingSet value object: one exercise followed by a rest period.
"""

from pydantic import BaseModel, Field

from domain.models.exercise import Exercise, countdown_seconds, has_countdown


class TrainingSet(BaseModel):
    """
    A single unit of work within a block.

    Examples:
        >>> training_set = TrainingSet(
        ...     exercise=RepetitionExercise(name="Dips", repetitions=9),
        ...     rest_seconds=90,
        ... )
    """

    exercise: Exercise = Field(..., description="Exercise to perform")
    rest_seconds: int = Field(
        ..., ge=0, description="Rest period after the exercise in seconds"
    )

    @property
    def is_timed(self) -> bool:
        """Check if the exercise of this set runs on a countdown."""
        return has_countdown(self.exercise)

    @property
    def exercise_seconds(self) -> int:
        """Initial exercise countdown (0 for repetition exercises)."""
        return countdown_seconds(self.exercise)

    def __str__(self) -> str:
        return f"{self.exercise}, rest {self.rest_seconds}s"

    model_config = {"frozen": True}
