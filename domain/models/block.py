"""
Block value object: a named group of sets performed consecutively.
"""

from typing import List

from pydantic import BaseModel, Field

from domain.models.training_set import TrainingSet


class Block(BaseModel):
    """
    Value object representing a block of sets within a training plan.

    Examples:
        >>> block = Block(
        ...     name="Core Training",
        ...     sets=[
        ...         TrainingSet(
        ...             exercise=RepetitionExercise(name="Leg Raises", repetitions=15),
        ...             rest_seconds=30,
        ...         ),
        ...         TrainingSet(
        ...             exercise=TimedExercise(name="Plank", duration_seconds=60),
        ...             rest_seconds=30,
        ...         ),
        ...     ],
        ... )
        >>> block.set_count
        2
    """

    name: str = Field(..., min_length=1, description="Block name (e.g., 'Warm-up')")
    sets: List[TrainingSet] = Field(
        ..., min_length=1, description="Ordered sets in this block"
    )

    @property
    def set_count(self) -> int:
        """Number of sets in the block."""
        return len(self.sets)

    @property
    def exercise_names(self) -> List[str]:
        """Exercise names in set order (repeats included)."""
        return [s.exercise.name for s in self.sets]

    def series_count(self, exercise_name: str) -> int:
        """
        Count how many sets in this block use the given exercise.

        Used to label repeated sets ("series 2 of 4").
        """
        return sum(1 for s in self.sets if s.exercise.name == exercise_name)

    def __str__(self) -> str:
        names = ", ".join(self.exercise_names[:3])
        if self.set_count > 3:
            names += f" (+{self.set_count - 3} more)"
        return f"{self.name} [{names}]"

    model_config = {"frozen": True}
