"""
Exercise variants for training sets.

An exercise is performed either by repetitions or by holding it for a fixed
time. The two variants are tagged with a literal ``kind`` so a plan can be
round-tripped through JSON/YAML and the engine can dispatch on the tag.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class RepetitionExercise(BaseModel):
    """
    Exercise prescribed as a number of repetitions.

    Examples:
        >>> exercise = RepetitionExercise(name="Push-ups", repetitions=14)
        >>> has_countdown(exercise)
        False
    """

    kind: Literal["repetition"] = "repetition"
    name: str = Field(..., min_length=1, description="Exercise name")
    description: Optional[str] = Field(
        default=None, description="Form cues or instructions"
    )
    repetitions: int = Field(..., gt=0, description="Repetitions to perform")

    def __str__(self) -> str:
        return f"{self.name} x{self.repetitions}"

    model_config = {"frozen": True}


class TimedExercise(BaseModel):
    """
    Exercise held or performed for a fixed duration.

    Examples:
        >>> exercise = TimedExercise(name="Plank", duration_seconds=60)
        >>> countdown_seconds(exercise)
        60
    """

    kind: Literal["timed"] = "timed"
    name: str = Field(..., min_length=1, description="Exercise name")
    description: Optional[str] = Field(
        default=None, description="Form cues or instructions"
    )
    duration_seconds: int = Field(..., gt=0, description="Duration in seconds")

    def __str__(self) -> str:
        return f"{self.name} {self.duration_seconds}s"

    model_config = {"frozen": True}


Exercise = Annotated[
    Union[RepetitionExercise, TimedExercise],
    Field(discriminator="kind"),
]


def countdown_seconds(exercise: Union[RepetitionExercise, TimedExercise]) -> int:
    """Seconds the exercise timer starts from (0 for repetition exercises)."""
    match exercise:
        case TimedExercise(duration_seconds=duration):
            return duration
        case _:
            return 0


def has_countdown(exercise: Union[RepetitionExercise, TimedExercise]) -> bool:
    """True when the exercise is finished by a countdown rather than by reps."""
    return exercise.kind == "timed"
