"""
Domain models for the Training Coach API.

This package contains pure domain models that are independent of
infrastructure concerns (storage, API, timers).

These models represent the core concepts:
- TrainingPlan: The aggregate root containing ordered blocks
- Block: A named group of sets performed consecutively
- TrainingSet: One exercise followed by a rest period
- RepetitionExercise / TimedExercise: The two exercise variants
- SessionSnapshot / SessionRecord: Live and persisted session state
- TrainingOverview: Read-only completion status

Usage:
    >>> from domain.models import TrainingPlan, Block, TrainingSet, TimedExercise

    >>> plan = TrainingPlan(
    ...     name="Core",
    ...     blocks=[
    ...         Block(
    ...             name="Core Training",
    ...             sets=[
    ...                 TrainingSet(
    ...                     exercise=TimedExercise(name="Plank", duration_seconds=60),
    ...                     rest_seconds=30,
    ...                 )
    ...             ],
    ...         )
    ...     ],
    ... )

    >>> # Serialize to JSON
    >>> json_str = plan.model_dump_json(indent=2)

    >>> # Deserialize from JSON
    >>> plan = TrainingPlan.model_validate_json(json_str)
"""

from domain.models.block import Block
from domain.models.exercise import (
    Exercise,
    RepetitionExercise,
    TimedExercise,
    countdown_seconds,
    has_countdown,
)
from domain.models.overview import TrainingOverview
from domain.models.plan import TrainingPlan
from domain.models.session import Phase, SessionRecord, SessionSnapshot, SetIdentifier
from domain.models.training_set import TrainingSet

__all__ = [
    # Plan
    "TrainingPlan",
    "Block",
    "TrainingSet",
    "Exercise",
    "RepetitionExercise",
    "TimedExercise",
    "countdown_seconds",
    "has_countdown",
    # Session
    "Phase",
    "SessionSnapshot",
    "SessionRecord",
    "SetIdentifier",
    "TrainingOverview",
]
