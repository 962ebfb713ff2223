"""
Domain layer for the Training Coach API.

This package contains pure domain models and converters that are
independent of infrastructure concerns (storage, API, timers).
"""

from domain.models import (
    Block,
    Phase,
    RepetitionExercise,
    SessionRecord,
    SessionSnapshot,
    SetIdentifier,
    TimedExercise,
    TrainingOverview,
    TrainingPlan,
    TrainingSet,
)

__all__ = [
    "Block",
    "Phase",
    "RepetitionExercise",
    "SessionRecord",
    "SessionSnapshot",
    "SetIdentifier",
    "TimedExercise",
    "TrainingOverview",
    "TrainingPlan",
    "TrainingSet",
]
