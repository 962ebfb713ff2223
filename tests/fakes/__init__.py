"""
Fake Implementations and Factories for Testing.

This package provides in-memory fake implementations of the application
ports for fast, isolated testing. No database, event loop or wall clock
required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test plans

Usage:
    from tests.fakes import FakeTimerScheduler, FakeSessionStore, create_plan, rep, timed

    plan = create_plan(blocks=[("Main", [rep("Squat", 10, 30), timed("Plank", 5, 20)])])
    engine = SessionEngine(plan, FakeTimerScheduler(), store=FakeSessionStore())
"""
from typing import List, Optional, Sequence, Tuple

from domain.models import (
    Block,
    RepetitionExercise,
    TimedExercise,
    TrainingPlan,
    TrainingSet,
)

from tests.fakes.plan_repository import FakePlanRepository
from tests.fakes.session_store import FakeSessionStore
from tests.fakes.timer_scheduler import FakeTimerScheduler


# =============================================================================
# Factory Functions
# =============================================================================


def rep(name: str, repetitions: int = 10, rest_seconds: int = 30) -> TrainingSet:
    """Create a repetition set."""
    return TrainingSet(
        exercise=RepetitionExercise(name=name, repetitions=repetitions),
        rest_seconds=rest_seconds,
    )


def timed(name: str, duration_seconds: int = 5, rest_seconds: int = 20) -> TrainingSet:
    """Create a timed set."""
    return TrainingSet(
        exercise=TimedExercise(name=name, duration_seconds=duration_seconds),
        rest_seconds=rest_seconds,
    )


def create_plan(
    *,
    name: str = "Test Plan",
    blocks: Optional[Sequence[Tuple[str, List[TrainingSet]]]] = None,
) -> TrainingPlan:
    """
    Create a TrainingPlan from (block name, sets) pairs.

    Args:
        name: Plan name
        blocks: Blocks in order; defaults to the two-set plan
            [rep x10 rest 30s, timed 5s rest 20s]

    Returns:
        TrainingPlan
    """
    if blocks is None:
        blocks = [("Main", [rep("Squat", 10, 30), timed("Plank", 5, 20)])]
    return TrainingPlan(
        name=name,
        blocks=[Block(name=block_name, sets=sets) for block_name, sets in blocks],
    )


def create_three_block_plan(name: str = "Three Blocks") -> TrainingPlan:
    """
    Plan with blocks of 2, 3 and 1 sets (6 sets total).

    Block "Strength" repeats Pull-ups three times for series labelling.
    """
    return create_plan(
        name=name,
        blocks=[
            ("Warm-up", [rep("Jumping Jacks", 20, 15), timed("Hip Circles", 10, 15)]),
            ("Strength", [
                rep("Pull-ups", 7, 90),
                rep("Pull-ups", 7, 90),
                rep("Pull-ups", 7, 60),
            ]),
            ("Core", [timed("Plank", 30, 0)]),
        ],
    )


__all__ = [
    "FakePlanRepository",
    "FakeSessionStore",
    "FakeTimerScheduler",
    "create_plan",
    "create_three_block_plan",
    "rep",
    "timed",
]
