"""
Session state types.

- Phase: which part of a set the session is in
- SessionSnapshot: immutable state emitted after every engine mutation
- SessionRecord: the subset of a snapshot that is persisted for resume
- SetIdentifier: (block, set) coordinate used by the progress overview
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class Phase(str, Enum):
    """Session phases."""

    EXERCISING = "exercising"
    RESTING = "resting"
    COMPLETED = "completed"


@dataclass(frozen=True)
class SetIdentifier:
    """Identifies a specific set in a training plan."""

    block_index: int
    set_index: int


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Immutable view of a session at one point in time.

    Attributes:
        position: Index into the flattened set sequence
        phase: Current phase
        exercise_time_remaining: Seconds left on the exercise countdown
            (always 0 for repetition exercises)
        rest_time_remaining: Seconds left on the rest countdown
        is_exercise_timer_running: Whether the exercise countdown is live
    """

    position: int = 0
    phase: Phase = Phase.EXERCISING
    exercise_time_remaining: int = 0
    rest_time_remaining: int = 0
    is_exercise_timer_running: bool = False

    def __post_init__(self) -> None:
        if self.position < 0:
            raise ValueError(f"position must be >= 0, got {self.position}")
        if self.exercise_time_remaining < 0 or self.rest_time_remaining < 0:
            raise ValueError("remaining times must be >= 0")
        if self.is_exercise_timer_running and self.phase != Phase.EXERCISING:
            raise ValueError("exercise timer can only run while exercising")

    @property
    def is_completed(self) -> bool:
        return self.phase == Phase.COMPLETED

    def to_record(self) -> "SessionRecord":
        """Project the persisted fields (the timer flag is never stored)."""
        return SessionRecord(
            position=self.position,
            phase=self.phase,
            exercise_time_remaining=self.exercise_time_remaining,
            rest_time_remaining=self.rest_time_remaining,
            is_completed=self.is_completed,
        )


class SessionRecord(BaseModel):
    """
    Persisted session record, round-tripped atomically through a SessionStore.

    Only these five fields are stored. Whether a timer was running is
    deliberately absent: a restored session always starts with timers stopped.
    """

    position: int = Field(..., ge=0)
    phase: Phase
    exercise_time_remaining: int = Field(..., ge=0)
    rest_time_remaining: int = Field(..., ge=0)
    is_completed: bool

    @model_validator(mode="after")
    def validate_completion_flag(self) -> "SessionRecord":
        """Completion flag and phase must agree."""
        if self.is_completed != (self.phase == Phase.COMPLETED):
            raise ValueError(
                f"is_completed={self.is_completed} does not match phase={self.phase.value}"
            )
        return self

    def to_snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            position=self.position,
            phase=self.phase,
            exercise_time_remaining=self.exercise_time_remaining,
            rest_time_remaining=self.rest_time_remaining,
            is_exercise_timer_running=False,
        )

    model_config = {"frozen": True}
