"""
Derived, read-only accessors over a session snapshot.

SessionView is what the presentation layer renders: the raw snapshot plus the
current set, block labels, 1-based counters and the "series" counter used to
label repeated exercises within a block (e.g. "Pull-ups 2/4").
"""

from dataclasses import dataclass
from typing import Optional

from domain.converters import FlatIndex
from domain.models import SessionSnapshot, TrainingPlan, TrainingSet


@dataclass(frozen=True)
class SessionView:
    """
    Snapshot plus derived accessors.

    Attributes:
        snapshot: The underlying immutable snapshot
        current_set: Set at the current position (None once completed)
        current_block_name: Name of the block holding the current set
        current_set_number: 1-based position, capped at total_sets
        current_block_number: 1-based block number, capped at total_blocks
        total_sets: Number of sets in the plan
        total_blocks: Number of blocks in the plan
        series_number: Occurrence of the current exercise within its block
            up to and including the current set (0 once completed)
        total_series: Occurrences of the current exercise within its block
        is_rest_timer_running: Whether the rest countdown is live
    """

    snapshot: SessionSnapshot
    current_set: Optional[TrainingSet]
    current_block_name: Optional[str]
    current_set_number: int
    current_block_number: int
    total_sets: int
    total_blocks: int
    series_number: int
    total_series: int
    is_rest_timer_running: bool = False


def build_view(
    plan: TrainingPlan,
    flat_index: FlatIndex,
    snapshot: SessionSnapshot,
    *,
    is_rest_timer_running: bool = False,
) -> SessionView:
    """Build the SessionView for a snapshot."""
    total_sets = len(flat_index)
    total_blocks = plan.total_blocks

    if snapshot.position >= total_sets:
        return SessionView(
            snapshot=snapshot,
            current_set=None,
            current_block_name=None,
            current_set_number=total_sets,
            current_block_number=total_blocks,
            total_sets=total_sets,
            total_blocks=total_blocks,
            series_number=0,
            total_series=0,
            is_rest_timer_running=is_rest_timer_running,
        )

    entry = flat_index[snapshot.position]
    block = plan.blocks[entry.block_index]
    exercise_name = entry.training_set.exercise.name
    series_number = sum(
        1
        for training_set in block.sets[: entry.set_index + 1]
        if training_set.exercise.name == exercise_name
    )

    return SessionView(
        snapshot=snapshot,
        current_set=entry.training_set,
        current_block_name=block.name,
        current_set_number=snapshot.position + 1,
        current_block_number=entry.block_index + 1,
        total_sets=total_sets,
        total_blocks=total_blocks,
        series_number=series_number,
        total_series=block.series_count(exercise_name),
        is_rest_timer_running=is_rest_timer_running,
    )
