"""
Flatten a nested TrainingPlan into a single ordered set sequence.

The flat sequence is the session engine's only position coordinate: entry
``i`` is the i-th set of the plan in document order.
"""

from typing import NamedTuple, Optional, Sequence, Tuple

from domain.models.plan import TrainingPlan
from domain.models.session import SetIdentifier
from domain.models.training_set import TrainingSet


class FlatEntry(NamedTuple):
    """One set of the plan together with its (block, set) coordinates."""

    block_index: int
    set_index: int
    training_set: TrainingSet

    @property
    def identifier(self) -> SetIdentifier:
        return SetIdentifier(self.block_index, self.set_index)


FlatIndex = Tuple[FlatEntry, ...]


def flatten_plan(plan: TrainingPlan) -> FlatIndex:
    """
    Build the flat index of a plan.

    Block and set order are preserved exactly; nothing is reordered or
    de-duplicated, so ``len(result) == plan.total_sets``.

    Args:
        plan: Plan to flatten

    Returns:
        Tuple of FlatEntry in document order
    """
    return tuple(
        FlatEntry(block_index, set_index, training_set)
        for block_index, block in enumerate(plan.blocks)
        for set_index, training_set in enumerate(block.sets)
    )


def first_index_after_block(flat_index: Sequence[FlatEntry], block_index: int) -> Optional[int]:
    """Position of the first entry belonging to a later block, or None."""
    return next(
        (i for i, entry in enumerate(flat_index) if entry.block_index > block_index),
        None,
    )
