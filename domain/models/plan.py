"""
TrainingPlan aggregate root.

A plan is an ordered list of blocks, each an ordered list of sets. Plans are
immutable for the whole lifetime of a session and are identified by name.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from domain.models.block import Block
from domain.models.training_set import TrainingSet


class TrainingPlan(BaseModel):
    """
    Aggregate root describing a full workout.

    Examples:
        >>> plan = TrainingPlan.model_validate({
        ...     "name": "Push Training",
        ...     "blocks": [{
        ...         "name": "Push",
        ...         "sets": [{
        ...             "exercise": {"kind": "repetition", "name": "Push-ups", "repetitions": 14},
        ...             "rest_seconds": 90,
        ...         }],
        ...     }],
        ... })
        >>> plan.total_sets
        1
    """

    name: str = Field(..., min_length=1, description="Plan name, used as lookup key")
    blocks: List[Block] = Field(
        ..., min_length=1, description="Ordered blocks of the plan"
    )

    @property
    def total_blocks(self) -> int:
        return len(self.blocks)

    @property
    def total_sets(self) -> int:
        """Total sets across all blocks."""
        return sum(block.set_count for block in self.blocks)

    def get_block(self, block_index: int) -> Optional[Block]:
        if 0 <= block_index < len(self.blocks):
            return self.blocks[block_index]
        return None

    def get_set(self, block_index: int, set_index: int) -> Optional[TrainingSet]:
        block = self.get_block(block_index)
        if block is None or not 0 <= set_index < block.set_count:
            return None
        return block.sets[set_index]

    def __str__(self) -> str:
        return f"{self.name} ({self.total_blocks} blocks, {self.total_sets} sets)"

    model_config = {"frozen": True}
