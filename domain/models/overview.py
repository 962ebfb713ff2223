"""
TrainingOverview: read-only completion status of a plan.
"""

from dataclasses import dataclass, field
from typing import FrozenSet

from domain.models.plan import TrainingPlan
from domain.models.session import SetIdentifier


@dataclass(frozen=True)
class TrainingOverview:
    """
    A training plan paired with the set of sets already completed.

    Attributes:
        plan: The plan being displayed
        completed_sets: Identifiers of every completed set
    """

    plan: TrainingPlan
    completed_sets: FrozenSet[SetIdentifier] = field(default_factory=frozenset)

    def is_set_completed(self, block_index: int, set_index: int) -> bool:
        return SetIdentifier(block_index, set_index) in self.completed_sets

    def is_block_completed(self, block_index: int) -> bool:
        """A block is completed when every one of its sets is completed."""
        block = self.plan.get_block(block_index)
        if block is None:
            return False
        return all(
            self.is_set_completed(block_index, set_index)
            for set_index in range(block.set_count)
        )

    def is_training_completed(self) -> bool:
        return all(
            self.is_block_completed(block_index)
            for block_index in range(self.plan.total_blocks)
        )

    @property
    def completed_count(self) -> int:
        return len(self.completed_sets)

    def to_dict(self) -> dict:
        """Serialize block-by-block completion for display."""
        return {
            "plan_name": self.plan.name,
            "is_completed": self.is_training_completed(),
            "completed_sets": self.completed_count,
            "total_sets": self.plan.total_sets,
            "blocks": [
                {
                    "name": block.name,
                    "is_completed": self.is_block_completed(block_index),
                    "sets": [
                        {
                            "exercise": training_set.exercise.name,
                            "is_completed": self.is_set_completed(block_index, set_index),
                        }
                        for set_index, training_set in enumerate(block.sets)
                    ],
                }
                for block_index, block in enumerate(self.plan.blocks)
            ],
        }
