"""
Domain converters deriving session structures from a TrainingPlan.

- flatten_plan: TrainingPlan -> flat (block, set) sequence
- snapshot_to_overview: (TrainingPlan, SessionSnapshot) -> TrainingOverview

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import flatten_plan, snapshot_to_overview

    >>> flat = flatten_plan(plan)
    >>> len(flat) == plan.total_sets
    True

    >>> overview = snapshot_to_overview(plan, engine.snapshot)
    >>> overview.is_block_completed(0)
"""

from domain.converters.plan_to_sequence import (
    FlatEntry,
    FlatIndex,
    first_index_after_block,
    flatten_plan,
)
from domain.converters.snapshot_to_overview import snapshot_to_overview

__all__ = [
    "FlatEntry",
    "FlatIndex",
    "first_index_after_block",
    "flatten_plan",
    "snapshot_to_overview",
]
