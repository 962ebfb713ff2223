"""
Derive the progress overview from a session snapshot.
"""

from typing import Optional

from domain.converters.plan_to_sequence import FlatIndex, flatten_plan
from domain.models.overview import TrainingOverview
from domain.models.plan import TrainingPlan
from domain.models.session import Phase, SessionSnapshot


def snapshot_to_overview(
    plan: TrainingPlan,
    snapshot: SessionSnapshot,
    flat_index: Optional[FlatIndex] = None,
) -> TrainingOverview:
    """
    Compute which sets are completed for a snapshot.

    A set is completed when its flat position is strictly below the
    snapshot position, or when the session is completed (then every set is).

    Args:
        plan: Plan the snapshot belongs to
        snapshot: Current session snapshot
        flat_index: Precomputed flat index of ``plan`` (computed if omitted)

    Returns:
        TrainingOverview for display
    """
    if flat_index is None:
        flat_index = flatten_plan(plan)

    if snapshot.phase == Phase.COMPLETED:
        completed = frozenset(entry.identifier for entry in flat_index)
    else:
        completed = frozenset(entry.identifier for entry in flat_index[: snapshot.position])

    return TrainingOverview(plan=plan, completed_sets=completed)
