"""
Plan Repository Interface (Port).

This module defines the abstract interface for looking up training plans.
Lookups are pure and synchronous; a missing plan is a legitimate result
(a rest day, or an unknown name) and is returned as None.
"""
from typing import List, Optional, Protocol

from domain.models import TrainingPlan


class PlanRepository(Protocol):
    """
    Abstract interface for the training plan catalog.

    Implementations:
    - YamlPlanRepository: bundled YAML catalog (infrastructure/catalog)
    - FakePlanRepository: in-memory fake for tests
    """

    def get_for_day(self, weekday: int) -> Optional[TrainingPlan]:
        """
        Get the plan scheduled for a day of the week.

        Args:
            weekday: Day of week, Monday == 0 ... Sunday == 6
                (same convention as datetime.date.weekday())

        Returns:
            The scheduled plan, or None on a rest day
        """
        ...

    def get_by_name(self, name: str) -> Optional[TrainingPlan]:
        """
        Get a plan by its name.

        Args:
            name: Plan name (exact match)

        Returns:
            The plan, or None if no plan has that name
        """
        ...

    def list_names(self) -> List[str]:
        """
        List the names of every plan in the catalog.

        Returns:
            Plan names in catalog order
        """
        ...
