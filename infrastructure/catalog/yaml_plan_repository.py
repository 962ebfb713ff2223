"""
YAML-backed plan catalog.

Loads training plans and the weekly schedule from a YAML document
(shared/catalog/training_plans.yaml by default). Plans are validated with
pydantic once at load time; lookups afterwards are pure dictionary reads.
"""
import logging
import pathlib
from typing import Any, Dict, List, Optional, Union

import yaml

from domain.models import TrainingPlan

logger = logging.getLogger(__name__)

# Root path for loading the bundled catalog
ROOT = pathlib.Path(__file__).resolve().parents[2]

DEFAULT_CATALOG_PATH = ROOT / "shared/catalog/training_plans.yaml"


class YamlPlanRepository:
    """
    PlanRepository implementation over a YAML catalog.

    The document has a ``plans`` list (each validated as a TrainingPlan) and
    an optional ``schedule`` mapping weekday (Monday == 0) to plan name.
    """

    def __init__(
        self,
        plans: List[TrainingPlan],
        schedule: Optional[Dict[int, str]] = None,
    ):
        """
        Initialize with already-validated plans.

        Args:
            plans: Plans in catalog order (names must be unique)
            schedule: Weekday -> plan name

        Raises:
            ValueError: On duplicate plan names or a schedule entry that
                names an unknown plan or an invalid weekday
        """
        self._plans: Dict[str, TrainingPlan] = {}
        for plan in plans:
            if plan.name in self._plans:
                raise ValueError(f"Duplicate plan name in catalog: '{plan.name}'")
            self._plans[plan.name] = plan

        self._schedule: Dict[int, str] = {}
        for weekday, name in (schedule or {}).items():
            if not 0 <= int(weekday) <= 6:
                raise ValueError(f"Invalid weekday in schedule: {weekday}")
            if name not in self._plans:
                raise ValueError(f"Schedule references unknown plan '{name}'")
            self._schedule[int(weekday)] = name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "YamlPlanRepository":
        """Build a repository from a parsed catalog document."""
        plans = [TrainingPlan.model_validate(p) for p in data.get("plans") or []]
        return cls(plans, data.get("schedule") or {})

    @classmethod
    def from_file(
        cls, path: Union[str, pathlib.Path, None] = None
    ) -> "YamlPlanRepository":
        """
        Load a catalog file.

        Args:
            path: YAML file to load (defaults to the bundled catalog)

        Returns:
            Loaded repository

        Raises:
            FileNotFoundError: If the file does not exist
            pydantic.ValidationError: If a plan is malformed
        """
        catalog_path = pathlib.Path(path) if path else DEFAULT_CATALOG_PATH
        data = yaml.safe_load(catalog_path.read_text(encoding="utf-8")) or {}
        repo = cls.from_dict(data)
        logger.info(f"Loaded {len(repo._plans)} training plans from {catalog_path}")
        return repo

    # =========================================================================
    # PlanRepository Protocol Methods
    # =========================================================================

    def get_for_day(self, weekday: int) -> Optional[TrainingPlan]:
        """Get the plan scheduled for a weekday (None on rest days)."""
        name = self._schedule.get(weekday)
        return self._plans.get(name) if name else None

    def get_by_name(self, name: str) -> Optional[TrainingPlan]:
        """Get a plan by exact name."""
        return self._plans.get(name)

    def list_names(self) -> List[str]:
        """List plan names in catalog order."""
        return list(self._plans)
