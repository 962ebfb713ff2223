"""
Start Session Use Case.

Resolves a training plan (by name, or by the day of the week) and starts or
resumes its session. A missing plan is not an error condition: on a rest day
there is simply nothing to start, and the result says so.
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from application.ports import PlanRepository
from application.session import SessionEngine, SessionRegistry
from domain.models import TrainingPlan

logger = logging.getLogger(__name__)

REST_DAY_MESSAGE = "No training scheduled today. Rest day!"


@dataclass
class StartSessionResult:
    """Result of starting (or resuming) a session."""
    success: bool
    engine: Optional[SessionEngine] = None
    plan: Optional[TrainingPlan] = None
    error: Optional[str] = None


class StartSessionUseCase:
    """
    Use case for starting training sessions.

    Encapsulates plan lookup and session creation so callers only deal
    with a result object, never with lookup failures.
    """

    def __init__(self, plan_repo: PlanRepository, registry: SessionRegistry):
        """
        Initialize with required dependencies.

        Args:
            plan_repo: Catalog of training plans
            registry: Live sessions of this process
        """
        self._plan_repo = plan_repo
        self._registry = registry

    def start_by_name(self, plan_name: str) -> StartSessionResult:
        """
        Start or resume the session of a named plan.

        Args:
            plan_name: Name of the plan

        Returns:
            StartSessionResult with the live engine, or an error if the
            plan does not exist
        """
        plan = self._plan_repo.get_by_name(plan_name)
        if plan is None:
            return StartSessionResult(
                success=False,
                error=f"No training plan named '{plan_name}'",
            )
        return self._start(plan)

    def start_for_day(self, weekday: Optional[int] = None) -> StartSessionResult:
        """
        Start or resume the session scheduled for a day of the week.

        Args:
            weekday: Monday == 0 ... Sunday == 6 (defaults to today)

        Returns:
            StartSessionResult with the live engine, or a rest-day message
        """
        if weekday is None:
            weekday = date.today().weekday()

        plan = self._plan_repo.get_for_day(weekday)
        if plan is None:
            logger.info(f"No plan scheduled for weekday {weekday}")
            return StartSessionResult(success=False, error=REST_DAY_MESSAGE)
        return self._start(plan)

    def _start(self, plan: TrainingPlan) -> StartSessionResult:
        engine = self._registry.start(plan)
        return StartSessionResult(success=True, engine=engine, plan=plan)
