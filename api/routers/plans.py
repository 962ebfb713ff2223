"""
Plans router for training plan lookup.

This router contains endpoints for:
- /plans - List plan names
- /plans/today - Plan scheduled for a weekday (rest day -> plan is null)
- /plans/{plan_name} - Full plan

IMPORTANT: /plans/today must be registered BEFORE /plans/{plan_name},
otherwise "today" would be captured as a plan name.
"""

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_plan_repo, require_plan
from api.schemas import PlanListResponse, TodayPlanResponse
from application.ports import PlanRepository
from application.use_cases import REST_DAY_MESSAGE
from domain.models import TrainingPlan

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/plans",
    tags=["Plans"],
)


@router.get("", response_model=PlanListResponse)
def list_plans(plan_repo: PlanRepository = Depends(get_plan_repo)):
    """List the names of all plans in the catalog."""
    return PlanListResponse(plans=plan_repo.list_names())


@router.get("/today", response_model=TodayPlanResponse)
def get_plan_for_today(
    weekday: Optional[int] = Query(default=None, ge=0, le=6),
    plan_repo: PlanRepository = Depends(get_plan_repo),
):
    """
    Get the plan scheduled for a weekday.

    Args:
        weekday: Monday == 0 ... Sunday == 6 (defaults to today)

    Returns:
        The scheduled plan, or plan=null with a rest-day message
    """
    if weekday is None:
        weekday = date.today().weekday()

    plan = plan_repo.get_for_day(weekday)
    if plan is None:
        return TodayPlanResponse(weekday=weekday, message=REST_DAY_MESSAGE)
    return TodayPlanResponse(weekday=weekday, plan=plan)


@router.get("/{plan_name}", response_model=TrainingPlan)
def get_plan(plan: TrainingPlan = Depends(require_plan)):
    """Get a plan by name (404 if unknown)."""
    return plan
