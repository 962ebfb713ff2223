"""
Pydantic models for the session API.

Response models for plan lookup, session state and intents. Session state is
the engine snapshot flattened together with its derived accessors.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from application.session import SessionView
from domain.models import Phase, TrainingPlan, TrainingSet


class PlanListResponse(BaseModel):
    """Names of every plan in the catalog"""
    plans: List[str]


class TodayPlanResponse(BaseModel):
    """Plan scheduled for a weekday; plan is None on a rest day"""
    weekday: int
    plan: Optional[TrainingPlan] = None
    message: Optional[str] = None


class SessionState(BaseModel):
    """Snapshot of a live session plus derived display values"""
    plan_name: str
    position: int
    phase: Phase
    exercise_time_remaining: int
    rest_time_remaining: int
    is_exercise_timer_running: bool
    is_rest_timer_running: bool
    is_completed: bool
    current_set: Optional[TrainingSet] = None
    current_block_name: Optional[str] = None
    current_set_number: int
    current_block_number: int
    total_sets: int
    total_blocks: int
    series_number: int
    total_series: int

    @classmethod
    def from_view(cls, plan_name: str, view: SessionView) -> "SessionState":
        snapshot = view.snapshot
        return cls(
            plan_name=plan_name,
            position=snapshot.position,
            phase=snapshot.phase,
            exercise_time_remaining=snapshot.exercise_time_remaining,
            rest_time_remaining=snapshot.rest_time_remaining,
            is_exercise_timer_running=snapshot.is_exercise_timer_running,
            is_rest_timer_running=view.is_rest_timer_running,
            is_completed=snapshot.is_completed,
            current_set=view.current_set,
            current_block_name=view.current_block_name,
            current_set_number=view.current_set_number,
            current_block_number=view.current_block_number,
            total_sets=view.total_sets,
            total_blocks=view.total_blocks,
            series_number=view.series_number,
            total_series=view.total_series,
        )


class IntentResponse(BaseModel):
    """Result of a user intent; applied is False when the intent was ignored"""
    applied: bool
    state: SessionState


class OverviewResponse(BaseModel):
    """Block-by-block completion of a session"""
    plan_name: str
    is_completed: bool
    completed_sets: int
    total_sets: int
    blocks: List[Dict[str, Any]]
