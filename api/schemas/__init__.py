"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- session: Plan lookup, session state and intent responses
"""

from api.schemas.session import (
    IntentResponse,
    OverviewResponse,
    PlanListResponse,
    SessionState,
    TodayPlanResponse,
)

__all__ = [
    "IntentResponse",
    "OverviewResponse",
    "PlanListResponse",
    "SessionState",
    "TodayPlanResponse",
]
