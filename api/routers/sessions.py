"""
Sessions router for running training sessions.

This router forwards user intents to the live SessionEngine of a plan and
returns the resulting state:
- POST /sessions/today - Start/resume the session scheduled for today
- POST /sessions/{plan_name} - Start/resume a session
- GET /sessions/{plan_name} - Current state
- DELETE /sessions/{plan_name} - Abandon a session
- POST /sessions/{plan_name}/exercise/{start|restart|finish|skip}
- POST /sessions/{plan_name}/rest/{start|skip}
- POST /sessions/{plan_name}/block/skip
- GET /sessions/{plan_name}/overview

Ignored intents are not errors: they return 200 with applied=false.

Endpoints are async so that intents and timer ticks run on the same event
loop (the asyncio timer scheduler ticks on the running loop). Calls that
block on the session store (loading a record on start, deleting one on
abandon) run in the threadpool; intents only hand records to the
write-behind store and never wait on I/O.

IMPORTANT: /sessions/today must be registered BEFORE /sessions/{plan_name}.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette.concurrency import run_in_threadpool

from api.deps import get_session_registry, get_start_session_use_case
from api.schemas import IntentResponse, OverviewResponse, SessionState
from application.session import SessionEngine, SessionRegistry
from application.use_cases import StartSessionUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sessions",
    tags=["Sessions"],
)


def get_live_engine(
    plan_name: str,
    registry: SessionRegistry = Depends(get_session_registry),
) -> SessionEngine:
    """
    Resolve the live session of a plan.

    Raises:
        HTTPException: 404 if the session has not been started in this process
    """
    engine = registry.get(plan_name)
    if engine is None:
        raise HTTPException(
            status_code=404,
            detail=f"No active session for '{plan_name}'. Start it first.",
        )
    return engine


def _state(engine: SessionEngine) -> SessionState:
    return SessionState.from_view(engine.session_key, engine.view())


def _intent(engine: SessionEngine, applied: bool) -> IntentResponse:
    return IntentResponse(applied=applied, state=_state(engine))


# =============================================================================
# Session Lifecycle
# =============================================================================


@router.post("/today")
async def start_todays_session(
    weekday: Optional[int] = Query(default=None, ge=0, le=6),
    use_case: StartSessionUseCase = Depends(get_start_session_use_case),
):
    """
    Start or resume the session scheduled for today.

    Returns:
        success=True with the session state, or success=False with a
        rest-day message
    """
    result = await run_in_threadpool(use_case.start_for_day, weekday)
    if not result.success:
        return {"success": False, "message": result.error}
    return {"success": True, "state": _state(result.engine)}


@router.post("/{plan_name}", response_model=SessionState)
async def start_session(
    plan_name: str,
    use_case: StartSessionUseCase = Depends(get_start_session_use_case),
):
    """
    Start a session, or resume it from its stored record.

    A resumed session never resumes its timers: the user restarts them.
    """
    result = await run_in_threadpool(use_case.start_by_name, plan_name)
    if not result.success:
        raise HTTPException(status_code=404, detail=result.error)
    return _state(result.engine)


@router.get("/{plan_name}", response_model=SessionState)
async def get_session(engine: SessionEngine = Depends(get_live_engine)):
    """Get the current state of a live session."""
    return _state(engine)


@router.delete("/{plan_name}")
async def abandon_session(
    plan_name: str,
    registry: SessionRegistry = Depends(get_session_registry),
):
    """Abandon a session: stop its timers and delete its stored record."""
    detached = registry.detach(plan_name)
    deleted = await run_in_threadpool(registry.forget, plan_name)
    if detached or deleted:
        logger.info(f"Abandoned session '{plan_name}'")
    return {"success": detached or deleted}


@router.get("/{plan_name}/overview", response_model=OverviewResponse)
async def get_session_overview(engine: SessionEngine = Depends(get_live_engine)):
    """Get block-by-block completion of a live session."""
    return OverviewResponse(**engine.overview().to_dict())


# =============================================================================
# Exercise Intents
# =============================================================================


@router.post("/{plan_name}/exercise/start", response_model=IntentResponse)
async def start_exercise_timer(engine: SessionEngine = Depends(get_live_engine)):
    """Start the countdown of a timed exercise."""
    return _intent(engine, engine.start_exercise_timer())


@router.post("/{plan_name}/exercise/restart", response_model=IntentResponse)
async def restart_exercise_timer(engine: SessionEngine = Depends(get_live_engine)):
    """Reset a timed exercise to its full duration (timer stopped)."""
    return _intent(engine, engine.restart_exercise_timer())


@router.post("/{plan_name}/exercise/finish", response_model=IntentResponse)
async def finish_exercise(engine: SessionEngine = Depends(get_live_engine)):
    """Finish the current exercise and start resting."""
    return _intent(engine, engine.finish_exercise())


@router.post("/{plan_name}/exercise/skip", response_model=IntentResponse)
async def skip_exercise(engine: SessionEngine = Depends(get_live_engine)):
    """Skip the current exercise and start resting."""
    return _intent(engine, engine.skip_exercise())


# =============================================================================
# Rest and Block Intents
# =============================================================================


@router.post("/{plan_name}/rest/start", response_model=IntentResponse)
async def start_rest_timer(engine: SessionEngine = Depends(get_live_engine)):
    """Start the rest countdown (e.g. after resuming a session)."""
    return _intent(engine, engine.start_rest_timer())


@router.post("/{plan_name}/rest/skip", response_model=IntentResponse)
async def skip_rest(engine: SessionEngine = Depends(get_live_engine)):
    """Skip the rest and move to the next set."""
    return _intent(engine, engine.skip_rest())


@router.post("/{plan_name}/block/skip", response_model=IntentResponse)
async def skip_block(engine: SessionEngine = Depends(get_live_engine)):
    """Skip to the next block (completes the session on the last block)."""
    return _intent(engine, engine.skip_block())
