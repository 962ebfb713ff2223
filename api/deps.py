"""
FastAPI Dependency Providers for the Training Coach API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings, Supabase client, plan catalog and session store are cached
  per-process (lru_cache)
- The session registry is a per-process singleton: live sessions and their
  timers belong to the hosting process
- Use cases are created per-request

Usage in routers:
    from api.deps import get_plan_repo
    from application.ports import PlanRepository

    @router.get("/plans")
    def list_plans(plan_repo: PlanRepository = Depends(get_plan_repo)):
        return plan_repo.list_names()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_plan_repo] = lambda: FakePlanRepository()
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import PlanRepository, SessionStore
from application.session import SessionRegistry
from application.use_cases import StartSessionUseCase

# Concrete implementations
from infrastructure import (
    AsyncioTimerScheduler,
    InMemorySessionStore,
    JsonFileSessionStore,
    SupabaseSessionStore,
    WriteBehindSessionStore,
    YamlPlanRepository,
)

from backend.settings import Settings, get_settings as _get_settings

logger = logging.getLogger(__name__)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


# =============================================================================
# Catalog and Store Providers
# =============================================================================


@lru_cache
def get_plan_repo() -> PlanRepository:
    """
    Get the plan catalog (loaded once per process).

    Returns:
        PlanRepository implementation backed by the YAML catalog
    """
    settings = _get_settings()
    return YamlPlanRepository.from_file(settings.plan_catalog_path)


@lru_cache
def get_session_store() -> SessionStore:
    """
    Get the session store selected by settings (cached).

    Supabase and file stores block on I/O, so they are wrapped in a
    WriteBehindSessionStore: engines persist from the event loop on every
    tick and must never wait on a write.

    Falls back to an in-memory store when the Supabase backend is selected
    but not configured, so sessions still run (without resume).

    Returns:
        SessionStore implementation
    """
    settings = _get_settings()
    backend = settings.session_store_backend

    if backend == "supabase":
        client = get_supabase_client()
        if client is not None:
            return WriteBehindSessionStore(SupabaseSessionStore(client))
        logger.warning(
            "session_store_backend=supabase but Supabase credentials are not configured; "
            "using in-memory session store"
        )
        return InMemorySessionStore()

    if backend == "memory":
        return InMemorySessionStore()

    return WriteBehindSessionStore(JsonFileSessionStore(settings.session_store_path))


# =============================================================================
# Session Providers
# =============================================================================


@lru_cache
def get_session_registry() -> SessionRegistry:
    """
    Get the process-wide registry of live sessions.

    Each session gets its own asyncio timer scheduler ticking on the
    server's event loop.

    Returns:
        SessionRegistry singleton
    """
    settings = _get_settings()
    interval = settings.timer_interval_seconds
    return SessionRegistry(
        store=get_session_store(),
        scheduler_factory=lambda: AsyncioTimerScheduler(interval_seconds=interval),
    )


def get_start_session_use_case(
    plan_repo: PlanRepository = Depends(get_plan_repo),
    registry: SessionRegistry = Depends(get_session_registry),
) -> StartSessionUseCase:
    """
    Get StartSessionUseCase with injected dependencies.

    Returns:
        StartSessionUseCase: Use case for starting/resuming sessions
    """
    return StartSessionUseCase(plan_repo=plan_repo, registry=registry)


def require_plan(
    plan_name: str,
    plan_repo: PlanRepository = Depends(get_plan_repo),
):
    """
    Resolve a plan name from the path, raising 404 if it is unknown.

    Raises:
        HTTPException: 404 if no plan has that name
    """
    plan = plan_repo.get_by_name(plan_name)
    if plan is None:
        raise HTTPException(
            status_code=404,
            detail=f"No training plan named '{plan_name}'",
        )
    return plan
