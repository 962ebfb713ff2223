"""
Shared pytest fixtures.

Provides plans, fake ports, engines wired to fakes, and a TestClient whose
dependencies are overridden with fakes (no event-loop timers, no disk, no
Supabase).
"""
import pytest
from fastapi.testclient import TestClient

from api.deps import get_plan_repo, get_session_registry
from application.session import SessionEngine, SessionRegistry
from backend.main import create_app
from backend.settings import Settings
from tests.fakes import (
    FakePlanRepository,
    FakeSessionStore,
    FakeTimerScheduler,
    create_plan,
    create_three_block_plan,
)


# ---------------------------------------------------------------------------
# Plans and fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def two_set_plan():
    """rep x10 rest 30s, then timed 5s rest 20s, in a single block."""
    return create_plan(name="Two Sets")


@pytest.fixture
def three_block_plan():
    return create_three_block_plan()


@pytest.fixture
def scheduler():
    return FakeTimerScheduler()


@pytest.fixture
def store():
    return FakeSessionStore()


@pytest.fixture
def engine(two_set_plan, scheduler, store):
    return SessionEngine(two_set_plan, scheduler, store=store)


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with an in-memory session store."""
    return Settings(environment="test", session_store_backend="memory", _env_file=None)


@pytest.fixture
def plan_repo(two_set_plan, three_block_plan):
    repo = FakePlanRepository()
    repo.seed([two_set_plan, three_block_plan], schedule={0: two_set_plan.name})
    return repo


@pytest.fixture
def schedulers():
    """Every FakeTimerScheduler handed out by the test registry, in order."""
    return []


@pytest.fixture
def registry(store, schedulers):
    def factory():
        scheduler = FakeTimerScheduler()
        schedulers.append(scheduler)
        return scheduler

    return SessionRegistry(store=store, scheduler_factory=factory)


@pytest.fixture
def app(test_settings, plan_repo, registry):
    application = create_app(settings=test_settings)
    application.dependency_overrides[get_plan_repo] = lambda: plan_repo
    application.dependency_overrides[get_session_registry] = lambda: registry
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client
