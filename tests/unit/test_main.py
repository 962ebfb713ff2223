"""
Unit tests for backend/main.py
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from unittest.mock import MagicMock, patch

from api.deps import get_session_registry
from application.session import SessionRegistry
from backend.main import _configure_cors, _init_sentry, _log_configuration, create_app
from backend.settings import Settings
from infrastructure import WriteBehindSessionStore
from tests.fakes import FakeSessionStore, FakeTimerScheduler


@pytest.mark.unit
class TestCreateApp:
    """Test the create_app() factory function."""

    def test_create_app_returns_fastapi_instance(self):
        settings = Settings(environment="test", _env_file=None)
        app = create_app(settings=settings)
        assert isinstance(app, FastAPI)

    def test_create_app_uses_default_settings_when_none_provided(self):
        with patch("backend.main.get_settings") as mock_get_settings:
            mock_get_settings.return_value = Settings(environment="test", _env_file=None)

            app = create_app(settings=None)

            mock_get_settings.assert_called_once()
            assert isinstance(app, FastAPI)

    def test_create_app_configures_app_metadata(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))

        assert app.title == "Training Coach API"
        assert app.version == "1.0.0"

    def test_routes_are_registered(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))
        paths = {route.path for route in app.routes}

        assert "/health" in paths
        assert "/plans/today" in paths
        assert "/sessions/{plan_name}/exercise/finish" in paths


@pytest.mark.unit
class TestInitSentry:
    """Test Sentry initialization."""

    def test_init_sentry_skipped_when_no_dsn(self):
        settings = Settings(sentry_dsn=None, _env_file=None)

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_not_called()

    def test_init_sentry_called_when_dsn_provided(self):
        settings = Settings(
            sentry_dsn="https://test@sentry.io/123",
            environment="test",
            _env_file=None,
        )

        with patch("backend.main.sentry_sdk.init") as mock_init:
            _init_sentry(settings)
            mock_init.assert_called_once_with(
                dsn="https://test@sentry.io/123",
                environment="test",
                traces_sample_rate=0.1,
            )


@pytest.mark.unit
class TestConfigureCors:
    def test_configure_cors_adds_middleware(self):
        app = FastAPI()
        initial_middleware_count = len(app.user_middleware)

        _configure_cors(app)

        assert len(app.user_middleware) == initial_middleware_count + 1


@pytest.mark.unit
class TestLogConfiguration:
    def test_logs_store_backend(self, caplog):
        settings = Settings(session_store_backend="memory", _env_file=None)

        with caplog.at_level("INFO"):
            _log_configuration(settings)

        assert "Session store backend: memory" in caplog.text

    def test_warns_on_non_default_interval(self, caplog):
        settings = Settings(timer_interval_seconds=0.1, _env_file=None)

        with caplog.at_level("WARNING"):
            _log_configuration(settings)

        assert "Timer interval is 0.1s" in caplog.text


@pytest.mark.unit
class TestLifespan:
    def test_shutdown_closes_live_sessions(self):
        app = create_app(settings=Settings(environment="test", _env_file=None))
        registry = MagicMock()
        registry.keys.return_value = []
        app.dependency_overrides[get_session_registry] = lambda: registry

        with TestClient(app) as client:
            assert client.get("/health").json()["live_sessions"] == 0
            registry.close_all.assert_not_called()

        registry.close_all.assert_called_once()

    def test_shutdown_writes_pending_records(self, two_set_plan):
        inner = FakeSessionStore()
        store = WriteBehindSessionStore(inner)
        registry = SessionRegistry(store=store, scheduler_factory=FakeTimerScheduler)
        app = create_app(settings=Settings(environment="test", _env_file=None))
        app.dependency_overrides[get_session_registry] = lambda: registry

        with TestClient(app):
            registry.start(two_set_plan).finish_exercise()

        assert registry.keys() == []
        assert store.pending_keys() == set()
        assert inner.load("Two Sets")["phase"] == "resting"
        store.close()
