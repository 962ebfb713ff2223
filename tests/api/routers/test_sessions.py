"""
Tests for the sessions router.

The registry is wired to fake timer schedulers (see conftest.py), so tests
drive countdowns explicitly with ``schedulers[i].advance(n)``.
"""
import pytest

pytestmark = pytest.mark.unit

TWO_SETS = "/sessions/Two%20Sets"


class TestStartSession:
    def test_start_returns_initial_state(self, client):
        response = client.post(TWO_SETS)

        assert response.status_code == 200
        data = response.json()
        assert data["plan_name"] == "Two Sets"
        assert data["position"] == 0
        assert data["phase"] == "exercising"
        assert data["exercise_time_remaining"] == 0
        assert data["rest_time_remaining"] == 30
        assert data["is_exercise_timer_running"] is False
        assert data["current_set"]["exercise"] == {
            "kind": "repetition",
            "name": "Squat",
            "description": None,
            "repetitions": 10,
        }
        assert data["current_set_number"] == 1
        assert data["total_sets"] == 2

    def test_start_unknown_plan(self, client):
        response = client.post("/sessions/Arms%20Training")
        assert response.status_code == 404

    def test_start_twice_keeps_progress(self, client):
        client.post(TWO_SETS)
        client.post(f"{TWO_SETS}/exercise/finish")

        data = client.post(TWO_SETS).json()

        assert data["phase"] == "resting"

    def test_today_scheduled(self, client):
        response = client.post("/sessions/today", params={"weekday": 0})

        data = response.json()
        assert data["success"] is True
        assert data["state"]["plan_name"] == "Two Sets"

    def test_today_rest_day(self, client):
        response = client.post("/sessions/today", params={"weekday": 3})

        assert response.status_code == 200
        assert response.json() == {
            "success": False,
            "message": "No training scheduled today. Rest day!",
        }

    def test_today_invalid_weekday(self, client):
        response = client.post("/sessions/today", params={"weekday": 7})
        assert response.status_code == 422


class TestLiveSession:
    def test_get_requires_started_session(self, client):
        assert client.get(TWO_SETS).status_code == 404
        assert client.post(f"{TWO_SETS}/exercise/finish").status_code == 404

    def test_full_walkthrough(self, client, schedulers):
        client.post(TWO_SETS)

        finished = client.post(f"{TWO_SETS}/exercise/finish").json()
        assert finished["applied"] is True
        assert finished["state"]["phase"] == "resting"
        assert finished["state"]["is_rest_timer_running"] is True

        skipped = client.post(f"{TWO_SETS}/rest/skip").json()
        assert skipped["state"]["position"] == 1
        assert skipped["state"]["exercise_time_remaining"] == 5

        rejected = client.post(f"{TWO_SETS}/exercise/finish").json()
        assert rejected["applied"] is False
        assert rejected["state"]["phase"] == "exercising"

        started = client.post(f"{TWO_SETS}/exercise/start").json()
        assert started["state"]["is_exercise_timer_running"] is True

        schedulers[0].advance(5)
        state = client.get(TWO_SETS).json()
        assert state["exercise_time_remaining"] == 0
        assert state["is_exercise_timer_running"] is False

        client.post(f"{TWO_SETS}/exercise/finish")
        done = client.post(f"{TWO_SETS}/rest/skip").json()
        assert done["state"]["phase"] == "completed"
        assert done["state"]["is_completed"] is True
        assert done["state"]["current_set"] is None
        assert done["state"]["position"] == 2

    def test_restart_timer(self, client, schedulers):
        client.post(TWO_SETS)
        client.post(f"{TWO_SETS}/exercise/skip")
        client.post(f"{TWO_SETS}/rest/skip")
        client.post(f"{TWO_SETS}/exercise/start")
        schedulers[0].advance(2)

        data = client.post(f"{TWO_SETS}/exercise/restart").json()

        assert data["applied"] is True
        assert data["state"]["exercise_time_remaining"] == 5
        assert data["state"]["is_exercise_timer_running"] is False

    def test_skip_block_reports_series(self, client):
        client.post("/sessions/Three%20Blocks")

        data = client.post("/sessions/Three%20Blocks/block/skip").json()

        state = data["state"]
        assert state["current_block_name"] == "Strength"
        assert state["current_block_number"] == 2
        assert state["series_number"] == 1
        assert state["total_series"] == 3
        assert state["rest_time_remaining"] == 90

    def test_rest_start_after_resume(self, client, app, registry):
        client.post(TWO_SETS)
        client.post(f"{TWO_SETS}/exercise/finish")
        registry.close_all()

        resumed = client.post(TWO_SETS).json()
        assert resumed["phase"] == "resting"
        assert resumed["is_rest_timer_running"] is False

        data = client.post(f"{TWO_SETS}/rest/start").json()
        assert data["applied"] is True
        assert data["state"]["is_rest_timer_running"] is True

    def test_overview(self, client):
        client.post("/sessions/Three%20Blocks")
        client.post("/sessions/Three%20Blocks/block/skip")

        data = client.get("/sessions/Three%20Blocks/overview").json()

        assert data["plan_name"] == "Three Blocks"
        assert data["completed_sets"] == 2
        assert data["total_sets"] == 6
        assert [block["is_completed"] for block in data["blocks"]] == [True, False, False]

    def test_abandon(self, client, store):
        client.post(TWO_SETS)
        client.post(f"{TWO_SETS}/exercise/finish")

        response = client.delete(TWO_SETS)

        assert response.json() == {"success": True}
        assert store.get_all() == {}
        assert client.get(TWO_SETS).status_code == 404

    def test_abandon_unknown(self, client):
        assert client.delete(TWO_SETS).json() == {"success": False}


class TestHealth:
    def test_health_counts_live_sessions(self, client):
        assert client.get("/health").json() == {"status": "ok", "live_sessions": 0}

        client.post(TWO_SETS)

        assert client.get("/health").json()["live_sessions"] == 1
