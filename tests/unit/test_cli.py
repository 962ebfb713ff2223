"""
Unit tests for the command line entry point.
"""
import json

import pytest

from backend import cli

pytestmark = pytest.mark.unit


@pytest.fixture
def run(monkeypatch, plan_repo, store):
    monkeypatch.setattr(cli, "get_plan_repo", lambda: plan_repo)
    monkeypatch.setattr(cli, "get_session_store", lambda: store)

    def _run(*argv):
        monkeypatch.setattr("sys.argv", ["training-coach", *argv])
        cli.main()

    return _run


class TestCli:
    def test_plans(self, run, capsys):
        run("plans")
        assert capsys.readouterr().out.splitlines() == ["Two Sets", "Three Blocks"]

    def test_show_json(self, run, capsys):
        run("show", "Two Sets", "--json")
        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "Two Sets"
        assert len(data["blocks"][0]["sets"]) == 2

    def test_show_unknown_plan(self, run, capsys):
        with pytest.raises(SystemExit) as exc_info:
            run("show", "Arms Training")
        assert exc_info.value.code == 1
        assert "Arms Training" in capsys.readouterr().err

    def test_today_rest_day(self, run, capsys):
        run("today", "--weekday", "6")
        assert "Rest day" in capsys.readouterr().out

    def test_today_scheduled(self, run, capsys):
        run("today", "--weekday", "0")
        assert capsys.readouterr().out.startswith("Two Sets")

    def test_status_reads_stored_record(self, run, store, capsys):
        store.seed({"Two Sets": {
            "position": 1,
            "phase": "exercising",
            "exercise_time_remaining": 4,
            "rest_time_remaining": 20,
            "is_completed": False,
        }})

        run("status", "Two Sets")

        out = capsys.readouterr().out
        assert "exercising, set 2/2" in out
        assert "[x] Main" not in out

    def test_reset(self, run, store, capsys):
        store.seed({"Two Sets": {"position": 0}})
        run("reset", "Two Sets")
        assert capsys.readouterr().out.strip() == "Session reset"
        assert store.get_all() == {}
