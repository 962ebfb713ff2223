import argparse
import json
import sys
from datetime import date

from api.deps import get_plan_repo, get_session_store
from application.session import SessionEngine
from infrastructure.timers import AsyncioTimerScheduler


def _print_plan(plan) -> None:
    print(plan)
    for block_number, block in enumerate(plan.blocks, start=1):
        print(f"  {block_number}. {block.name}")
        for training_set in block.sets:
            print(f"     - {training_set}")


def _print_status(engine: SessionEngine) -> None:
    view = engine.view()
    overview = engine.overview()
    snapshot = view.snapshot
    print(f"{engine.plan.name}: {snapshot.phase.value}, set {view.current_set_number}/{view.total_sets}")
    if view.current_set is not None:
        print(f"  Block {view.current_block_number}/{view.total_blocks}: {view.current_block_name}")
        print(f"  Current: {view.current_set} (series {view.series_number}/{view.total_series})")
    for block_index, block in enumerate(engine.plan.blocks):
        mark = "x" if overview.is_block_completed(block_index) else " "
        print(f"  [{mark}] {block.name}")


def main():
    parser = argparse.ArgumentParser(description="Inspect training plans and stored sessions")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("plans", help="List plan names")

    show = sub.add_parser("show", help="Print a plan")
    show.add_argument("name", help="Plan name")
    show.add_argument("--json", action="store_true", help="Print the plan as JSON")

    today = sub.add_parser("today", help="Print the plan scheduled for a weekday")
    today.add_argument("--weekday", type=int, choices=range(7), help="Monday=0 ... Sunday=6 (default: today)")

    status = sub.add_parser("status", help="Show the stored progress of a session")
    status.add_argument("name", help="Plan name")

    reset = sub.add_parser("reset", help="Delete the stored record of a session")
    reset.add_argument("name", help="Plan name")

    args = parser.parse_args()
    plan_repo = get_plan_repo()

    if args.command == "plans":
        for name in plan_repo.list_names():
            print(name)
        return

    if args.command == "today":
        weekday = args.weekday if args.weekday is not None else date.today().weekday()
        plan = plan_repo.get_for_day(weekday)
        if plan is None:
            print("No training scheduled. Rest day!")
            return
        _print_plan(plan)
        return

    plan = plan_repo.get_by_name(args.name)
    if plan is None:
        print(f"Error: no training plan named '{args.name}'", file=sys.stderr)
        sys.exit(1)

    if args.command == "show":
        if args.json:
            print(json.dumps(plan.model_dump(mode="json"), indent=2))
        else:
            _print_plan(plan)
    elif args.command == "status":
        engine = SessionEngine(plan, AsyncioTimerScheduler(), store=get_session_store())
        _print_status(engine)
    elif args.command == "reset":
        deleted = get_session_store().delete(plan.name)
        print("Session reset" if deleted else "No stored session")


if __name__ == "__main__":
    main()
