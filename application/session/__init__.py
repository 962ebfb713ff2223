"""
Training session execution.

- SessionEngine: the resumable session state machine
- SessionView: snapshot plus derived read-only accessors
- TimerScheduler / TimerKind: single active countdown with stale-tick dropping
- SessionRegistry: live sessions of the hosting process
"""

from application.session.engine import SessionEngine, SnapshotListener
from application.session.registry import SessionRegistry
from application.session.timer import TimerKind, TimerScheduler
from application.session.view import SessionView, build_view

__all__ = [
    "SessionEngine",
    "SessionRegistry",
    "SessionView",
    "SnapshotListener",
    "TimerKind",
    "TimerScheduler",
    "build_view",
]
