"""
In-process registry of live training sessions.

The hosting process keeps at most one engine per session key. When the
process is torn down, close_all() stops every countdown; the stored records
survive, so the next process resumes each session (with timers stopped) the
first time it is started again.
"""

import logging
from threading import Lock
from typing import Callable, Dict, List, Optional

from application.ports.session_store import SessionStore
from application.session.engine import SessionEngine
from application.session.timer import TimerScheduler
from domain.models import TrainingPlan

logger = logging.getLogger(__name__)

SchedulerFactory = Callable[[], TimerScheduler]


class SessionRegistry:
    """
    Live sessions keyed by session key (the plan name).

    Args:
        store: Durable store shared by every session
        scheduler_factory: Creates one TimerScheduler per session
    """

    def __init__(self, store: Optional[SessionStore], scheduler_factory: SchedulerFactory):
        self._store = store
        self._scheduler_factory = scheduler_factory
        self._engines: Dict[str, SessionEngine] = {}
        # start() may run in a worker thread while the store loads a record
        self._lock = Lock()

    @property
    def store(self) -> Optional[SessionStore]:
        return self._store

    def get(self, session_key: str) -> Optional[SessionEngine]:
        return self._engines.get(session_key)

    def keys(self) -> List[str]:
        return list(self._engines)

    def start(self, plan: TrainingPlan) -> SessionEngine:
        """
        Return the live session for a plan, creating (or resuming) it if needed.

        Args:
            plan: Plan to run

        Returns:
            The live SessionEngine for this plan
        """
        with self._lock:
            engine = self._engines.get(plan.name)
            if engine is not None:
                return engine

            engine = SessionEngine(plan, self._scheduler_factory(), store=self._store)
            self._engines[plan.name] = engine
        logger.info(f"Started session '{plan.name}' ({plan.total_sets} sets)")
        return engine

    def detach(self, session_key: str) -> bool:
        """Stop and drop the live engine of a session (its record is kept)."""
        with self._lock:
            engine = self._engines.pop(session_key, None)
        if engine is None:
            return False
        engine.close()
        return True

    def forget(self, session_key: str) -> bool:
        """Delete the stored record of a session. Blocks on the store."""
        if self._store is None:
            return False
        return self._store.delete(session_key)

    def close_all(self) -> None:
        """Stop every live countdown and drop the engines (records are kept)."""
        with self._lock:
            engines = list(self._engines.values())
            self._engines.clear()
        for engine in engines:
            engine.close()
        if engines:
            logger.info(f"Closed {len(engines)} live session(s)")
