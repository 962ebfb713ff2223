"""
Session execution engine.

SessionEngine is the state machine that walks a user through a TrainingPlan.
It owns the current SessionSnapshot and is the only thing that mutates it:
user intents (start/restart/finish/skip exercise, start/skip rest, skip
block) and timer ticks each produce a new immutable snapshot, which is
offered to listeners and, when a SessionStore is attached, persisted.

Intents never raise. Each returns True when it caused a state transition and
False when it was ignored because its preconditions did not hold.

Usage:
    from application.session import SessionEngine
    from infrastructure.timers import AsyncioTimerScheduler

    engine = SessionEngine(plan, AsyncioTimerScheduler(), store=store)
    engine.subscribe(lambda snapshot: print(snapshot))

    engine.finish_exercise()      # repetition set -> resting, rest countdown starts
    engine.skip_rest()            # next set
    engine.start_exercise_timer() # timed set -> countdown runs
"""

import logging
from dataclasses import replace
from typing import Callable, List, Optional

from pydantic import ValidationError

from application.ports.session_store import SessionStore
from application.session.timer import TimerKind, TimerScheduler
from application.session.view import SessionView, build_view
from domain.converters import (
    FlatEntry,
    first_index_after_block,
    flatten_plan,
    snapshot_to_overview,
)
from domain.models import (
    Phase,
    SessionRecord,
    SessionSnapshot,
    TrainingOverview,
    TrainingPlan,
)

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[SessionSnapshot], None]


class SessionEngine:
    """
    Resumable state machine for one training session.

    Args:
        plan: Immutable plan executed by this session
        scheduler: Timer scheduler owned by this session
        store: Optional durable store for resume support
        session_key: Key the session is stored under (defaults to plan name)
    """

    def __init__(
        self,
        plan: TrainingPlan,
        scheduler: TimerScheduler,
        *,
        store: Optional[SessionStore] = None,
        session_key: Optional[str] = None,
    ):
        self._plan = plan
        self._scheduler = scheduler
        self._store = store
        self._session_key = session_key or plan.name
        self._flat_index = flatten_plan(plan)
        self._listeners: List[SnapshotListener] = []

        self._snapshot = self._restore() or self._initial_snapshot()

    # =========================================================================
    # Read-only accessors
    # =========================================================================

    @property
    def plan(self) -> TrainingPlan:
        return self._plan

    @property
    def session_key(self) -> str:
        return self._session_key

    @property
    def snapshot(self) -> SessionSnapshot:
        """Current immutable snapshot."""
        return self._snapshot

    @property
    def total_sets(self) -> int:
        return len(self._flat_index)

    @property
    def current_entry(self) -> Optional[FlatEntry]:
        """Flat entry at the current position (None once completed)."""
        position = self._snapshot.position
        if position < len(self._flat_index):
            return self._flat_index[position]
        return None

    @property
    def is_rest_timer_running(self) -> bool:
        return self._scheduler.active_kind == TimerKind.REST

    def view(self) -> SessionView:
        """Snapshot plus derived accessors for the presentation layer."""
        return build_view(
            self._plan,
            self._flat_index,
            self._snapshot,
            is_rest_timer_running=self.is_rest_timer_running,
        )

    def overview(self) -> TrainingOverview:
        """Completion overview for the current snapshot."""
        return snapshot_to_overview(self._plan, self._snapshot, self._flat_index)

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """
        Register a listener called with every new snapshot.

        Returns:
            Callable that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # =========================================================================
    # Intents
    # =========================================================================

    def start_exercise_timer(self) -> bool:
        """Start the countdown of a timed exercise that has time left."""
        state = self._snapshot
        if (
            state.phase != Phase.EXERCISING
            or state.is_exercise_timer_running
            or state.exercise_time_remaining <= 0
        ):
            return False

        self._update(is_exercise_timer_running=True)
        self._scheduler.start(
            TimerKind.EXERCISE,
            state.exercise_time_remaining,
            on_tick=self._on_exercise_tick,
            on_zero=self._on_exercise_zero,
        )
        return True

    def restart_exercise_timer(self) -> bool:
        """Reset a timed exercise to its full duration; the user must start it again."""
        entry = self.current_entry
        if (
            self._snapshot.phase != Phase.EXERCISING
            or entry is None
            or not entry.training_set.is_timed
        ):
            return False

        self._cancel_timer(TimerKind.EXERCISE)
        self._update(
            exercise_time_remaining=entry.training_set.exercise_seconds,
            is_exercise_timer_running=False,
        )
        return True

    def finish_exercise(self) -> bool:
        """
        Mark the current exercise as done and start resting.

        A timed exercise can only be finished once its countdown reached zero;
        repetition exercises can always be finished.
        """
        entry = self.current_entry
        if self._snapshot.phase != Phase.EXERCISING or entry is None:
            return False
        if entry.training_set.is_timed and self._snapshot.exercise_time_remaining > 0:
            logger.debug(
                f"Ignored finish: {self._snapshot.exercise_time_remaining}s left on "
                f"'{entry.training_set.exercise.name}'"
            )
            return False

        self._begin_rest(entry)
        return True

    def skip_exercise(self) -> bool:
        """Start resting immediately, whatever the exercise timer says."""
        entry = self.current_entry
        if self._snapshot.phase != Phase.EXERCISING or entry is None:
            return False

        self._begin_rest(entry, exercise_time_remaining=0)
        return True

    def start_rest_timer(self) -> bool:
        """Start (or resume) the rest countdown when none is live."""
        state = self._snapshot
        if (
            state.phase != Phase.RESTING
            or self.is_rest_timer_running
            or state.rest_time_remaining <= 0
        ):
            return False

        self._run_rest_timer(state.rest_time_remaining)
        return True

    def skip_rest(self) -> bool:
        """Cut the rest short and move on to the next set."""
        if self._snapshot.phase != Phase.RESTING:
            return False

        self._cancel_timer(TimerKind.REST)
        self._advance()
        return True

    def skip_block(self) -> bool:
        """Jump to the first set of the next block, or complete the session."""
        entry = self.current_entry
        if self._snapshot.phase == Phase.COMPLETED or entry is None:
            return False

        self._scheduler.cancel()
        target = first_index_after_block(self._flat_index, entry.block_index)
        if target is None:
            logger.info(f"Session '{self._session_key}': skipped last block")
            self._complete()
        else:
            logger.info(
                f"Session '{self._session_key}': skipped block {entry.block_index + 1}"
            )
            self._move_to(target)
        return True

    def close(self) -> None:
        """
        Stop any live countdown (host tear-down).

        The snapshot and stored record are kept so the session can be resumed;
        a resumed session always starts with its timers stopped.
        """
        self._scheduler.cancel()
        if self._snapshot.is_exercise_timer_running:
            self._update(is_exercise_timer_running=False)

    # =========================================================================
    # Timer callbacks
    # =========================================================================

    def _on_exercise_tick(self, remaining: int) -> None:
        self._update(exercise_time_remaining=remaining)

    def _on_exercise_zero(self) -> None:
        # Reaching zero only unlocks finish_exercise(); it never advances.
        self._update(exercise_time_remaining=0, is_exercise_timer_running=False)

    def _on_rest_tick(self, remaining: int) -> None:
        self._update(rest_time_remaining=remaining)

    def _on_rest_zero(self) -> None:
        if self._snapshot.phase == Phase.RESTING:
            self._advance()

    # =========================================================================
    # Transitions
    # =========================================================================

    def _begin_rest(self, entry: FlatEntry, **changes) -> None:
        self._cancel_timer(TimerKind.EXERCISE)
        rest_seconds = entry.training_set.rest_seconds
        self._update(
            phase=Phase.RESTING,
            rest_time_remaining=rest_seconds,
            is_exercise_timer_running=False,
            **changes,
        )
        if rest_seconds > 0:
            self._run_rest_timer(rest_seconds)
        else:
            # Nothing to count down: a zero-length rest is already over.
            self._advance()

    def _run_rest_timer(self, seconds: int) -> None:
        self._scheduler.start(
            TimerKind.REST,
            seconds,
            on_tick=self._on_rest_tick,
            on_zero=self._on_rest_zero,
        )

    def _advance(self) -> None:
        next_position = self._snapshot.position + 1
        if next_position < len(self._flat_index):
            self._move_to(next_position)
        else:
            self._complete()

    def _move_to(self, position: int) -> None:
        training_set = self._flat_index[position].training_set
        self._update(
            position=position,
            phase=Phase.EXERCISING,
            exercise_time_remaining=training_set.exercise_seconds,
            rest_time_remaining=training_set.rest_seconds,
            is_exercise_timer_running=False,
        )

    def _complete(self) -> None:
        self._scheduler.cancel()
        self._update(
            position=len(self._flat_index),
            phase=Phase.COMPLETED,
            exercise_time_remaining=0,
            rest_time_remaining=0,
            is_exercise_timer_running=False,
        )
        logger.info(f"Session '{self._session_key}' completed")

    def _cancel_timer(self, kind: TimerKind) -> None:
        if self._scheduler.active_kind == kind:
            self._scheduler.cancel()

    def _update(self, **changes) -> None:
        previous = self._snapshot
        self._snapshot = SessionSnapshot(
            position=changes.get("position", previous.position),
            phase=changes.get("phase", previous.phase),
            exercise_time_remaining=changes.get(
                "exercise_time_remaining", previous.exercise_time_remaining
            ),
            rest_time_remaining=changes.get(
                "rest_time_remaining", previous.rest_time_remaining
            ),
            is_exercise_timer_running=changes.get(
                "is_exercise_timer_running", previous.is_exercise_timer_running
            ),
        )
        if self._snapshot.phase != previous.phase or self._snapshot.position != previous.position:
            logger.debug(
                f"Session '{self._session_key}': {previous.phase.value}@{previous.position} -> "
                f"{self._snapshot.phase.value}@{self._snapshot.position}"
            )
        self._persist()
        for listener in list(self._listeners):
            listener(self._snapshot)

    # =========================================================================
    # Persistence
    # =========================================================================

    def _initial_snapshot(self) -> SessionSnapshot:
        first = self._flat_index[0].training_set
        return SessionSnapshot(
            position=0,
            phase=Phase.EXERCISING,
            exercise_time_remaining=first.exercise_seconds,
            rest_time_remaining=first.rest_seconds,
            is_exercise_timer_running=False,
        )

    def _persist(self) -> None:
        if self._store is None:
            return
        record = self._snapshot.to_record().model_dump(mode="json")
        if not self._store.save(self._session_key, record):
            logger.warning(f"Session '{self._session_key}': snapshot was not persisted")

    def _restore(self) -> Optional[SessionSnapshot]:
        """Load the stored snapshot, or None when absent or unusable."""
        if self._store is None:
            return None

        data = self._store.load(self._session_key)
        if data is None:
            return None

        try:
            record = SessionRecord.model_validate(data)
            snapshot = self._reconcile(record)
        except (ValidationError, ValueError) as e:
            logger.warning(
                f"Session '{self._session_key}': ignoring unusable stored record: {e}"
            )
            return None

        logger.info(
            f"Session '{self._session_key}' resumed at set {snapshot.position + 1}/"
            f"{len(self._flat_index)} ({snapshot.phase.value})"
        )
        return snapshot

    def _reconcile(self, record: SessionRecord) -> SessionSnapshot:
        """Check a stored record against this plan; timers always start stopped."""
        total = len(self._flat_index)

        if record.phase == Phase.COMPLETED:
            return SessionSnapshot(position=total, phase=Phase.COMPLETED)

        if record.position >= total:
            raise ValueError(f"position {record.position} is past the last set ({total})")

        training_set = self._flat_index[record.position].training_set
        exercise_time = record.exercise_time_remaining
        if not training_set.is_timed:
            exercise_time = 0
        elif exercise_time > training_set.exercise_seconds:
            raise ValueError(
                f"exercise time {exercise_time}s exceeds the set duration "
                f"({training_set.exercise_seconds}s)"
            )

        return replace(record.to_snapshot(), exercise_time_remaining=exercise_time)
