"""
Countdown timer scheduling for training sessions.

A session has two countdowns (exercise and rest) but only one may be live at
a time. TimerScheduler owns that single countdown: starting a timer cancels
the previous one, and every start bumps a generation counter so a tick that
was already queued for a cancelled countdown is recognised and dropped.

Subclasses decide *how* ticks are delivered by implementing ``_schedule`` and
``_unschedule``; the base class decides *what* a tick does.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)

TickCallback = Callable[[int], None]
ZeroCallback = Callable[[], None]


class TimerKind(str, Enum):
    """Which countdown a timer drives."""

    EXERCISE = "exercise"
    REST = "rest"


@dataclass
class _Countdown:
    generation: int
    kind: TimerKind
    remaining: int
    on_tick: TickCallback
    on_zero: ZeroCallback


class TimerScheduler(ABC):
    """
    Single active countdown, ticking once per interval.

    On every tick the remaining value is decremented and ``on_tick`` is called
    with the new value. When it reaches zero the countdown is cleared, then
    ``on_zero`` is called. Both callbacks run synchronously on the thread (or
    event loop) that delivers the tick.
    """

    def __init__(self) -> None:
        self._generation = 0
        self._active: Optional[_Countdown] = None

    @property
    def generation(self) -> int:
        """Generation of the most recently started countdown."""
        return self._generation

    @property
    def active_kind(self) -> Optional[TimerKind]:
        """Kind of the live countdown, or None when idle."""
        return self._active.kind if self._active else None

    @property
    def remaining(self) -> Optional[int]:
        return self._active.remaining if self._active else None

    def start(
        self,
        kind: TimerKind,
        seconds: int,
        on_tick: TickCallback,
        on_zero: ZeroCallback,
    ) -> int:
        """
        Start a countdown, cancelling whichever one is live.

        Args:
            kind: Exercise or rest countdown
            seconds: Starting value, must be > 0
            on_tick: Called with the new remaining value after each tick
            on_zero: Called once when the countdown reaches zero

        Returns:
            Generation token bound to the new countdown
        """
        if seconds <= 0:
            raise ValueError(f"countdown must start above zero, got {seconds}")

        self.cancel()
        self._generation += 1
        self._active = _Countdown(
            generation=self._generation,
            kind=kind,
            remaining=seconds,
            on_tick=on_tick,
            on_zero=on_zero,
        )
        logger.debug(f"Started {kind.value} countdown of {seconds}s (generation {self._generation})")
        self._schedule(self._generation)
        return self._generation

    def cancel(self) -> None:
        """Cancel the live countdown; no further ticks from it are observed."""
        if self._active is None:
            return
        logger.debug(
            f"Cancelled {self._active.kind.value} countdown (generation {self._active.generation})"
        )
        self._active = None
        self._unschedule()

    def _fire(self, generation: int) -> None:
        """Deliver one tick for ``generation``; stale generations are ignored."""
        active = self._active
        if active is None or active.generation != generation:
            logger.debug(f"Dropped stale tick for generation {generation}")
            return

        active.remaining -= 1
        if active.remaining > 0:
            try:
                active.on_tick(active.remaining)
            finally:
                # The tick callback may have cancelled or replaced this countdown.
                if self._active is active:
                    self._schedule(generation)
            return

        self._active = None
        active.on_tick(0)
        active.on_zero()

    @abstractmethod
    def _schedule(self, generation: int) -> None:
        """Arrange for ``_fire(generation)`` to be called one interval from now."""

    @abstractmethod
    def _unschedule(self) -> None:
        """Drop any pending tick delivery."""
