"""
asyncio-backed TimerScheduler.

Ticks are delivered on the asyncio event loop via ``loop.call_later``, so
every engine mutation (intents from request handlers and timer ticks) runs on
the same single-threaded loop and never concurrently.
"""

import asyncio
import logging
from typing import Optional

from application.session.timer import TimerScheduler

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_SECONDS = 1.0


class AsyncioTimerScheduler(TimerScheduler):
    """
    TimerScheduler that ticks on an asyncio event loop.

    Args:
        interval_seconds: Seconds between ticks (1.0 in production)
        loop: Event loop to schedule on. Defaults to the loop running when each tick
            is scheduled, so start() must then be called from within a loop.
    """

    def __init__(
        self,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        super().__init__()
        if interval_seconds <= 0:
            raise ValueError(f"interval_seconds must be > 0, got {interval_seconds}")
        self._interval = interval_seconds
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def interval_seconds(self) -> float:
        return self._interval

    def _schedule(self, generation: int) -> None:
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self._interval, self._fire, generation)

    def _unschedule(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
