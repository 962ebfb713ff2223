"""
Timer scheduler implementations.
"""

from infrastructure.timers.asyncio_scheduler import (
    DEFAULT_INTERVAL_SECONDS,
    AsyncioTimerScheduler,
)

__all__ = [
    "AsyncioTimerScheduler",
    "DEFAULT_INTERVAL_SECONDS",
]
