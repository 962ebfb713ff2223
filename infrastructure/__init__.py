"""
Infrastructure Layer for the Training Coach API.

This package contains concrete implementations of the application ports:
- catalog/: YAML plan catalog
- db/: Supabase session store
- storage/: Local JSON file and in-memory session stores, write-behind wrapper
- timers/: asyncio timer scheduler
"""

from infrastructure.catalog import YamlPlanRepository
from infrastructure.db import SupabaseSessionStore
from infrastructure.storage import (
    InMemorySessionStore,
    JsonFileSessionStore,
    WriteBehindSessionStore,
)
from infrastructure.timers import AsyncioTimerScheduler

__all__ = [
    "YamlPlanRepository",
    "SupabaseSessionStore",
    "JsonFileSessionStore",
    "InMemorySessionStore",
    "WriteBehindSessionStore",
    "AsyncioTimerScheduler",
]
