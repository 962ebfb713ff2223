"""
Local storage implementations.
"""

from infrastructure.storage.json_session_store import JsonFileSessionStore
from infrastructure.storage.memory_session_store import InMemorySessionStore
from infrastructure.storage.write_behind_store import WriteBehindSessionStore

__all__ = [
    "InMemorySessionStore",
    "JsonFileSessionStore",
    "WriteBehindSessionStore",
]
