"""
In-memory Session Store Implementation.

Records live only as long as the process; useful for development and for
hosting setups that do not need resume across restarts.
"""
import copy
from typing import Any, Dict, Optional


class InMemorySessionStore:
    """In-process implementation of SessionStore."""

    def __init__(self):
        self._records: Dict[str, Dict[str, Any]] = {}

    def load(self, session_key: str) -> Optional[Dict[str, Any]]:
        record = self._records.get(session_key)
        return copy.deepcopy(record) if record is not None else None

    def save(self, session_key: str, record: Dict[str, Any]) -> bool:
        self._records[session_key] = copy.deepcopy(record)
        return True

    def delete(self, session_key: str) -> bool:
        return self._records.pop(session_key, None) is not None
