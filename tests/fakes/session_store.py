"""
Fake Session Store for testing.

This module provides an in-memory implementation of SessionStore
with seeding, write history and failure injection.
"""
from typing import Any, Dict, List, Optional, Tuple
import copy


class FakeSessionStore:
    """
    In-memory fake implementation of SessionStore for testing.

    Usage:
        store = FakeSessionStore()
        store.seed({"Push Training": {"position": 3, ...}})
        engine = SessionEngine(plan, scheduler, store=store)
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._records: Dict[str, Dict[str, Any]] = {}
        self.writes: List[Tuple[str, Dict[str, Any]]] = []
        self.fail_writes = False

    def reset(self) -> None:
        """Clear all stored records and history."""
        self._records.clear()
        self.writes.clear()
        self.fail_writes = False

    def seed(self, records: Dict[str, Any]) -> None:
        """
        Seed the store with raw records (not validated).

        Args:
            records: Mapping of session key -> stored value
        """
        for key, record in records.items():
            self._records[key] = copy.deepcopy(record)

    def get_all(self) -> Dict[str, Dict[str, Any]]:
        """Get all stored records (test helper)."""
        return copy.deepcopy(self._records)

    # =========================================================================
    # SessionStore Protocol Methods
    # =========================================================================

    def load(self, session_key: str) -> Optional[Dict[str, Any]]:
        record = self._records.get(session_key)
        return copy.deepcopy(record) if record is not None else None

    def save(self, session_key: str, record: Dict[str, Any]) -> bool:
        if self.fail_writes:
            return False
        self._records[session_key] = copy.deepcopy(record)
        self.writes.append((session_key, copy.deepcopy(record)))
        return True

    def delete(self, session_key: str) -> bool:
        return self._records.pop(session_key, None) is not None
