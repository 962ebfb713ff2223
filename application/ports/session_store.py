"""
Session Store Interface (Port).

This module defines the abstract interface for durable session records.
A store is a generic key-value store: the key identifies the session (the
plan name by default) and the value is one opaque JSON-compatible record,
always written and read as a whole.
"""
from typing import Any, Dict, Optional, Protocol


class SessionStore(Protocol):
    """
    Abstract interface for persisting resumable session records.

    Implementations must swallow and log their own backend failures:
    a failed load is reported as None, a failed write as False.
    """

    def load(self, session_key: str) -> Optional[Dict[str, Any]]:
        """
        Load the stored record for a session.

        Args:
            session_key: Session identity (e.g., plan name)

        Returns:
            The stored record, or None if absent or unreadable
        """
        ...

    def save(self, session_key: str, record: Dict[str, Any]) -> bool:
        """
        Store a record, replacing any previous one for the same session.

        Args:
            session_key: Session identity
            record: JSON-compatible record

        Returns:
            True if the record was stored
        """
        ...

    def delete(self, session_key: str) -> bool:
        """
        Remove the stored record for a session.

        Args:
            session_key: Session identity

        Returns:
            True if a record was removed
        """
        ...
