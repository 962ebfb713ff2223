"""
Supabase Session Store Implementation.

This module implements the SessionStore protocol using Supabase as the
backend. Each session is one row of the ``training_sessions`` table:

    session_key  text primary key
    record       jsonb
    updated_at   timestamptz
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from supabase import Client

logger = logging.getLogger(__name__)

TABLE_NAME = "training_sessions"


class SupabaseSessionStore:
    """
    Supabase implementation of SessionStore.

    The whole record is written as one JSON value, so a snapshot is
    always stored and read atomically.
    """

    def __init__(self, client: Client, table_name: str = TABLE_NAME):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
            table_name: Table holding session records
        """
        self._client = client
        self._table = table_name

    def load(self, session_key: str) -> Optional[Dict[str, Any]]:
        """Load the stored record for a session."""
        try:
            result = self._client.table(self._table) \
                .select("record") \
                .eq("session_key", session_key) \
                .limit(1) \
                .execute()

            if result.data:
                record = result.data[0].get("record")
                return record if isinstance(record, dict) else None
            return None

        except Exception as e:
            logger.error(f"Error loading session '{session_key}': {e}")
            return None

    def save(self, session_key: str, record: Dict[str, Any]) -> bool:
        """Upsert the record for a session."""
        try:
            result = self._client.table(self._table).upsert({
                "session_key": session_key,
                "record": record,
                "updated_at": datetime.now(timezone.utc).isoformat(),
            }, on_conflict="session_key").execute()

            return bool(result.data)

        except Exception as e:
            logger.error(f"Error saving session '{session_key}': {e}")
            return False

    def delete(self, session_key: str) -> bool:
        """Delete the record for a session."""
        try:
            result = self._client.table(self._table) \
                .delete() \
                .eq("session_key", session_key) \
                .execute()

            return len(result.data) > 0 if result.data else False

        except Exception as e:
            logger.error(f"Error deleting session '{session_key}': {e}")
            return False
