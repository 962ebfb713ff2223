"""
Write-behind SessionStore wrapper.

Engines persist on every mutation, including once per timer tick, and those
mutations run on the asyncio event loop. A Supabase round-trip or a JSON file
rewrite on that path would stall every live session. This wrapper makes
save() a constant-time handoff: the newest record per session is kept in
memory and a single background worker writes it to the wrapped store.
Records superseded before the worker gets to them are never written.
"""
import copy
import logging
from concurrent.futures import ThreadPoolExecutor
from threading import Lock
from typing import Any, Dict, Optional, Set

from application.ports.session_store import SessionStore

logger = logging.getLogger(__name__)


class WriteBehindSessionStore:
    """
    SessionStore that defers writes to a background thread.

    load() sees pending records first, so a session read back in the same
    process always gets its newest state. delete() and flush() wait for
    queued writes, so a deleted session is never resurrected by a late write.

    Usage:
        store = WriteBehindSessionStore(SupabaseSessionStore(client))
        engine = SessionEngine(plan, scheduler, store=store)
        ...
        store.close()  # on shutdown: writes everything still pending
    """

    def __init__(self, store: SessionStore, executor: Optional[ThreadPoolExecutor] = None):
        """
        Initialize with the store that performs the actual writes.

        Args:
            store: Blocking store (Supabase, JSON file, ...)
            executor: Single-worker executor; one is created if omitted
        """
        self._store = store
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="session-store"
        )
        self._lock = Lock()
        self._pending: Dict[str, Dict[str, Any]] = {}
        self._queued: Set[str] = set()

    @property
    def store(self) -> SessionStore:
        """The wrapped store."""
        return self._store

    def pending_keys(self) -> Set[str]:
        with self._lock:
            return set(self._pending)

    # =========================================================================
    # SessionStore Protocol Methods
    # =========================================================================

    def load(self, session_key: str) -> Optional[Dict[str, Any]]:
        """Load the newest record, pending or stored."""
        with self._lock:
            record = self._pending.get(session_key)
            if record is not None:
                return copy.deepcopy(record)
        return self._store.load(session_key)

    def save(self, session_key: str, record: Dict[str, Any]) -> bool:
        """Queue a record for writing; returns immediately."""
        with self._lock:
            self._pending[session_key] = copy.deepcopy(record)
            if session_key in self._queued:
                return True
            self._queued.add(session_key)
        self._executor.submit(self._drain, session_key)
        return True

    def delete(self, session_key: str) -> bool:
        """Drop any pending record and delete the stored one (blocking)."""
        with self._lock:
            dropped = self._pending.pop(session_key, None) is not None
        deleted = self._executor.submit(self._store.delete, session_key).result()
        return deleted or dropped

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def flush(self) -> None:
        """Block until every record queued so far has been written."""
        self._executor.submit(lambda: None).result()

    def close(self) -> None:
        """Write everything still pending and stop the worker."""
        self._executor.shutdown(wait=True)

    def _drain(self, session_key: str) -> None:
        while True:
            with self._lock:
                record = self._pending.pop(session_key, None)
                if record is None:
                    self._queued.discard(session_key)
                    return
            try:
                saved = self._store.save(session_key, record)
            except Exception as e:
                logger.error(f"Error writing session '{session_key}': {e}")
                saved = False
            if not saved:
                logger.warning(f"Session '{session_key}': snapshot was not persisted")
