"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the interfaces
defined in application.ports.

Usage:
    from supabase import create_client
    from infrastructure.db import SupabaseSessionStore

    client = create_client(url, key)
    store = SupabaseSessionStore(client)
"""

from infrastructure.db.session_store import SupabaseSessionStore

__all__ = ["SupabaseSessionStore"]
