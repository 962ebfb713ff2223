"""
API package for the Training Coach API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
- schemas/: Response models
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_plan_repo,
    get_session_store,
    get_session_registry,
    get_start_session_use_case,
)

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    # Catalog and storage
    "get_plan_repo",
    "get_session_store",
    # Sessions
    "get_session_registry",
    "get_start_session_use_case",
]
