"""
Router package for the Training Coach API.

This package contains all API routers organized by domain:
- health: Health check
- plans: Training plan lookup
- sessions: Session lifecycle and user intents
"""

from api.routers.health import router as health_router
from api.routers.plans import router as plans_router
from api.routers.sessions import router as sessions_router

__all__ = [
    "health_router",
    "plans_router",
    "sessions_router",
]
