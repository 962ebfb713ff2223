"""
Health check router.

This router provides health check endpoints for monitoring and load balancers.
"""

import logging

from fastapi import APIRouter, Depends

from api.deps import get_session_registry
from application.session import SessionRegistry

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health(registry: SessionRegistry = Depends(get_session_registry)):
    """
    Simple liveness endpoint.

    Returns:
        dict: Status indicator and number of live sessions
    """
    return {"status": "ok", "live_sessions": len(registry.keys())}
