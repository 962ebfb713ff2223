"""
Interfaces (Ports) for the Training Coach API.

This package defines abstract interfaces that decouple the session engine
from infrastructure (plan catalogs, durable storage). Implementations are
provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the engine needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import PlanRepository, SessionStore

    class StartSessionUseCase:
        def __init__(self, plan_repo: PlanRepository, registry: SessionRegistry):
            self._plan_repo = plan_repo
            ...
"""

# Plan catalog
from application.ports.plan_repository import PlanRepository

# Session persistence
from application.ports.session_store import SessionStore

__all__ = [
    "PlanRepository",
    "SessionStore",
]
