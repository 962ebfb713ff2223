"""
Application Use Cases for the Training Coach API.

This package contains application-level use cases that orchestrate domain
logic and coordinate between ports/adapters. Use cases are the entry points
for business operations.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies are injected via constructors for testability
- Use cases return result objects, never raise for "not found"

Usage:
    from application.use_cases import StartSessionUseCase

    use_case = StartSessionUseCase(plan_repo=plan_repo, registry=registry)
    result = use_case.start_for_day()
    if result.success:
        result.engine.finish_exercise()
    else:
        print(result.error)  # rest day
"""

from application.use_cases.start_session import (
    REST_DAY_MESSAGE,
    StartSessionResult,
    StartSessionUseCase,
)

__all__ = [
    "REST_DAY_MESSAGE",
    "StartSessionResult",
    "StartSessionUseCase",
]
