"""
Plan catalog implementations.
"""

from infrastructure.catalog.yaml_plan_repository import (
    DEFAULT_CATALOG_PATH,
    YamlPlanRepository,
)

__all__ = [
    "DEFAULT_CATALOG_PATH",
    "YamlPlanRepository",
]
