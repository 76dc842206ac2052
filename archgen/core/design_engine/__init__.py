"""Parametric floor-plan generation, compliance checking, material
selection and simplified structural analysis.
"""

from archgen.core.design_engine.catalog import DEFAULT_CATALOG, DesignCatalog
from archgen.core.design_engine.service import (
    DesignEngineService,
    generate_3d_model,
    generate_floor_plan,
)

__all__ = [
    "DEFAULT_CATALOG",
    "DesignCatalog",
    "DesignEngineService",
    "generate_3d_model",
    "generate_floor_plan",
]
