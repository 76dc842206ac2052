"""Material selection and take-off for the design engine.

``optimize_materials`` picks a primary material and a list of alternatives
from the catalog under one of four objectives, then derives a heuristic
life-cycle assessment from the chosen material's sustainability score.
``generate_material_breakdown`` produces volume, weight and cost totals for
an extruded 3D model.

The life-cycle and breakdown figures are flat linear heuristics, not
physical models.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NamedTuple

from archgen.common.enums import LevelOfDetail, OptimizationObjective
from archgen.common.exceptions import InvalidRequirement, UnsupportedOptimizationObjective
from archgen.common.logging import get_logger
from archgen.core.design_engine.catalog import DEFAULT_CATALOG, DesignCatalog
from archgen.core.design_engine.numerics import require_finite
from archgen.core.design_engine.schemas import (
    LifeCycleAssessment,
    MaterialBreakdown,
    MaterialOptimizationResult,
    MaterialSpecification,
    Model3D,
    StructuralElement,
)

logger = get_logger("design_engine.materials")


# ---------------------------------------------------------------------------
# Heuristic constants
# ---------------------------------------------------------------------------

ACCESSIBLE_MATERIAL_KEY = "engineered-wood"
SUSTAINABLE_THRESHOLD = 7

# Life-cycle assessment, all driven by the sustainability score.
LCA_CARBON_PER_POINT = 0.1
LCA_ENERGY_PER_POINT = 0.8
LCA_MAINTENANCE_RATE = 0.05
LCA_EXPECTED_LIFESPAN_YEARS = 50
LCA_ENVIRONMENTAL_IMPACT = "low"

# Material breakdown averages.
AVERAGE_DENSITY_LB_PER_CUFT = 150.0
AVERAGE_COST_PER_CUFT = 120.0
MATERIAL_DISTRIBUTION: dict[str, float] = {
    "concrete": 0.4,
    "steel": 0.1,
    "wood": 0.3,
    "other": 0.2,
}


class _Selection(NamedTuple):
    primary: MaterialSpecification
    alternatives: list[str]


# ---------------------------------------------------------------------------
# Objective strategies
# ---------------------------------------------------------------------------

# min()/max() return the first extreme element, so ties go to catalog order.

def _for_cost(catalog: DesignCatalog) -> _Selection:
    materials = list(catalog.materials.values())
    cheapest = min(materials, key=lambda m: m.properties.cost)
    return _Selection(cheapest, [m.name for m in materials[1:3]])


def _for_sustainability(catalog: DesignCatalog) -> _Selection:
    materials = list(catalog.materials.values())
    greenest = max(materials, key=lambda m: m.properties.sustainability)
    return _Selection(
        greenest,
        [m.name for m in materials if m.properties.sustainability >= SUSTAINABLE_THRESHOLD],
    )


def _for_accessibility(catalog: DesignCatalog) -> _Selection:
    materials = list(catalog.materials.values())
    accessible = catalog.material(ACCESSIBLE_MATERIAL_KEY) or materials[0]
    return _Selection(
        accessible,
        [m.name for m in materials if m.properties.fire_rating != "none"],
    )


def _for_space(catalog: DesignCatalog) -> _Selection:
    materials = list(catalog.materials.values())
    lightest = min(materials, key=lambda m: m.properties.density)
    return _Selection(lightest, [m.name for m in materials[:2]])


_STRATEGIES: dict[OptimizationObjective, Callable[[DesignCatalog], _Selection]] = {
    OptimizationObjective.COST: _for_cost,
    OptimizationObjective.SUSTAINABILITY: _for_sustainability,
    OptimizationObjective.ACCESSIBILITY: _for_accessibility,
    OptimizationObjective.SPACE: _for_space,
}


def parse_objective(objective: OptimizationObjective | str) -> OptimizationObjective:
    """Coerce *objective* into the closed ``OptimizationObjective`` set."""
    if isinstance(objective, OptimizationObjective):
        return objective
    try:
        return OptimizationObjective(objective)
    except ValueError:
        raise UnsupportedOptimizationObjective(str(objective)) from None


def life_cycle_assessment(sustainability_score: float, total_cost: float) -> LifeCycleAssessment:
    return LifeCycleAssessment(
        carbon_footprint=sustainability_score * LCA_CARBON_PER_POINT,
        energy_efficiency=sustainability_score * LCA_ENERGY_PER_POINT,
        maintenance_cost=total_cost * LCA_MAINTENANCE_RATE,
        expected_lifespan=LCA_EXPECTED_LIFESPAN_YEARS,
        environmental_impact=LCA_ENVIRONMENTAL_IMPACT,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def optimize_materials(
    elements: list[StructuralElement],
    objective: OptimizationObjective | str = OptimizationObjective.SPACE,
    catalog: DesignCatalog = DEFAULT_CATALOG,
) -> MaterialOptimizationResult:
    """Select materials for *elements* under *objective*.

    Parameters
    ----------
    elements:
        Structural elements; only their count affects the result.
    objective:
        One of ``space``, ``cost``, ``sustainability``, ``accessibility``.
    catalog:
        Material catalog to choose from.

    Raises
    ------
    UnsupportedOptimizationObjective
        If *objective* is not one of the four supported values.
    InvalidRequirement
        If the catalog has no materials.
    """
    objective = parse_objective(objective)
    if not catalog.materials:
        raise InvalidRequirement("Material catalog is empty")

    selection = _STRATEGIES[objective](catalog)
    primary = selection.primary
    total_cost = len(elements) * primary.properties.cost
    score = primary.properties.sustainability

    logger.debug(
        "Objective %s selected %s for %d elements",
        objective.value,
        primary.name,
        len(elements),
    )

    return MaterialOptimizationResult(
        primary_material=primary.name,
        alternatives=selection.alternatives,
        total_cost=total_cost,
        sustainability_score=score,
        life_cycle_assessment=life_cycle_assessment(score, total_cost),
    )


def generate_material_breakdown(
    model3d: Model3D,
    level_of_detail: LevelOfDetail | str = LevelOfDetail.MEDIUM,
) -> MaterialBreakdown:
    """Volume, weight and cost totals over every element of *model3d*."""
    total_volume = require_finite(
        sum(
            e.dimensions.length * e.dimensions.width * e.dimensions.height
            for e in model3d.elements
        ),
        "material volume",
    )
    return MaterialBreakdown(
        total_volume=total_volume,
        total_weight=require_finite(
            total_volume * AVERAGE_DENSITY_LB_PER_CUFT, "material weight"
        ),
        total_cost=require_finite(total_volume * AVERAGE_COST_PER_CUFT, "material cost"),
        material_distribution=dict(MATERIAL_DISTRIBUTION),
        level_of_detail=LevelOfDetail(level_of_detail),
    )
