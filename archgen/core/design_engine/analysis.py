"""Simplified structural analysis for the design engine.

This is NOT a finite-element solver and must not be treated as an
engineering-grade result.  Every element is loaded with the full dead load
over its own cross-section and the full live load scaled by its volume; the
safety factor compares the worst stress against a fixed 4000 psi concrete
strength.  The formulas are literal heuristics.
"""

from __future__ import annotations

from archgen.common.enums import ArchitecturalStyle
from archgen.common.exceptions import DegenerateGeometry
from archgen.common.logging import get_logger
from archgen.core.design_engine.numerics import require_finite
from archgen.core.design_engine.schemas import (
    FloorPlanRequirements,
    StructuralAnalysis,
    StructuralElement,
    StructuralLoads,
)

logger = get_logger("design_engine.analysis")


# ---------------------------------------------------------------------------
# Load and capacity constants
# ---------------------------------------------------------------------------

DEAD_LOAD_PSF = 50.0
LIVE_LOAD_PSF = 40.0
WIND_LOAD_PSF = 20.0
SEISMIC_LOAD_PSF = 15.0

DISPLACEMENT_COEFFICIENT = 0.001
MATERIAL_STRENGTH_PSI = 4000.0

# Fixed engineering threshold; not configurable.
STABILITY_THRESHOLD = 1.5


def calculate_loads(requirements: FloorPlanRequirements) -> StructuralLoads:
    return StructuralLoads(
        dead_load=require_finite(requirements.total_area * DEAD_LOAD_PSF, "dead load"),
        live_load=require_finite(requirements.total_area * LIVE_LOAD_PSF, "live load"),
        wind_load=WIND_LOAD_PSF,
        seismic_load=SEISMIC_LOAD_PSF,
    )


def _cross_section(element: StructuralElement) -> float:
    dims = element.dimensions
    if dims.width <= 0 or dims.height <= 0:
        raise DegenerateGeometry(
            element.id,
            f"cross-section {dims.width} x {dims.height} has no area",
        )
    area = dims.width * dims.height
    if area <= 0:
        raise DegenerateGeometry(element.id, "cross-section area underflows to zero")
    return area


def calculate_stress(elements: list[StructuralElement], loads: StructuralLoads) -> list[float]:
    return [
        require_finite(loads.dead_load / _cross_section(e), "stress", e.id)
        for e in elements
    ]


def calculate_displacement(
    elements: list[StructuralElement], loads: StructuralLoads
) -> list[float]:
    displacement = []
    for e in elements:
        volume = e.dimensions.length * e.dimensions.width * e.dimensions.height
        displacement.append(
            require_finite(
                loads.live_load * volume * DISPLACEMENT_COEFFICIENT, "displacement", e.id
            )
        )
    return displacement


def recommendations_for(safety_factor: float, style: ArchitecturalStyle) -> list[str]:
    recommendations: list[str] = []

    if safety_factor < STABILITY_THRESHOLD:
        recommendations.append("Consider increasing structural member sizes")
        recommendations.append("Add additional load-bearing elements")

    if style == ArchitecturalStyle.MODERN:
        recommendations.append("Use engineered materials for better performance")

    return recommendations


def analyze(
    elements: list[StructuralElement],
    requirements: FloorPlanRequirements,
) -> StructuralAnalysis:
    """Run the simplified analysis over *elements*.

    Raises
    ------
    DegenerateGeometry
        If there are no elements, any element has a zero (or negative)
        cross-sectional area, or a load, stress, displacement or safety
        factor overflows.
    """
    if not elements:
        raise DegenerateGeometry(detail="no structural elements to analyze")

    loads = calculate_loads(requirements)
    stress = calculate_stress(elements, loads)
    displacement = calculate_displacement(elements, loads)

    max_stress = max(stress)
    if max_stress <= 0:
        raise DegenerateGeometry(detail="maximum stress underflows to zero")
    safety_factor = require_finite(MATERIAL_STRENGTH_PSI / max_stress, "safety factor")

    is_stable = safety_factor > STABILITY_THRESHOLD
    if not is_stable:
        logger.warning(
            "Safety factor %.2f is below the stability threshold %.1f",
            safety_factor,
            STABILITY_THRESHOLD,
        )

    return StructuralAnalysis(
        loads=loads,
        stress=stress,
        displacement=displacement,
        safety_factor=safety_factor,
        max_stress=max_stress,
        max_displacement=max(displacement),
        is_stable=is_stable,
        recommendations=recommendations_for(safety_factor, requirements.style),
    )
