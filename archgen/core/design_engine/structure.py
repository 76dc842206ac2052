"""Structural element generation.

Derives one load-bearing wall per room plus a single foundation slab from a
synthesized floor plan.  Columns, beams and roofs are never generated.
"""

from __future__ import annotations

import math

from archgen.common.enums import StructuralElementType
from archgen.core.design_engine.layout import (
    DEFAULT_CEILING_HEIGHT_FT,
    FOOTPRINT_FACTOR,
)
from archgen.core.design_engine.schemas import (
    ElementDimensions,
    FloorPlan,
    FloorPlanRequirements,
    Position3D,
    StructuralElement,
)

WALL_MATERIAL = "engineered-wood"
WALL_THICKNESS_FT = 0.5

FOUNDATION_MATERIAL = "concrete-4000psi"
FOUNDATION_THICKNESS_FT = 0.5
FOUNDATION_STRENGTH_PSI = 4000


def _foundation_side(total_area: float) -> float:
    return math.sqrt(total_area) * FOOTPRINT_FACTOR


def generate_elements(
    floor_plan: FloorPlan,
    requirements: FloorPlanRequirements,
) -> list[StructuralElement]:
    """Return the walls and foundation for *floor_plan*.

    Element ids are ``wall-{index}`` in room order, then ``foundation-slab``.
    """
    wall_height = requirements.constraints.ceiling_height or DEFAULT_CEILING_HEIGHT_FT
    elements: list[StructuralElement] = []

    for index, room in enumerate(floor_plan.rooms):
        elements.append(
            StructuralElement(
                id=f"wall-{index}",
                type=StructuralElementType.WALL,
                material=WALL_MATERIAL,
                dimensions=ElementDimensions(
                    length=room.dimensions.width,
                    width=WALL_THICKNESS_FT,
                    height=wall_height,
                ),
                position=Position3D(x=room.position.x, y=room.position.y, z=0.0),
                properties={"load_bearing": True, "fire_rating": "1-hour"},
            )
        )

    side = _foundation_side(floor_plan.total_area)
    elements.append(
        StructuralElement(
            id="foundation-slab",
            type=StructuralElementType.FOUNDATION,
            material=FOUNDATION_MATERIAL,
            dimensions=ElementDimensions(
                length=side,
                width=side,
                height=FOUNDATION_THICKNESS_FT,
            ),
            position=Position3D(x=0.0, y=0.0, z=-FOUNDATION_THICKNESS_FT),
            properties={
                "compressive_strength": FOUNDATION_STRENGTH_PSI,
                "reinforcement": "rebar",
            },
        )
    )

    return elements
