"""Geometry summaries and 3D extrusion.

Counts are coarse: a room is a single quad in 2D and every 3D element is a
rectangular prism (8 vertices, 6 faces, 12 edges).  Bounds always start at
the origin.
"""

from __future__ import annotations

from typing import Any

from archgen.common.enums import StructuralElementType
from archgen.core.design_engine.numerics import require_finite
from archgen.core.design_engine.schemas import (
    Bounds,
    ElementDimensions,
    ExtrudedRoom,
    FloorPlan,
    Geometry,
    Model3D,
    Position2D,
    Position3D,
    RoomLayout,
    StructuralElement,
)

EXTRUDED_MATERIAL = "mixed"


def calculate_bounds(rooms: list[RoomLayout] | list[ExtrudedRoom]) -> tuple[float, float]:
    """Return ``(max_x, max_y)`` over every room's far corner."""
    max_x = 0.0
    max_y = 0.0
    for room in rooms:
        max_x = max(max_x, room.position.x + room.dimensions.width)
        max_y = max(max_y, room.position.y + room.dimensions.length)
    return max_x, max_y


def calculate_geometry(floor_plan: FloorPlan) -> Geometry:
    count = len(floor_plan.rooms)
    width, length = calculate_bounds(floor_plan.rooms)
    return Geometry(
        vertices=count * 4,
        faces=count,
        edges=count * 4,
        bounds=Bounds(min=Position3D(), max=Position3D(x=width, y=length, z=0.0)),
    )


def extrude(floor_plan: FloorPlan, height: float) -> Model3D:
    """Extrude every room of *floor_plan* to *height* feet.

    Each room becomes a slab-type prism element sized ``length x width x
    height`` whose ``volume`` property is the requested area times height.
    Raises ``DegenerateGeometry`` when a volume overflows.
    """
    rooms: list[ExtrudedRoom] = []
    elements: list[StructuralElement] = []

    for index, room in enumerate(floor_plan.rooms):
        volume = require_finite(room.area * height, "room volume", f"room-{index}")
        rooms.append(
            ExtrudedRoom(
                type=room.type,
                area=room.area,
                dimensions=room.dimensions.model_copy(update={"height": height}),
                position=Position2D(x=room.position.x, y=room.position.y),
                height=height,
                volume=volume,
            )
        )
        elements.append(
            StructuralElement(
                id=f"room-{index}",
                type=StructuralElementType.SLAB,
                material=EXTRUDED_MATERIAL,
                dimensions=ElementDimensions(
                    length=room.dimensions.length,
                    width=room.dimensions.width,
                    height=height,
                ),
                position=Position3D(x=room.position.x, y=room.position.y, z=0.0),
                properties={"room_type": room.type.value, "volume": volume},
            )
        )

    return Model3D(
        total_area=floor_plan.total_area,
        height=height,
        volume=require_finite(floor_plan.total_area * height, "model volume"),
        rooms=rooms,
        elements=elements,
    )


def calculate_3d_geometry(model3d: Model3D) -> Geometry:
    count = len(model3d.elements)
    width, length = calculate_bounds(model3d.rooms)
    return Geometry(
        vertices=count * 8,
        faces=count * 6,
        edges=count * 12,
        bounds=Bounds(
            min=Position3D(),
            max=Position3D(x=width, y=length, z=model3d.height),
        ),
    )


def generate_constraints(floor_plan: FloorPlan) -> dict[str, Any]:
    """Dimensional and geometric constraints attached to a CAD artifact."""
    return {
        "dimensional": [
            {"type": "distance", "value": floor_plan.total_area, "tolerance": 0.1},
        ],
        "geometric": [
            {"type": "parallel", "entities": ["walls"]},
        ],
    }
