"""Layout synthesis for the design engine.

Turns a validated ``FloorPlanRequirements`` into a ``FloorPlan``:

1. keep only the required rooms,
2. order them high-priority first, then by area (largest first),
3. size each room from its area at a fixed 1.2 length-to-width ratio,
4. lay rooms out left-to-right in rows (shelf packing),
5. add a single corridor connecting every room,
6. report space efficiency.

Room sizing is a heuristic.  Flooring both sides at ``min_room_size`` means
small rooms can come out larger than requested; the requested ``area`` is
what gets reported and what efficiency is computed from.
"""

from __future__ import annotations

import math

from archgen.common.enums import Priority
from archgen.common.logging import get_logger
from archgen.core.design_engine.numerics import require_finite
from archgen.core.design_engine.schemas import (
    Corridor,
    FloorPlan,
    FloorPlanRequirements,
    Position2D,
    RoomDimensions,
    RoomLayout,
    RoomSpec,
)

logger = get_logger("design_engine.layout")


# Length : width ratio applied to every room.
ROOM_ASPECT_RATIO = 1.2

DEFAULT_MIN_ROOM_SIZE_FT = 8.0
DEFAULT_CORRIDOR_WIDTH_IN = 36.0
DEFAULT_CEILING_HEIGHT_FT = 9.0

# Foundation side = sqrt(total_area) * this factor; also the default row width.
FOOTPRINT_FACTOR = 1.2


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _sort_rooms(rooms: list[RoomSpec]) -> list[RoomSpec]:
    # sorted() is stable, so equal keys keep their input order.
    return sorted(rooms, key=lambda r: (r.priority != Priority.HIGH, -r.area))


def _row_limit(requirements: FloorPlanRequirements) -> float:
    if requirements.constraints.max_width:
        return requirements.constraints.max_width
    return math.sqrt(requirements.total_area) * FOOTPRINT_FACTOR


def _pack_rows(dimensions: list[RoomDimensions], row_limit: float) -> list[Position2D]:
    """Place rooms left-to-right, starting a new row when the next room
    would cross ``row_limit``.  A room wider than the limit gets a row to
    itself.
    """
    positions: list[Position2D] = []
    x = 0.0
    y = 0.0
    row_depth = 0.0

    for dims in dimensions:
        if x > 0 and x + dims.width > row_limit:
            y += row_depth
            x = 0.0
            row_depth = 0.0
        positions.append(Position2D(x=x, y=y))
        x += dims.width
        row_depth = max(row_depth, dims.length)

    return positions


def _generate_corridors(rooms: list[RoomSpec], corridor_width_in: float) -> list[Corridor]:
    return [
        Corridor(
            width=corridor_width_in / 12,
            connections=[room.type for room in rooms],
        )
    ]


def _layout_efficiency(rooms: list[RoomLayout], total_area: float) -> float:
    used_area = sum(room.area for room in rooms)
    return require_finite((used_area / total_area) * 100, "layout efficiency")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def calculate_room_dimensions(
    area: float,
    min_room_size: float = DEFAULT_MIN_ROOM_SIZE_FT,
    height: float | None = None,
) -> RoomDimensions:
    """Size a room of *area* square feet.

    ``length = sqrt(area * 1.2)`` and ``width = area / length``; each side is
    then floored at *min_room_size*.
    """
    length = require_finite(math.sqrt(area * ROOM_ASPECT_RATIO), "room length")
    width = area / length
    return RoomDimensions(
        width=max(width, min_room_size),
        length=max(length, min_room_size),
        height=height,
    )


def synthesize(requirements: FloorPlanRequirements) -> FloorPlan:
    """Generate a floor plan from *requirements*.

    Parameters
    ----------
    requirements:
        A validated ``FloorPlanRequirements``.

    Returns
    -------
    FloorPlan
        Rooms in layout order with dimensions and positions, one corridor,
        and the space efficiency (which may exceed 100 when the requested
        rooms over-allocate the total area).
    """
    constraints = requirements.constraints
    min_room_size = constraints.min_room_size or DEFAULT_MIN_ROOM_SIZE_FT
    corridor_width = constraints.corridor_width or DEFAULT_CORRIDOR_WIDTH_IN
    ceiling_height = constraints.ceiling_height or DEFAULT_CEILING_HEIGHT_FT

    sorted_rooms = _sort_rooms([r for r in requirements.room_types if r.required])

    dimensions = [
        calculate_room_dimensions(room.area, min_room_size, ceiling_height)
        for room in sorted_rooms
    ]
    positions = _pack_rows(dimensions, _row_limit(requirements))

    rooms = [
        RoomLayout(type=spec.type, area=spec.area, dimensions=dims, position=pos)
        for spec, dims, pos in zip(sorted_rooms, dimensions, positions)
    ]

    efficiency = _layout_efficiency(rooms, requirements.total_area)
    if efficiency > 100:
        logger.info(
            "Requested rooms over-allocate the floor area (efficiency %.1f%%)",
            efficiency,
        )

    return FloorPlan(
        total_area=requirements.total_area,
        rooms=rooms,
        corridors=_generate_corridors(sorted_rooms, corridor_width),
        style=requirements.style,
        constraints=constraints,
        efficiency=efficiency,
        optimized=True,
    )
