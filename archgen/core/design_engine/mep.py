"""Mechanical / Electrical / Plumbing sizing.

Rule-of-thumb sizing for a single-storey floor plan.  A production version
would call into dedicated MEP load-calculation tools.
"""

from __future__ import annotations

import math

from archgen.common.enums import RoomType
from archgen.core.design_engine.numerics import require_finite
from archgen.core.design_engine.schemas import FloorPlan, MEPPlan

# Fixtures contributed per room type.
_FIXTURES_PER_ROOM: dict[RoomType, int] = {
    RoomType.BATHROOM: 3,  # toilet, sink, tub/shower
    RoomType.KITCHEN: 2,  # sink, dishwasher
    RoomType.UTILITY: 2,  # washer supply, utility sink
}

MIN_PLUMBING_FIXTURES = 6


# ---------------------------------------------------------------------------
# Sizing and cost rates
# ---------------------------------------------------------------------------

SQFT_PER_CIRCUIT = 500
MIN_GENERAL_CIRCUITS = 8
# Kitchen (2), laundry, HVAC and water heater; bathrooms add one each.
DEDICATED_CIRCUITS = 5

# Moderate climate.
SQFT_PER_TON = 550
MIN_HVAC_TONNAGE = 1.5

CIRCUIT_COST = 280
ELECTRICAL_COST_PER_SQFT = 6
FIXTURE_COST = 750
PLUMBING_COST_PER_SQFT = 4
HVAC_COST_PER_TON = 3_200
HVAC_COST_PER_SQFT = 3


def generate_mep_plan(floor_plan: FloorPlan) -> MEPPlan:
    """Generate a high-level MEP plan for *floor_plan*.

    Parameters
    ----------
    floor_plan:
        A ``FloorPlan`` produced by the layout synthesizer.

    Returns
    -------
    MEPPlan
        Circuit count, fixture count, HVAC tonnage and estimated cost.

    Raises
    ------
    DegenerateGeometry
        If the estimated cost overflows.
    """
    sqft = floor_plan.total_area

    general_circuits = max(MIN_GENERAL_CIRCUITS, math.ceil(sqft / SQFT_PER_CIRCUIT))
    bathroom_count = sum(1 for r in floor_plan.rooms if r.type == RoomType.BATHROOM)
    electrical_circuits = general_circuits + DEDICATED_CIRCUITS + bathroom_count

    plumbing_fixtures = sum(_FIXTURES_PER_ROOM.get(r.type, 0) for r in floor_plan.rooms)
    plumbing_fixtures = max(plumbing_fixtures, MIN_PLUMBING_FIXTURES)

    hvac_tonnage = round(max(MIN_HVAC_TONNAGE, sqft / SQFT_PER_TON), 1)

    electrical_cost = electrical_circuits * CIRCUIT_COST + sqft * ELECTRICAL_COST_PER_SQFT
    plumbing_cost = plumbing_fixtures * FIXTURE_COST + sqft * PLUMBING_COST_PER_SQFT
    hvac_cost = hvac_tonnage * HVAC_COST_PER_TON + sqft * HVAC_COST_PER_SQFT
    total_cost = require_finite(
        electrical_cost + plumbing_cost + hvac_cost, "MEP cost estimate"
    )

    return MEPPlan(
        electrical_circuits=electrical_circuits,
        plumbing_fixtures=plumbing_fixtures,
        hvac_tonnage=hvac_tonnage,
        estimated_cost=int(total_cost),
    )
