import pytest

from archgen.core.design_engine.layout import synthesize
from archgen.core.design_engine.schemas import FloorPlanRequirements
from archgen.core.design_engine.structure import generate_elements


@pytest.fixture
def requirements_data():
    return {
        "total_area": 1200,
        "room_count": 3,
        "room_types": [
            {"type": "bedroom", "area": 300, "required": True, "priority": "high"},
            {"type": "bathroom", "area": 100, "required": True, "priority": "high"},
            {"type": "living", "area": 500, "required": True, "priority": "medium"},
        ],
        "constraints": {"min_room_size": 8, "corridor_width": 36, "ceiling_height": 9},
        "style": "modern",
        "building_code": "IBC-2021",
    }


@pytest.fixture
def requirements(requirements_data):
    return FloorPlanRequirements.model_validate(requirements_data)


@pytest.fixture
def floor_plan(requirements):
    return synthesize(requirements)


@pytest.fixture
def elements(floor_plan, requirements):
    return generate_elements(floor_plan, requirements)
