import pytest

from archgen.common.enums import StructuralElementType
from archgen.core.design_engine.geometry import (
    calculate_3d_geometry,
    calculate_bounds,
    calculate_geometry,
    extrude,
    generate_constraints,
)


def test_2d_geometry_counts(floor_plan):
    geometry = calculate_geometry(floor_plan)
    assert geometry.vertices == 12
    assert geometry.faces == 3
    assert geometry.edges == 12
    assert geometry.units == "feet"


def test_2d_bounds_scan_room_extents(floor_plan):
    geometry = calculate_geometry(floor_plan)
    expected_x = max(r.position.x + r.dimensions.width for r in floor_plan.rooms)
    expected_y = max(r.position.y + r.dimensions.length for r in floor_plan.rooms)
    assert geometry.bounds.min.x == 0 and geometry.bounds.min.y == 0
    assert geometry.bounds.max.x == pytest.approx(expected_x)
    assert geometry.bounds.max.y == pytest.approx(expected_y)
    assert geometry.bounds.max.z == 0


def test_bounds_of_nothing_is_origin():
    assert calculate_bounds([]) == (0.0, 0.0)


def test_extrude_volumes(floor_plan):
    model = extrude(floor_plan, 10)
    assert model.height == 10
    assert model.volume == pytest.approx(1200 * 10)
    assert [r.volume for r in model.rooms] == [pytest.approx(r.area * 10) for r in floor_plan.rooms]
    assert all(r.dimensions.height == 10 for r in model.rooms)


def test_extrude_builds_one_prism_per_room(floor_plan):
    model = extrude(floor_plan, 9)
    assert len(model.elements) == len(floor_plan.rooms)
    for element, room in zip(model.elements, floor_plan.rooms):
        assert element.type == StructuralElementType.SLAB
        assert element.dimensions.length == room.dimensions.length
        assert element.dimensions.width == room.dimensions.width
        assert element.dimensions.height == 9


def test_3d_geometry_counts(floor_plan):
    model = extrude(floor_plan, 9)
    geometry = calculate_3d_geometry(model)
    assert geometry.vertices == 24
    assert geometry.faces == 18
    assert geometry.edges == 36
    assert geometry.bounds.max.z == 9


def test_constraints(floor_plan):
    constraints = generate_constraints(floor_plan)
    assert constraints["dimensional"][0]["value"] == 1200
    assert constraints["geometric"][0]["entities"] == ["walls"]
