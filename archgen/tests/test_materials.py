import pytest

from archgen.common.enums import MaterialType, OptimizationObjective
from archgen.common.exceptions import InvalidRequirement, UnsupportedOptimizationObjective
from archgen.core.design_engine.catalog import DEFAULT_CATALOG, DesignCatalog
from archgen.core.design_engine.materials import optimize_materials
from archgen.core.design_engine.schemas import (
    EnvironmentalProfile,
    MaterialProperties,
    MaterialSpecification,
)


def _material(name, cost, density, sustainability, fire_rating="1-hour"):
    return MaterialSpecification(
        name=name,
        type=MaterialType.COMPOSITE,
        properties=MaterialProperties(
            density=density,
            strength=1000,
            cost=cost,
            sustainability=sustainability,
            fire_rating=fire_rating,
        ),
        environmental=EnvironmentalProfile(
            carbon_footprint=0.1, recyclability=0.5, life_cycle=40
        ),
    )


def test_sustainability_on_empty_elements():
    result = optimize_materials([], "sustainability")
    assert result.primary_material == "Engineered Wood"
    assert result.sustainability_score == 9
    assert result.total_cost == 0
    assert result.alternatives == ["Structural Steel", "Engineered Wood"]


def test_cost_picks_global_minimum(elements):
    result = optimize_materials(elements, OptimizationObjective.COST)
    cheapest = min(DEFAULT_CATALOG.materials.values(), key=lambda m: m.properties.cost)
    assert result.primary_material == cheapest.name
    assert result.alternatives == ["Structural Steel", "Engineered Wood"]
    assert result.total_cost == len(elements) * 80


def test_cost_minimum_with_injected_catalog():
    catalog = DesignCatalog(
        materials={
            "a": _material("A", cost=300, density=10, sustainability=5),
            "b": _material("B", cost=50, density=20, sustainability=5),
            "c": _material("C", cost=75, density=30, sustainability=5),
            "d": _material("D", cost=60, density=40, sustainability=5),
        }
    )
    result = optimize_materials([], "cost", catalog)
    assert result.primary_material == "B"
    # alternatives are positional, not cost-sorted
    assert result.alternatives == ["B", "C"]


def test_space_picks_lightest(elements):
    result = optimize_materials(elements)
    assert result.primary_material == "Engineered Wood"
    assert result.alternatives == ["Concrete 4000 PSI", "Structural Steel"]


def test_accessibility_prefers_engineered_wood(elements):
    result = optimize_materials(elements, "accessibility")
    assert result.primary_material == "Engineered Wood"
    assert result.alternatives == [
        "Concrete 4000 PSI",
        "Structural Steel",
        "Engineered Wood",
    ]


def test_accessibility_falls_back_to_first_entry():
    catalog = DesignCatalog(
        materials={
            "brick": _material("Brick", cost=90, density=120, sustainability=5, fire_rating="none"),
            "clt": _material("CLT", cost=110, density=35, sustainability=8),
        }
    )
    result = optimize_materials([], "accessibility", catalog)
    assert result.primary_material == "Brick"
    assert result.alternatives == ["CLT"]


def test_life_cycle_assessment(elements):
    result = optimize_materials(elements, "cost")
    lca = result.life_cycle_assessment
    assert lca.carbon_footprint == pytest.approx(0.9)
    assert lca.energy_efficiency == pytest.approx(7.2)
    assert lca.maintenance_cost == pytest.approx(result.total_cost * 0.05)
    assert lca.expected_lifespan == 50
    assert lca.environmental_impact == "low"


def test_unsupported_objective_raises(elements):
    with pytest.raises(UnsupportedOptimizationObjective):
        optimize_materials(elements, "aesthetics")


def test_empty_catalog_raises():
    with pytest.raises(InvalidRequirement):
        optimize_materials([], "space", DesignCatalog())
