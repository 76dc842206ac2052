import pytest

from archgen.common.enums import CADArtifactType, ComplianceStatus, RoomType
from archgen.common.exceptions import (
    DegenerateGeometry,
    InvalidRequirement,
    UnsupportedOptimizationObjective,
)
from archgen.core.design_engine import (
    DesignCatalog,
    DesignEngineService,
    generate_3d_model,
    generate_floor_plan,
)
from archgen.core.design_engine import service as service_module
from archgen.core.design_engine.catalog import DEFAULT_CATALOG
from archgen.core.design_engine.schemas import FloorPlanOptions


def test_generate_floor_plan_scenario(requirements_data):
    result = generate_floor_plan(requirements_data)

    assert [r.type for r in result.floor_plan.rooms] == [
        RoomType.BEDROOM,
        RoomType.BATHROOM,
        RoomType.LIVING,
    ]
    assert result.floor_plan.efficiency == pytest.approx(75.0)
    assert len(result.structural_elements) == 4
    assert result.building_code_compliance.status == ComplianceStatus.NON_COMPLIANT
    assert result.building_code_compliance.issues == [
        "Corridor width: Minimum corridor width 36inches"
    ]
    assert result.material_optimization.primary_material == "Engineered Wood"
    assert result.mep_plan is None


def test_floor_plan_artifact(requirements_data):
    result = generate_floor_plan(requirements_data, {"optimization": "cost"})
    artifact = result.cad_artifact

    assert artifact.artifact_type == CADArtifactType.FLOOR_PLAN
    assert artifact.format == "dwg"
    assert artifact.name == "Floor Plan - 1200 sq ft"
    assert artifact.geometry.vertices == 12
    assert artifact.properties["cost"] == result.material_optimization.total_cost
    assert artifact.metadata["tags"] == ["floor-plan", "modern", "cost"]
    assert artifact.metadata["compliance"]["status"] == "non-compliant"
    assert artifact.ai_metadata["generated"] is True
    assert artifact.ai_metadata["parameters"]["options"]["optimization"] == "cost"
    assert artifact.permissions["is_public"] is False
    assert artifact.usage == {"downloads": 0, "views": 0, "analyses": 0}
    assert artifact.constraints["dimensional"][0]["value"] == 1200


def test_without_structural_elements(requirements_data):
    result = generate_floor_plan(
        requirements_data, FloorPlanOptions(include_structural=False, include_mep=True)
    )
    assert result.structural_elements == []
    assert result.material_optimization.total_cost == 0
    assert result.mep_plan is not None


def test_result_is_serializable(requirements_data):
    data = generate_floor_plan(requirements_data).model_dump(mode="json")
    assert data["floor_plan"]["rooms"][0]["type"] == "bedroom"
    assert data["building_code_compliance"]["status"] == "non-compliant"


@pytest.mark.parametrize(
    "overrides",
    [
        {"total_area": 0},
        {"total_area": -50},
        {"total_area": float("inf")},
        {"total_area": float("nan")},
        {"room_types": [{"type": "bedroom", "area": float("inf"), "required": True}]},
        {"constraints": {"ceiling_height": float("nan")}},
        {"room_types": []},
        {"room_types": [{"type": "garage", "area": 400, "required": True, "priority": "high"}]},
        {"room_types": [{"type": "bedroom", "area": 0, "required": True, "priority": "high"}]},
        {"room_types": [{"type": "bedroom", "area": 200, "required": False, "priority": "high"}]},
    ],
)
def test_invalid_requirements_rejected(requirements_data, overrides):
    with pytest.raises(InvalidRequirement):
        generate_floor_plan({**requirements_data, **overrides})


def test_unsupported_objective_rejected(requirements_data):
    with pytest.raises(UnsupportedOptimizationObjective) as exc_info:
        generate_floor_plan(requirements_data, {"optimization": "beauty"})
    assert exc_info.value.status_code == 400


def test_unknown_building_code_does_not_raise(requirements_data):
    result = generate_floor_plan({**requirements_data, "building_code": "NOPE"})
    assert result.building_code_compliance.status == ComplianceStatus.COMPLIANT
    assert result.building_code_compliance.issues == []


def test_generate_3d_model(requirements_data):
    plan = generate_floor_plan(requirements_data).floor_plan
    result = generate_3d_model(plan, requirements_data)

    assert result.model3d.height == 9
    assert result.model3d.volume == pytest.approx(10_800)
    assert len(result.model3d.elements) == 3
    assert result.structural_analysis.is_stable == (
        result.structural_analysis.safety_factor > 1.5
    )
    # room prisms: length * width equals the requested area
    assert result.material_breakdown.total_volume == pytest.approx(900 * 9)
    assert result.material_breakdown.total_weight == pytest.approx(900 * 9 * 150)
    assert result.material_breakdown.total_cost == pytest.approx(900 * 9 * 120)

    artifact = result.cad_artifact
    assert artifact.artifact_type == CADArtifactType.MODEL_3D
    assert artifact.format == "gltf"
    assert artifact.geometry.vertices == 24
    assert artifact.geometry.bounds.max.z == 9
    assert artifact.metadata["compliance"]["status"] == "pending-review"
    assert artifact.usage["analyses"] == 1
    assert "structural" in artifact.analysis


def test_generate_3d_model_height_option(requirements_data):
    plan = generate_floor_plan(requirements_data).floor_plan
    result = generate_3d_model(
        plan, requirements_data, {"height": 12, "level_of_detail": "high"}
    )
    assert result.model3d.height == 12
    assert result.material_breakdown.level_of_detail.value == "high"
    assert result.cad_artifact.properties["specifications"]["height"] == 12


def test_generate_3d_model_accepts_dict_floor_plan(requirements_data):
    plan = generate_floor_plan(requirements_data).floor_plan.model_dump(mode="json")
    result = generate_3d_model(plan, requirements_data)
    assert len(result.model3d.rooms) == 3


def test_generate_3d_model_rejects_zero_width_room(requirements_data):
    plan = generate_floor_plan(requirements_data).floor_plan.model_dump(mode="json")
    plan["rooms"][1]["dimensions"]["width"] = 0
    with pytest.raises(DegenerateGeometry):
        generate_3d_model(plan, requirements_data)


def test_generate_3d_model_rejects_empty_plan(requirements_data):
    plan = generate_floor_plan(requirements_data).floor_plan.model_dump(mode="json")
    plan["rooms"] = []
    with pytest.raises(InvalidRequirement):
        generate_3d_model(plan, requirements_data)


def test_service_facade(requirements_data):
    service = DesignEngineService()
    result = service.generate_floor_plan(requirements_data, {"optimization": "sustainability"})
    assert result.material_optimization.primary_material == "Engineered Wood"
    model = service.generate_3d_model(result.floor_plan, requirements_data)
    assert model.structural_analysis.loads.dead_load == 60_000


def test_facade_catalog_does_not_affect_3d_model(requirements_data):
    plan = generate_floor_plan(requirements_data).floor_plan
    custom = DesignCatalog(
        materials={"steel": DEFAULT_CATALOG.material("structural-steel")},
        building_codes={},
    )
    default_model = DesignEngineService().generate_3d_model(plan, requirements_data)
    custom_model = DesignEngineService(custom).generate_3d_model(plan, requirements_data)
    assert custom_model.model3d == default_model.model3d
    assert custom_model.structural_analysis == default_model.structural_analysis
    assert custom_model.material_breakdown == default_model.material_breakdown


def test_empty_catalog_rejected_before_layout(requirements_data, monkeypatch):
    def fail_synthesize(requirements):
        raise AssertionError("layout ran with an empty catalog")

    monkeypatch.setattr(service_module, "synthesize", fail_synthesize)
    with pytest.raises(InvalidRequirement) as exc_info:
        generate_floor_plan(requirements_data, catalog=DesignCatalog())
    assert "catalog is empty" in exc_info.value.detail


def test_generate_3d_model_volume_overflow(requirements_data):
    data = {**requirements_data, "total_area": 1e308}
    plan = generate_floor_plan(data).floor_plan
    with pytest.raises(DegenerateGeometry) as exc_info:
        generate_3d_model(plan, data)
    assert "not finite" in exc_info.value.detail


def test_mep_cost_overflow_raises_degenerate_geometry(requirements_data):
    with pytest.raises(DegenerateGeometry):
        generate_floor_plan(
            {**requirements_data, "total_area": 1e308}, {"include_mep": True}
        )
