"""Entry points for the design engine.

``generate_floor_plan`` runs layout synthesis, structural element
generation, compliance checking and material optimization, then wraps the
results in a floor-plan ``CADArtifact``.  ``generate_3d_model`` extrudes an
existing floor plan, analyzes it and wraps the results in a 3D-model
``CADArtifact``.

Both functions validate their inputs up front and raise before any stage
runs; no partial results are ever returned.  Neither touches storage: the
surrounding application decides what to persist.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from archgen.common.enums import CADArtifactType, ComplianceStatus
from archgen.common.exceptions import DegenerateGeometry, InvalidRequirement
from archgen.common.logging import get_logger
from archgen.config import settings
from archgen.core.design_engine.analysis import analyze
from archgen.core.design_engine.catalog import DEFAULT_CATALOG, DesignCatalog
from archgen.core.design_engine.compliance import check_compliance
from archgen.core.design_engine.geometry import (
    calculate_3d_geometry,
    calculate_geometry,
    extrude,
    generate_constraints,
)
from archgen.core.design_engine.layout import DEFAULT_CEILING_HEIGHT_FT, synthesize
from archgen.core.design_engine.materials import (
    generate_material_breakdown,
    optimize_materials,
    parse_objective,
)
from archgen.core.design_engine.mep import generate_mep_plan
from archgen.core.design_engine.schemas import (
    CADArtifact,
    FloorPlan,
    FloorPlanOptions,
    FloorPlanRequirements,
    FloorPlanResult,
    Model3DOptions,
    Model3DResult,
)
from archgen.core.design_engine.structure import generate_elements

logger = get_logger("design_engine.service")

FLOOR_PLAN_SCALE = 0.125  # 1/8" = 1'
FLOOR_PLAN_LAYERS = ["walls", "rooms", "dimensions", "fixtures"]
MODEL_3D_LAYERS = ["structure", "envelope", "interiors", "systems"]


# ---------------------------------------------------------------------------
# Input validation
# ---------------------------------------------------------------------------

def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def validate_requirements(
    requirements: FloorPlanRequirements | dict[str, Any],
) -> FloorPlanRequirements:
    """Parse and check *requirements*.

    Raises
    ------
    InvalidRequirement
        On any schema violation (non-positive area, unknown room type, ...)
        or when no room is marked as required.
    """
    if not isinstance(requirements, FloorPlanRequirements):
        try:
            requirements = FloorPlanRequirements.model_validate(requirements)
        except ValidationError as exc:
            detail = _format_validation_error(exc)
            logger.warning("Rejected floor-plan requirements: %s", detail)
            raise InvalidRequirement(detail) from exc

    if not any(room.required for room in requirements.room_types):
        logger.warning("Rejected floor-plan requirements: no required rooms")
        raise InvalidRequirement("At least one room must be marked as required")

    return requirements


def _parse_floor_plan_options(
    options: FloorPlanOptions | dict[str, Any] | None,
) -> FloorPlanOptions:
    if options is None:
        return FloorPlanOptions()
    if isinstance(options, FloorPlanOptions):
        return options

    data = dict(options)
    if "optimization" in data:
        data["optimization"] = parse_objective(data["optimization"])
    try:
        return FloorPlanOptions.model_validate(data)
    except ValidationError as exc:
        raise InvalidRequirement(_format_validation_error(exc)) from exc


def _parse_model_options(options: Model3DOptions | dict[str, Any] | None) -> Model3DOptions:
    if options is None:
        return Model3DOptions()
    if isinstance(options, Model3DOptions):
        return options
    try:
        return Model3DOptions.model_validate(options)
    except ValidationError as exc:
        raise InvalidRequirement(_format_validation_error(exc)) from exc


def _validate_floor_plan(floor_plan: FloorPlan | dict[str, Any]) -> FloorPlan:
    if not isinstance(floor_plan, FloorPlan):
        try:
            floor_plan = FloorPlan.model_validate(floor_plan)
        except ValidationError as exc:
            raise InvalidRequirement(_format_validation_error(exc)) from exc

    if not floor_plan.rooms:
        raise InvalidRequirement("Floor plan has no rooms to extrude")

    for index, room in enumerate(floor_plan.rooms):
        if room.dimensions.width <= 0 or room.dimensions.length <= 0:
            raise DegenerateGeometry(
                f"room-{index}",
                f"{room.type.value} is {room.dimensions.width} x {room.dimensions.length}",
            )

    return floor_plan


# ---------------------------------------------------------------------------
# Artifact assembly
# ---------------------------------------------------------------------------

def _base_metadata(scale: float, layers: list[str], tags: list[str]) -> dict[str, Any]:
    return {
        "version": settings.GENERATOR_VERSION,
        "software": settings.GENERATOR_SOFTWARE,
        "scale": scale,
        "coordinate_system": "Cartesian",
        "layers": list(layers),
        "tags": tags,
        "category": "residential",
    }


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate_floor_plan(
    requirements: FloorPlanRequirements | dict[str, Any],
    options: FloorPlanOptions | dict[str, Any] | None = None,
    catalog: DesignCatalog = DEFAULT_CATALOG,
) -> FloorPlanResult:
    """Generate a floor plan and everything derived from it.

    Parameters
    ----------
    requirements:
        Spatial and regulatory requirements, as a model or a plain dict.
    options:
        Optimization objective and which optional outputs to include.
    catalog:
        Material and building-code reference data.

    Returns
    -------
    FloorPlanResult
        The floor plan, structural elements (empty when
        ``include_structural`` is off), compliance report, material
        selection, optional MEP plan and the floor-plan CAD artifact.

    Raises
    ------
    InvalidRequirement
        If the requirements or options fail validation, or *catalog* has no
        materials.
    UnsupportedOptimizationObjective
        If the optimization objective is not recognised.
    DegenerateGeometry
        If a derived layout quantity overflows.
    """
    requirements = validate_requirements(requirements)
    options = _parse_floor_plan_options(options)
    objective = options.optimization
    if not catalog.materials:
        raise InvalidRequirement("Material catalog is empty")

    logger.info(
        "Generating floor plan: %.0f sq ft, %d rooms, code %s, objective %s",
        requirements.total_area,
        requirements.room_count,
        requirements.building_code,
        objective.value,
    )

    floor_plan = synthesize(requirements)
    elements = generate_elements(floor_plan, requirements) if options.include_structural else []
    compliance = check_compliance(floor_plan, requirements, catalog)
    material_optimization = optimize_materials(elements, objective, catalog)
    mep_plan = generate_mep_plan(floor_plan) if options.include_mep else None

    metadata = _base_metadata(
        FLOOR_PLAN_SCALE,
        FLOOR_PLAN_LAYERS,
        ["floor-plan", requirements.style.value, objective.value],
    )
    metadata["building_code"] = requirements.building_code
    metadata["compliance"] = compliance.model_dump(mode="json")

    cad_artifact = CADArtifact(
        name=f"Floor Plan - {requirements.total_area:g} sq ft",
        description=f"AI-generated floor plan for {requirements.room_count} rooms",
        artifact_type=CADArtifactType.FLOOR_PLAN,
        format="dwg",
        geometry=calculate_geometry(floor_plan),
        properties={
            "material": material_optimization.primary_material,
            "thickness": 0.5,
            "cost": material_optimization.total_cost,
            "specifications": {
                "building_code": requirements.building_code,
                "optimization": objective.value,
                "total_area": requirements.total_area,
            },
        },
        constraints=generate_constraints(floor_plan),
        metadata=metadata,
        ai_metadata={
            "generated": True,
            "prompt": (
                f"Generate floor plan for {requirements.total_area:g} sq ft "
                f"with {requirements.room_count} rooms"
            ),
            "model": settings.GENERATOR_NAME,
            "parameters": {
                "requirements": requirements.model_dump(mode="json"),
                "options": options.model_dump(mode="json"),
            },
            "confidence": settings.FLOOR_PLAN_CONFIDENCE,
        },
    )

    logger.info(
        "Floor plan ready: %d rooms, efficiency %.1f%%, %s",
        len(floor_plan.rooms),
        floor_plan.efficiency,
        compliance.status.value,
    )

    return FloorPlanResult(
        floor_plan=floor_plan,
        structural_elements=elements,
        building_code_compliance=compliance,
        material_optimization=material_optimization,
        mep_plan=mep_plan,
        cad_artifact=cad_artifact,
    )


def generate_3d_model(
    floor_plan: FloorPlan | dict[str, Any],
    requirements: FloorPlanRequirements | dict[str, Any],
    options: Model3DOptions | dict[str, Any] | None = None,
) -> Model3DResult:
    """Extrude *floor_plan* to 3D, analyze it and break down its materials.

    The extrusion height defaults to the requirements' ceiling height, or
    9 ft when none is given.

    Raises
    ------
    InvalidRequirement
        If the requirements or options fail validation, or the floor plan
        has no rooms.
    DegenerateGeometry
        If a room or extruded element has no cross-sectional area, or a
        derived volume, load or stress overflows.
    """
    requirements = validate_requirements(requirements)
    floor_plan = _validate_floor_plan(floor_plan)
    options = _parse_model_options(options)
    height = (
        options.height
        or requirements.constraints.ceiling_height
        or DEFAULT_CEILING_HEIGHT_FT
    )

    logger.info(
        "Generating 3D model: %d rooms at %.1f ft (%s detail)",
        len(floor_plan.rooms),
        height,
        options.level_of_detail.value,
    )

    model3d = extrude(floor_plan, height)
    structural_analysis = analyze(model3d.elements, requirements)
    material_breakdown = generate_material_breakdown(model3d, options.level_of_detail)

    metadata = _base_metadata(
        1,
        MODEL_3D_LAYERS,
        ["3d-model", requirements.style.value, "architectural"],
    )
    metadata["building_code"] = requirements.building_code
    metadata["compliance"] = {
        "status": ComplianceStatus.PENDING_REVIEW.value,
        "issues": [],
        "standards": [requirements.building_code],
    }

    cad_artifact = CADArtifact(
        name=f"3D Model - {requirements.total_area:g} sq ft",
        description=f"3D architectural model with {height:g}ft ceiling height",
        artifact_type=CADArtifactType.MODEL_3D,
        format="gltf",
        geometry=calculate_3d_geometry(model3d),
        properties={
            "material": "mixed",
            "thickness": 0.5,
            "weight": material_breakdown.total_weight,
            "cost": material_breakdown.total_cost,
            "specifications": {
                "height": height,
                "include_roof": options.include_roof,
                "include_foundation": options.include_foundation,
                "level_of_detail": options.level_of_detail.value,
            },
        },
        analysis={"structural": structural_analysis.model_dump(mode="json")},
        metadata=metadata,
        ai_metadata={
            "generated": True,
            "prompt": f"Generate 3D model from floor plan with {height:g}ft height",
            "model": settings.GENERATOR_NAME,
            "parameters": {
                "floor_plan": floor_plan.model_dump(mode="json"),
                "requirements": requirements.model_dump(mode="json"),
                "options": options.model_dump(mode="json"),
            },
            "confidence": settings.MODEL_3D_CONFIDENCE,
        },
        usage={"downloads": 0, "views": 0, "analyses": 1},
    )

    return Model3DResult(
        model3d=model3d,
        structural_analysis=structural_analysis,
        material_breakdown=material_breakdown,
        cad_artifact=cad_artifact,
    )


class DesignEngineService:
    """Facade bound to a single catalog.

    The catalog feeds floor-plan generation.  3D generation reads no
    reference data, so ``generate_3d_model`` behaves the same for every
    catalog.

    Usage::

        service = DesignEngineService()
        result = service.generate_floor_plan(requirements, {"optimization": "cost"})
        model = service.generate_3d_model(result.floor_plan, requirements)
    """

    def __init__(self, catalog: DesignCatalog = DEFAULT_CATALOG):
        self.catalog = catalog

    def generate_floor_plan(
        self,
        requirements: FloorPlanRequirements | dict[str, Any],
        options: FloorPlanOptions | dict[str, Any] | None = None,
    ) -> FloorPlanResult:
        return generate_floor_plan(requirements, options, self.catalog)

    def generate_3d_model(
        self,
        floor_plan: FloorPlan | dict[str, Any],
        requirements: FloorPlanRequirements | dict[str, Any],
        options: Model3DOptions | dict[str, Any] | None = None,
    ) -> Model3DResult:
        return generate_3d_model(floor_plan, requirements, options)
