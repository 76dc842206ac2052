"""Pydantic models for the design engine pipeline.

These schemas define the data structures flowing through each stage of the
design engine: requirement intake, layout synthesis, structural element
generation, compliance checking, material optimization, structural analysis,
and the CAD artifact envelope handed back to callers.

Every model is frozen and rejects infinite or NaN floats.  Nothing produced
by one stage is mutated by the next; stages build new objects instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from archgen.common.enums import (
    ArchitecturalStyle,
    CADArtifactType,
    CodeCategory,
    ComplianceStatus,
    LevelOfDetail,
    MaterialType,
    OptimizationObjective,
    Priority,
    RoomType,
    StructuralElementType,
)


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)


# ---------------------------------------------------------------------------
# Requirements (caller input)
# ---------------------------------------------------------------------------

class RoomSpec(FrozenModel):
    """One requested room."""

    type: RoomType = Field(..., description="Room type")
    area: float = Field(..., gt=0, description="Requested area in square feet")
    required: bool = Field(True, description="Whether the room must be laid out")
    priority: Priority = Field(Priority.MEDIUM, description="Layout priority")


class Constraints(FrozenModel):
    """Optional spatial constraints.  Lengths are feet unless noted."""

    max_width: float | None = Field(None, gt=0, description="Maximum plan width")
    max_length: float | None = Field(None, gt=0, description="Maximum plan length")
    min_room_size: float | None = Field(
        None, gt=0, description="Minimum room side length"
    )
    corridor_width: float | None = Field(
        None, gt=0, description="Corridor width in inches"
    )
    ceiling_height: float | None = Field(None, gt=0, description="Ceiling height")


class FloorPlanRequirements(FrozenModel):
    """Canonical input for every generator in the pipeline."""

    total_area: float = Field(..., gt=0, description="Total floor area in square feet")
    room_count: int = Field(0, ge=0, description="Desired number of rooms")
    room_types: list[RoomSpec] = Field(
        default_factory=list, description="Requested rooms"
    )
    constraints: Constraints = Field(default_factory=Constraints)
    style: ArchitecturalStyle = Field(
        ArchitecturalStyle.MODERN, description="Architectural style"
    )
    building_code: str = Field(
        "IBC-2021", description="Key into the building-code catalog"
    )


# ---------------------------------------------------------------------------
# Floor-plan primitives
# ---------------------------------------------------------------------------

class Position2D(FrozenModel):
    x: float = 0.0
    y: float = 0.0


class Position3D(FrozenModel):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class RoomDimensions(FrozenModel):
    width: float = Field(..., ge=0)
    length: float = Field(..., ge=0)
    height: float | None = Field(None, description="Ceiling height, if known")


class RoomLayout(FrozenModel):
    """A single positioned, dimensioned room within a floor plan."""

    type: RoomType
    area: float = Field(..., description="Requested area in square feet")
    dimensions: RoomDimensions
    position: Position2D = Field(default_factory=Position2D)


class Corridor(FrozenModel):
    width: float = Field(..., description="Corridor width in feet")
    connections: list[RoomType] = Field(default_factory=list)


class FloorPlan(FrozenModel):
    """Synthesized 2D arrangement of rooms and corridors."""

    total_area: float
    rooms: list[RoomLayout] = Field(default_factory=list)
    corridors: list[Corridor] = Field(default_factory=list)
    style: ArchitecturalStyle = ArchitecturalStyle.MODERN
    constraints: Constraints = Field(default_factory=Constraints)
    efficiency: float = Field(
        0.0, description="Used area as a percentage of total area; may exceed 100"
    )
    optimized: bool = False


# ---------------------------------------------------------------------------
# Structural elements
# ---------------------------------------------------------------------------

class ElementDimensions(FrozenModel):
    length: float
    width: float
    height: float


class StructuralElement(FrozenModel):
    """A generated physical building component."""

    id: str = Field(..., description="Unique within a generation run")
    type: StructuralElementType
    material: str = Field(..., description="Key into the material catalog")
    dimensions: ElementDimensions
    position: Position3D = Field(default_factory=Position3D)
    properties: dict[str, Any] = Field(default_factory=dict)


# ---------------------------------------------------------------------------
# Catalog entries
# ---------------------------------------------------------------------------

class MaterialProperties(FrozenModel):
    density: float = Field(..., description="lb / cu ft")
    strength: float = Field(..., description="psi")
    cost: float = Field(..., description="USD per unit")
    sustainability: float = Field(..., ge=1, le=10)
    fire_rating: str = "none"


class EnvironmentalProfile(FrozenModel):
    carbon_footprint: float
    recyclability: float = Field(..., ge=0, le=1)
    life_cycle: float = Field(..., description="Service life in years")


class MaterialSpecification(FrozenModel):
    name: str = Field(..., description="Display name")
    type: MaterialType
    properties: MaterialProperties
    environmental: EnvironmentalProfile


class BuildingCodeRequirement(FrozenModel):
    code: str
    description: str
    category: CodeCategory
    requirement: str = Field(..., description="Rule label used for dispatch")
    value: int | float | str
    unit: str | None = None


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------

class ComplianceReport(FrozenModel):
    status: ComplianceStatus
    issues: list[str] = Field(default_factory=list)
    compliant: list[str] = Field(default_factory=list)
    standards: list[str] = Field(default_factory=list)


class StructuralLoads(FrozenModel):
    """Design loads in pounds / psf."""

    dead_load: float
    live_load: float
    wind_load: float
    seismic_load: float


class StructuralAnalysis(FrozenModel):
    loads: StructuralLoads
    stress: list[float] = Field(default_factory=list)
    displacement: list[float] = Field(default_factory=list)
    safety_factor: float
    max_stress: float
    max_displacement: float
    is_stable: bool
    recommendations: list[str] = Field(default_factory=list)


class LifeCycleAssessment(FrozenModel):
    carbon_footprint: float
    energy_efficiency: float
    maintenance_cost: float
    expected_lifespan: int = 50
    environmental_impact: str = "low"


class MaterialOptimizationResult(FrozenModel):
    primary_material: str
    alternatives: list[str] = Field(default_factory=list)
    total_cost: float
    sustainability_score: float
    life_cycle_assessment: LifeCycleAssessment


class MEPPlan(FrozenModel):
    """Mechanical / Electrical / Plumbing high-level plan."""

    electrical_circuits: int = Field(..., ge=1)
    plumbing_fixtures: int = Field(..., ge=1)
    hvac_tonnage: float = Field(..., ge=0.5)
    estimated_cost: int = Field(..., ge=0)


# ---------------------------------------------------------------------------
# 3D model
# ---------------------------------------------------------------------------

class ExtrudedRoom(FrozenModel):
    type: RoomType
    area: float
    dimensions: RoomDimensions
    position: Position2D
    height: float
    volume: float


class Model3D(FrozenModel):
    """A floor plan extruded to a uniform height."""

    total_area: float
    height: float
    volume: float
    rooms: list[ExtrudedRoom] = Field(default_factory=list)
    elements: list[StructuralElement] = Field(
        default_factory=list, description="One rectangular prism per room"
    )


class MaterialBreakdown(FrozenModel):
    total_volume: float
    total_weight: float
    total_cost: float
    material_distribution: dict[str, float] = Field(default_factory=dict)
    level_of_detail: LevelOfDetail = LevelOfDetail.MEDIUM


# ---------------------------------------------------------------------------
# CAD artifact envelope
# ---------------------------------------------------------------------------

class Bounds(FrozenModel):
    min: Position3D = Field(default_factory=Position3D)
    max: Position3D = Field(default_factory=Position3D)


class Geometry(FrozenModel):
    vertices: int
    faces: int
    edges: int
    bounds: Bounds
    units: str = "feet"


class CADArtifact(FrozenModel):
    """Descriptive envelope for a generated design.  Carries no behaviour."""

    name: str
    description: str
    artifact_type: CADArtifactType
    format: str
    geometry: Geometry
    properties: dict[str, Any] = Field(default_factory=dict)
    constraints: dict[str, Any] | None = None
    analysis: dict[str, Any] | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    ai_metadata: dict[str, Any] = Field(default_factory=dict)
    permissions: dict[str, Any] = Field(
        default_factory=lambda: {
            "is_public": False,
            "allowed_users": [],
            "allowed_organizations": [],
        }
    )
    usage: dict[str, int] = Field(
        default_factory=lambda: {"downloads": 0, "views": 0, "analyses": 0}
    )


# ---------------------------------------------------------------------------
# Entry-point options and results
# ---------------------------------------------------------------------------

class FloorPlanOptions(FrozenModel):
    optimization: OptimizationObjective = OptimizationObjective.SPACE
    include_structural: bool = True
    include_mep: bool = False


class Model3DOptions(FrozenModel):
    height: float | None = Field(None, gt=0, description="Extrusion height in feet")
    include_roof: bool = True
    include_foundation: bool = True
    level_of_detail: LevelOfDetail = LevelOfDetail.MEDIUM


class FloorPlanResult(FrozenModel):
    floor_plan: FloorPlan
    structural_elements: list[StructuralElement] = Field(default_factory=list)
    building_code_compliance: ComplianceReport
    material_optimization: MaterialOptimizationResult
    mep_plan: MEPPlan | None = None
    cad_artifact: CADArtifact


class Model3DResult(FrozenModel):
    model3d: Model3D
    structural_analysis: StructuralAnalysis
    material_breakdown: MaterialBreakdown
    cad_artifact: CADArtifact
