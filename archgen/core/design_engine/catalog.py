"""Static reference data for the design engine.

Two catalogs are defined here: construction materials keyed by slug, and
building-code rule sets keyed by code name.  Both are built once at import
time and bundled into ``DEFAULT_CATALOG``.  Components never reach for these
module globals directly; they take a ``DesignCatalog`` argument so callers
can inject their own reference data.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import Field, field_validator

from archgen.common.enums import CodeCategory, MaterialType
from archgen.core.design_engine.schemas import (
    BuildingCodeRequirement,
    EnvironmentalProfile,
    FrozenModel,
    MaterialProperties,
    MaterialSpecification,
)


class DesignCatalog(FrozenModel):
    """Read-only bundle of the material and building-code catalogs.

    ``materials`` preserves insertion order; the material optimizer picks
    alternatives by catalog position, so order is part of the contract.
    Both mappings are exposed as read-only proxies over private copies.
    """

    materials: Mapping[str, MaterialSpecification] = Field(
        default_factory=dict, validate_default=True
    )
    building_codes: Mapping[str, tuple[BuildingCodeRequirement, ...]] = Field(
        default_factory=dict, validate_default=True
    )

    @field_validator("materials", "building_codes")
    @classmethod
    def freeze_mapping(cls, value: Mapping) -> Mapping:
        return MappingProxyType(dict(value))

    def material(self, key: str) -> MaterialSpecification | None:
        return self.materials.get(key)

    def rules_for(self, code: str) -> tuple[BuildingCodeRequirement, ...]:
        return self.building_codes.get(code, ())

    def has_code(self, code: str) -> bool:
        return code in self.building_codes


# ---------------------------------------------------------------------------
# Materials
# ---------------------------------------------------------------------------

_MATERIALS: dict[str, MaterialSpecification] = {
    "concrete-4000psi": MaterialSpecification(
        name="Concrete 4000 PSI",
        type=MaterialType.CONCRETE,
        properties=MaterialProperties(
            density=150,
            strength=4000,
            cost=120,
            sustainability=6,
            fire_rating="2-hour",
        ),
        environmental=EnvironmentalProfile(
            carbon_footprint=0.15,
            recyclability=0.8,
            life_cycle=50,
        ),
    ),
    "structural-steel": MaterialSpecification(
        name="Structural Steel",
        type=MaterialType.STEEL,
        properties=MaterialProperties(
            density=490,
            strength=50_000,
            cost=200,
            sustainability=7,
            fire_rating="1-hour",
        ),
        environmental=EnvironmentalProfile(
            carbon_footprint=0.25,
            recyclability=0.95,
            life_cycle=75,
        ),
    ),
    "engineered-wood": MaterialSpecification(
        name="Engineered Wood",
        type=MaterialType.WOOD,
        properties=MaterialProperties(
            density=40,
            strength=2000,
            cost=80,
            sustainability=9,
            fire_rating="1-hour",
        ),
        environmental=EnvironmentalProfile(
            carbon_footprint=0.05,
            recyclability=0.9,
            life_cycle=30,
        ),
    ),
}


# ---------------------------------------------------------------------------
# Building codes
# ---------------------------------------------------------------------------

_BUILDING_CODES: dict[str, tuple[BuildingCodeRequirement, ...]] = {
    "IBC-2021": (
        BuildingCodeRequirement(
            code="IBC-2021",
            description="Minimum room dimensions",
            category=CodeCategory.STRUCTURAL,
            requirement="Minimum room area",
            value=70,
            unit="sq ft",
        ),
        BuildingCodeRequirement(
            code="IBC-2021",
            description="Corridor width",
            category=CodeCategory.ACCESSIBILITY,
            requirement="Minimum corridor width",
            value=36,
            unit="inches",
        ),
        BuildingCodeRequirement(
            code="IBC-2021",
            description="Ceiling height",
            category=CodeCategory.STRUCTURAL,
            requirement="Minimum ceiling height",
            value=7.5,
            unit="feet",
        ),
    ),
    "ASCE-7": (
        BuildingCodeRequirement(
            code="ASCE-7",
            description="Wind load requirements",
            category=CodeCategory.STRUCTURAL,
            requirement="Wind speed",
            value=115,
            unit="mph",
        ),
        BuildingCodeRequirement(
            code="ASCE-7",
            description="Seismic design category",
            category=CodeCategory.STRUCTURAL,
            requirement="Seismic zone",
            value="D",
            unit="category",
        ),
    ),
}


DEFAULT_CATALOG = DesignCatalog(materials=_MATERIALS, building_codes=_BUILDING_CODES)
