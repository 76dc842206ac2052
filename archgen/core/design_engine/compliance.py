"""Building-code compliance checking.

Each rule in a code's rule set is dispatched on its ``requirement`` label.
Only three labels are understood; every other label passes.  An unknown
building code has no rules and therefore always comes back compliant.
"""

from __future__ import annotations

from collections.abc import Callable

from archgen.common.enums import ComplianceStatus
from archgen.common.logging import get_logger
from archgen.core.design_engine.catalog import DEFAULT_CATALOG, DesignCatalog
from archgen.core.design_engine.schemas import (
    BuildingCodeRequirement,
    ComplianceReport,
    FloorPlan,
    FloorPlanRequirements,
)

logger = get_logger("design_engine.compliance")


def _threshold(rule: BuildingCodeRequirement) -> float | None:
    if isinstance(rule.value, str):
        return None
    return float(rule.value)


def _min_room_area(floor_plan: FloorPlan, rule: BuildingCodeRequirement) -> bool:
    limit = _threshold(rule)
    if limit is None:
        return True
    return all(room.area >= limit for room in floor_plan.rooms)


def _min_corridor_width(floor_plan: FloorPlan, rule: BuildingCodeRequirement) -> bool:
    limit = _threshold(rule)
    if limit is None:
        return True
    return all(
        corridor.width >= limit for corridor in floor_plan.corridors
    )


def _min_ceiling_height(floor_plan: FloorPlan, rule: BuildingCodeRequirement) -> bool:
    limit = _threshold(rule)
    if limit is None:
        return True
    # Rooms without a recorded height are not applicable.
    return all(
        room.dimensions.height >= limit
        for room in floor_plan.rooms
        if room.dimensions.height is not None
    )


_CHECKS: dict[str, Callable[[FloorPlan, BuildingCodeRequirement], bool]] = {
    "Minimum room area": _min_room_area,
    "Minimum corridor width": _min_corridor_width,
    "Minimum ceiling height": _min_ceiling_height,
}


def _format_value(value: int | float | str) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def check_requirement(floor_plan: FloorPlan, rule: BuildingCodeRequirement) -> bool:
    """Evaluate one rule.  Unrecognised labels are treated as satisfied."""
    check = _CHECKS.get(rule.requirement)
    if check is None:
        return True
    return check(floor_plan, rule)


def check_compliance(
    floor_plan: FloorPlan,
    requirements: FloorPlanRequirements,
    catalog: DesignCatalog = DEFAULT_CATALOG,
) -> ComplianceReport:
    """Validate *floor_plan* against the rule set named by
    ``requirements.building_code``.

    Failing rules are reported as ``"{description}: {requirement}
    {value}{unit}"``; passing rules by their description.
    """
    code = requirements.building_code
    if not catalog.has_code(code):
        logger.warning(
            "Unknown building code '%s'; no compliance rules applied", code
        )

    issues: list[str] = []
    compliant: list[str] = []

    for rule in catalog.rules_for(code):
        if check_requirement(floor_plan, rule):
            compliant.append(rule.description)
        else:
            issues.append(
                f"{rule.description}: {rule.requirement} "
                f"{_format_value(rule.value)}{rule.unit or ''}"
            )

    return ComplianceReport(
        status=ComplianceStatus.COMPLIANT if not issues else ComplianceStatus.NON_COMPLIANT,
        issues=issues,
        compliant=compliant,
        standards=[code],
    )
