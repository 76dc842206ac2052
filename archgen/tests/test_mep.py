from archgen.core.design_engine.mep import generate_mep_plan


def test_mep_plan(floor_plan):
    mep = generate_mep_plan(floor_plan)
    # 8 base + 5 dedicated + 1 bathroom
    assert mep.electrical_circuits == 14
    assert mep.plumbing_fixtures == 6
    assert mep.hvac_tonnage == 2.2
    assert mep.estimated_cost == 31_060


def test_mep_rates_small_plan(floor_plan):
    plan = floor_plan.model_copy(update={"total_area": 400, "rooms": floor_plan.rooms[:1]})
    mep = generate_mep_plan(plan)
    assert mep.electrical_circuits == 13
    assert mep.hvac_tonnage == 1.5
    # 13 * 280 + 400 * 6 + 6 * 750 + 400 * 4 + 1.5 * 3200 + 400 * 3
    assert mep.estimated_cost == 18_140
