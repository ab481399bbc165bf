"""
Tests for component damage decomposition: shares, adjustments, clamping order.
"""

from __future__ import annotations

from seismo_damage.analysis_engine.models import ComponentDamage
from seismo_damage.analysis_engine.tables import MaterialType, SoilType
from seismo_damage.analytics.component_engine import decompose


def test_zero_damage_is_zero_everywhere(make_inputs):
    for soil in ("clay", "rock", "peat", "sand"):
        for material in ("brick", "steel", "concrete"):
            for floors in (1, 9, 30):
                result = decompose(0, make_inputs(soil=soil, material=material, floors=floors))
                assert result == ComponentDamage(0, 0, 0, 0, 0)


def test_end_to_end_clay_brick_high_rise(make_inputs):
    """85 on clay/brick/12 floors: foundation 68+15, pillars 72.25+10, walls 76.5+15 -> 91.5 rounds up."""
    result = decompose(85, make_inputs(magnitude=8.0, pga=0.4, soil="clay", material="brick", floors=12))
    assert result.foundation == 83
    assert result.pillars == 82
    assert result.walls == 92


def test_adjustments_are_summed_before_clamp(make_inputs):
    """Clay on 1% overall: 0.8 + 15 = 15.8 -> 16 (clamping the base first would give 25)."""
    result = decompose(1, make_inputs(soil="clay", material="concrete", floors=3))
    assert result.foundation == 16
    assert result.pillars == 10
    assert result.walls == 10
    assert result.roof == 10
    assert result.utilities == 10


def test_rock_relief_floors_at_ten(make_inputs):
    result = decompose(10, make_inputs(soil="rock", floors=3))
    # 8 - 10 = -2 -> 10
    assert result.foundation == 10
    result = decompose(50, make_inputs(soil="rock", floors=3))
    assert result.foundation == 30


def test_tall_ductile_building_pillars(make_inputs):
    # 40 * 0.85 + 10 - 5 = 39
    result = decompose(40, make_inputs(material="steel", floors=9))
    assert result.pillars == 39
    # 8 floors is not tall: 34 - 5 = 29
    result = decompose(40, make_inputs(material="wood", floors=8))
    assert result.pillars == 29


def test_masonry_walls(make_inputs):
    # 50 * 0.9 + 15 = 60
    assert decompose(50, make_inputs(material="adobe")).walls == 60
    assert decompose(50, make_inputs(material="concrete")).walls == 45


def test_upper_clamp(make_inputs):
    result = decompose(100, make_inputs(soil="peat", material="brick", floors=20))
    assert result.utilities == 100
    assert result.foundation == 95
    assert result.walls == 100


def test_remote_float_score(make_inputs):
    """Remote scores arrive with one decimal and are decomposed as-is."""
    result = decompose(40.5, make_inputs(soil="sand", material="steel", floors=4))
    # 40.5 * 0.8 = 32.4
    assert result.foundation == 32
    # 40.5 * 1.1 = 44.55
    assert result.utilities == 45


def test_positive_damage_components_in_range(make_inputs):
    for soil in SoilType:
        for material in MaterialType:
            for floors in (1, 9, 15):
                for overall in (1, 5, 22, 50, 85, 99, 100):
                    result = decompose(overall, make_inputs(soil=soil, material=material, floors=floors))
                    for value in result.to_dict().values():
                        assert 10 <= value <= 100
