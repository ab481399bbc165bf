"""
Tests for the deterministic damage model: tier precedence, boundaries, rounding, clamping.
"""

from __future__ import annotations

import pytest

from seismo_damage.analysis_engine.tables import MaterialType, SoilType
from seismo_damage.analytics.damage_engine import damage_tier, estimate_damage


def test_soft_soil_major_event():
    """M8 on clay: 80 + (8 - 7) * 5 = 85 regardless of material."""
    assert estimate_damage(8.0, "clay", "brick", 12) == 85
    assert estimate_damage(8.0, "clay", "steel", 2) == 85
    assert damage_tier(8.0, "clay") == "soft_soil_major"


def test_soft_soil_boundary_is_exclusive():
    """7.01 hits tier 1 (80.05 -> 80); 7.0 falls through to the general formula."""
    assert estimate_damage(7.01, "clay", "concrete", 5) == 80
    at_seven = estimate_damage(7.0, "clay", "concrete", 5)
    # 7/9 * 70 * 1.3 = 70.78
    assert at_seven == 71
    assert damage_tier(7.0, "clay") == "general"


def test_soft_soil_rounds_half_up():
    """Peat M9.5: 80 + 2.5 * 5 = 92.5 rounds up to 93 (banker's rounding would give 92)."""
    assert estimate_damage(9.5, "peat", "wood", 3) == 93


def test_rock_moderate_band():
    assert estimate_damage(5.0, "rock", "concrete", 5) == 40
    assert estimate_damage(5.5, "rock", "concrete", 5) == 50
    assert estimate_damage(6.0, "rock", "concrete", 5) == 60
    # Above the band: general formula, 6.01/9 * 70 * 0.8 = 37.4
    assert estimate_damage(6.01, "rock", "concrete", 5) == 37


def test_rock_below_band_uses_minor_tier():
    assert damage_tier(4.0, "rock") == "minor"
    assert estimate_damage(4.0, "rock", "concrete", 5) == 26


def test_minor_event():
    """M3: 10 + (3/5) * 20 = 22 for any soil and material."""
    for soil in ("clay", "rock", "sand", "mystery"):
        for material in ("adobe", "steel", ""):
            assert estimate_damage(3.0, soil, material, 3) == 22


def test_general_case_multipliers():
    # 6.5/9 * 70 * 1.1 (sand) * 0.8 (steel) = 44.49
    assert estimate_damage(6.5, "sand", "steel", 5) == 44
    # > 10 floors: x1.1 -> 48.94
    assert estimate_damage(6.5, "sand", "steel", 11) == 49
    # exactly 10 floors is not a high-rise
    assert estimate_damage(6.5, "sand", "steel", 10) == 44


def test_general_case_clamped_to_100():
    # 9.5/9 * 70 * 1.2 (silt) * 1.6 (adobe) = 141.9
    assert estimate_damage(9.5, "silt", "adobe", 20) == 100


def test_unknown_and_case_insensitive_values():
    """Unknown soil/material use multiplier 1.0; lookups ignore case and whitespace."""
    assert estimate_damage(6.3, "lava", "", 5) == 49
    assert estimate_damage(6.3, None, None, 5) == 49
    assert estimate_damage(8.0, "  CLAY ", "Brick", 12) == estimate_damage(8.0, "clay", "brick", 12)
    assert estimate_damage(6.5, SoilType.SAND, MaterialType.STEEL, 5) == estimate_damage(6.5, "sand", "steel", 5)


def test_range_over_grid():
    """Every soil, material, height and magnitude in [1, 9.5] yields an int in 0-100."""
    magnitudes = [1.0 + 0.25 * i for i in range(35)]
    for soil in SoilType:
        for material in MaterialType:
            for floors in (1, 5, 11, 30):
                for mag in magnitudes:
                    d = estimate_damage(mag, soil, material, floors)
                    assert isinstance(d, int)
                    assert 0 <= d <= 100


@pytest.mark.parametrize("args", [(8.0, "clay", "brick", 12), (6.2, "gravel", "precast", 4), (2.0, "rock", "wood", 1)])
def test_idempotent(args):
    assert estimate_damage(*args) == estimate_damage(*args)
