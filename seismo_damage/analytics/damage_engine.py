"""
Deterministic damage model: overall damage percent from tiered heuristic rules.

Tiers are evaluated in order, first match wins:
  1. magnitude > 7 on soft soil (clay, peat, fill): 80 + (M - 7) * 5
  2. 5 <= magnitude <= 6 on rock: 40 + (M - 5) * 20
  3. magnitude < 5: 10 + (M / 5) * 20
  4. otherwise (M / 9) * 70 scaled by soil and material multipliers, x1.1 above 10 floors
Result is rounded half-up and clamped to 0-100.
"""

from __future__ import annotations

from typing import Any

from seismo_damage.analysis_engine.tables import (
    MATERIAL_DAMAGE_MULTIPLIER,
    SOFT_SOILS,
    SOIL_DAMAGE_MULTIPLIER,
    MaterialType,
    SoilType,
)
from seismo_damage.seismo_logging import get_logger
from seismo_damage.utils.rounding import clamp, round_int

logger = get_logger(__name__)

SOFT_SOIL_MAGNITUDE_THRESHOLD = 7.0
SOFT_SOIL_BASE = 80.0
SOFT_SOIL_SLOPE = 5.0

ROCK_MAGNITUDE_RANGE = (5.0, 6.0)
ROCK_BASE = 40.0
ROCK_SLOPE = 20.0

MINOR_MAGNITUDE_THRESHOLD = 5.0
MINOR_BASE = 10.0
MINOR_SPAN = 20.0

GENERAL_MAX_MAGNITUDE = 9.0
GENERAL_SPAN = 70.0
HIGH_RISE_FLOORS = 10
HIGH_RISE_FACTOR = 1.1

DAMAGE_MIN = 0
DAMAGE_MAX = 100


def _raw_damage(magnitude: float, soil: SoilType, material: MaterialType, floor_count: int) -> tuple[float, str]:
    """Unrounded damage and the name of the tier that produced it."""
    if magnitude > SOFT_SOIL_MAGNITUDE_THRESHOLD and soil in SOFT_SOILS:
        return SOFT_SOIL_BASE + (magnitude - SOFT_SOIL_MAGNITUDE_THRESHOLD) * SOFT_SOIL_SLOPE, "soft_soil_major"
    low, high = ROCK_MAGNITUDE_RANGE
    if low <= magnitude <= high and soil is SoilType.ROCK:
        return ROCK_BASE + (magnitude - low) * ROCK_SLOPE, "rock_moderate"
    if magnitude < MINOR_MAGNITUDE_THRESHOLD:
        return MINOR_BASE + (magnitude / MINOR_MAGNITUDE_THRESHOLD) * MINOR_SPAN, "minor"

    damage = (magnitude / GENERAL_MAX_MAGNITUDE) * GENERAL_SPAN
    damage *= SOIL_DAMAGE_MULTIPLIER[soil]
    damage *= MATERIAL_DAMAGE_MULTIPLIER[material]
    if floor_count > HIGH_RISE_FLOORS:
        damage *= HIGH_RISE_FACTOR
    return damage, "general"


def estimate_damage(
    magnitude: float,
    soil_type: SoilType | str | None,
    material_type: MaterialType | str | None,
    floor_count: int,
) -> int:
    """
    Overall damage percent (int, 0-100) for one building.

    soil_type and material_type accept enums or raw strings; unknown values
    use the 1.0 default multiplier.
    """
    soil = SoilType.from_raw(soil_type)
    material = MaterialType.from_raw(material_type)
    raw, tier = _raw_damage(magnitude, soil, material, floor_count)
    damage = int(clamp(round_int(raw), DAMAGE_MIN, DAMAGE_MAX))
    logger.debug(
        "damage_engine_result",
        magnitude=magnitude,
        soil=soil.value,
        material=material.value,
        floors=floor_count,
        tier=tier,
        damage=damage,
    )
    return damage


def damage_tier(magnitude: float, soil_type: Any, material_type: Any = None, floor_count: int = 1) -> str:
    """Name of the rule tier estimate_damage would apply."""
    return _raw_damage(
        magnitude,
        SoilType.from_raw(soil_type),
        MaterialType.from_raw(material_type),
        floor_count,
    )[1]
