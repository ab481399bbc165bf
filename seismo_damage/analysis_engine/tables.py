"""
Static lookup tables keyed by closed soil and material enums.

Any unrecognized external string resolves to the UNKNOWN variant, which
carries the documented default weight in every table (1.0, 50, 20 GPa).
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class SoilType(str, Enum):
    CLAY = "clay"
    SAND = "sand"
    LOAM = "loam"
    ROCK = "rock"
    SILT = "silt"
    PEAT = "peat"
    GRAVEL = "gravel"
    FILL = "fill"
    CHALK = "chalk"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, raw: Any) -> "SoilType":
        """Case-insensitive lookup; None, blanks and unknown names map to UNKNOWN."""
        if isinstance(raw, cls):
            return raw
        key = str(raw or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN


class MaterialType(str, Enum):
    CONCRETE = "concrete"
    STEEL = "steel"
    BRICK = "brick"
    WOOD = "wood"
    BAMBOO = "bamboo"
    ADOBE = "adobe"
    PRECAST = "precast"
    CONFINED = "confined"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, raw: Any) -> "MaterialType":
        """Case-insensitive lookup; None, blanks and unknown names map to UNKNOWN."""
        if isinstance(raw, cls):
            return raw
        key = str(raw or "").strip().lower()
        try:
            return cls(key)
        except ValueError:
            return cls.UNKNOWN


# Soils that amplify shaking and undermine foundations
SOFT_SOILS = frozenset({SoilType.CLAY, SoilType.PEAT, SoilType.FILL})
# Low-ductility load-bearing walls
MASONRY_MATERIALS = frozenset({MaterialType.BRICK, MaterialType.ADOBE})
# Flexible frames that shed pillar damage
DUCTILE_MATERIALS = frozenset({MaterialType.STEEL, MaterialType.WOOD, MaterialType.BAMBOO})

SOIL_DAMAGE_MULTIPLIER: dict[SoilType, float] = {
    SoilType.CLAY: 1.3,
    SoilType.SAND: 1.1,
    SoilType.LOAM: 1.0,
    SoilType.ROCK: 0.8,
    SoilType.SILT: 1.2,
    SoilType.PEAT: 1.5,
    SoilType.GRAVEL: 0.9,
    SoilType.FILL: 1.4,
    SoilType.CHALK: 1.0,
    SoilType.UNKNOWN: 1.0,
}

MATERIAL_DAMAGE_MULTIPLIER: dict[MaterialType, float] = {
    MaterialType.CONCRETE: 1.0,
    MaterialType.STEEL: 0.8,
    MaterialType.BRICK: 1.2,
    MaterialType.WOOD: 0.7,
    MaterialType.BAMBOO: 0.7,
    MaterialType.ADOBE: 1.6,
    MaterialType.PRECAST: 1.1,
    MaterialType.CONFINED: 0.9,
    MaterialType.UNKNOWN: 1.0,
}

# Young's modulus, GPa
ELASTIC_MODULUS_GPA: dict[MaterialType, float] = {
    MaterialType.CONCRETE: 30.0,
    MaterialType.STEEL: 200.0,
    MaterialType.BRICK: 15.0,
    MaterialType.WOOD: 12.0,
    MaterialType.BAMBOO: 18.0,
    MaterialType.ADOBE: 5.0,
    MaterialType.PRECAST: 35.0,
    MaterialType.CONFINED: 25.0,
    MaterialType.UNKNOWN: 20.0,
}

# Sensitivity weights (0-100)
SOIL_SENSITIVITY_WEIGHT: dict[SoilType, float] = {
    SoilType.CLAY: 85.0,
    SoilType.PEAT: 95.0,
    SoilType.FILL: 90.0,
    SoilType.SAND: 75.0,
    SoilType.LOAM: 60.0,
    SoilType.ROCK: 30.0,
    SoilType.GRAVEL: 40.0,
    SoilType.SILT: 80.0,
    SoilType.CHALK: 50.0,
    SoilType.UNKNOWN: 50.0,
}

MATERIAL_DUCTILITY_WEIGHT: dict[MaterialType, float] = {
    MaterialType.BRICK: 90.0,
    MaterialType.ADOBE: 95.0,
    MaterialType.CONCRETE: 60.0,
    MaterialType.PRECAST: 75.0,
    MaterialType.STEEL: 40.0,
    MaterialType.WOOD: 35.0,
    MaterialType.BAMBOO: 30.0,
    MaterialType.CONFINED: 55.0,
    MaterialType.UNKNOWN: 50.0,
}
