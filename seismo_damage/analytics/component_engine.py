"""
Component damage decomposition: overall damage -> five subsystem percents.

Base shares of the overall score, then additive soil/height/material
adjustments, then a single round-and-clamp to 10-100. Zero overall damage
means zero everywhere.
"""

from __future__ import annotations

from seismo_damage.analysis_engine.models import AnalysisInput, ComponentDamage
from seismo_damage.analysis_engine.tables import (
    DUCTILE_MATERIALS,
    MASONRY_MATERIALS,
    SOFT_SOILS,
    SoilType,
)
from seismo_damage.seismo_logging import get_logger
from seismo_damage.utils.rounding import clamp, round_int

logger = get_logger(__name__)

FOUNDATION_SHARE = 0.8
PILLARS_SHARE = 0.85
WALLS_SHARE = 0.9
ROOF_SHARE = 0.7
# Utilities fail even with low structural damage
UTILITIES_SHARE = 1.1

SOFT_SOIL_FOUNDATION_PENALTY = 15
ROCK_FOUNDATION_RELIEF = 10
TALL_BUILDING_FLOORS = 8
TALL_BUILDING_PILLAR_PENALTY = 10
MASONRY_WALL_PENALTY = 15
DUCTILE_PILLAR_RELIEF = 5

COMPONENT_MIN = 10
COMPONENT_MAX = 100


def _cap(value: float, overall_damage: float) -> int:
    if overall_damage == 0:
        return 0
    return int(clamp(round_int(value), COMPONENT_MIN, COMPONENT_MAX))


def decompose(overall_damage: float, inputs: AnalysisInput) -> ComponentDamage:
    """Split an overall damage score (int or remote float) into subsystem damage."""
    foundation = overall_damage * FOUNDATION_SHARE
    pillars = overall_damage * PILLARS_SHARE
    walls = overall_damage * WALLS_SHARE
    roof = overall_damage * ROOF_SHARE
    utilities = overall_damage * UTILITIES_SHARE

    if inputs.soil_type in SOFT_SOILS:
        foundation += SOFT_SOIL_FOUNDATION_PENALTY
    if inputs.soil_type is SoilType.ROCK:
        foundation -= ROCK_FOUNDATION_RELIEF
    if inputs.floor_count > TALL_BUILDING_FLOORS:
        pillars += TALL_BUILDING_PILLAR_PENALTY
    if inputs.material_type in MASONRY_MATERIALS:
        walls += MASONRY_WALL_PENALTY
    if inputs.material_type in DUCTILE_MATERIALS:
        pillars -= DUCTILE_PILLAR_RELIEF

    result = ComponentDamage(
        foundation=_cap(foundation, overall_damage),
        pillars=_cap(pillars, overall_damage),
        walls=_cap(walls, overall_damage),
        roof=_cap(roof, overall_damage),
        utilities=_cap(utilities, overall_damage),
    )
    logger.debug("component_engine_result", overall=overall_damage, **result.to_dict())
    return result
