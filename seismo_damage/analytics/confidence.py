"""
Confidence band and sensitivity drivers.

Both are read from the inputs only (not from the damage score), so the
deterministic and scientific paths report the same uncertainty.
"""

from __future__ import annotations

from seismo_damage.analysis_engine.models import AnalysisInput, SensitivityDriver
from seismo_damage.analysis_engine.tables import (
    MATERIAL_DUCTILITY_WEIGHT,
    SOIL_SENSITIVITY_WEIGHT,
    MaterialType,
    SoilType,
)
from seismo_damage.utils.rounding import clamp

BASE_BAND = 5
MAJOR_EVENT_MAGNITUDE = 7.0
MAJOR_EVENT_WIDENING = 5
UNSTABLE_SOIL_WIDENING = 5
ROCK_NARROWING = 2

UNSTABLE_SOILS = frozenset({SoilType.PEAT, SoilType.FILL})

MAX_MAGNITUDE = 9.0
RESONANCE_FLOORS = 20


def confidence_band(magnitude: float, soil_type: SoilType | str | None) -> int:
    """
    Half-width of the uncertainty band, in percent (reported as +/-band).

    Not clamped: with the current table the minimum is 3 (rock, M <= 7).
    """
    soil = SoilType.from_raw(soil_type)
    band = BASE_BAND
    if magnitude > MAJOR_EVENT_MAGNITUDE:
        band += MAJOR_EVENT_WIDENING
    if soil in UNSTABLE_SOILS:
        band += UNSTABLE_SOIL_WIDENING
    if soil is SoilType.ROCK:
        band -= ROCK_NARROWING
    return band


def soil_weight(soil_type: SoilType | str | None) -> float:
    return SOIL_SENSITIVITY_WEIGHT[SoilType.from_raw(soil_type)]


def material_weight(material_type: MaterialType | str | None) -> float:
    return MATERIAL_DUCTILITY_WEIGHT[MaterialType.from_raw(material_type)]


def sensitivity_drivers(inputs: AnalysisInput) -> list[SensitivityDriver]:
    """Four damage drivers with 0-100 weights, highest first; ties keep declaration order."""
    drivers = [
        SensitivityDriver("Magnitude", clamp(inputs.magnitude / MAX_MAGNITUDE * 100.0, 0.0, 100.0)),
        SensitivityDriver("Soil Factor", soil_weight(inputs.soil_type)),
        SensitivityDriver("Ductility", material_weight(inputs.material_type)),
        SensitivityDriver("Resonance", min(100.0, inputs.floor_count / RESONANCE_FLOORS * 100.0)),
    ]
    # sorted() is stable
    return sorted(drivers, key=lambda d: d.weight, reverse=True)
