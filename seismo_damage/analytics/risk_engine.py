"""
Risk engine: classify a damage score and an event magnitude for display.

Risk level: < 35 LOW, < 70 MODERATE, else SEVERE.
Seismic zone by magnitude: < 4.5 Zone II, < 6.0 Zone III, < 7.5 Zone IV, else Zone V.
Also the qualitative base-shear estimate used when no simulation runs, and the
damage-vs-magnitude curve for a fixed building.
"""

from __future__ import annotations

from seismo_damage.analysis_engine.models import AnalysisInput
from seismo_damage.analytics.damage_engine import estimate_damage

RISK_LOW = "Low (Safe)"
RISK_MODERATE = "Moderate (Caution)"
RISK_SEVERE = "Severe (Danger)"

LOW_RISK_MAX = 35
MODERATE_RISK_MAX = 70

# (upper bound exclusive, zone name, description)
SEISMIC_ZONES = (
    (4.5, "Zone II", "Low Risk"),
    (6.0, "Zone III", "Moderate Risk"),
    (7.5, "Zone IV", "High Risk"),
)
TOP_ZONE = ("Zone V", "Very Severe Risk")

# Qualitative estimate: magnitude * 4500 * (floors / 5) * (pga * 4)
QUALITATIVE_SHEAR_PER_MAGNITUDE_KN = 4500.0
QUALITATIVE_REFERENCE_FLOORS = 5.0
QUALITATIVE_PGA_FACTOR = 4.0

SEVERITY_CURVE_MAGNITUDES = tuple(range(1, 10))


def risk_level(damage: float) -> str:
    if damage < LOW_RISK_MAX:
        return RISK_LOW
    if damage < MODERATE_RISK_MAX:
        return RISK_MODERATE
    return RISK_SEVERE


def seismic_zone(magnitude: float) -> str:
    """Zone label with description, e.g. 'Zone IV (High Risk)'."""
    for upper, name, description in SEISMIC_ZONES:
        if magnitude < upper:
            return f"{name} ({description})"
    return f"{TOP_ZONE[0]} ({TOP_ZONE[1]})"


def estimate_base_shear(inputs: AnalysisInput) -> float:
    """Base shear (kN) for deterministic mode, where no displacement simulation runs."""
    return (
        inputs.magnitude
        * QUALITATIVE_SHEAR_PER_MAGNITUDE_KN
        * (inputs.floor_count / QUALITATIVE_REFERENCE_FLOORS)
        * (inputs.pga * QUALITATIVE_PGA_FACTOR)
    )


def severity_curve(soil_type, material_type, floor_count: int) -> list[tuple[int, int]]:
    """(magnitude, damage) for magnitudes 1-9 with the building held fixed."""
    return [
        (m, estimate_damage(float(m), soil_type, material_type, floor_count))
        for m in SEVERITY_CURVE_MAGNITUDES
    ]
