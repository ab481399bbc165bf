"""Plain-language explanation of what drove a damage score."""

from __future__ import annotations

from seismo_damage.analysis_engine.models import AnalysisInput
from seismo_damage.analysis_engine.tables import (
    DUCTILE_MATERIALS,
    MASONRY_MATERIALS,
    SOFT_SOILS,
    SoilType,
)
from seismo_damage.utils.rounding import round_int

DENSE_SOILS = frozenset({SoilType.ROCK, SoilType.GRAVEL})


def _format_number(value: float) -> str:
    """Shortest round-trip digits; whole numbers drop the trailing .0."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def explanation_reasons(damage: float, inputs: AnalysisInput) -> list[str]:
    """Ordered reasons; the first is always the ground-motion reason."""
    reasons: list[str] = []
    mag = inputs.magnitude
    pga = inputs.pga

    if mag >= 7.5 or pga > 0.6:
        reasons.append(f"high Peak Ground Acceleration (PGA) from a {_format_number(mag)} Mw event")
    elif mag >= 6.0 or pga > 0.3:
        reasons.append(f"significant ground motion at {_format_number(pga)}g PGA")
    else:
        reasons.append("moderate seismic vibrations")

    if inputs.soil_type in SOFT_SOILS:
        reasons.append("soil amplification in unstable ground layers")
    elif inputs.soil_type in DENSE_SOILS:
        reasons.append("the stability of dense foundation materials")

    if inputs.material_type in MASONRY_MATERIALS and damage > 50:
        reasons.append("the low ductility of traditional masonry")
    elif inputs.material_type in DUCTILE_MATERIALS and damage < 40:
        reasons.append("the superior flexural strength and ductility of the structure")

    if inputs.floor_count > 10:
        reasons.append("increased inter-storey drift in this high-rise structure")
    return reasons


def explain_damage(damage: float, inputs: AnalysisInput) -> str:
    """Thresholds use the score as given; the text shows it rounded half-up."""
    reasons = explanation_reasons(damage, inputs)
    text = f"This {round_int(damage)}% damage prediction is primarily driven by {reasons[0]}. "
    if len(reasons) > 1:
        text += f"The result was further influenced by {' and '.join(reasons[1:])}."
    return text
