"""
Seismo Damage analytics.

Pure engines (damage_engine, displacement, component_engine, confidence,
risk_engine, explanation) and the analytics_pipeline that combines them with
the prediction service.
"""

from seismo_damage.analytics.damage_engine import estimate_damage
from seismo_damage.analytics.displacement import simulate_displacement
from seismo_damage.analytics.component_engine import decompose
from seismo_damage.analytics.confidence import confidence_band, sensitivity_drivers
from seismo_damage.analytics.risk_engine import (
    estimate_base_shear,
    risk_level,
    seismic_zone,
    severity_curve,
)
from seismo_damage.analytics.explanation import explain_damage
from seismo_damage.analytics.analytics_pipeline import run_analysis

__all__ = [
    "estimate_damage",
    "simulate_displacement",
    "decompose",
    "confidence_band",
    "sensitivity_drivers",
    "estimate_base_shear",
    "risk_level",
    "seismic_zone",
    "severity_curve",
    "explain_damage",
    "run_analysis",
]
