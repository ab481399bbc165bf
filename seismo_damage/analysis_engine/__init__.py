"""
Analysis engine package — data model and lookup tables.

Everything here is a plain value; the computations that consume it live in
seismo_damage.analytics.
"""

from seismo_damage.analysis_engine.models import (
    AnalysisInput,
    AnalysisReport,
    ComponentDamage,
    DamageResult,
    DeterministicScore,
    DisplacementSeries,
    EngineMode,
    FallbackScore,
    FloorDisplacement,
    PredictionResponse,
    RemoteScore,
    ScoreOutcome,
    SensitivityDriver,
)
from seismo_damage.analysis_engine.tables import MaterialType, SoilType

__all__ = [
    "AnalysisInput",
    "AnalysisReport",
    "ComponentDamage",
    "DamageResult",
    "DeterministicScore",
    "DisplacementSeries",
    "EngineMode",
    "FallbackScore",
    "FloorDisplacement",
    "PredictionResponse",
    "RemoteScore",
    "ScoreOutcome",
    "SensitivityDriver",
    "MaterialType",
    "SoilType",
]
