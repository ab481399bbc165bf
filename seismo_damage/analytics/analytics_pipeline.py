"""
Analytics pipeline: run one full damage analysis in the selected engine mode.

Deterministic: estimate_damage -> decompose.
Scientific: simulate_displacement (always), then the prediction service;
its score feeds decompose, or on RemoteUnavailableError the deterministic
score does and the report carries a fallback notice. Remote failures never
propagate to the caller.
"""

from __future__ import annotations

from seismo_damage.analysis_engine.models import (
    AnalysisInput,
    AnalysisReport,
    DamageResult,
    DeterministicScore,
    DisplacementSeries,
    EngineMode,
    FallbackScore,
    RemoteScore,
    ScoreOutcome,
)
from seismo_damage.analytics.component_engine import decompose
from seismo_damage.analytics.confidence import confidence_band, sensitivity_drivers
from seismo_damage.analytics.damage_engine import estimate_damage
from seismo_damage.analytics.displacement import simulate_displacement
from seismo_damage.analytics.explanation import explain_damage
from seismo_damage.analytics.risk_engine import estimate_base_shear, risk_level, seismic_zone
from seismo_damage.core.exceptions import RemoteUnavailableError
from seismo_damage.ml.prediction_client import PredictionClient
from seismo_damage.seismo_logging import get_logger
from seismo_damage.utils.rounding import round_int

logger = get_logger(__name__)

FALLBACK_NOTICE = "ML Backend Offline. Using local fallback simulation."


def _deterministic_score(inputs: AnalysisInput) -> int:
    return estimate_damage(inputs.magnitude, inputs.soil_type, inputs.material_type, inputs.floor_count)


def score_with_fallback(inputs: AnalysisInput, client: PredictionClient) -> ScoreOutcome:
    """Remote score when the service answers, deterministic score otherwise."""
    try:
        prediction = client.predict(inputs)
    except RemoteUnavailableError as e:
        score = _deterministic_score(inputs)
        logger.warning("prediction_fallback", reason=str(e), fallback_score=score)
        return FallbackScore(score=score, reason=str(e))
    return RemoteScore(score=prediction.damage_score, prediction=prediction)


def run_analysis(
    inputs: AnalysisInput,
    mode: EngineMode | str = EngineMode.DETERMINISTIC,
    client: PredictionClient | None = None,
) -> AnalysisReport:
    """
    Run one analysis and return the full report.

    client is only used in scientific mode; a default PredictionClient
    (PREDICTION_URL) is created when none is given.
    """
    mode = EngineMode(mode)
    logger.info("analytics_pipeline_start", mode=mode.value, **inputs.to_dict())

    displacement: DisplacementSeries | None = None
    notice: str | None = None
    if mode is EngineMode.SCIENTIFIC:
        displacement = simulate_displacement(inputs)
        outcome = score_with_fallback(inputs, client or PredictionClient())
        if isinstance(outcome, FallbackScore):
            notice = FALLBACK_NOTICE
        shear = displacement.base_shear_kn
    else:
        outcome = DeterministicScore(score=_deterministic_score(inputs))
        shear = estimate_base_shear(inputs)

    overall = round_int(outcome.score)
    # a score that displays as 0% decomposes as no damage
    components = decompose(outcome.score if overall else 0, inputs)
    report = AnalysisReport(
        inputs=inputs,
        mode=mode,
        outcome=outcome,
        damage=DamageResult(overall_damage=overall, components=components),
        base_shear_kn=shear,
        confidence_band=confidence_band(inputs.magnitude, inputs.soil_type),
        sensitivity=tuple(sensitivity_drivers(inputs)),
        risk_level=risk_level(outcome.score),
        seismic_zone=seismic_zone(inputs.magnitude),
        explanation=explain_damage(outcome.score, inputs),
        displacement=displacement,
        notice=notice,
    )
    logger.info(
        "analytics_pipeline_done",
        mode=mode.value,
        source=outcome.source,
        damage=overall,
        risk_level=report.risk_level,
    )
    return report
