"""
Mock regression model behind POST /predict.

Stands in for a trained multivariate regressor: a linear score in magnitude
and floor count, scaled by soil and material bias, plus uniform noise to
mimic model variance. Stateless apart from the noise generator.

    prediction = (mag * 8 + floors * 1.5) * soil_bias * material_bias + U(-2.5, 2.5)
    damageScore = round(clamp(prediction, 0, 100), 1)
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import numpy as np

from seismo_damage.analysis_engine.models import PredictionResponse
from seismo_damage.seismo_logging import get_logger
from seismo_damage.utils.rounding import clamp, round_half_up

logger = get_logger(__name__)

MAGNITUDE_COEF = 8.0
FLOORS_COEF = 1.5

# Keys are lower-cased raw strings; anything else is 1.0
SOIL_BIAS: dict[str, float] = {"clay": 1.25, "peat": 1.4, "rock": 0.75, "sand": 1.1}
MATERIAL_BIAS: dict[str, float] = {"steel": 0.8, "brick": 1.3, "adobe": 1.5, "wood": 0.7}

NOISE_HALF_WIDTH = 2.5
CONFIDENCE_RANGE = (0.85, 0.95)
MODEL_TAGS = ("SeismicAI-v2", "XGBoost-Regressor")

SCORE_MIN = 0.0
SCORE_MAX = 100.0


def noiseless_prediction(mag: float, floors: float, soil: str, material: str) -> float:
    """Linear prediction before noise and clamping."""
    prediction = mag * MAGNITUDE_COEF + floors * FLOORS_COEF
    prediction *= SOIL_BIAS.get(soil.strip().lower(), 1.0)
    prediction *= MATERIAL_BIAS.get(material.strip().lower(), 1.0)
    return prediction


def _utc_timestamp() -> str:
    """ISO-8601 UTC with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class DamagePredictor:
    """
    Noisy damage regressor.

    rng is a seed, None (OS entropy), or any object with a numpy-style
    uniform(low, high) method such as np.random.Generator.
    """

    def __init__(self, rng: Any = None):
        if rng is None or isinstance(rng, int):
            self._rng = np.random.default_rng(rng)
        else:
            self._rng = rng

    def predict(self, mag: float, floors: float, soil: str, material: str) -> PredictionResponse:
        base = noiseless_prediction(mag, floors, soil, material)
        noise = float(self._rng.uniform(-NOISE_HALF_WIDTH, NOISE_HALF_WIDTH))
        score = round_half_up(clamp(base + noise, SCORE_MIN, SCORE_MAX), 1)
        confidence = float(self._rng.uniform(*CONFIDENCE_RANGE))
        result = PredictionResponse(
            damage_score=score,
            confidence=confidence,
            model_tags=MODEL_TAGS,
            timestamp=_utc_timestamp(),
        )
        logger.debug(
            "predictor_result",
            mag=mag,
            floors=floors,
            soil=soil,
            material=material,
            base=round(base, 3),
            noise=round(noise, 3),
            damage_score=score,
        )
        return result
