"""
Tests for the mock regression model: formula, bias tables, noise band, clamping.
"""

from __future__ import annotations

import numpy as np
import pytest

from seismo_damage.ml.predictor import (
    CONFIDENCE_RANGE,
    MODEL_TAGS,
    NOISE_HALF_WIDTH,
    DamagePredictor,
    noiseless_prediction,
)

# Rounding to one decimal can move a score by up to 0.05 past the raw noise band
ROUNDING_SLACK = 0.05 + 1e-9


def test_noiseless_formula():
    # (8*8 + 12*1.5) * 1.25 * 1.3
    assert noiseless_prediction(8.0, 12, "clay", "brick") == pytest.approx(133.25)
    assert noiseless_prediction(6.0, 5, "loam", "concrete") == pytest.approx(55.5)
    assert noiseless_prediction(6.0, 5, "ROCK", "Wood") == pytest.approx(55.5 * 0.75 * 0.7)


def test_bias_tables_default_to_one():
    """Soils and materials outside the service's bias tables (e.g. silt, precast) are unbiased."""
    assert noiseless_prediction(5.0, 4, "silt", "precast") == pytest.approx(46.0)
    assert noiseless_prediction(5.0, 4, "", "") == pytest.approx(46.0)


def test_zero_noise_prediction(zero_noise_predictor):
    result = zero_noise_predictor.predict(5.0, 4, "SAND", "Steel")
    # 46 * 1.1 * 0.8 = 40.48 -> 40.5
    assert result.damage_score == 40.5
    assert result.confidence == pytest.approx(0.9)
    assert result.model_tags == MODEL_TAGS
    assert result.timestamp.endswith("Z")


def test_noise_stays_within_band():
    predictor = DamagePredictor(np.random.default_rng(2024))
    base = noiseless_prediction(6.0, 5, "loam", "concrete")
    scores = [predictor.predict(6.0, 5, "loam", "concrete").damage_score for _ in range(500)]
    for score in scores:
        assert abs(score - base) <= NOISE_HALF_WIDTH + ROUNDING_SLACK
        assert 0.0 <= score <= 100.0
        assert score == round(score, 1)
    # it is actually noisy
    assert len(set(scores)) > 10


def test_confidence_range():
    predictor = DamagePredictor(7)
    low, high = CONFIDENCE_RANGE
    for _ in range(200):
        assert low <= predictor.predict(6.0, 5, "clay", "brick").confidence <= high


def test_clamped_to_bounds():
    predictor = DamagePredictor(99)
    for _ in range(100):
        assert predictor.predict(9.5, 50, "peat", "adobe").damage_score == 100.0
        low = predictor.predict(0.0, 0, "rock", "wood").damage_score
        assert 0.0 <= low <= NOISE_HALF_WIDTH + ROUNDING_SLACK


def test_seeded_predictors_are_reproducible():
    a = DamagePredictor(42)
    b = DamagePredictor(42)
    assert [a.predict(7.0, 8, "clay", "steel").damage_score for _ in range(20)] == [
        b.predict(7.0, 8, "clay", "steel").damage_score for _ in range(20)
    ]
