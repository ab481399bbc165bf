"""
Pytest fixtures for Seismo Damage tests.

The prediction service runs in-process through FastAPI's TestClient; the
predictor is swapped for a zero-noise one so scores are exact.
"""

from __future__ import annotations

import pytest

from seismo_damage.analysis_engine.models import AnalysisInput


class MidpointRng:
    """uniform() always returns the middle of the range: zero noise, confidence 0.9."""

    def uniform(self, low: float, high: float) -> float:
        return (low + high) / 2.0


@pytest.fixture
def make_inputs():
    """Factory for AnalysisInput with sensible defaults."""

    def _make(
        magnitude: float = 6.0,
        pga: float = 0.3,
        soil: str = "loam",
        material: str = "concrete",
        floors: int = 5,
    ) -> AnalysisInput:
        return AnalysisInput(
            magnitude=magnitude,
            pga=pga,
            soil_type=soil,
            material_type=material,
            floor_count=floors,
        )

    return _make


@pytest.fixture
def zero_noise_predictor():
    from seismo_damage.ml.predictor import DamagePredictor

    return DamagePredictor(MidpointRng())


@pytest.fixture
def client(zero_noise_predictor):
    """FastAPI TestClient whose /predict uses the zero-noise predictor."""
    from fastapi.testclient import TestClient

    from seismo_damage.api_server.server import app, get_predictor

    app.dependency_overrides[get_predictor] = lambda: zero_noise_predictor
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_client():
    """TestClient backed by a real, seeded noisy predictor."""
    from fastapi.testclient import TestClient

    from seismo_damage.api_server.server import app, get_predictor
    from seismo_damage.ml.predictor import DamagePredictor

    predictor = DamagePredictor(1234)
    app.dependency_overrides[get_predictor] = lambda: predictor
    yield TestClient(app)
    app.dependency_overrides.clear()
