"""
ML layer: the mock damage regressor served over HTTP and the client that calls it.
"""

from seismo_damage.ml.prediction_client import PredictionClient
from seismo_damage.ml.predictor import DamagePredictor, noiseless_prediction

__all__ = ["DamagePredictor", "PredictionClient", "noiseless_prediction"]
