"""
HTTP client for the prediction service.

POSTs the analysis inputs to PREDICTION_URL and parses the score. Every way
the call can fail (connection error, timeout, non-2xx, body that is not JSON
or lacks a numeric damageScore) surfaces as RemoteUnavailableError so the
caller can fall back to the deterministic model. No retries.
"""

from __future__ import annotations

import httpx

from seismo_damage.analysis_engine.models import AnalysisInput, PredictionResponse
from seismo_damage.config import get_settings
from seismo_damage.core.exceptions import RemoteUnavailableError
from seismo_damage.seismo_logging import get_logger

logger = get_logger(__name__)


class PredictionClient:
    """
    Client for POST /predict.

    http_client: optional httpx.Client to send through (shared pool, test
    transport, or a FastAPI TestClient). When omitted a short-lived client is
    opened per call.
    """

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ):
        settings = None
        if url is None or timeout is None:
            settings = get_settings()
        self.url = url if url is not None else settings.prediction_url
        self.timeout = timeout if timeout is not None else settings.prediction_timeout_sec
        self._http_client = http_client

    def _post(self, payload: dict) -> httpx.Response:
        if self._http_client is not None:
            return self._http_client.post(self.url, json=payload, timeout=self.timeout)
        with httpx.Client(timeout=self.timeout) as client:
            return client.post(self.url, json=payload)

    def predict(self, inputs: AnalysisInput) -> PredictionResponse:
        payload = inputs.to_payload()
        try:
            resp = self._post(payload)
        except httpx.HTTPError as e:
            logger.warning("prediction_client_transport_error", url=self.url, error=str(e))
            raise RemoteUnavailableError(f"prediction service unreachable: {e}") from e

        if not resp.is_success:
            logger.warning("prediction_client_bad_status", url=self.url, status_code=resp.status_code)
            raise RemoteUnavailableError(
                f"prediction service returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )

        try:
            prediction = PredictionResponse.from_payload(resp.json())
        except ValueError as e:
            # json.JSONDecodeError is a ValueError
            logger.warning("prediction_client_malformed_body", url=self.url, error=str(e))
            raise RemoteUnavailableError(f"malformed prediction response: {e}", status_code=resp.status_code) from e

        logger.debug("prediction_client_ok", url=self.url, damage_score=prediction.damage_score)
        return prediction
