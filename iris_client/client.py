from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import requests
from pydantic import ValidationError as SchemaError

from .errors import ClientError, DecodeError, HttpError, NetworkError
from .schemas import PredictionRequestBody, PredictionResponseBody
from .types import FeatureVector, PredictionRequest, PredictionResult

logger = logging.getLogger(__name__)

PREDICT_PATH = "/api/predict"
HEALTH_PATH = "/health"
# Startup probe must not hang even when predictions have no timeout.
HEALTH_TIMEOUT_SECONDS = 5.0


@dataclass
class PredictionHttpClient:
    """Single-shot client for the classification service's predict endpoint.

    ``timeout`` is passed to the transport unchanged. ``None`` means requests
    waits indefinitely, so a hung service keeps the caller waiting too.
    """

    base_url: str
    timeout: float | None = None
    session: requests.Session = field(default_factory=requests.Session)

    @property
    def predict_url(self) -> str:
        return f"{self.base_url.rstrip('/')}{PREDICT_PATH}"

    def submit(self, vector: FeatureVector) -> PredictionResult | ClientError:
        try:
            return self.predict(vector)
        except ClientError as exc:
            return exc

    def predict(self, vector: FeatureVector) -> PredictionResult:
        request = PredictionRequest.from_vector(vector)
        return self.send(request)

    def send(self, request: PredictionRequest) -> PredictionResult:
        payload = PredictionRequestBody(**request.to_payload()).model_dump()
        try:
            response = self.session.post(
                self.predict_url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.Timeout as exc:
            logger.warning("Prediction request timed out url=%s", self.predict_url)
            raise NetworkError("timed out waiting for response") from exc
        except requests.RequestException as exc:
            logger.warning("Prediction request failed url=%s error=%s", self.predict_url, exc)
            raise NetworkError(str(exc)) from exc

        if not 200 <= response.status_code < 300:
            logger.warning("Prediction service returned status=%s", response.status_code)
            raise HttpError(response.status_code)

        try:
            data: Any = response.json()
        except ValueError as exc:
            raise DecodeError("body is not valid JSON") from exc
        return self._parse_body(data)

    def health(self) -> bool:
        url = f"{self.base_url.rstrip('/')}{HEALTH_PATH}"
        try:
            response = self.session.get(url, timeout=self.timeout or HEALTH_TIMEOUT_SECONDS)
        except requests.RequestException as exc:
            logger.info("Prediction service health check failed: %s", exc)
            return False
        return 200 <= response.status_code < 300

    def _parse_body(self, data: Any) -> PredictionResult:
        if not isinstance(data, dict):
            raise DecodeError(f"expected a JSON object, got {type(data).__name__}")
        try:
            body = PredictionResponseBody.model_validate(data)
        except SchemaError as exc:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
                for err in exc.errors()
            )
            raise DecodeError(problems) from exc
        return PredictionResult(species=body.species, probabilities=dict(body.probabilities))


__all__ = ["PredictionHttpClient", "PREDICT_PATH"]
