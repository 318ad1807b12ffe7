from __future__ import annotations

from .errors import ClientError, DecodeError, HttpError, NetworkError, ValidationError
from .types import FEATURE_NAMES, FeatureVector, PredictionRequest, PredictionResult

__all__ = [
    "ClientError",
    "DecodeError",
    "FEATURE_NAMES",
    "FeatureVector",
    "HttpError",
    "NetworkError",
    "PredictionRequest",
    "PredictionResult",
    "ValidationError",
]
