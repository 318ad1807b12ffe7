from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .errors import ClientError
from .types import FeatureVector, PredictionRequest, PredictionResult

SPECIES: tuple[str, ...] = ("setosa", "versicolor", "virginica")


@dataclass
class ThresholdIrisModel:
    """Baseline classifier using the textbook petal cut-offs."""

    setosa_max_petal_length: float = 2.5
    versicolor_max_petal_width: float = 1.75
    confidence: float = 0.9

    def predict(self, request: PredictionRequest) -> PredictionResult:
        if request.petal_length < self.setosa_max_petal_length:
            species = "setosa"
        elif request.petal_width < self.versicolor_max_petal_width:
            species = "versicolor"
        else:
            species = "virginica"
        remainder = round((1.0 - self.confidence) / (len(SPECIES) - 1), 6)
        probabilities = {
            label: (self.confidence if label == species else remainder) for label in SPECIES
        }
        return PredictionResult(species=species, probabilities=probabilities)


@dataclass
class MockPredictionApi:
    """Offline stand-in for the prediction service; records every request."""

    model: ThresholdIrisModel = field(default_factory=ThresholdIrisModel)
    records: List[PredictionRequest] = field(default_factory=list)

    def submit(self, vector: FeatureVector) -> PredictionResult | ClientError:
        try:
            request = PredictionRequest.from_vector(vector)
        except ClientError as exc:
            return exc
        self.records.append(request)
        return self.model.predict(request)


__all__ = ["MockPredictionApi", "SPECIES", "ThresholdIrisModel"]
