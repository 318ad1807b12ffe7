from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Protocol

from .errors import ClientError, ValidationError

FEATURE_NAMES: tuple[str, ...] = (
    "sepal_length",
    "sepal_width",
    "petal_length",
    "petal_width",
)

DEFAULT_FEATURES: dict[str, float] = {
    "sepal_length": 5.1,
    "sepal_width": 3.5,
    "petal_length": 1.4,
    "petal_width": 0.2,
}

# Entry fields accept nothing below this value.
MIN_FEATURE_VALUE: float = 0.0


class UnknownFieldError(KeyError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown feature field {self.name!r}; expected one of {', '.join(FEATURE_NAMES)}"


def _is_finite(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


@dataclass(frozen=True)
class FeatureVector:
    """Measurements of one specimen; ``None`` marks a field the user cleared."""

    sepal_length: float | None = DEFAULT_FEATURES["sepal_length"]
    sepal_width: float | None = DEFAULT_FEATURES["sepal_width"]
    petal_length: float | None = DEFAULT_FEATURES["petal_length"]
    petal_width: float | None = DEFAULT_FEATURES["petal_width"]

    def get(self, name: str) -> float | None:
        if name not in FEATURE_NAMES:
            raise UnknownFieldError(name)
        return getattr(self, name)

    def with_value(self, name: str, value: float | None) -> "FeatureVector":
        if name not in FEATURE_NAMES:
            raise UnknownFieldError(name)
        return replace(self, **{name: value})

    def missing_fields(self) -> list[str]:
        return [name for name in FEATURE_NAMES if not _is_finite(getattr(self, name))]

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def as_dict(self) -> dict[str, float | None]:
        return {name: getattr(self, name) for name in FEATURE_NAMES}


@dataclass(frozen=True)
class PredictionRequest:
    sepal_length: float
    sepal_width: float
    petal_length: float
    petal_width: float

    @classmethod
    def from_vector(cls, vector: FeatureVector) -> "PredictionRequest":
        missing = vector.missing_fields()
        if missing:
            raise ValidationError(missing)
        negative = [name for name in FEATURE_NAMES if getattr(vector, name) < MIN_FEATURE_VALUE]
        if negative:
            raise ValidationError(negative, reason="must not be negative")
        return cls(**{name: float(getattr(vector, name)) for name in FEATURE_NAMES})

    def to_payload(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in FEATURE_NAMES}


@dataclass(frozen=True)
class PredictionResult:
    species: str
    probabilities: Mapping[str, float] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        return {"species": self.species, "probabilities": dict(self.probabilities)}


class PredictionClient(Protocol):
    def submit(self, vector: FeatureVector) -> PredictionResult | ClientError:
        ...


__all__ = [
    "DEFAULT_FEATURES",
    "FEATURE_NAMES",
    "MIN_FEATURE_VALUE",
    "FeatureVector",
    "PredictionClient",
    "PredictionRequest",
    "PredictionResult",
    "UnknownFieldError",
]
