from __future__ import annotations

from typing import Annotated, Dict

from pydantic import BaseModel, ConfigDict, Field

Probability = Annotated[float, Field(strict=True, ge=0.0, le=1.0, allow_inf_nan=False)]
Measurement = Annotated[float, Field(ge=0.0, allow_inf_nan=False, description="Centimetres")]


class PredictionRequestBody(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sepal_length: Measurement
    sepal_width: Measurement
    petal_length: Measurement
    petal_width: Measurement


class PredictionResponseBody(BaseModel):
    species: str = Field(..., strict=True, min_length=1, description="Most likely label")
    probabilities: Dict[str, Probability] = Field(
        default_factory=dict, description="Probability per label, in service order"
    )


class FieldChangePayload(BaseModel):
    field: str = Field(..., description="Feature field being edited")
    value: str = Field(default="", description="Raw text from the entry control")


__all__ = ["FieldChangePayload", "PredictionRequestBody", "PredictionResponseBody"]
