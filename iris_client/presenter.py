from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from .types import PredictionResult

# Smallest bar drawn so a near-zero probability is still visible.
MIN_BAR_WIDTH_PERCENT: float = 3


@dataclass(frozen=True)
class ProbabilityBar:
    label: str
    percent_text: str
    bar_width_percent: float

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


def present(result: PredictionResult) -> list[ProbabilityBar]:
    """Turn a result into display rows, keeping the service's label order."""
    bars: list[ProbabilityBar] = []
    for label, probability in result.probabilities.items():
        percent = probability * 100
        bars.append(
            ProbabilityBar(
                label=label,
                percent_text=_format_percent(percent),
                bar_width_percent=max(MIN_BAR_WIDTH_PERCENT, percent),
            )
        )
    return bars


def _format_percent(percent: float) -> str:
    # Half-up on the exact binary value, matching JavaScript toFixed.
    rounded = Decimal(percent).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"{rounded}%"


def format_species(label: str) -> str:
    return label[:1].upper() + label[1:]


__all__ = ["MIN_BAR_WIDTH_PERCENT", "ProbabilityBar", "format_species", "present"]
