from __future__ import annotations

import logging
import math

from .types import FEATURE_NAMES, FeatureVector, UnknownFieldError

logger = logging.getLogger(__name__)


def parse_measurement(raw_text: str) -> float | None:
    """Return the finite number in ``raw_text`` or ``None`` when there is none."""
    text = raw_text.strip()
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


class InputController:
    """Owns the vector being edited plus any text that did not parse."""

    def __init__(self, vector: FeatureVector | None = None) -> None:
        self._vector = vector or FeatureVector()
        self._drafts: dict[str, str] = {}

    @property
    def vector(self) -> FeatureVector:
        return self._vector

    @property
    def drafts(self) -> dict[str, str]:
        return dict(self._drafts)

    def on_field_change(self, field_name: str, raw_text: str) -> FeatureVector:
        if field_name not in FEATURE_NAMES:
            raise UnknownFieldError(field_name)
        value = parse_measurement(raw_text)
        if value is None and raw_text.strip():
            # Keep what was typed for display; the committed field stays unset.
            self._drafts[field_name] = raw_text
            logger.debug("Rejected non-numeric input field=%s text=%r", field_name, raw_text)
        else:
            self._drafts.pop(field_name, None)
        self._vector = self._vector.with_value(field_name, value)
        return self._vector

    def display_value(self, field_name: str) -> str:
        if field_name in self._drafts:
            return self._drafts[field_name]
        value = self._vector.get(field_name)
        return "" if value is None else repr(value)

    def reset(self) -> FeatureVector:
        self._vector = FeatureVector()
        self._drafts.clear()
        return self._vector


__all__ = ["InputController", "parse_measurement"]
