from __future__ import annotations

import pytest

from iris_client.presenter import MIN_BAR_WIDTH_PERCENT, format_species, present
from iris_client.types import PredictionResult


def test_versicolor_response_renders_in_service_order() -> None:
    result = PredictionResult(
        species="versicolor",
        probabilities={"setosa": 0.02, "versicolor": 0.91, "virginica": 0.07},
    )

    bars = present(result)

    assert [bar.label for bar in bars] == ["setosa", "versicolor", "virginica"]
    assert [bar.percent_text for bar in bars] == ["2.0%", "91.0%", "7.0%"]
    assert [bar.bar_width_percent for bar in bars] == pytest.approx([3, 91, 7])


def test_order_is_not_resorted_by_probability() -> None:
    result = PredictionResult(
        species="virginica",
        probabilities={"virginica": 0.6, "setosa": 0.1, "versicolor": 0.3},
    )

    assert [bar.label for bar in present(result)] == ["virginica", "setosa", "versicolor"]


def test_zero_probability_still_gets_visible_bar() -> None:
    bars = present(PredictionResult(species="setosa", probabilities={"setosa": 1.0, "virginica": 0.0}))

    assert bars[0].percent_text == "100.0%"
    assert bars[0].bar_width_percent == pytest.approx(100)
    assert bars[1].percent_text == "0.0%"
    assert bars[1].bar_width_percent == MIN_BAR_WIDTH_PERCENT


def test_unnormalised_distribution_does_not_fail() -> None:
    bars = present(PredictionResult(species="setosa", probabilities={"setosa": 0.7, "versicolor": 0.7}))

    assert [bar.percent_text for bar in bars] == ["70.0%", "70.0%"]


@pytest.mark.parametrize(
    ("probability", "expected"),
    [(0.0025, "0.3%"), (0.0024, "0.2%"), (0.0026, "0.3%"), (0.5, "50.0%")],
)
def test_percent_text_rounds_ties_half_up(probability: float, expected: str) -> None:
    bars = present(PredictionResult(species="a", probabilities={"a": probability}))

    assert bars[0].percent_text == expected


def test_result_without_probabilities_has_no_bars() -> None:
    assert present(PredictionResult(species="setosa")) == []


def test_format_species_capitalises_first_letter() -> None:
    assert format_species("versicolor") == "Versicolor"
    assert format_species("") == ""
