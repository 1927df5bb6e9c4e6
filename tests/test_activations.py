from __future__ import annotations

import math

import pytest

from nnvis.core.activations import (
    SquashingFunction,
    activation,
    parse_squashing_function,
    relu,
    sigmoid,
    weighted_sum,
)
from nnvis.core.errors import ShapeMismatchError, UnsupportedSquashingFunctionError


def test_should_squash_with_sigmoid_and_relu() -> None:
    assert float(sigmoid(0.0)) == 0.5
    assert float(sigmoid(2.0)) == pytest.approx(1.0 / (1.0 + math.exp(-2.0)))
    assert 0.0 < float(sigmoid(-40.0)) < 1e-12
    assert float(relu(-3.0)) == 0.0
    assert float(relu(2.5)) == 2.5


def test_should_compute_weighted_sum_plus_bias() -> None:
    total = weighted_sum([0.99, 0.34, 0.66, 0.12, 0.09], [4, 2, 6, 7, 0], -5.0)

    assert total == pytest.approx(4 * 0.99 + 2 * 0.34 + 6 * 0.66 + 7 * 0.12 - 5.0)


def test_should_apply_selected_squashing_function() -> None:
    assert activation([0.0, 0.0], [1.0, 1.0], 0.0, SquashingFunction.SIGMOID) == 0.5
    assert activation([3.0, 3.0], [1.0, -1.0], 0.0, SquashingFunction.RELU) == 0.0
    assert activation([2.0], [1.5], 1.0, SquashingFunction.RELU) == 4.0


def test_should_reject_unknown_squashing_function() -> None:
    with pytest.raises(UnsupportedSquashingFunctionError):
        activation([1.0], [1.0], 0.0, "tanh")  # type: ignore[arg-type]
    with pytest.raises(UnsupportedSquashingFunctionError):
        parse_squashing_function("softmax")


def test_should_parse_squashing_function_names() -> None:
    assert parse_squashing_function("ReLU") is SquashingFunction.RELU
    assert parse_squashing_function(" sigmoid ") is SquashingFunction.SIGMOID


def test_should_reject_unequal_activation_and_weight_lengths() -> None:
    with pytest.raises(ShapeMismatchError) as error:
        weighted_sum([1.0, 2.0], [1.0], 0.0)

    assert error.value.provided == 1
    assert error.value.expected == 2


def test_should_match_exact_sigmoid_far_into_both_tails() -> None:
    assert float(sigmoid(-60.0)) == pytest.approx(1.0 / (1.0 + math.exp(60.0)), rel=1e-12)
    assert float(sigmoid(-700.0)) == pytest.approx(1.0 / (1.0 + math.exp(700.0)), rel=1e-12)
    assert float(sigmoid(60.0)) == 1.0
    assert float(sigmoid(-1000.0)) == 0.0
