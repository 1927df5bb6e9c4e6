from __future__ import annotations

import pytest

from nnvis.app.parameters import (
    NeuronParameters,
    evaluate_neuron,
    format_parameters,
    from_form_activations,
    to_form_activations,
)
from nnvis.core.activations import SquashingFunction


def test_should_scale_form_activations_down_by_ten() -> None:
    parameters = NeuronParameters(activations=(10.0, 5.0, 0.0), weights=(1.0, -2.0, 3.0), bias=0.5)

    formatted = format_parameters(parameters)

    assert formatted.activations == pytest.approx((1.0, 0.5, 0.0))
    assert formatted.weights == (1.0, -2.0, 3.0)
    assert formatted.bias == 0.5


def test_should_convert_network_activations_to_and_from_form_scale() -> None:
    assert to_form_activations([0.25, 1.0]) == pytest.approx([2.5, 10.0])
    assert from_form_activations([2.5, 10.0]) == pytest.approx([0.25, 1.0])


def test_should_evaluate_playground_neuron() -> None:
    default_value = evaluate_neuron(NeuronParameters(), SquashingFunction.SIGMOID)
    parameters = NeuronParameters(
        activations=(0.99, 0.34, 0.66, 0.12, 0.09),
        weights=(4.0, 2.0, 6.0, 7.0, 0.0),
        bias=-5.0,
    )

    assert default_value == 0.5
    assert evaluate_neuron(parameters, SquashingFunction.RELU) == pytest.approx(4.44)
