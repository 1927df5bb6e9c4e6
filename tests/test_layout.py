from __future__ import annotations

import pytest

from nnvis.core.activations import SquashingFunction
from nnvis.core.neural_network import NeuralNetwork, NeuralNetworkState
from nnvis.infra.layout import (
    calc_layer_height,
    compute_draw_options,
    compute_neuron_positions,
    validate_state_shape,
)


def test_should_center_network_on_canvas() -> None:
    options = compute_draw_options([3, 4, 2], canvas_width=1000, canvas_height=600)
    positions = compute_neuron_positions([3, 4, 2], options)
    radius = options.neuron_radius

    left = positions[0][0].x - radius
    right = positions[-1][0].x + radius
    top = positions[1][0].y - radius
    bottom = positions[1][-1].y + radius

    assert options.layer_distance == pytest.approx(400.0)
    assert radius == pytest.approx(600 / 13)
    assert (left + right) / 2 == pytest.approx(500.0)
    assert (top + bottom) / 2 == pytest.approx(300.0)
    assert bottom - top == pytest.approx(calc_layer_height(4, radius))


def test_should_center_shorter_layers_against_tallest_layer() -> None:
    options = compute_draw_options([2, 5], canvas_width=900, canvas_height=500)
    positions = compute_neuron_positions([2, 5], options)

    short_mid = (positions[0][0].y + positions[0][-1].y) / 2
    tall_mid = (positions[1][0].y + positions[1][-1].y) / 2

    assert short_mid == pytest.approx(tall_mid)
    assert positions[1][1].y - positions[1][0].y == pytest.approx(options.neuron_radius * 3)


def test_should_cap_radius_to_quarter_of_layer_distance() -> None:
    options = compute_draw_options([1, 1, 1, 1, 1], canvas_width=1200, canvas_height=600)

    assert options.layer_distance == pytest.approx(200.0)
    assert options.neuron_radius == pytest.approx(50.0)


def test_should_reject_single_layer_network() -> None:
    with pytest.raises(ValueError):
        compute_draw_options([3], canvas_width=800, canvas_height=600)

    state = NeuralNetwork([3], SquashingFunction.SIGMOID).get_state()
    with pytest.raises(ValueError):
        validate_state_shape(state)


def test_should_reject_state_with_missing_connection_layer() -> None:
    state = NeuralNetwork([2, 2, 1], SquashingFunction.SIGMOID).get_state()
    broken = NeuralNetworkState(layers=state.layers, connections=state.connections[:1])

    with pytest.raises(ValueError):
        validate_state_shape(broken)
