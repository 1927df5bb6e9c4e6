"""Canvas geometry for drawing a layered network."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from nnvis.core.neural_network import NeuralNetworkState

DEFAULT_LAYER_SPAN = 800.0
MAX_NEURON_RADIUS = 100.0


@dataclass(frozen=True)
class Position:
    x: float
    y: float


@dataclass(frozen=True)
class DrawOptions:
    """Sizes and offsets that center the network on the canvas."""

    neuron_radius: float
    layer_distance: float
    hor_offset: float
    ver_offset: float
    total_width: float
    total_height: float


def validate_state_shape(state: NeuralNetworkState) -> None:
    """Check that a snapshot has one connection layer between each pair of neuron layers."""
    if len(state.layers) < 2:
        raise ValueError(
            f"The neural network must have at least 2 layers, provided: {len(state.layers)}"
        )
    if len(state.connections) != len(state.layers) - 1:
        raise ValueError(
            "The neural network must have a layer of connections for each layer of neurons - 1. "
            f"Provided: {len(state.layers)} layers of neurons and "
            f"{len(state.connections)} layers of connections"
        )


def calc_layer_distance(layer_count: int, layer_span: float = DEFAULT_LAYER_SPAN) -> float:
    if layer_count < 2:
        raise ValueError("The layer count must be at least 2")
    return layer_span / (layer_count - 1)


def calc_layer_height(layer_size: int, neuron_radius: float) -> float:
    return layer_size * neuron_radius * 2 + neuron_radius * (layer_size - 1)


def calc_neuron_radius(layer_distance: float, tallest_layer: int, canvas_height: float) -> float:
    """Radius that fits the tallest layer vertically, capped to a quarter of the layer distance."""
    if tallest_layer < 1:
        raise ValueError("The tallest layer must have at least 1 neuron")
    radius = min(canvas_height / (tallest_layer * 3 + 1), MAX_NEURON_RADIUS)
    return min(radius, layer_distance / 4)


def compute_draw_options(
    layer_sizes: Sequence[int],
    canvas_width: float,
    canvas_height: float,
    layer_span: float = DEFAULT_LAYER_SPAN,
) -> DrawOptions:
    if canvas_width <= 0 or canvas_height <= 0:
        raise ValueError("canvas dimensions must be positive")
    layer_count = len(layer_sizes)
    layer_distance = calc_layer_distance(layer_count, layer_span)
    tallest_layer = max(layer_sizes)
    radius = calc_neuron_radius(layer_distance, tallest_layer, canvas_height)

    total_width = layer_distance * (layer_count - 1) + radius * layer_count * 2
    total_height = calc_layer_height(tallest_layer, radius)
    return DrawOptions(
        neuron_radius=radius,
        layer_distance=layer_distance,
        hor_offset=(canvas_width - total_width) / 2,
        ver_offset=(canvas_height - total_height) / 2,
        total_width=total_width,
        total_height=total_height,
    )


def calc_neuron_position(
    layer_index: int,
    neuron_index: int,
    layer_size: int,
    options: DrawOptions,
) -> Position:
    radius = options.neuron_radius
    layer_height = calc_layer_height(layer_size, radius)
    layer_ver_offset = options.total_height / 2 - layer_height / 2
    return Position(
        x=radius + options.hor_offset + layer_index * (options.layer_distance + radius * 2),
        y=radius + options.ver_offset + layer_ver_offset + neuron_index * radius * 3,
    )


def compute_neuron_positions(layer_sizes: Sequence[int], options: DrawOptions) -> list[list[Position]]:
    return [
        [
            calc_neuron_position(layer_index, neuron_index, layer_size, options)
            for neuron_index in range(layer_size)
        ]
        for layer_index, layer_size in enumerate(layer_sizes)
    ]
