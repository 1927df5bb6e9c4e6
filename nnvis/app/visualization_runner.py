"""Use-case orchestration: build a network, evaluate it and draw it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from numpy.typing import NDArray

from nnvis.core.activations import SquashingFunction
from nnvis.core.errors import ShapeMismatchError
from nnvis.core.neural_network import NeuralNetwork, NeuralNetworkState
from nnvis.infra.renderer import save_network_image

Array = NDArray[np.float64]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisualizationConfig:
    """Everything needed to evaluate and draw one network."""

    layer_sizes: tuple[int, ...] = (3, 4, 2)
    squashing_function: SquashingFunction = SquashingFunction.SIGMOID
    input_activations: tuple[float, ...] | None = None
    weights: tuple[tuple[float, ...], ...] | None = None
    biases: tuple[tuple[float, ...], ...] | None = None
    seed: int | None = None
    image_path: Path | None = None
    canvas_width: int = 1000
    canvas_height: int = 600


@dataclass(frozen=True)
class VisualizationResult:
    """Evaluated network and where it was drawn, if anywhere."""

    state: NeuralNetworkState
    output_activations: Array
    image_path: Path | None


def build_network(config: VisualizationConfig) -> NeuralNetwork:
    """Create a network and apply the configured weights, biases and inputs."""
    network = NeuralNetwork(config.layer_sizes, config.squashing_function, seed=config.seed)

    if config.weights is not None:
        _apply_weights(network, config.weights)
    if config.biases is not None:
        _apply_biases(network, config.biases)
    if config.input_activations is not None:
        network.set_input_layer_activations(config.input_activations)
    return network


def run_visualization(config: VisualizationConfig) -> VisualizationResult:
    network = build_network(config)
    logger.debug(
        "Feeding forward %s network with layer sizes %s",
        network.squashing_function.value,
        network.layer_sizes,
    )
    network.feed_forward()
    state = network.get_state()

    image_path = None
    if config.image_path is not None:
        image_path = save_network_image(
            state,
            config.image_path,
            width=config.canvas_width,
            height=config.canvas_height,
        )

    return VisualizationResult(
        state=state,
        output_activations=network.output_activations(),
        image_path=image_path,
    )


def format_visualization_result(result: VisualizationResult) -> str:
    """Build a human-readable per-layer summary."""
    lines = [
        "Feed-forward network",
        "--------------------",
        "Layer sizes: " + " -> ".join(str(size) for size in result.state.layer_sizes),
    ]
    for layer_index, layer in enumerate(result.state.layers):
        name = "input" if layer_index == 0 else f"layer {layer_index}"
        lines.append(f"{name} activations: " + _format_vector([neuron.activation for neuron in layer]))
    lines.append("Output: " + _format_vector(result.output_activations.tolist()))
    if result.image_path is not None:
        lines.append(f"Image: {result.image_path}")
    return "\n".join(lines)


def _apply_weights(network: NeuralNetwork, weights: tuple[tuple[float, ...], ...]) -> None:
    sizes = network.layer_sizes
    if len(weights) != len(sizes) - 1:
        raise ShapeMismatchError(
            "Number of weight layers does not match number of connection layers",
            provided=len(weights),
            expected=len(sizes) - 1,
        )
    for layer_index, layer_weights in enumerate(weights):
        expected = sizes[layer_index] * sizes[layer_index + 1]
        if len(layer_weights) != expected:
            raise ShapeMismatchError(
                f"Number of weights does not match connection layer {layer_index}",
                provided=len(layer_weights),
                expected=expected,
            )
        for connection_index, weight in enumerate(layer_weights):
            network.set_weight(layer_index, connection_index, weight)


def _apply_biases(network: NeuralNetwork, biases: tuple[tuple[float, ...], ...]) -> None:
    sizes = network.layer_sizes
    if len(biases) != len(sizes) - 1:
        raise ShapeMismatchError(
            "Number of bias layers does not match number of non-input layers",
            provided=len(biases),
            expected=len(sizes) - 1,
        )
    for offset, layer_biases in enumerate(biases):
        layer_index = offset + 1
        if len(layer_biases) != sizes[layer_index]:
            raise ShapeMismatchError(
                f"Number of biases does not match layer {layer_index}",
                provided=len(layer_biases),
                expected=sizes[layer_index],
            )
        for neuron_index, bias in enumerate(layer_biases):
            network.set_bias(layer_index, neuron_index, bias)


def _format_vector(values: list[float]) -> str:
    return "[" + ", ".join(f"{float(value):.4f}" for value in values) + "]"
