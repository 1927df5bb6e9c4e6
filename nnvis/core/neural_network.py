"""Layered feed-forward network with flat per-layer connection weights."""

from __future__ import annotations

import operator
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from nnvis.core.activations import SquashingFunction, activation, resolve_squashing_function
from nnvis.core.errors import IndexOutOfBoundsError, InvalidLayerError, ShapeMismatchError

Array = NDArray[np.float64]

DEFAULT_WEIGHT = 1.0


@dataclass(frozen=True)
class Neuron:
    """Read-only view of one neuron."""

    activation: float = 0.0
    bias: float = 0.0


@dataclass(frozen=True)
class Connection:
    """Read-only view of one weighted edge between adjacent layers."""

    weight: float = DEFAULT_WEIGHT


@dataclass(frozen=True)
class NeuralNetworkState:
    """Snapshot of every neuron and connection in a network.

    ``connections[i]`` is flat: for a source layer of size S the entry at
    ``j * S + k`` joins source neuron ``k`` of layer ``i`` to destination
    neuron ``j`` of layer ``i + 1``.
    """

    layers: tuple[tuple[Neuron, ...], ...]
    connections: tuple[tuple[Connection, ...], ...]

    @property
    def layer_sizes(self) -> tuple[int, ...]:
        return tuple(len(layer) for layer in self.layers)

    def connection(self, layer_index: int, source_index: int, dest_index: int) -> Connection:
        source_size = len(self.layers[layer_index])
        return self.connections[layer_index][dest_index * source_size + source_index]


class NeuralNetwork:
    """Fixed-topology network evaluated by forward propagation.

    Activations, biases and weights live in numpy arrays allocated once at
    construction. Only their values change afterwards, through the
    bounds-checked setters. Instances are not thread-safe.
    """

    def __init__(
        self,
        layer_sizes: Sequence[int],
        squashing_function: SquashingFunction | str,
        seed: int | None = None,
    ) -> None:
        resolved_sizes = [int(size) for size in layer_sizes]
        if not resolved_sizes:
            raise ValueError("layer_sizes cannot be empty")
        if any(size <= 0 for size in resolved_sizes):
            raise ValueError("all layer_sizes values must be positive")

        self._squashing_function = resolve_squashing_function(squashing_function)
        self._layer_sizes = tuple(resolved_sizes)
        self._activations: list[Array] = [np.zeros(size, dtype=np.float64) for size in resolved_sizes]
        self._biases: list[Array] = [np.zeros(size, dtype=np.float64) for size in resolved_sizes]

        rng = np.random.default_rng(seed) if seed is not None else None
        self._weights: list[Array] = []
        for source_size, dest_size in zip(resolved_sizes[:-1], resolved_sizes[1:]):
            if rng is None:
                layer_weights = np.full(source_size * dest_size, DEFAULT_WEIGHT, dtype=np.float64)
            else:
                layer_weights = rng.normal(0.0, 0.5, size=source_size * dest_size)
            self._weights.append(layer_weights)

    @property
    def layer_sizes(self) -> tuple[int, ...]:
        return self._layer_sizes

    @property
    def squashing_function(self) -> SquashingFunction:
        return self._squashing_function

    @property
    def layer_count(self) -> int:
        return len(self._layer_sizes)

    def get_state(self) -> NeuralNetworkState:
        """Return an immutable snapshot of the current neurons and connections."""
        layers = tuple(
            tuple(
                Neuron(activation=float(value), bias=float(bias))
                for value, bias in zip(layer_activations, layer_biases)
            )
            for layer_activations, layer_biases in zip(self._activations, self._biases)
        )
        connections = tuple(
            tuple(Connection(weight=float(weight)) for weight in layer_weights)
            for layer_weights in self._weights
        )
        return NeuralNetworkState(layers=layers, connections=connections)

    def set_weight(self, layer_index: int, connection_index: int, weight: float) -> None:
        self._check_index("set_weight", "Layer index", layer_index, len(self._weights))
        self._check_index(
            "set_weight",
            "Connection index",
            connection_index,
            self._weights[layer_index].size,
            context=f"in connection layer: {layer_index}",
        )
        self._weights[layer_index][connection_index] = float(weight)

    def set_connection_weight(
        self,
        layer_index: int,
        source_index: int,
        dest_index: int,
        weight: float,
    ) -> None:
        """Set the weight joining ``source_index`` in ``layer_index`` to ``dest_index`` in the next layer."""
        flat_index = self.connection_index(layer_index, source_index, dest_index)
        self._weights[layer_index][flat_index] = float(weight)

    def set_bias(self, layer_index: int, neuron_index: int, bias: float) -> None:
        self._check_neuron("set_bias", layer_index, neuron_index)
        self._biases[layer_index][neuron_index] = float(bias)

    def set_activation(self, layer_index: int, neuron_index: int, activation_value: float) -> None:
        self._check_neuron("set_activation", layer_index, neuron_index)
        self._activations[layer_index][neuron_index] = float(activation_value)

    def set_input_layer_activations(self, values: Sequence[float] | Array) -> None:
        input_values = np.asarray(values, dtype=np.float64)
        if input_values.ndim != 1 or input_values.shape[0] != self._layer_sizes[0]:
            raise ShapeMismatchError(
                "NeuralNetwork.set_input_layer_activations: Number of activations does not match "
                "number of neurons in the input layer",
                provided=int(input_values.shape[0]) if input_values.ndim else 1,
                expected=self._layer_sizes[0],
            )
        self._activations[0][:] = input_values

    def connection_index(self, layer_index: int, source_index: int, dest_index: int) -> int:
        """Flat position of a connection within its connection layer."""
        self._check_index("connection_index", "Layer index", layer_index, len(self._weights))
        source_size = self._layer_sizes[layer_index]
        self._check_index(
            "connection_index",
            "Source index",
            source_index,
            source_size,
            context=f"in layer: {layer_index}",
        )
        self._check_index(
            "connection_index",
            "Destination index",
            dest_index,
            self._layer_sizes[layer_index + 1],
            context=f"in layer: {layer_index + 1}",
        )
        return dest_index * source_size + source_index

    def incoming_weights(self, layer_index: int, neuron_index: int) -> Array:
        """Copy of the weights feeding a neuron, ordered by source neuron."""
        self._check_computable(layer_index, neuron_index, "incoming_weights")
        return self._incoming_weights_view(layer_index, neuron_index).copy()

    def activations(self, layer_index: int) -> Array:
        self._check_index("activations", "Layer index", layer_index, self.layer_count)
        return self._activations[layer_index].copy()

    def output_activations(self) -> Array:
        return self._activations[-1].copy()

    def feed_forward(self) -> None:
        """Recompute every non-input activation, one layer after another."""
        for layer_index in range(1, self.layer_count):
            for neuron_index in range(self._layer_sizes[layer_index]):
                self._activations[layer_index][neuron_index] = self.compute_neuron_activation(
                    layer_index, neuron_index
                )

    def compute_neuron_activation(self, layer_index: int, neuron_index: int) -> float:
        """Activation of one neuron from the current state of the previous layer."""
        self._check_computable(layer_index, neuron_index, "compute_neuron_activation")
        return activation(
            self._activations[layer_index - 1],
            self._incoming_weights_view(layer_index, neuron_index),
            float(self._biases[layer_index][neuron_index]),
            self._squashing_function,
        )

    def _incoming_weights_view(self, layer_index: int, neuron_index: int) -> Array:
        source_size = self._layer_sizes[layer_index - 1]
        start = neuron_index * source_size
        return self._weights[layer_index - 1][start : start + source_size]

    def _check_computable(self, layer_index: int, neuron_index: int, operation: str) -> None:
        try:
            operator.index(layer_index)
        except TypeError as exc:
            raise InvalidLayerError(
                f"NeuralNetwork.{operation}: Layer index must be an integer. Provided index: {layer_index!r}",
                layer_index=layer_index,
            ) from exc
        if layer_index == 0:
            raise InvalidLayerError(
                f"NeuralNetwork.{operation}: Cannot calculate activation for input layer",
                layer_index=layer_index,
            )
        if not 0 < layer_index < self.layer_count:
            raise InvalidLayerError(
                f"NeuralNetwork.{operation}: Layer index out of bounds. Provided index: "
                f"{layer_index}, valid range: [1, {self.layer_count - 1}]",
                layer_index=layer_index,
            )
        self._check_index(
            operation,
            "Neuron index",
            neuron_index,
            self._layer_sizes[layer_index],
            context=f"in layer: {layer_index}",
        )

    def _check_neuron(self, operation: str, layer_index: int, neuron_index: int) -> None:
        self._check_index(operation, "Layer index", layer_index, self.layer_count)
        self._check_index(
            operation,
            "Neuron index",
            neuron_index,
            self._layer_sizes[layer_index],
            context=f"in layer: {layer_index}",
        )

    def _check_index(self, operation: str, index_name: str, index: int, size: int, context: str = "") -> None:
        try:
            position = operator.index(index)
        except TypeError:
            position = None
        if position is None or not 0 <= position < size:
            raise IndexOutOfBoundsError(
                operation=operation,
                index_name=index_name,
                provided=index,
                minimum=0,
                maximum=size - 1,
                context=context,
            )
