"""Squashing functions and the single-neuron activation computation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum

import numpy as np
from numpy.typing import ArrayLike, NDArray

from nnvis.core.errors import ShapeMismatchError, UnsupportedSquashingFunctionError

Array = NDArray[np.float64]


class SquashingFunction(str, Enum):
    """Nonlinear transform applied to a neuron's weighted sum."""

    SIGMOID = "sigmoid"
    RELU = "relu"


def sigmoid(values: ArrayLike) -> Array:
    """Compute sigmoid activation without overflow for large magnitudes."""
    inputs = np.asarray(values, dtype=np.float64)
    with np.errstate(over="ignore", invalid="ignore"):
        positive = 1.0 / (1.0 + np.exp(-inputs))
        exp_inputs = np.exp(inputs)
        negative = exp_inputs / (1.0 + exp_inputs)
    return np.where(inputs >= 0.0, positive, negative)


def relu(values: ArrayLike) -> Array:
    """Compute ReLU activation."""
    return np.maximum(0.0, np.asarray(values, dtype=np.float64))


_TRANSFORMS: dict[SquashingFunction, Callable[[ArrayLike], Array]] = {
    SquashingFunction.SIGMOID: sigmoid,
    SquashingFunction.RELU: relu,
}


def resolve_squashing_function(squashing_function: object) -> SquashingFunction:
    """Return the enum member for a member or its string value."""
    if isinstance(squashing_function, SquashingFunction):
        return squashing_function
    if isinstance(squashing_function, str):
        return parse_squashing_function(squashing_function)
    raise UnsupportedSquashingFunctionError(squashing_function)


def parse_squashing_function(name: str) -> SquashingFunction:
    """Parse a case-insensitive squashing function name."""
    try:
        return SquashingFunction(name.strip().lower())
    except ValueError as exc:
        raise UnsupportedSquashingFunctionError(name) from exc


def weighted_sum(activations: Sequence[float] | Array, weights: Sequence[float] | Array, bias: float) -> float:
    """Dot product of activations and weights plus the bias."""
    activation_values = np.asarray(activations, dtype=np.float64)
    weight_values = np.asarray(weights, dtype=np.float64)
    if activation_values.shape != weight_values.shape:
        raise ShapeMismatchError(
            "Algorithms.weighted_sum: Number of weights does not match number of activations",
            provided=int(weight_values.size),
            expected=int(activation_values.size),
        )
    return float(np.dot(activation_values, weight_values) + bias)


def activation(
    prev_activations: Sequence[float] | Array,
    weights: Sequence[float] | Array,
    bias: float,
    squashing_function: SquashingFunction,
) -> float:
    """Compute one neuron's activation from the previous layer's activations."""
    try:
        transform = _TRANSFORMS[squashing_function]
    except (KeyError, TypeError) as exc:
        raise UnsupportedSquashingFunctionError(squashing_function) from exc
    total = weighted_sum(prev_activations, weights, bias)
    return float(transform(total))
