"""Form values for the single-neuron playground and the network editor."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from nnvis.core.activations import SquashingFunction, activation

Array = NDArray[np.float64]

# Activation sliders run from 0 to 10; the network works in [0, 1].
FORM_SCALE = 10.0


@dataclass(frozen=True)
class NeuronParameters:
    """Inputs of one neuron: incoming activations, their weights and a bias."""

    activations: tuple[float, ...] = (0.0, 0.0, 0.0, 0.0, 0.0)
    weights: tuple[float, ...] = (0.0, 0.0, 0.0, 0.0, 0.0)
    bias: float = 0.0


def format_parameters(parameters: NeuronParameters, form_scale: float = FORM_SCALE) -> NeuronParameters:
    """Convert form-scale activations to network scale, leaving weights and bias untouched."""
    return NeuronParameters(
        activations=tuple(value / form_scale for value in parameters.activations),
        weights=parameters.weights,
        bias=parameters.bias,
    )


def to_form_activations(activations: Sequence[float] | Array, form_scale: float = FORM_SCALE) -> list[float]:
    return [float(value) * form_scale for value in activations]


def from_form_activations(form_values: Sequence[float] | Array, form_scale: float = FORM_SCALE) -> list[float]:
    return [float(value) / form_scale for value in form_values]


def evaluate_neuron(
    parameters: NeuronParameters,
    squashing_function: SquashingFunction,
) -> float:
    """Activation produced by the playground neuron."""
    return activation(
        parameters.activations,
        parameters.weights,
        parameters.bias,
        squashing_function,
    )
