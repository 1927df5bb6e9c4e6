"""Errors raised by the neural network core."""

from __future__ import annotations

from typing import Any


class NeuralNetworkError(Exception):
    """Base exception for invalid calls into the network core."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class IndexOutOfBoundsError(NeuralNetworkError, IndexError):
    """Raised when a layer, neuron or connection index is outside its range."""

    def __init__(
        self,
        operation: str,
        index_name: str,
        provided: object,
        minimum: int,
        maximum: int,
        context: str = "",
    ) -> None:
        message = (
            f"NeuralNetwork.{operation}: {index_name} out of bounds. "
            f"Provided index: {provided}, valid range: [{minimum}, {maximum}]"
        )
        if context:
            message = f"{message}, {context}"
        super().__init__(
            message,
            details={
                "operation": operation,
                "index_name": index_name,
                "provided": provided,
                "minimum": minimum,
                "maximum": maximum,
            },
        )
        self.operation = operation
        self.index_name = index_name
        self.provided = provided
        self.minimum = minimum
        self.maximum = maximum


class ShapeMismatchError(NeuralNetworkError, ValueError):
    """Raised when a vector does not have the length its target requires."""

    def __init__(self, message: str, provided: int, expected: int) -> None:
        super().__init__(
            f"{message}. Provided: {provided}, expected: {expected}",
            details={"provided": provided, "expected": expected},
        )
        self.provided = provided
        self.expected = expected


class InvalidLayerError(NeuralNetworkError, ValueError):
    """Raised when an activation is requested for a layer that cannot compute one."""

    def __init__(self, message: str, layer_index: int) -> None:
        super().__init__(message, details={"layer_index": layer_index})
        self.layer_index = layer_index


class UnsupportedSquashingFunctionError(NeuralNetworkError, ValueError):
    """Raised when a squashing function is not one of the known variants."""

    def __init__(self, squashing_function: object) -> None:
        super().__init__(
            f"Squashing function not supported: {squashing_function!r}",
            details={"squashing_function": repr(squashing_function)},
        )
        self.squashing_function = squashing_function
