"""Color mapping for neuron activations and connection weights."""

from __future__ import annotations

import math

POSITIVE_WEIGHT_COLOR = "lime"
NEGATIVE_WEIGHT_COLOR = "red"


def num_to_grayscale(value: float) -> str:
    """Map a number in [0, 1] to a gray hex color (0 = black, 1 = white)."""
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"Number must be between 0 and 1, got {value}")
    channel = round(value * 255)
    return f"#{channel:02x}{channel:02x}{channel:02x}"


def num_to_red_green(value: float) -> str:
    """Map a weight to red when negative and lime when positive."""
    if math.isnan(value):
        raise ValueError("NaN weights have no sign color")
    if value == 0.0:
        raise ValueError("Zero weights have no sign color")
    return NEGATIVE_WEIGHT_COLOR if value < 0.0 else POSITIVE_WEIGHT_COLOR
