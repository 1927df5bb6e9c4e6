"""Raster rendering of a network snapshot with Pillow."""

from __future__ import annotations

import logging
import math
from pathlib import Path

from PIL import Image, ImageDraw

from nnvis.core.neural_network import NeuralNetworkState
from nnvis.infra.colors import num_to_grayscale, num_to_red_green
from nnvis.infra.layout import (
    DEFAULT_LAYER_SPAN,
    Position,
    compute_draw_options,
    compute_neuron_positions,
    validate_state_shape,
)

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = (255, 255, 255)
OUTLINE_COLOR = "black"
ZERO_WEIGHT_COLOR = "black"
DASH_LENGTH = 15.0


def render_network(
    state: NeuralNetworkState,
    width: int,
    height: int,
    layer_span: float = DEFAULT_LAYER_SPAN,
) -> Image.Image:
    """Draw connections, then neurons, onto a new RGB image."""
    validate_state_shape(state)
    layer_sizes = state.layer_sizes
    options = compute_draw_options(layer_sizes, width, height, layer_span)
    positions = compute_neuron_positions(layer_sizes, options)

    image = Image.new("RGB", (width, height), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)

    for layer_index in range(1, len(positions)):
        for dest_index, dest_position in enumerate(positions[layer_index]):
            for source_index, source_position in enumerate(positions[layer_index - 1]):
                weight = state.connection(layer_index - 1, source_index, dest_index).weight
                if math.isnan(weight):
                    raise ValueError(
                        f"Cannot render NaN weight from neuron {source_index} in layer "
                        f"{layer_index - 1} to neuron {dest_index}"
                    )
                _draw_connection(draw, source_position, dest_position, weight)

    radius = options.neuron_radius
    for layer_index, (layer, layer_positions) in enumerate(zip(state.layers, positions)):
        for neuron_index, (neuron, position) in enumerate(zip(layer, layer_positions)):
            if math.isnan(neuron.activation):
                raise ValueError(
                    f"Cannot render NaN activation of neuron {neuron_index} in layer {layer_index}"
                )
            # ReLU activations above 1 render as white.
            intensity = min(max(neuron.activation, 0.0), 1.0)
            draw.ellipse(
                [(position.x - radius, position.y - radius), (position.x + radius, position.y + radius)],
                fill=num_to_grayscale(intensity),
                outline=OUTLINE_COLOR,
                width=1,
            )

    logger.debug(
        "Rendered %d layers at %dx%d with neuron radius %.2f",
        len(layer_sizes),
        width,
        height,
        radius,
    )
    return image


def save_network_image(
    state: NeuralNetworkState,
    output_path: Path | str,
    width: int,
    height: int,
) -> Path:
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    render_network(state, width, height).save(path, format="PNG")
    logger.info("Wrote %s", path)
    return path


def _draw_connection(draw: ImageDraw.ImageDraw, start: Position, end: Position, weight: float) -> None:
    if weight == 0.0:
        _draw_dashed_line(draw, start, end, fill=ZERO_WEIGHT_COLOR, width=1)
        return
    draw.line(
        [(start.x, start.y), (end.x, end.y)],
        fill=num_to_red_green(weight),
        width=max(1, round(abs(weight))),
    )


def _draw_dashed_line(
    draw: ImageDraw.ImageDraw,
    start: Position,
    end: Position,
    fill: str,
    width: int,
) -> None:
    length = math.hypot(end.x - start.x, end.y - start.y)
    if length == 0.0:
        return
    step_x = (end.x - start.x) / length
    step_y = (end.y - start.y) / length
    offset = 0.0
    while offset < length:
        dash_end = min(offset + DASH_LENGTH, length)
        draw.line(
            [
                (start.x + step_x * offset, start.y + step_y * offset),
                (start.x + step_x * dash_end, start.y + step_y * dash_end),
            ],
            fill=fill,
            width=width,
        )
        offset += DASH_LENGTH * 2
