"""Command-line adapter for evaluating and drawing networks."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from nnvis.app.parameters import (
    NeuronParameters,
    evaluate_neuron,
    format_parameters,
    from_form_activations,
    to_form_activations,
)
from nnvis.app.visualization_runner import (
    VisualizationConfig,
    format_visualization_result,
    run_visualization,
)
from nnvis.config.settings import Settings, load_settings_from_env
from nnvis.core.activations import SquashingFunction
from nnvis.core.errors import NeuralNetworkError

logger = logging.getLogger("nnvis")


def build_argument_parser(settings: Settings | None = None) -> argparse.ArgumentParser:
    """Create CLI parser."""
    settings = settings or load_settings_from_env()

    parser = argparse.ArgumentParser(
        description="Evaluate a small feed-forward neural network and draw it."
    )
    parser.add_argument(
        "--mode",
        choices=["network", "neuron"],
        default="network",
        help="network: feed forward a layered network, neuron: evaluate one neuron.",
    )
    parser.add_argument(
        "--squashing",
        choices=[member.value for member in SquashingFunction],
        default=settings.squashing_function.value,
        help="Squashing function applied to every weighted sum.",
    )
    parser.add_argument(
        "--layer-sizes",
        type=str,
        default=",".join(str(size) for size in settings.layer_sizes),
        help="Comma-separated neuron counts, input layer first.",
    )
    parser.add_argument(
        "--inputs",
        type=str,
        default="",
        help="Comma-separated input layer activations.",
    )
    parser.add_argument(
        "--form-inputs",
        action="store_true",
        help="Read --inputs and --activations on the 0..10 slider scale.",
    )
    parser.add_argument(
        "--weights",
        type=str,
        default="",
        help="Flat weights per connection layer, layers separated by ';' (e.g. '1,1;1,-1').",
    )
    parser.add_argument(
        "--biases",
        type=str,
        default="",
        help="Biases per non-input layer, layers separated by ';'.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="Seed for random initial weights. Omit for constant weights of 1.",
    )
    parser.add_argument("--output", type=Path, default=None, help="Write a PNG drawing to this path.")
    parser.add_argument("--width", type=int, default=settings.canvas_width, help="Image width in pixels.")
    parser.add_argument("--height", type=int, default=settings.canvas_height, help="Image height in pixels.")

    parser.add_argument(
        "--activations",
        type=str,
        default="0,0,0,0,0",
        help="Comma-separated incoming activations for --mode neuron.",
    )
    parser.add_argument(
        "--neuron-weights",
        type=str,
        default="0,0,0,0,0",
        help="Comma-separated incoming weights for --mode neuron.",
    )
    parser.add_argument("--bias", type=float, default=0.0, help="Bias for --mode neuron.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the visualizer from command line."""
    try:
        settings = load_settings_from_env()
    except ValueError as exc:
        build_argument_parser(Settings()).error(str(exc))
    parser = build_argument_parser(settings)
    arguments = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if arguments.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    squashing_function = SquashingFunction(arguments.squashing)

    try:
        if arguments.mode == "neuron":
            print(_run_neuron_mode(arguments, squashing_function))
            return
        print(_run_network_mode(arguments, squashing_function))
    except (NeuralNetworkError, ValueError, OSError) as exc:
        logger.debug("Run failed", exc_info=True)
        parser.error(str(exc))


def _run_neuron_mode(arguments: argparse.Namespace, squashing_function: SquashingFunction) -> str:
    parameters = NeuronParameters(
        activations=tuple(_parse_float_list(arguments.activations)),
        weights=tuple(_parse_float_list(arguments.neuron_weights)),
        bias=arguments.bias,
    )
    if arguments.form_inputs:
        parameters = format_parameters(parameters)
    value = evaluate_neuron(parameters, squashing_function)
    return f"Neuron activation ({squashing_function.value}): {value:.4f}"


def _run_network_mode(arguments: argparse.Namespace, squashing_function: SquashingFunction) -> str:
    input_activations = None
    if arguments.inputs.strip():
        input_activations = _parse_float_list(arguments.inputs)
        if arguments.form_inputs:
            input_activations = from_form_activations(input_activations)

    config = VisualizationConfig(
        layer_sizes=tuple(_parse_int_list(arguments.layer_sizes)),
        squashing_function=squashing_function,
        input_activations=tuple(input_activations) if input_activations is not None else None,
        weights=_parse_layered_floats(arguments.weights),
        biases=_parse_layered_floats(arguments.biases),
        seed=arguments.seed,
        image_path=arguments.output,
        canvas_width=arguments.width,
        canvas_height=arguments.height,
    )
    result = run_visualization(config)
    summary = format_visualization_result(result)
    if arguments.form_inputs:
        form_outputs = to_form_activations(result.output_activations)
        summary += "\nOutput (form scale): [" + ", ".join(f"{value:.2f}" for value in form_outputs) + "]"
    return summary


def _parse_int_list(raw_values: str) -> list[int]:
    values = [item.strip() for item in raw_values.split(",") if item.strip()]
    if not values:
        raise ValueError("Expected at least one integer value.")
    return [int(value) for value in values]


def _parse_float_list(raw_values: str) -> list[float]:
    values = [item.strip() for item in raw_values.split(",") if item.strip()]
    if not values:
        raise ValueError("Expected at least one float value.")
    return [float(value) for value in values]


def _parse_layered_floats(raw_values: str) -> tuple[tuple[float, ...], ...] | None:
    if not raw_values.strip():
        return None
    return tuple(tuple(_parse_float_list(layer)) for layer in raw_values.split(";"))


if __name__ == "__main__":
    main()
